import json
from datetime import datetime
from types import SimpleNamespace

from src import handler
from src.greeting import ClockUnavailable, ResponseBody


def test_hello_returns_greeting(monkeypatch):
    monkeypatch.setattr(handler, "handle", lambda event: ResponseBody("Good evening", "2024-03-10 18:30:00"))
    response = handler.hello({}, SimpleNamespace(aws_request_id="req-1"))

    assert response["statusCode"] == 200
    assert response["headers"] == {"Content-Type": "application/json"}
    assert json.loads(response["body"]) == {"greetingText": "Good evening", "timestamp": "2024-03-10 18:30:00"}


def test_hello_with_real_clock_and_no_context():
    response = handler.hello(None, None)
    body = json.loads(response["body"])

    assert response["statusCode"] == 200
    assert body["greetingText"] in ("Good morning", "Good afternoon", "Good evening")
    datetime.strptime(body["timestamp"], "%Y-%m-%d %H:%M:%S")


def test_hello_reports_clock_failure(monkeypatch, caplog):
    def broken(event):
        raise ClockUnavailable("Could not read the clock: boom")

    monkeypatch.setattr(handler, "handle", broken)
    response = handler.hello({}, None)

    assert response["statusCode"] == 500
    assert json.loads(response["body"]) == {
        "error": "Could not read the current time",
        "details": "Could not read the clock: boom",
    }
    assert "Greeting failed" in caplog.text


def test_build_response():
    response = handler.build_response(201, {"ok": True})
    assert response == {
        "statusCode": 201,
        "headers": {"Content-Type": "application/json"},
        "body": '{"ok": true}',
    }
