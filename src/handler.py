import json

from src.greeting import ClockUnavailable, handle
from src.settings import configure_logging, load_settings

settings = load_settings()
logger = configure_logging(settings)


def build_response(status_code, payload):
    return {
        "statusCode": status_code,
        "headers": {"Content-Type": "application/json"},
        "body": json.dumps(payload)
    }


# lambda entry point, referenced by serverless.yml as handler.hello
def hello(event, context):
    request_id = getattr(context, 'aws_request_id', None)
    try:
        body = handle(event)
    except ClockUnavailable as e:
        logger.exception("Greeting failed (stage=%s, request_id=%s)", settings.stage, request_id)
        return build_response(500, {"error": "Could not read the current time", "details": str(e)})

    logger.info("Greeting %r at %s (stage=%s, request_id=%s)",
                body.greeting_text, body.timestamp, settings.stage, request_id)
    return build_response(200, body.to_dict())
