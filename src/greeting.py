"""Time-of-day greeting for Singapore local time."""
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from enum import Enum

# Singapore has no daylight saving, a fixed offset is exact
SINGAPORE_TZ = timezone(timedelta(hours=8), 'Asia/Singapore')
TIMESTAMP_FORMAT = '%Y-%m-%d %H:%M:%S'


class ClockUnavailable(RuntimeError):
    """Raised when the current time cannot be read."""


class GreetingBucket(Enum):
    MORNING = "Good morning"
    AFTERNOON = "Good afternoon"
    EVENING = "Good evening"

    @property
    def text(self):
        return self.value


@dataclass(frozen=True)
class ResponseBody:
    greeting_text: str
    timestamp: str

    def to_dict(self):
        return {"greetingText": self.greeting_text, "timestamp": self.timestamp}


def utc_now():
    return datetime.now(timezone.utc)


def to_singapore_time(instant):
    # naive instants are treated as UTC
    if instant.tzinfo is None:
        instant = instant.replace(tzinfo=timezone.utc)
    return instant.astimezone(SINGAPORE_TZ)


def bucket_for_hour(hour):
    if not 0 <= hour <= 23:
        raise ValueError(f"hour must be in 0..23, got {hour}")
    if hour < 12:
        return GreetingBucket.MORNING
    if hour < 18:
        return GreetingBucket.AFTERNOON
    return GreetingBucket.EVENING


def format_timestamp(local):
    return local.strftime(TIMESTAMP_FORMAT)


def _read_clock(clock):
    try:
        instant = clock()
    except (OSError, OverflowError, ValueError) as e:
        raise ClockUnavailable(f"Could not read the clock: {e}") from e
    if not isinstance(instant, datetime):
        raise ClockUnavailable(f"Clock returned {type(instant).__name__}, expected datetime")
    return instant


def handle(request=None, clock=utc_now):
    """Build the greeting for the instant returned by ``clock``.

    ``request`` is accepted so the function can sit behind any trigger, but
    nothing in it is read.
    """
    local = to_singapore_time(_read_clock(clock))
    bucket = bucket_for_hour(local.hour)
    return ResponseBody(greeting_text=bucket.text, timestamp=format_timestamp(local))
