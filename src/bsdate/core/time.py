from __future__ import annotations
from datetime import date, datetime, time, timedelta, timezone
from typing import Callable, Union

# Nepal Time: fixed UTC+05:45, no daylight saving.
NEPAL_TZ = timezone(timedelta(hours=5, minutes=45), "NPT")

DateLike = Union[datetime, date, str]
Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def to_datetime(value: DateLike, *, tz: timezone = NEPAL_TZ) -> datetime:
    """
    Coerce a datetime, date or ISO-8601 string into an aware datetime.

    Naive values are taken as wall-clock time in ``tz``; a bare date means
    midnight in ``tz``. Malformed strings raise ValueError.
    """
    if isinstance(value, str):
        text = value.strip()
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"
        value = datetime.fromisoformat(text)
    if isinstance(value, datetime):
        return value if value.tzinfo is not None else value.replace(tzinfo=tz)
    if isinstance(value, date):
        return datetime.combine(value, time(), tzinfo=tz)
    raise TypeError(f"Expected datetime, date or ISO-8601 string, got {type(value).__name__}")


def civil_date(value: DateLike, *, tz: timezone = NEPAL_TZ) -> date:
    """The calendar day of ``value`` in ``tz``, time of day discarded."""
    if isinstance(value, date) and not isinstance(value, datetime):
        return value
    return to_datetime(value, tz=tz).astimezone(tz).date()


def sunday_first_weekday(d: date) -> int:
    """Weekday index with Sunday=0 .. Saturday=6."""
    return (d.weekday() + 1) % 7
