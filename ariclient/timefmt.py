"""JSON helpers for the date and duration formats used by the ARI service."""

from __future__ import annotations

import re
from datetime import datetime, timedelta, timezone

DATE_FORMAT = "%Y-%m-%dT%H:%M:%S.mmm+HHMM"
"""Human-readable form of the wire format, e.g. ``2005-02-04T13:12:06.000+0000``."""

_DATE_RE = re.compile(
    r"(\d{4})-(\d{2})-(\d{2})T(\d{2}):(\d{2}):(\d{2})\.(\d{3})([+-])(\d{2})(\d{2})"
)
_SECOND = timedelta(seconds=1)


def format_datetime(value: datetime) -> str:
    """Render a datetime in the ARI date format.

    Naive datetimes are treated as UTC.
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    offset = value.utcoffset() or timedelta(0)
    minutes = int(offset.total_seconds()) // 60
    sign = "+" if minutes >= 0 else "-"
    hours, mins = divmod(abs(minutes), 60)
    millis = value.microsecond // 1000
    return (
        f"{value.strftime('%Y-%m-%dT%H:%M:%S')}.{millis:03d}"
        f"{sign}{hours:02d}{mins:02d}"
    )


def parse_datetime(text: str) -> datetime:
    """Parse a date in the ARI date format into an aware datetime."""
    if not isinstance(text, str):
        raise TypeError(f"date must be a string, not {type(text).__name__}")
    match = _DATE_RE.fullmatch(text)
    if match is None:
        raise ValueError(f"cannot parse {text!r} as an ARI date")
    year, month, day, hour, minute, second, millis, sign, off_h, off_m = match.groups()
    offset = timedelta(hours=int(off_h), minutes=int(off_m))
    if sign == "-":
        offset = -offset
    return datetime(
        int(year),
        int(month),
        int(day),
        int(hour),
        int(minute),
        int(second),
        int(millis) * 1000,
        tzinfo=timezone(offset),
    )


def encode_duration(value: timedelta) -> int:
    """Convert a duration to whole seconds, truncating toward zero."""
    return int(value / _SECOND)


def decode_duration(raw: object) -> timedelta:
    """Convert a decoded JSON integer of seconds into a duration.

    Only JSON numbers that are integers are accepted; strings are rejected.
    """
    if isinstance(raw, bool) or not isinstance(raw, int):
        raise TypeError(f"duration must be an integer number of seconds, not {raw!r}")
    return timedelta(seconds=raw)