"""Timestamp rendering.

The elapsed-time reference is captured once, when this module is first
imported, and is read-only afterwards.
"""

import time
from datetime import datetime, timedelta

RFC3339NANO = "rfc3339nano"

_BASE_TIMESTAMP: float = time.monotonic()


def elapsed_seconds() -> float:
    """Return seconds elapsed since the process-wide base timestamp."""
    return time.monotonic() - _BASE_TIMESTAMP


def format_elapsed() -> str:
    return f"[{elapsed_seconds():f}]"


def format_rfc3339_nano(dt: datetime) -> str:
    """Render a datetime as RFC 3339 with trimmed fractional seconds.

    Trailing zeros of the fraction are dropped (and the fraction entirely
    when it is zero). UTC renders as ``Z``; other offsets as ``+hh:mm``.
    Naive datetimes are interpreted as local time.
    """
    if dt.tzinfo is None:
        dt = dt.astimezone()

    text = dt.strftime("%Y-%m-%dT%H:%M:%S")
    if dt.microsecond:
        text += "." + f"{dt.microsecond:06d}".rstrip("0")

    offset = dt.utcoffset() or timedelta(0)
    if offset == timedelta(0):
        return text + "Z"

    sign = "+" if offset > timedelta(0) else "-"
    minutes = abs(int(offset.total_seconds())) // 60
    return f"{text}{sign}{minutes // 60:02d}:{minutes % 60:02d}"


def format_timestamp(dt: datetime, fmt: str = RFC3339NANO) -> str:
    """Render a record timestamp with a strftime format or the RFC3339NANO default."""
    if not fmt or fmt == RFC3339NANO:
        return format_rfc3339_nano(dt)
    return dt.strftime(fmt)
