"""Conversions between clock-style duration strings and timedeltas."""

from __future__ import annotations

import re
from datetime import datetime, timedelta

_DURATION_RE = re.compile(r"(\d{1,2}):(\d{1,2}):(\d{1,2})(?:\.(\d{1,3}))?")

_MICROS_PER_SECOND = 1_000_000
_MICROS_PER_MINUTE = 60 * _MICROS_PER_SECOND
_MICROS_PER_HOUR = 60 * _MICROS_PER_MINUTE
_MICROS_PER_MILLI = 1_000


class DurationParseError(ValueError):
    """Raised when a duration string is not in HH:MM:SS[.mmm] form."""


def parse_duration(text: str) -> timedelta:
    """Parse ``HH:MM:SS.mmm`` or ``HH:MM:SS`` into a timedelta."""
    match = _DURATION_RE.match(text)
    if match is None:
        raise DurationParseError("parse duration error")
    hours, minutes, seconds, millis = match.groups()
    return timedelta(
        hours=int(hours),
        minutes=int(minutes),
        seconds=int(seconds),
        milliseconds=int(millis) if millis else 0,
    )


def _trunc_div(value: int, divisor: int) -> int:
    quotient = abs(value) // divisor
    return quotient if value >= 0 else -quotient


def _trunc_mod(value: int, divisor: int) -> int:
    return value - _trunc_div(value, divisor) * divisor


def format_duration(duration: timedelta) -> str:
    """Render a timedelta as ``HH:MM:SS.mmm``; hours are not wrapped at 24."""
    micros = duration // timedelta(microseconds=1)
    hours = _trunc_div(micros, _MICROS_PER_HOUR)
    minutes = _trunc_mod(_trunc_div(micros, _MICROS_PER_MINUTE), 60)
    seconds = _trunc_mod(_trunc_div(micros, _MICROS_PER_SECOND), 60)
    millis = _trunc_div(_trunc_mod(micros, _MICROS_PER_SECOND), _MICROS_PER_MILLI)
    return f"{hours:02d}:{minutes:02d}:{seconds:02d}.{millis:03d}"


def check_time_deviation(start: datetime, end: datetime, delta: str) -> bool:
    """Return True when ``end`` is later than ``start`` by more than ``delta``."""
    allowed = parse_duration(delta)
    return end - start > allowed