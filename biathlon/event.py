"""Race events and their text representation."""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime
from os import PathLike
from typing import Iterator, Union

_CLOCK_RE = re.compile(r"(\d{1,2}):(\d{2}):(\d{2})\.(\d{3})")
_INT_RE = re.compile(r"[+-]?\d+")


class EventParseError(ValueError):
    """Raised when an event line or clock value is malformed."""


@dataclass(frozen=True)
class Event:
    """One line of the event log."""

    time: datetime
    event_id: int
    competitor_id: int
    extra_params: str = ""


def parse_clock(text: str) -> datetime:
    """Parse an ``HH:MM:SS.mmm`` time of day into a datetime on a fixed date."""
    match = _CLOCK_RE.fullmatch(text)
    if match is None:
        raise EventParseError(f"invalid time {text!r}")
    hours, minutes, seconds, millis = (int(part) for part in match.groups())
    if hours > 23 or minutes > 59 or seconds > 59:
        raise EventParseError(f"time out of range: {text!r}")
    return datetime(1900, 1, 1, hours, minutes, seconds, millis * 1000)


def _parse_int(text: str, what: str) -> int:
    if _INT_RE.fullmatch(text) is None:
        raise EventParseError(f"invalid {what}: {text!r}")
    return int(text)


def parse_event(line: str) -> Event:
    """Parse ``[time] eventID competitorID [extra]``; only the first extra word is kept."""
    args = line.split(" ")
    if len(args) < 3:
        raise EventParseError("too few fields in event line")
    return Event(
        time=parse_clock(args[0].strip("[]")),
        event_id=_parse_int(args[1], "event id"),
        competitor_id=_parse_int(args[2], "competitor id"),
        extra_params=args[3] if len(args) > 3 else "",
    )


def read_events(path: Union[str, PathLike]) -> Iterator[Event]:
    """Yield the events of a log file, one per line."""
    with open(path, encoding="utf-8", newline="") as handle:
        content = handle.read()
    lines = content.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    for line in lines:
        yield parse_event(line[:-1] if line.endswith("\r") else line)