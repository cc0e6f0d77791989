"""Competitors, their laps and firing-line results."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional


@dataclass
class Lap:
    """A main or penalty lap; ``end_time`` is None while it is in progress."""

    start_time: datetime
    length: float
    end_time: Optional[datetime] = None

    def speed(self) -> float:
        """Average speed over the lap in length units per second."""
        if self.end_time is None:
            raise ValueError("lap has not been finished")
        seconds = (self.end_time - self.start_time).total_seconds()
        if seconds == 0:
            if self.length == 0:
                return math.nan
            return math.copysign(math.inf, self.length)
        return self.length / seconds


@dataclass
class ShotLine:
    """History of hits per firing line and the total number of hits."""

    total_hits: int = 0
    hits: list[int] = field(default_factory=list)

    def add_line(self, hits: int) -> None:
        """Register a new firing line with the given number of hits."""
        self.hits.append(hits)

    def penalty_length(self, shots_per_line: int, penalty_len: int) -> int:
        """Penalty distance for the misses on the most recent firing line."""
        if not self.hits:
            raise IndexError("no firing line registered")
        return (shots_per_line - self.hits[-1]) * penalty_len


@dataclass
class Competitor:
    """A biathlete and everything recorded about their race."""

    id: int
    registered: bool = False
    start_time: Optional[datetime] = None
    actual_start_time: Optional[datetime] = None
    laps: list[Lap] = field(default_factory=list)
    penalties: list[Lap] = field(default_factory=list)
    shot_lines: ShotLine = field(default_factory=ShotLine)
    all_hits: int = 0
    total_shots: int = 0
    line_hits: int = 0
    status: str = ""
    comment: str = ""
    laps_count: int = 0

    def add_lap(self, lap: Lap) -> None:
        self.laps.append(lap)

    def add_penalty(self, lap: Lap) -> None:
        self.penalties.append(lap)

    def current_lap(self) -> Optional[Lap]:
        """The most recent main lap, or None if there is none."""
        return self.laps[-1] if self.laps else None

    def current_penalty(self) -> Optional[Lap]:
        """The most recent penalty lap, or None if there is none."""
        return self.penalties[-1] if self.penalties else None

    def delete_last_lap(self) -> None:
        self.laps.pop()

    def delete_last_penalty(self) -> None:
        self.penalties.pop()