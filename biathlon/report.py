"""Final results table built from a finished competition."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Iterable, Optional

from biathlon.competition import Competition
from biathlon.competitor import Lap
from biathlon.timeparse import format_duration

# Unset timestamps behave as a moment one leap year after the race day.
_UNSET_TIME = datetime(1900, 1, 1) + timedelta(days=366)


def _moment(value: Optional[datetime]) -> datetime:
    return _UNSET_TIME if value is None else value


def _format_speed(speed: float) -> str:
    if math.isnan(speed):
        return "NaN"
    if math.isinf(speed):
        return "+Inf" if speed > 0 else "-Inf"
    return f"{speed:.3f}"


@dataclass(frozen=True)
class LapAndSpeed:
    """Time spent on a lap and the average speed over it."""

    lap_time: timedelta
    lap_speed: float

    def __str__(self) -> str:
        return f"{{{format_duration(self.lap_time)}, {_format_speed(self.lap_speed)}}}"


def lap_durations(laps: Iterable[Lap], lap_length: int) -> list[LapAndSpeed]:
    """Lap times and speeds, using ``lap_length`` and whole elapsed seconds."""
    result = []
    for lap in laps:
        lap_time = _moment(lap.end_time) - _moment(lap.start_time)
        seconds = int(lap_time.total_seconds())
        if seconds == 0:
            speed = math.nan if lap_length == 0 else math.copysign(math.inf, lap_length)
        else:
            speed = lap_length / seconds
        result.append(LapAndSpeed(lap_time, speed))
    return result


@dataclass
class ReportEntry:
    """One competitor's line of the final results."""

    id: int
    status: str
    duration: timedelta
    laps: list[LapAndSpeed]
    penalties: list[LapAndSpeed]
    hits_per_shots: str

    def __str__(self) -> str:
        shown_time = format_duration(self.duration) if self.status == "Finished" else self.status
        laps = ", ".join(str(lap) for lap in self.laps)
        lead = " " if self.laps else ""
        penalties = ", ".join(str(lap) for lap in self.penalties)
        return (
            f"[{shown_time}] {self.id} [{lead}{laps}] "
            f"{{{penalties}}} {self.hits_per_shots} \n"
        )


@dataclass
class Report:
    """The final results of a competition."""

    entries: list[ReportEntry] = field(default_factory=list)

    @classmethod
    def from_competition(cls, competition: Competition) -> "Report":
        """Collect the results of every competitor of the race."""
        config = competition.config
        entries = []
        for comp in competition.competitors.values():
            if comp.laps:
                duration = _moment(comp.laps[-1].end_time) - _moment(comp.start_time)
            else:
                duration = timedelta(0)
            entries.append(
                ReportEntry(
                    id=comp.id,
                    status=comp.status,
                    duration=duration,
                    laps=lap_durations(comp.laps, config.lap_len),
                    penalties=lap_durations(comp.penalties, config.penalty_len),
                    hits_per_shots=f"{comp.line_hits}/{comp.total_shots}",
                )
            )
        return cls(entries)

    def show(self) -> str:
        """Render the results, fastest first, one competitor per line."""
        return "".join(str(entry) for entry in sorted(self.entries, key=lambda e: e.duration))