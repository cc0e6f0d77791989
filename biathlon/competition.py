"""The state of a biathlon race and the handling of its events."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from biathlon.competitor import Competitor, Lap, ShotLine
from biathlon.config import Config
from biathlon.event import Event, EventParseError, parse_clock
from biathlon.timeparse import DurationParseError, check_time_deviation, parse_duration


def _clock(moment: datetime) -> str:
    return f"{moment:%H:%M:%S}.{moment.microsecond // 1000:03d}"


def _drop_unfinished(competitor: Competitor) -> None:
    """Remove the last main or penalty lap if it was never completed."""
    lap = competitor.current_lap()
    if lap is not None and lap.end_time is None:
        competitor.delete_last_lap()
    penalty = competitor.current_penalty()
    if penalty is not None and penalty.end_time is None:
        competitor.delete_last_penalty()


@dataclass
class Competition:
    """A race: its configuration, competitors and shots per firing line."""

    config: Config
    shots_count: int
    competitors: dict[int, Competitor] = field(default_factory=dict)

    def find_competitor(self, competitor_id: int) -> Competitor:
        """Return the competitor with this id, creating one if needed."""
        competitor = self.competitors.get(competitor_id)
        if competitor is None:
            competitor = Competitor(id=competitor_id)
            self.competitors[competitor_id] = competitor
        return competitor

    def process_event(self, event: Event) -> str:
        """Apply an event to the race and return its log line or error text."""
        try:
            return self._process(event)
        except (EventParseError, DurationParseError) as exc:
            return str(exc)

    def _process(self, event: Event) -> str:
        competitor = self.find_competitor(event.competitor_id)
        cid = competitor.id
        prefix = f"[{_clock(event.time)}] "
        eid = event.event_id

        if eid == 1:
            self.competitors[event.competitor_id] = Competitor(
                id=event.competitor_id,
                registered=True,
                shot_lines=ShotLine(),
            )
            return prefix + f"The competitor({cid}) registered"

        if eid == 2:
            try:
                competitor.start_time = parse_clock(event.extra_params)
            except EventParseError:
                competitor.start_time = None
                raise
            return prefix + (
                f"The start time for the competitor({cid}) was set by a draw to "
                f"{event.extra_params}"
            )

        if eid == 3:
            return prefix + f"The competitor({cid}) is on the start line"

        if eid == 4:
            competitor.actual_start_time = event.time
            if competitor.start_time is None:
                parse_duration(self.config.start_delta)
                late = False
            else:
                late = check_time_deviation(
                    competitor.start_time, event.time, self.config.start_delta
                )
            if late:
                competitor.status = "Not started"
                _drop_unfinished(competitor)
            else:
                competitor.add_lap(Lap(start_time=event.time, length=float(self.config.lap_len)))
            return prefix + f"The competitor({cid}) has started"

        if eid == 5:
            competitor.shot_lines.add_line(0)
            return prefix + f"The competitor({cid}) is on the firing range({event.extra_params})"

        if eid == 6:
            competitor.line_hits += 1
            competitor.shot_lines.hits[-1] += 1
            return prefix + f"The target({event.extra_params}) has been hit by competitor({cid})"

        if eid == 7:
            competitor.all_hits += competitor.line_hits
            competitor.shot_lines.total_hits += competitor.line_hits
            competitor.total_shots += self.shots_count
            return prefix + f"The competitor({cid}) left the firing range"

        if eid == 8:
            length = competitor.shot_lines.penalty_length(self.shots_count, self.config.penalty_len)
            competitor.add_penalty(Lap(start_time=event.time, length=float(length)))
            return prefix + f"The competitor({cid}) entered the penalty laps"

        if eid == 9:
            penalty = competitor.current_penalty()
            if penalty is None:
                raise LookupError(f"competitor {cid} has no penalty lap in progress")
            penalty.end_time = event.time
            return prefix + f"The competitor({cid}) left the penalty laps"

        if eid == 10:
            lap = competitor.current_lap()
            competitor.laps_count += 1
            if lap is None:
                raise LookupError(f"competitor {cid} has no lap in progress")
            lap.end_time = event.time
            if competitor.laps_count >= self.config.laps:
                if competitor.status == "":
                    competitor.status = "Finished"
            else:
                competitor.add_lap(Lap(start_time=event.time, length=float(self.config.lap_len)))
            return prefix + f"The competitor({cid}) ended the main lap"

        if eid == 11:
            competitor.status = "Not finished"
            _drop_unfinished(competitor)
            return prefix + f"The competitor({cid}) can`t continue: {event.extra_params}"

        return prefix