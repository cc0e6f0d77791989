import pytest

from biathlon.competition import Competition
from biathlon.config import Config
from biathlon.event import parse_event


def make_competition(laps=2):
    config = Config(
        laps=laps,
        lap_len=3651,
        penalty_len=50,
        firing_lines=1,
        start="09:30:00",
        start_delta="00:00:30",
    )
    return Competition(config, 5)


def feed(competition, *lines):
    return [competition.process_event(parse_event(line)) for line in lines]


def test_find_competitor_creates_once():
    comp = make_competition()
    first = comp.find_competitor(7)
    assert first.id == 7
    assert comp.find_competitor(7) is first
    assert list(comp.competitors) == [7]


def test_registration_message_and_state():
    comp = make_competition()
    (msg,) = feed(comp, "[09:05:59.867] 1 1")
    assert msg == "[09:05:59.867] The competitor(1) registered"
    assert comp.competitors[1].registered is True


def test_start_time_draw():
    comp = make_competition()
    msgs = feed(comp, "[09:05:59.867] 1 1", "[09:15:00.841] 2 1 09:30:00.000")
    assert msgs[1] == (
        "[09:15:00.841] The start time for the competitor(1) was set by a draw to 09:30:00.000"
    )
    start = comp.competitors[1].start_time
    assert (start.hour, start.minute, start.second) == (9, 30, 0)


def test_invalid_start_time_returns_error_text():
    comp = make_competition()
    msgs = feed(comp, "[09:05:59.867] 1 1", "[09:15:00.841] 2 1 bogus")
    assert not msgs[1].startswith("[09:15:00.841]")
    assert comp.competitors[1].start_time is None


def test_late_start_is_not_started():
    comp = make_competition()
    msgs = feed(
        comp,
        "[09:05:59.867] 1 1",
        "[09:15:00.841] 2 1 09:30:00.000",
        "[09:30:31.000] 4 1",
    )
    assert msgs[2] == "[09:30:31.000] The competitor(1) has started"
    competitor = comp.competitors[1]
    assert competitor.status == "Not started"
    assert competitor.laps == []


def test_on_time_start_opens_lap():
    comp = make_competition()
    feed(comp, "[09:05:59.867] 1 1", "[09:15:00.841] 2 1 09:30:00.000", "[09:30:01.005] 4 1")
    competitor = comp.competitors[1]
    assert len(competitor.laps) == 1
    assert competitor.laps[0].length == 3651.0
    assert competitor.laps[0].end_time is None


def test_full_race_with_penalty_and_abandon():
    comp = make_competition()
    msgs = feed(
        comp,
        "[09:05:59.867] 1 1",
        "[09:15:00.841] 2 1 09:30:00.000",
        "[09:29:45.734] 3 1",
        "[09:30:01.005] 4 1",
        "[09:49:31.659] 5 1 1",
        "[09:49:33.123] 6 1 1",
        "[09:49:34.650] 6 1 2",
        "[09:49:35.937] 6 1 4",
        "[09:49:37.364] 6 1 5",
        "[09:49:38.339] 7 1",
        "[09:49:55.915] 8 1",
        "[09:51:48.391] 9 1",
        "[09:59:03.872] 10 1",
        "[09:59:05.321] 11 1 Lost in the forest",
    )
    assert msgs[4] == "[09:49:31.659] The competitor(1) is on the firing range(1)"
    assert msgs[5] == "[09:49:33.123] The target(1) has been hit by competitor(1)"
    assert msgs[-1] == "[09:59:05.321] The competitor(1) can`t continue: Lost"
    competitor = comp.competitors[1]
    assert competitor.status == "Not finished"
    assert len(competitor.laps) == 1
    assert competitor.laps[0].end_time is not None and competitor.laps_count == 1
    assert competitor.shot_lines.hits == [4]
    assert competitor.line_hits == 4
    assert competitor.total_shots == 5
    assert len(competitor.penalties) == 1
    assert competitor.penalties[0].length == 50.0


def test_finishing_all_laps_sets_finished():
    comp = make_competition(laps=1)
    feed(
        comp,
        "[09:05:59.867] 1 1",
        "[09:15:00.841] 2 1 09:30:00.000",
        "[09:30:01.005] 4 1",
        "[09:59:03.872] 10 1",
    )
    competitor = comp.competitors[1]
    assert competitor.status == "Finished"
    assert len(competitor.laps) == 1


def test_abandon_during_penalty_drops_it():
    comp = make_competition()
    feed(
        comp,
        "[09:05:59.867] 1 1",
        "[09:15:00.841] 2 1 09:30:00.000",
        "[09:30:01.005] 4 1",
        "[09:49:31.659] 5 1 1",
        "[09:49:38.339] 7 1",
        "[09:49:55.915] 8 1",
        "[09:50:00.000] 11 1 Tired",
    )
    competitor = comp.competitors[1]
    assert competitor.penalties == []
    assert competitor.laps == []


def test_hit_without_firing_line_raises():
    comp = make_competition()
    with pytest.raises(IndexError):
        feed(comp, "[09:05:59.867] 1 1", "[09:49:33.123] 6 1 1")


def test_unknown_event_yields_bare_prefix():
    comp = make_competition()
    (msg,) = feed(comp, "[09:05:59.867] 42 3")
    assert msg == "[09:05:59.867] "
    assert 3 in comp.competitors