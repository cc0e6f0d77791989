# biathlon

Reads a biathlon race configuration and an event log, prints a line for every
event as it is processed, writes those lines to a log file, and writes a final
results table.

## Installation

```
pip install .
```

For running the tests:

```
pip install .[test]
pytest
```

## Usage

```
biathlon --config sunny_5_skiers/config.json \
         --input sunny_5_skiers/events \
         --output output.txt \
         --result result.txt
```

The options may also be written with a single dash (`-config`, `-input`,
`-output`, `-result`). All four have the values above as defaults, so running
`biathlon` alone reads the files from `sunny_5_skiers/` and writes
`output.txt` and `result.txt` in the current directory.

The command prints the event log under the heading `Логи соревнований:` and the
results under `Данные о результатах соревнований:`. It exits with status 0 on
success and 1 if a file cannot be read or written, the configuration is not
valid, or an event line cannot be parsed.

Each firing line has 5 shots.

### Configuration

A JSON object:

```json
{
    "laps": 2,
    "lapLen": 3651,
    "penaltyLen": 50,
    "firingLines": 1,
    "start": "09:30:00",
    "startDelta": "00:00:30"
}
```

Keys are matched without regard to case; unknown keys are ignored. `laps`,
`lapLen`, `penaltyLen` and `firingLines` must be integers, `start` and
`startDelta` strings. `startDelta` is read as `HH:MM:SS` or `HH:MM:SS.mmm`.
`firingLines` and `start` are loaded but not used in the calculations.

### Event log

One event per line: a time in brackets, the event id, the competitor id and,
for some events, one extra parameter. Fields are separated by single spaces;
only the first word after the competitor id is kept.

```
[09:05:59.867] 1 1
[09:15:00.841] 2 1 09:30:00.000
[09:29:45.734] 3 1
[09:30:01.005] 4 1
[09:49:31.659] 5 1 1
[09:49:33.123] 6 1 1
[09:59:03.872] 7 1
[09:59:03.872] 8 1
[10:00:01.000] 9 1
[10:08:35.000] 10 1
[11:08:35.000] 10 1
```

| id | meaning                                   | extra parameter        |
|----|-------------------------------------------|------------------------|
| 1  | competitor registered                     |                        |
| 2  | start time set by draw                    | start time (HH:MM:SS.mmm) |
| 3  | competitor on the start line              |                        |
| 4  | competitor started                        |                        |
| 5  | competitor on the firing range            | firing range number    |
| 6  | target hit                                | target number          |
| 7  | competitor left the firing range          |                        |
| 8  | competitor entered the penalty laps       |                        |
| 9  | competitor left the penalty laps          |                        |
| 10 | competitor ended a main lap               |                        |
| 11 | competitor cannot continue                | reason (one word)      |

A competitor who starts more than `startDelta` after the drawn start time is
marked `Not started`. A competitor who reports event 11 is marked
`Not finished`, and any lap or penalty lap left unfinished is dropped. A
competitor who completes `laps` main laps without either of those is marked
`Finished`. The penalty distance is the number of misses on the last firing
line times `penaltyLen`.

If the start time given with event 2 cannot be parsed, the error message is
written in place of that event's log line. An event id outside 1–11 produces
only its time stamp.

### Output

The log file holds one human-readable line per event, for example
`[09:05:59.867] The competitor(1) registered`.

The result file holds one line per competitor, ordered by total time (from the
drawn start time to the end of the last recorded lap):

```
[total time or status] id [ {lap time, speed}, ... ] {{penalty time, speed}, ...} hits/shots
```

The total time is shown only for finished competitors; otherwise the status is
shown in its place. Speeds are in configured length units per whole second,
with three decimals.

## Using it as a library

```python
from biathlon.competition import Competition
from biathlon.config import load_config
from biathlon.event import read_events
from biathlon.report import Report

competition = Competition(load_config("config.json"), shots_count=5)
for event in read_events("events"):
    print(competition.process_event(event))

print(Report.from_competition(competition).show())
```

Single lines can be parsed with `biathlon.event.parse_event`, which raises
`EventParseError` for malformed input. `biathlon.timeparse` offers
`parse_duration`, `format_duration` and `check_time_deviation`.

`biathlon.cli.run(config_path, input_path, output_path, result_path)` does the
whole job in one call, the same as the command, and returns the results text.