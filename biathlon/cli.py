"""Command line entry point: process an event log and write the results."""

from __future__ import annotations

import argparse
import json
import sys
from os import PathLike
from typing import Optional, Sequence, Union

from biathlon.competition import Competition
from biathlon.config import load_config
from biathlon.event import EventParseError, read_events
from biathlon.report import Report

SHOTS_COUNT = 5  # fixed by the competition rules

_PathType = Union[str, PathLike]


def write_file(path: _PathType, text: str) -> None:
    """Create or overwrite ``path`` with ``text``."""
    with open(path, "w", encoding="utf-8", newline="") as handle:
        handle.write(text)


def run(
    config_path: _PathType,
    input_path: _PathType,
    output_path: _PathType,
    result_path: _PathType,
) -> str:
    """Process the events, write the log and results, and return the results."""
    competition = Competition(load_config(config_path), SHOTS_COUNT)

    print("Логи соревнований:")
    log_lines = []
    for event in read_events(input_path):
        message = competition.process_event(event)
        log_lines.append(message + "\n")
        print(message)

    write_file(output_path, "".join(log_lines))

    result = Report.from_competition(competition).show()
    print("\nДанные о результатах соревнований:")
    print(result)
    write_file(result_path, result)
    return result


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Process biathlon race events.")
    parser.add_argument(
        "-config", "--config", dest="config",
        default="sunny_5_skiers/config.json", help="Path to JSON-config file",
    )
    parser.add_argument(
        "-input", "--input", dest="input",
        default="sunny_5_skiers/events", help="Path to input events file",
    )
    parser.add_argument(
        "-output", "--output", dest="output",
        default="output.txt", help="Path to log file",
    )
    parser.add_argument(
        "-result", "--result", dest="result",
        default="result.txt", help="Path to result file",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the command; returns the process exit status."""
    args = _parser().parse_args(argv)
    try:
        run(args.config, args.input, args.output, args.result)
    except (json.JSONDecodeError, ValueError) as exc:
        kind = "событий" if isinstance(exc, EventParseError) else "конфигурации"
        print(f"Ошибка при обработке {kind}: {exc}", file=sys.stderr)
        return 1
    except OSError as exc:
        print(f"Ошибка при работе с файлом: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())