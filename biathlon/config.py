"""Competition configuration loaded from JSON."""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass
from os import PathLike
from typing import Any, Union

# JSON key (compared case-insensitively) -> (attribute name, expected type)
_FIELDS: dict[str, tuple[str, type]] = {
    "laps": ("laps", int),
    "laplen": ("lap_len", int),
    "penaltylen": ("penalty_len", int),
    "firinglines": ("firing_lines", int),
    "start": ("start", str),
    "startdelta": ("start_delta", str),
}


@dataclass
class Config:
    """Race parameters: lap count and lengths, firing lines, start schedule."""

    laps: int = 0
    lap_len: int = 0
    penalty_len: int = 0
    firing_lines: int = 0
    start: str = ""
    start_delta: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Config":
        """Build a config from a decoded JSON object; unknown keys are ignored."""
        if not isinstance(data, Mapping):
            raise ValueError("configuration must be a JSON object")
        values: dict[str, Any] = {}
        for key, value in data.items():
            target = _FIELDS.get(str(key).lower())
            if target is None or value is None:
                continue
            name, kind = target
            if kind is int:
                if not isinstance(value, int) or isinstance(value, bool):
                    raise ValueError(f"field {key!r} must be an integer, got {value!r}")
            elif not isinstance(value, str):
                raise ValueError(f"field {key!r} must be a string, got {value!r}")
            values[name] = value
        return cls(**values)


def load_config(path: Union[str, PathLike]) -> Config:
    """Read a JSON configuration file."""
    with open(path, encoding="utf-8") as handle:
        data = json.load(handle)
    return Config.from_dict(data)