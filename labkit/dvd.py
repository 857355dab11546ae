"""DVD records stored as JSON."""

from __future__ import annotations

import argparse
import json
import os
from dataclasses import asdict, dataclass
from pathlib import Path

_TEXT_FIELDS = ("name", "cast")
_NUMBER_FIELDS = ("year", "length")
_U16_MAX = 0xFFFF

_SAMPLE = """
        {
            "name": "La La Land",
            "year": 2016,
            "cast": "Emma Stone, Ryan Gosling",
            "length": 128
        }"""


@dataclass(frozen=True)
class Dvd:
    """A DVD with its title, release year, cast and running time."""

    name: str
    year: int
    cast: str
    length: int

    def to_json(self) -> str:
        """Encode as compact JSON."""
        return json.dumps(asdict(self), separators=(",", ":"), ensure_ascii=False)

    @classmethod
    def from_json(cls, raw: str | bytes) -> Dvd:
        """Decode a JSON object; unknown fields are ignored."""
        data = json.loads(raw)
        if not isinstance(data, dict):
            raise ValueError("expected a JSON object")
        values = {}
        for name in _TEXT_FIELDS + _NUMBER_FIELDS:
            if name not in data:
                raise ValueError(f"missing field `{name}`")
            values[name] = data[name]
        for name in _TEXT_FIELDS:
            if not isinstance(values[name], str):
                raise ValueError(f"field `{name}` must be a string")
        for name in _NUMBER_FIELDS:
            value = values[name]
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"field `{name}` must be an integer")
            if not 0 <= value <= _U16_MAX:
                raise ValueError(f"field `{name}` is out of range: {value}")
        return cls(**values)


def append_to_file(path: str | Path, dvd: Dvd) -> None:
    """Append the DVD's JSON to an existing file."""
    descriptor = os.open(path, os.O_WRONLY | os.O_APPEND)
    with os.fdopen(descriptor, "w", encoding="utf-8") as handle:
        handle.write(dvd.to_json())


def read_from_file(path: str | Path) -> Dvd:
    """Read a file holding exactly one DVD as JSON."""
    return Dvd.from_json(Path(path).read_text(encoding="utf-8"))


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="dvd", description="Store a DVD record as JSON.")
    parser.add_argument("file", nargs="?", default="file.json")
    args = parser.parse_args(argv)

    dvd = Dvd.from_json(_SAMPLE)
    print(dvd.to_json())
    append_to_file(args.file, dvd)
    print(read_from_file(args.file).to_json())
    return 0