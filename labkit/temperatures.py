"""Average daily low and high temperatures."""

from __future__ import annotations

import argparse
import math
import struct
from collections.abc import Iterable
from dataclasses import dataclass
from decimal import Decimal
from pathlib import Path


@dataclass(frozen=True)
class Temperature:
    """One day's minimum and maximum temperature."""

    minimum: float
    maximum: float


def _single(value: float) -> float:
    """Round to single precision."""
    try:
        return struct.unpack("f", struct.pack("f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


def _parse_float(text: str, number: int) -> float:
    if text != text.strip() or "_" in text:
        raise ValueError(f"line {number}: invalid number {text!r}")
    try:
        return float(text)
    except ValueError as error:
        raise ValueError(f"line {number}: invalid number {text!r}") from error


def read_temperatures(path: str | Path) -> list[Temperature]:
    """Read "minimum,maximum" lines."""
    temps = []
    with open(path, encoding="utf-8", newline="") as handle:
        for number, raw in enumerate(handle, 1):
            line = raw.removesuffix("\n").removesuffix("\r")
            fields = line.split(",")
            if len(fields) < 2:
                raise ValueError(f"line {number}: expected minimum and maximum")
            temps.append(
                Temperature(_parse_float(fields[0], number), _parse_float(fields[1], number))
            )
    return temps


def average(temps: Iterable[Temperature]) -> tuple[float, float]:
    """Average minimum and maximum in single precision; NaN for no data."""
    temps = list(temps)
    if not temps:
        return math.nan, math.nan
    low_total = high_total = 0.0
    for temp in temps:
        low_total = _single(low_total + _single(temp.minimum))
        high_total = _single(high_total + _single(temp.maximum))
    count = len(temps)
    return _single(low_total / count), _single(high_total / count)


def _display(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    single = _single(value)
    text = repr(single)
    for digits in range(1, 10):
        candidate = f"{single:.{digits}g}"
        if _single(float(candidate)) == single:
            text = candidate
            break
    return format(Decimal(text), "f")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="temperatures", description="Average temperatures.")
    parser.add_argument("file", nargs="?", default="temperatures.txt")
    args = parser.parse_args(argv)

    low, high = average(read_temperatures(args.file))
    print(f"Average daily low: {_display(low)}, average daily high: {_display(high)}")
    return 0