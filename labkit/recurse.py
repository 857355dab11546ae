"""Recursive classics: factorial, Fibonacci and the towers of Hanoi."""

from __future__ import annotations

import argparse
import math
from collections.abc import Iterator

_U128_MAX = 2**128 - 1
_U16_MAX = 2**16 - 1


def _check_natural(n: int) -> None:
    if n < 0:
        raise ValueError(f"expected a non-negative number, got {n}")


def factorial(n: int) -> int:
    """Return n! for n > 1 and n itself otherwise, within 128 unsigned bits."""
    _check_natural(n)
    if n <= 1:
        return n
    result = math.prod(range(2, n + 1))
    if result > _U128_MAX:
        raise OverflowError(f"{n}! does not fit in 128 bits")
    return result


def fibonacci(n: int) -> int:
    """Return the n-th Fibonacci number, within 128 unsigned bits."""
    _check_natural(n)
    previous, current = 0, 1
    for _ in range(n):
        previous, current = current, previous + current
        if previous > _U128_MAX:
            raise OverflowError(f"Fibonacci number {n} does not fit in 128 bits")
    return previous


def _moves(n: int, source: str, target: str, spare: str) -> Iterator[tuple[int, str, str]]:
    if n == 1:
        yield (1, source, target)
        return
    yield from _moves(n - 1, source, spare, target)
    yield (n, source, target)
    yield from _moves(n - 1, spare, target, source)


def tower_moves(
    n: int, source: str = "A", target: str = "B", spare: str = "C"
) -> Iterator[tuple[int, str, str]]:
    """Yield (disk, from_rod, to_rod) moves that shift n disks to the target rod."""
    if not 1 <= n <= _U16_MAX:
        raise ValueError(f"number of disks must be between 1 and {_U16_MAX}, got {n}")
    return _moves(n, source, target, spare)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="recurse", description="Run recursive examples.")
    parser.parse_args(argv)

    print(f"The result is {factorial(5)}")
    print(f"The 15th Fibonacci number is {fibonacci(5)}")
    for disk, source, target in tower_moves(4, "A", "B", "C"):
        print(f"Moving disk {disk} from rod {source} to rod {target}")
    return 0