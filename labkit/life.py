"""Conway's Game of Life on a fixed 75x75 grid."""

from __future__ import annotations

import argparse
import random
import re
import time
from pathlib import Path

SIZE = 75
# Only the first 74 rows and columns are updated, counted and drawn; the
# last row and column can still feed neighbour counts.
_ACTIVE = SIZE - 1

RED = "\x1b[38;5;1m"
BLUE = "\x1b[38;5;4m"
CLEAR = "\x1b[2J"

World = list[list[int]]

_NEIGHBOURS = [(di, dj) for di in (-1, 0, 1) for dj in (-1, 0, 1) if (di, dj) != (0, 0)]
_INDEX = re.compile(r"\+?[0-9]+")


def empty_world() -> World:
    """Return a grid with every cell dead."""
    return [[0] * SIZE for _ in range(SIZE)]


def random_world(rng: random.Random | None = None) -> World:
    """Return a grid whose active cells are alive with even odds."""
    rng = rng or random.Random()
    world = empty_world()
    for row in world[:_ACTIVE]:
        row[:_ACTIVE] = [rng.getrandbits(1) for _ in range(_ACTIVE)]
    return world


def census(world: World) -> int:
    """Count the living cells in the active part of the grid."""
    return sum(row[:_ACTIVE].count(1) for row in world[:_ACTIVE])


def _live_neighbours(world: World, i: int, j: int) -> int:
    return sum(
        world[i + di][j + dj]
        for di, dj in _NEIGHBOURS
        if 0 <= i + di < SIZE and 0 <= j + dj < SIZE
    )


def generation(world: World) -> World:
    """Compute the next generation of the grid."""
    new_world = empty_world()
    for i in range(_ACTIVE):
        for j in range(_ACTIVE):
            count = _live_neighbours(world, i, j)
            alive = world[i][j] == 1
            if (alive and count in (2, 3)) or (world[i][j] == 0 and count == 3):
                new_world[i][j] = 1
    return new_world


def _parse_index(word: str, number: int) -> int:
    if not _INDEX.fullmatch(word):
        raise ValueError(f"line {number}: invalid coordinate {word!r}")
    value = int(word)
    if value >= SIZE:
        raise ValueError(f"line {number}: coordinate {value} is outside the grid")
    return value


def populate_from_file(path: str | Path) -> World:
    """Build a grid from a file of whitespace separated "row column" pairs."""
    world = empty_world()
    with open(path, encoding="utf-8") as handle:
        for number, line in enumerate(handle, 1):
            words = line.split()
            if len(words) < 2:
                raise ValueError(f"line {number}: expected two coordinates")
            x = _parse_index(words[0], number)
            y = _parse_index(words[1], number)
            world[x][y] = 1
    return world


def render(world: World) -> str:
    """Draw the active part of the grid, one text line per row."""
    return "".join(
        "".join(f"{RED}*" if cell == 1 else " " for cell in row[:_ACTIVE]) + "\n"
        for row in world[:_ACTIVE]
    )


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="life", description="Run the Game of Life.")
    parser.add_argument("file", nargs="?", help="file of live cell coordinates")
    parser.add_argument("--generations", type=int, default=100)
    parser.add_argument("--delay", type=float, default=2.0, help="seconds between generations")
    args = parser.parse_args(argv)

    world = populate_from_file(args.file) if args.file else random_world()
    print(f"Population at generation 0 is {census(world)}")
    for number in range(1, args.generations + 1):
        world = generation(world)
        print(CLEAR)
        print(render(world), end="")
        print(f"{BLUE}Population at generation {number} is {census(world)}")
        time.sleep(args.delay)
    return 0