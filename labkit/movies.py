"""Sorting and looking up movies by release year."""

from __future__ import annotations

import argparse
import re
from dataclasses import dataclass
from pathlib import Path

_I32 = re.compile(r"[+-]?[0-9]+")
_I32_MIN, _I32_MAX = -(2**31), 2**31 - 1


@dataclass(frozen=True, order=True)
class Movie:
    """A movie title and its release year."""

    title: str
    year: int


def default_movies() -> list[Movie]:
    """Return the built-in movie collection."""
    return [
        Movie("Buckaroo Banzai Across the 8th Dimension", 1984),
        Movie("Captain America", 2011),
        Movie("Stargate", 1994),
        Movie("When Harry Met Sally", 1989),
        Movie("Kiss Kiss Bang Bang", 2005),
        Movie("The Dark Knight", 2008),
        Movie("Boys Night Out", 1962),
        Movie("The Glass Bottom Boat", 1966),
    ]


def by_year_descending(movies: list[Movie]) -> list[Movie]:
    """Newest first; movies from the same year come in reverse input order."""
    return list(reversed(sorted(movies, key=lambda movie: movie.year)))


def _parse_year(text: str, number: int) -> int:
    if not _I32.fullmatch(text):
        raise ValueError(f"line {number}: invalid year {text!r}")
    year = int(text)
    if not _I32_MIN <= year <= _I32_MAX:
        raise ValueError(f"line {number}: year {year} is out of range")
    return year


def load_movie_years(path: str | Path) -> dict[str, int]:
    """Read tab separated "title<TAB>year" lines into a title-ordered mapping."""
    entries: dict[str, int] = {}
    with open(path, encoding="utf-8", newline="") as handle:
        for number, raw in enumerate(handle, 1):
            line = raw.removesuffix("\n").removesuffix("\r")
            fields = line.split("\t")
            if len(fields) < 2:
                raise ValueError(f"line {number}: expected a title and a year")
            entries[fields[0]] = _parse_year(fields[1], number)
    return dict(sorted(entries.items()))


def sorted_by_year(movie_years: dict[str, int]) -> list[tuple[str, int]]:
    """List (title, year) pairs by year, titles in order within a year."""
    return sorted(sorted(movie_years.items()), key=lambda item: item[1])


def _debug_str(text: str) -> str:
    escaped = (
        text.replace("\\", "\\\\")
        .replace('"', '\\"')
        .replace("\n", "\\n")
        .replace("\r", "\\r")
        .replace("\t", "\\t")
    )
    return f'"{escaped}"'


def main_sort(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="movies-sort", description="List movies newest first.")
    parser.parse_args(argv)
    for movie in by_year_descending(default_movies()):
        print(f"DVD {{ title: {_debug_str(movie.title)}, year: {movie.year} }}")
    return 0


def main_tree(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="movies-tree", description="Look up movie years.")
    parser.add_argument("file", nargs="?", default="values.txt")
    args = parser.parse_args(argv)

    movies = load_movie_years(args.file)
    print(f"We have {len(movies)} movies")

    year = movies.get("Captain America")
    print(year if year is not None else "Unable to find that movie")

    title = "Boys Night Out"
    if title in movies:
        print(f"{title} : {movies[title]}")
    else:
        print("Unable to find that movie")

    for movie, year in movies.items():
        print(f"{movie}: {year}")

    pairs = ", ".join(f"({_debug_str(t)}, {y})" for t, y in sorted_by_year(movies))
    print(f"[{pairs}]")
    return 0