"""A small SQLite store of findings."""

from __future__ import annotations

import argparse
import sqlite3
import sys
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path

_SCHEMA = """CREATE TABLE IF NOT EXISTS findings (
    findings_ID INTEGER PRIMARY KEY,
    title TEXT NOT NULL,
    finding TEXT NOT NULL,
    details TEXT,
    justification TEXT)"""
SEPARATOR = "-----------------------------"


@dataclass(frozen=True)
class Finding:
    title: str
    finding: str
    details: str | None
    justification: str | None


class FindingsDB:
    """Findings kept in an SQLite database file."""

    def __init__(self, path: str | Path = "stratapp.db") -> None:
        self._conn = sqlite3.connect(path)
        self._conn.execute(_SCHEMA)
        self._conn.commit()

    def add(self, finding: Finding) -> None:
        """Store a finding, trimming surrounding whitespace from its fields."""
        values = [
            value.strip() if value is not None else None
            for value in (finding.title, finding.finding, finding.details, finding.justification)
        ]
        self._conn.execute(
            "INSERT INTO findings (title, finding, details, justification) VALUES (?, ?, ?, ?)",
            values,
        )
        self._conn.commit()

    def records(self) -> Iterator[Finding]:
        rows = self._conn.execute(
            "SELECT title, finding, details, justification FROM findings ORDER BY findings_ID"
        )
        for row in rows:
            yield Finding(*row)

    def close(self) -> None:
        self._conn.close()

    def __enter__(self) -> FindingsDB:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


def format_finding(finding: Finding) -> str:
    return "\n".join(
        [
            SEPARATOR,
            f"Title = {finding.title}",
            f"Finding = {finding.finding}",
            f"Details = {finding.details}",
            f"Justification = {finding.justification}",
        ]
    )


def _prompt(label: str) -> str:
    print(label)
    return sys.stdin.readline()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="findings", description="Record findings.")
    parser.add_argument("command", nargs="?")
    parser.add_argument("--db", default="stratapp.db")
    args = parser.parse_args(argv)

    with FindingsDB(args.db) as db:
        if args.command is None:
            print("Please specify add or list as a command line parameter")
        elif args.command == "add":
            db.add(
                Finding(
                    _prompt("Title"),
                    _prompt("Finding text"),
                    _prompt("Details of the finding"),
                    _prompt("Justification"),
                )
            )
        elif args.command == "list":
            for finding in db.records():
                print(format_finding(finding))
        else:
            print("Didn't send a valid command in")
    return 0