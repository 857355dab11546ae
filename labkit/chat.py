"""A keyword-matching chat bot."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path
from typing import TextIO

GREETING = "Hi,my name is Zelia, what can I do for you?"
FALLBACK = "I'm not sure what you are saying"


@dataclass(frozen=True)
class ChatResponse:
    """A reply given when the key occurs in the query."""

    key: str
    response: str


def load_responses(path: str | Path) -> list[ChatResponse]:
    """Read tab separated "key<TAB>response" lines."""
    responses = []
    with open(path, encoding="utf-8", newline="") as handle:
        for number, raw in enumerate(handle, 1):
            line = raw.removesuffix("\n").removesuffix("\r")
            fields = line.split("\t")
            if len(fields) < 2:
                raise ValueError(f"line {number}: expected a key and a response")
            responses.append(ChatResponse(fields[0], fields[1]))
    return responses


def reply(responses: Iterable[ChatResponse], query: str) -> str:
    """Answer with the first response whose key occurs in the query."""
    return next((r.response for r in responses if r.key in query), FALLBACK)


def converse(responses: list[ChatResponse], lines: Iterable[str], output: TextIO) -> None:
    """Greet, then answer each input line until the input ends."""
    print(GREETING, file=output)
    for line in lines:
        print(reply(responses, line.strip()), file=output)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="chat", description="Chat with a simple bot.")
    parser.add_argument("file", nargs="?", default="chatresponses.txt")
    args = parser.parse_args(argv)

    converse(load_responses(args.file), sys.stdin, sys.stdout)
    return 0