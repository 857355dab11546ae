"""A console game of hangman."""

from __future__ import annotations

import argparse
import random
import sys
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path
from typing import TextIO

BODY_PARTS = (
    "noose",
    "head",
    "neck",
    "torso",
    "left arm",
    "right arm",
    "right leg",
    "left leg",
    "left foot",
    "right foot",
)
_LAST_PART = "right foot"


@dataclass
class Word:
    """The word being guessed and how much of it has been revealed."""

    answer: str
    representation: str = field(init=False)
    correct_count: int = field(default=0, init=False)

    def __post_init__(self) -> None:
        self.representation = "_" * len(self.answer)

    def check_for_letter(self, letter: str) -> bool:
        """Reveal every hidden occurrence of the letter; tell whether it occurs."""
        found = False
        revealed = 0
        shown_chars = []
        for shown, actual in zip(self.representation, self.answer):
            if actual == letter:
                found = True
            if shown == "_" and actual == letter:
                revealed += 1
                shown_chars.append(actual)
            else:
                shown_chars.append(shown)
        self.representation = "".join(shown_chars)
        self.correct_count += revealed
        return found

    def is_complete(self) -> bool:
        return self.correct_count == len(self.answer)


def read_word_list(path: str | Path) -> list[str]:
    """Read words longer than four characters; an unreadable file gives none."""
    try:
        with open(path, encoding="utf-8", newline="") as handle:
            lines = [line.removesuffix("\n").removesuffix("\r") for line in handle]
    except OSError:
        return []
    return [word for word in lines if len(word) > 4]


def select_word(words: list[str], rng: random.Random | None = None) -> str:
    """Pick a word, never the first one in the list."""
    if len(words) < 2:
        raise ValueError("need at least two words to choose from")
    rng = rng or random.Random()
    return words[rng.randrange(1, len(words))]


def play(word: Word, guesses: Iterable[str], output: TextIO) -> bool:
    """Play a game reading one guess per line; return True if the word was found."""
    parts = iter(BODY_PARTS)
    lines = iter(guesses)
    hanged = False
    while not word.is_complete() and not hanged:
        print("Provide a letter to guess ", file=output)
        line = next(lines, "")
        if not line:
            raise EOFError("no guess was provided")
        letter = line[0]
        if word.check_for_letter(letter):
            print("Found a ", file=output)
            print(
                f"There is at least one {letter}, so the word is {word.representation}",
                file=output,
            )
        else:
            part = next(parts)
            print(f"Incorrect! You are at {part}", file=output)
            hanged = part == _LAST_PART
    if hanged:
        print(f"You were unsuccessful at guessing {word.answer}", file=output)
    else:
        print(f"Yes! The word was {word.answer}", file=output)
    return not hanged


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="hangman", description="Play hangman.")
    parser.add_argument("words", nargs="?", default="words.txt", help="word list file")
    args = parser.parse_args(argv)

    answer = select_word(read_word_list(args.words))
    try:
        play(Word(answer), sys.stdin, sys.stdout)
    except EOFError:
        print("Didn't get any input", file=sys.stderr)
        return 1
    return 0