"""Load people records into MongoDB and look up their locations."""

from __future__ import annotations

import argparse
import json
import sys
from collections.abc import Iterable, Iterator
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any

from pymongo import MongoClient
from pymongo.errors import PyMongoError

MONGO_URI = "mongodb://localhost:27017"
_TEXT_FIELDS = ("name", "occupation", "location", "phone")


@dataclass(frozen=True)
class Person:
    name: str
    age: int
    occupation: str
    location: str
    phone: str

    @classmethod
    def from_dict(cls, data: Any) -> Person:
        if not isinstance(data, dict):
            raise ValueError("expected a JSON object")
        for name in _TEXT_FIELDS + ("age",):
            if name not in data:
                raise ValueError(f"missing field `{name}`")
        for name in _TEXT_FIELDS:
            if not isinstance(data[name], str):
                raise ValueError(f"field `{name}` must be a string")
        age = data["age"]
        if isinstance(age, bool) or not isinstance(age, int) or not -(2**31) <= age < 2**31:
            raise ValueError("field `age` must be a 32-bit integer")
        return cls(data["name"], age, data["occupation"], data["location"], data["phone"])


def read_people(path: str | Path) -> Iterator[Person]:
    """Yield people from a file of JSON objects written one after another."""
    text = Path(path).read_text(encoding="utf-8")
    decoder = json.JSONDecoder()
    position = 0
    while True:
        while position < len(text) and text[position].isspace():
            position += 1
        if position >= len(text):
            return
        value, position = decoder.raw_decode(text, position)
        yield Person.from_dict(value)


def insert_people(collection: Any, people: Iterable[Person]) -> list[Any]:
    """Insert each person, reporting failures; return the inserted ids."""
    ids = []
    for person in people:
        try:
            result = collection.insert_one(asdict(person))
        except PyMongoError as error:
            print(f"Unable to insert data because of {error}")
            continue
        print(f"Inserted ID is {result.inserted_id}")
        ids.append(result.inserted_id)
    return ids


def lookup_locations(collection: Any, name: str) -> Iterator[str | None]:
    """Yield the location of each matching person, None where it is missing."""
    for document in collection.find({"name": name}):
        location = document.get("location")
        yield location if isinstance(location, str) else None


def _collection(uri: str) -> Any:
    return MongoClient(uri)["customer_info"]["people"]


def main_load(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="people-load", description="Load people into MongoDB.")
    parser.add_argument("file", nargs="?", default="people.json")
    parser.add_argument("--uri", default=MONGO_URI)
    args = parser.parse_args(argv)
    insert_people(_collection(args.uri), read_people(args.file))
    return 0


def main_lookup(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="people-lookup", description="Look up a person.")
    parser.add_argument("--uri", default=MONGO_URI)
    args = parser.parse_args(argv)
    print("What person would you like to look up? ")
    name = sys.stdin.readline().strip()
    for location in lookup_locations(_collection(args.uri), name):
        print(f"location: {location}" if location is not None else "no location listed")
    return 0