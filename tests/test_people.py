from types import SimpleNamespace

import pytest
from pymongo.errors import PyMongoError

from labkit.people import Person, insert_people, lookup_locations, read_people

RECORD = '{"name": "Ann", "age": 40, "occupation": "pilot", "location": "Paris", "phone": "000"}'


class FakeCollection:
    def __init__(self, docs=(), fail=False):
        self.docs = list(docs)
        self.fail = fail

    def insert_one(self, doc):
        if self.fail:
            raise PyMongoError("down")
        self.docs.append(doc)
        return SimpleNamespace(inserted_id=len(self.docs))

    def find(self, query):
        return [d for d in self.docs if all(d.get(k) == v for k, v in query.items())]


def test_read_concatenated(tmp_path):
    path = tmp_path / "p.json"
    path.write_text(RECORD + "\n" + RECORD.replace("Ann", "Bob"))
    people = list(read_people(path))
    assert [p.name for p in people] == ["Ann", "Bob"]
    assert people[0] == Person("Ann", 40, "pilot", "Paris", "000")


def test_read_rejects_bad_age(tmp_path):
    path = tmp_path / "p.json"
    path.write_text(RECORD.replace("40", '"forty"'))
    with pytest.raises(ValueError):
        list(read_people(path))


def test_insert_and_lookup(capsys):
    collection = FakeCollection()
    person = Person("Ann", 40, "pilot", "Paris", "000")
    assert insert_people(collection, [person]) == [1]
    collection.docs.append({"name": "Ann"})
    assert list(lookup_locations(collection, "Ann")) == ["Paris", None]
    assert list(lookup_locations(collection, "Zed")) == []


def test_insert_failure_reported(capsys):
    assert insert_people(FakeCollection(fail=True), [Person("A", 1, "o", "l", "p")]) == []
    assert "Unable to insert data because of" in capsys.readouterr().out