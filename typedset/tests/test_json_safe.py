from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from pathlib import Path

from typedset.utils.json_safe import to_jsonable, type_tag


class Color(str, Enum):
    RED = "red"


@dataclass
class Pair:
    left: int
    right: int


class Bag:
    def __init__(self):
        self.items = {"b", "a"}


def test_primitives_pass_through():
    assert to_jsonable(None) is None
    assert to_jsonable("x") == "x"
    assert to_jsonable(1.5) == 1.5


def test_common_types_are_converted():
    assert to_jsonable(datetime(2026, 1, 1, tzinfo=timezone.utc)) == "2026-01-01T00:00:00+00:00"
    assert to_jsonable(Path("a/b")) == "a/b"
    assert to_jsonable(b"hi") == {"__bytes_b64__": "aGk="}
    assert to_jsonable(Color.RED) == "red"
    assert to_jsonable((1, [2])) == [1, [2]]


def test_structured_objects_are_tagged_with_type():
    assert to_jsonable(Pair(1, 2)) == {"__type__": type_tag(Pair(1, 2)), "fields": {"left": 1, "right": 2}}
    assert to_jsonable(Bag()) == {"__type__": type_tag(Bag()), "fields": {"items": ["a", "b"]}}


def test_sets_are_sorted():
    assert to_jsonable(frozenset({3, 1, 2})) == [1, 2, 3]


def test_reference_cycles_become_back_references():
    bag = Bag()
    bag.items = [bag]

    assert to_jsonable(bag) == {
        "__type__": type_tag(bag),
        "fields": {"items": [{"__ref__": type_tag(bag)}]},
    }


def test_shared_references_are_expanded_each_time():
    shared = Pair(1, 2)
    assert to_jsonable([shared, shared]) == [to_jsonable(shared), to_jsonable(shared)]
