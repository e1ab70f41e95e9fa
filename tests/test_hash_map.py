"""Tests for the chained AssociativeMap."""

import random

import pytest

from oznav.environment import Coord
from oznav.structures import AssociativeMap


class _Collider:
    """Key type whose instances all hash to the same bucket."""

    def __init__(self, label: str) -> None:
        self.label = label

    def __hash__(self) -> int:
        return 7

    def __eq__(self, other: object) -> bool:
        return isinstance(other, _Collider) and other.label == self.label


def test_put_get_overwrite():
    m = AssociativeMap()
    m.put("a", 1)
    m.put("b", 2)
    m.put("a", 3)

    assert m.get("a") == 3
    assert m.get("b") == 2
    assert len(m) == 2


def test_missing_key_reports_default():
    m = AssociativeMap()
    assert m.get("nope") is None
    assert m.get_or_default("nope", ()) == ()
    assert "nope" not in m
    with pytest.raises(KeyError):
        m["nope"]


def test_put_if_absent_never_overwrites():
    m = AssociativeMap()
    assert m.put_if_absent("k", [1]) == [1]
    stored = m.put_if_absent("k", [2])

    assert stored == [1]
    assert m.get("k") == [1]
    assert len(m) == 1


def test_keys_compare_by_value():
    m = AssociativeMap()
    m.put(Coord(3, 4), "cell")

    # A separately built coordinate (or plain tuple) finds the same entry
    assert m.get(Coord(3, 4)) == "cell"
    assert m.get((3, 4)) == "cell"
    assert m.get(Coord(4, 3)) is None


def test_none_is_a_distinct_key():
    m = AssociativeMap()
    m.put(None, "none")
    m.put(0, "zero")

    assert m.get(None) == "none"
    assert m.get(0) == "zero"
    assert len(m) == 2


def test_colliding_keys_are_chained():
    m = AssociativeMap()
    for label in "abcde":
        m.put(_Collider(label), label.upper())

    for label in "abcde":
        assert m.get(_Collider(label)) == label.upper()
    assert m.get(_Collider("z")) is None


def test_negative_hashes_map_to_valid_buckets():
    m = AssociativeMap()
    for key in range(-50, 0):
        m.put(key, key * 2)

    assert all(m.get(key) == key * 2 for key in range(-50, 0))


def test_resize_triggers_at_load_factor():
    m = AssociativeMap()
    assert m.bucket_count == 19

    # 14 < 0.75 * 19 = 14.25, the 15th insert crosses it
    for i in range(14):
        m.put(i, i)
    assert m.bucket_count == 19
    m.put(14, 14)
    assert m.bucket_count == 38

    # Overwrites do not count toward the load factor
    for i in range(15):
        m.put(i, -i)
    assert m.bucket_count == 38
    assert len(m) == 15


def test_resize_preserves_all_entries():
    rng = random.Random(1234)
    keys = rng.sample(range(-10_000, 10_000), 500)
    m = AssociativeMap()
    for key in keys:
        m.put(Coord(key, key % 17), key)

    assert len(m) == 500
    assert m.bucket_count > 19
    for key in keys:
        assert m.get(Coord(key, key % 17)) == key
    assert sorted(value for _, value in m.items()) == sorted(keys)
