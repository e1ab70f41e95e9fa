"""Tests for the binary-heap PriorityQueue."""

import random

import pytest

from oznav.structures import PriorityQueue


def test_poll_sequence_is_non_decreasing():
    rng = random.Random(42)
    values = [rng.randint(-100, 100) for _ in range(300)]
    queue = PriorityQueue()
    for value in values:
        queue.add(value)

    drained = []
    while not queue.is_empty():
        drained.append(queue.poll())

    assert drained == sorted(values)


def test_is_empty_tracks_adds_and_polls():
    queue = PriorityQueue()
    assert queue.is_empty()

    queue.add(5)
    queue.add(1)
    assert not queue.is_empty()
    assert len(queue) == 2

    queue.poll()
    assert not queue.is_empty()
    queue.poll()
    assert queue.is_empty()


def test_poll_empty_raises():
    queue = PriorityQueue()
    with pytest.raises(IndexError):
        queue.poll()
    with pytest.raises(IndexError):
        queue.peek()


def test_key_function_orders_items():
    queue = PriorityQueue(key=lambda item: item[1])
    queue.add(("far", 9.5))
    queue.add(("near", 0.5))
    queue.add(("mid", 3.0))

    assert queue.peek() == ("near", 0.5)
    assert [queue.poll()[0] for _ in range(3)] == ["near", "mid", "far"]


def test_equal_keys_follow_heap_mechanics():
    # Equal keys never move during sift-up; the last slot replaces the root on
    # poll and stays there because the remaining child is not strictly smaller.
    queue = PriorityQueue(key=lambda item: item[1])
    for name in "abc":
        queue.add((name, 1))

    assert [queue.poll()[0] for _ in range(3)] == ["a", "c", "b"]


def test_repeated_runs_are_identical():
    def drain():
        queue = PriorityQueue(key=lambda item: item[0])
        for i in range(50):
            queue.add((i % 5, i))
        return [queue.poll() for _ in range(50)]

    assert drain() == drain()
