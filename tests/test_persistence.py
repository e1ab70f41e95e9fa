"""Tests for trace strategies."""

import json

import pytest

from oznav.persistence import InMemoryTrace, JsonlTrace, TextFileTrace, open_trace
from oznav.schemas import TraceEvent

EVENTS = [
    TraceEvent(kind="option_chosen", objective=1, option=2),
    TraceEvent(kind="moving", objective=1, x=1, y=0),
    TraceEvent(kind="path_impassable", objective=1),
    TraceEvent(kind="objective_reached", objective=1),
]


def test_in_memory_trace_keeps_order():
    trace = InMemoryTrace()
    for event in EVENTS:
        trace.record(event)

    assert trace.events == EVENTS
    assert trace.lines() == [
        "Number 2 is chosen!",
        "Moving to 1-0",
        "Path is impassable!",
        "Objective 1 reached!",
    ]


def test_text_trace_writes_once_on_close(tmp_path):
    path = tmp_path / "out.txt"
    with TextFileTrace(path) as trace:
        for event in EVENTS:
            trace.record(event)
        # Nothing hits the disk until the trace is closed
        assert not path.exists()

    assert path.read_text().splitlines() == trace.lines()
    trace.close()  # second close is a no-op
    assert path.read_text().endswith("Objective 1 reached!\n")


def test_text_trace_writes_even_when_run_fails(tmp_path):
    path = tmp_path / "out.txt"
    with pytest.raises(RuntimeError):
        with TextFileTrace(path) as trace:
            trace.record(EVENTS[1])
            raise RuntimeError("boom")

    assert path.read_text() == "Moving to 1-0\n"


def test_jsonl_trace(tmp_path):
    path = tmp_path / "out.jsonl"
    with JsonlTrace(path) as trace:
        for event in EVENTS[:2]:
            trace.record(event)

    rows = [json.loads(line) for line in path.read_text().splitlines()]
    assert rows[0] == {"kind": "option_chosen", "objective": 1, "option": 2, "message": "Number 2 is chosen!"}
    assert rows[1]["message"] == "Moving to 1-0"
    assert rows[1]["x"] == 1 and rows[1]["y"] == 0


def test_open_trace_formats(tmp_path):
    assert isinstance(open_trace(tmp_path / "a.txt"), TextFileTrace)
    assert isinstance(open_trace(tmp_path / "a.jsonl", "jsonl"), JsonlTrace)
    with pytest.raises(ValueError):
        open_trace(tmp_path / "a.xml", "xml")


def test_unwritable_path_raises_oserror(tmp_path):
    trace = TextFileTrace(tmp_path / "missing-dir" / "out.txt")
    trace.record(EVENTS[0])
    with pytest.raises(OSError):
        trace.close()
