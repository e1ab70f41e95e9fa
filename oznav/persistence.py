"""
TraceStrategy interface for pluggable trace output.

The navigator emits TraceEvents in order; a TraceStrategy decides where they
end up. Three implementations are included:

1. InMemoryTrace - keeps events in a list (tests, embedding, inspection)
2. TextFileTrace - the plain-text trace, one rendered line per event
3. JsonlTrace - one JSON object per event, for downstream analysis

File-backed strategies buffer events in memory and write the whole file once
on ``close()``. Strategies are context managers so the file is written on every
exit path:

    with TextFileTrace("out.txt") as trace:
        Navigator.from_scenario(scenario, trace=trace).run()
"""

import json
from abc import ABC, abstractmethod
from pathlib import Path
from typing import List

from .schemas import TraceEvent


class TraceStrategy(ABC):
    """Abstract sink for trace events."""

    @abstractmethod
    def record(self, event: TraceEvent) -> None:
        """Append ``event`` to the trace."""

    @property
    @abstractmethod
    def events(self) -> List[TraceEvent]:
        """Events recorded so far, in emission order."""

    def lines(self) -> List[str]:
        return [event.render() for event in self.events]

    def close(self) -> None:
        """Flush buffered output. Safe to call more than once."""
        return None

    def __enter__(self) -> "TraceStrategy":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


class InMemoryTrace(TraceStrategy):
    """Keeps events in process memory; nothing is written anywhere."""

    def __init__(self) -> None:
        self._events: List[TraceEvent] = []

    def record(self, event: TraceEvent) -> None:
        self._events.append(event)

    @property
    def events(self) -> List[TraceEvent]:
        return list(self._events)


class _BufferedFileTrace(InMemoryTrace):
    def __init__(self, path: Path | str, encoding: str = "utf-8") -> None:
        super().__init__()
        self.path = Path(path)
        self.encoding = encoding
        self._closed = False

    @abstractmethod
    def _format(self, event: TraceEvent) -> str:
        ...

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        with self.path.open("w", encoding=self.encoding) as handle:
            for event in self._events:
                handle.write(self._format(event))
                handle.write("\n")


class TextFileTrace(_BufferedFileTrace):
    """Plain-text trace (``Moving to 1-0``, ``Objective 1 reached!``, ...)."""

    def _format(self, event: TraceEvent) -> str:
        return event.render()


class JsonlTrace(_BufferedFileTrace):
    """JSON Lines trace; each line also carries the rendered ``message``."""

    def _format(self, event: TraceEvent) -> str:
        payload = event.model_dump(mode="json", exclude_none=True)
        payload["message"] = event.render()
        return json.dumps(payload)


TRACE_FORMATS = {
    "text": TextFileTrace,
    "jsonl": JsonlTrace,
}


def open_trace(path: Path | str, fmt: str = "text", encoding: str = "utf-8") -> TraceStrategy:
    """Build the file trace for ``fmt`` (``text`` or ``jsonl``)."""
    try:
        factory = TRACE_FORMATS[fmt]
    except KeyError:
        raise ValueError(f"Unknown trace format '{fmt}'. Expected one of: {sorted(TRACE_FORMATS)}") from None
    return factory(path, encoding=encoding)
