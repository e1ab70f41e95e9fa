"""Edge index: weighted adjacency keyed by source coordinate.

Every undirected input edge is stored as two directed arcs. Arcs keep their
insertion order per source, which fixes the order neighbours are relaxed in
during a search. Topology never changes once the index is built.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Sequence

from ..logging_utils import log_warning
from ..structures import AssociativeMap
from .grid import Coord


@dataclass(frozen=True)
class Edge:
    """Directed arc to ``target`` costing ``cost``."""

    target: Coord
    cost: float


class EdgeIndex:
    """Adjacency lists stored in an :class:`AssociativeMap`."""

    def __init__(self) -> None:
        self._adjacency: AssociativeMap[Coord, List[Edge]] = AssociativeMap()
        self._arc_count = 0

    @property
    def arc_count(self) -> int:
        return self._arc_count

    def add_arc(self, source: Coord, target: Coord, cost: float) -> None:
        if cost < 0:
            raise ValueError(f"edge {source}->{target} has negative cost {cost}")
        arcs = self._adjacency.put_if_absent(Coord(*source), [])
        arcs.append(Edge(Coord(*target), float(cost)))
        self._arc_count += 1

    def add_edge(self, a: Coord, b: Coord, cost: float) -> None:
        """Add an undirected edge as two arcs, ``a -> b`` first."""
        self.add_arc(a, b, cost)
        self.add_arc(b, a, cost)

    def neighbors(self, source: Coord) -> Sequence[Edge]:
        return self._adjacency.get_or_default(source, ())

    def route_cost(self, route: Sequence[Coord]) -> float:
        """Sum the arc costs along ``route``.

        An empty route means "unreachable" and costs ``math.inf``; a single
        coordinate costs nothing. Between consecutive coordinates the first
        matching arc is used; a pair with no arc is reported and skipped.
        """
        if not route:
            return math.inf

        total = 0.0
        for current, nxt in zip(route, route[1:]):
            for edge in self.neighbors(current):
                if edge.target == nxt:
                    total += edge.cost
                    break
            else:
                log_warning(f"No edge found between {current} and {nxt}")
        return total

    def __len__(self) -> int:
        return len(self._adjacency)
