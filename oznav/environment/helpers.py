"""Routing utilities over a terrain grid and its edge index."""

from __future__ import annotations

import math
from typing import Iterable, List, NamedTuple, Optional, Sequence

from ..structures import AssociativeMap, PriorityQueue
from .graph import EdgeIndex
from .grid import Coord, TerrainGrid


class FrontierEntry(NamedTuple):
    """Queued search state: a coordinate and its tentative distance."""

    coord: Coord
    distance: float


def _frontier_key(entry: FrontierEntry) -> float:
    return entry.distance


def shortest_route(
    grid: TerrainGrid,
    edges: EdgeIndex,
    source: Coord,
    target: Coord,
) -> List[Coord]:
    """Return the cheapest route from ``source`` to ``target`` using Dijkstra.

    The route lists coordinates from ``source`` to ``target`` inclusive. An
    empty list means the target cannot be reached under the grid's current
    passability. ``source == target`` yields ``[source]``.

    Arcs are followed only into cells that exist and are passable; the source
    itself is never checked. Improved distances push a fresh queue entry and
    outdated entries are skipped when they surface.
    """

    source = Coord(*source)
    target = Coord(*target)
    if source == target:
        return [source]
    # Nothing outside the extents can be stored in the distance table.
    if not grid.contains(source) or not grid.contains(target):
        return []

    # Dense distance table indexed [x][y], matching the grid layout.
    dist = [[math.inf] * grid.height for _ in range(grid.width)]
    dist[source.x][source.y] = 0.0

    parents: AssociativeMap[Coord, Optional[Coord]] = AssociativeMap()
    parents.put(source, None)

    frontier: PriorityQueue[FrontierEntry] = PriorityQueue(key=_frontier_key)
    frontier.add(FrontierEntry(source, 0.0))

    while not frontier.is_empty():
        current, distance = frontier.poll()

        if current == target:
            return _reconstruct(parents, target)

        # Stale entry: a shorter distance to this coordinate was already queued.
        if distance > dist[current.x][current.y]:
            continue

        for edge in edges.neighbors(current):
            nxt = edge.target
            if not grid.is_passable(nxt):
                continue
            candidate = distance + edge.cost
            if candidate < dist[nxt.x][nxt.y]:
                dist[nxt.x][nxt.y] = candidate
                frontier.add(FrontierEntry(nxt, candidate))
                parents.put(nxt, current)

    return []


def _reconstruct(parents: AssociativeMap[Coord, Optional[Coord]], target: Coord) -> List[Coord]:
    route: List[Coord] = []
    current: Optional[Coord] = target
    while current is not None:
        route.append(current)
        current = parents.get(current)
    route.reverse()
    return route


def route_blocked(blockers: Iterable[Coord], route: Sequence[Coord]) -> bool:
    """True when any coordinate in ``blockers`` lies on ``route``."""

    on_route = set(route)
    return any(Coord(*coord) in on_route for coord in blockers)
