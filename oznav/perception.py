"""
Fog-of-war perception for the navigating agent.

The agent sees every cell within ``sight_radius`` (Euclidean, compared on
squared integer distances) of where it stands. Seeing a cell whose terrain is
``>= 2`` while it is still passable turns it into an obstacle for the rest of
the run: the grid records it in its revealed set and it stays blocked through
later terrain reverts.

Cells with terrain ``0`` or ``1``, and cells that are already impassable, are
left alone and never reported twice.

Usage:
    engine = VisibilityEngine(grid, sight_radius=2)
    fresh = engine.reveal_around(Coord(3, 4))
    # fresh lists only the cells blocked by this call
"""

from __future__ import annotations

from typing import List

from .environment import Coord, TerrainGrid

REVEALABLE_TERRAIN = 2


class VisibilityEngine:
    """Reveals obstacles around a position with a fixed sight radius."""

    def __init__(self, grid: TerrainGrid, sight_radius: int):
        self.grid = grid
        self.sight_radius = int(sight_radius)

    @property
    def revealed(self) -> frozenset[Coord]:
        """Every coordinate revealed so far in this run."""
        return self.grid.revealed

    def reveal_around(self, origin: Coord) -> List[Coord]:
        """Block newly seen obstacles around ``origin`` and return them.

        The scan covers the radius bounding box clamped to the grid, column by
        column. An origin outside the grid sees nothing.
        """
        grid = self.grid
        if not grid.contains(origin):
            return []

        cx, cy = origin
        radius = self.sight_radius
        limit = radius * radius
        fresh: List[Coord] = []

        for x in range(max(cx - radius, 0), min(cx + radius + 1, grid.width)):
            dx = x - cx
            for y in range(max(cy - radius, 0), min(cy + radius + 1, grid.height)):
                dy = y - cy
                if dx * dx + dy * dy > limit:
                    continue
                cell = grid.cell(Coord(x, y))
                if cell is None or cell.terrain < REVEALABLE_TERRAIN or not cell.passable:
                    continue
                grid.reveal(cell.coord)
                fresh.append(cell.coord)

        return fresh
