"""Terrain grid (dense 2D cell array with fog-of-war overrides).

Cells are addressed by integer ``(x, y)`` with ``0 <= x < width`` and
``0 <= y < height``. A position may also hold no cell at all when the node file
never declared it; such positions and anything outside the extents read as
absent and impassable.

Passability normally follows the terrain type: terrain ``1`` is a wall, terrain
``0`` and everything ``>= 2`` is open. Cells the perception layer has revealed
are kept in ``revealed`` and stay blocked whenever their terrain is reassigned
through :meth:`TerrainGrid.set_terrain`. Clearing a cell to terrain ``0``
(:meth:`TerrainGrid.clear_terrain`) always opens it, revealed or not.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, NamedTuple, Optional, Set


class Coord(NamedTuple):
    """Grid coordinate; hashes and compares structurally."""

    x: int
    y: int

    def __str__(self) -> str:
        return f"{self.x}-{self.y}"


CLEAR_TERRAIN = 0
WALL_TERRAIN = 1


def derive_passable(terrain: int) -> bool:
    return terrain != WALL_TERRAIN and terrain >= CLEAR_TERRAIN


@dataclass
class Cell:
    """A single grid position."""

    x: int
    y: int
    terrain: int
    passable: bool = True

    @property
    def coord(self) -> Coord:
        return Coord(self.x, self.y)


class TerrainGrid:
    """Dense ``width x height`` array of optional cells plus the revealed set."""

    def __init__(self, width: int, height: int) -> None:
        if width < 0 or height < 0:
            raise ValueError("grid extents must be non-negative")
        self.width = width
        self.height = height
        self._cells: List[List[Optional[Cell]]] = [[None] * height for _ in range(width)]
        self._revealed: Set[Coord] = set()

    def contains(self, coord: Coord) -> bool:
        return 0 <= coord[0] < self.width and 0 <= coord[1] < self.height

    def add_cell(self, x: int, y: int, terrain: int) -> Cell:
        if not self.contains(Coord(x, y)):
            raise ValueError(f"cell {x}-{y} lies outside a {self.width}x{self.height} grid")
        cell = Cell(x=x, y=y, terrain=terrain, passable=derive_passable(terrain))
        self._cells[x][y] = cell
        return cell

    def cell(self, coord: Coord) -> Optional[Cell]:
        if not self.contains(coord):
            return None
        return self._cells[coord[0]][coord[1]]

    def cells(self) -> Iterator[Cell]:
        """Yield every present cell, column by column (x outer, y inner)."""
        for column in self._cells:
            for cell in column:
                if cell is not None:
                    yield cell

    def terrain(self, coord: Coord) -> Optional[int]:
        cell = self.cell(coord)
        return None if cell is None else cell.terrain

    def is_passable(self, coord: Coord) -> bool:
        cell = self.cell(coord)
        return cell is not None and cell.passable

    def cells_of_type(self, terrain: int) -> List[Coord]:
        return [cell.coord for cell in self.cells() if cell.terrain == terrain]

    def set_terrain(self, coord: Coord, terrain: int) -> None:
        """Assign ``terrain`` and re-derive passability.

        Revealed cells stay impassable regardless of the new terrain.
        """
        cell = self._require(coord)
        cell.terrain = terrain
        cell.passable = derive_passable(terrain)
        self._enforce_revealed(cell)

    def clear_terrain(self, coord: Coord) -> None:
        """Set terrain to ``0`` and open the cell."""
        cell = self._require(coord)
        cell.terrain = CLEAR_TERRAIN
        cell.passable = True

    # -- reveal bookkeeping -------------------------------------------------

    @property
    def revealed(self) -> frozenset[Coord]:
        return frozenset(self._revealed)

    def is_revealed(self, coord: Coord) -> bool:
        return Coord(*coord) in self._revealed

    def reveal(self, coord: Coord) -> None:
        """Block ``coord`` and remember it for the rest of the run."""
        cell = self._require(coord)
        self._revealed.add(cell.coord)
        self._enforce_revealed(cell)

    def _enforce_revealed(self, cell: Cell) -> None:
        if cell.coord in self._revealed:
            cell.passable = False

    def _require(self, coord: Coord) -> Cell:
        cell = self.cell(coord)
        if cell is None:
            raise KeyError(f"no cell at {coord[0]}-{coord[1]}")
        return cell

    def __repr__(self) -> str:
        return f"TerrainGrid({self.width}x{self.height}, revealed={len(self._revealed)})"
