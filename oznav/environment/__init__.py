"""Environment model: terrain grid, edge index and routing helpers."""

from .graph import Edge, EdgeIndex
from .grid import CLEAR_TERRAIN, WALL_TERRAIN, Cell, Coord, TerrainGrid, derive_passable
from .helpers import FrontierEntry, route_blocked, shortest_route

__all__ = [
    "CLEAR_TERRAIN",
    "WALL_TERRAIN",
    "Cell",
    "Coord",
    "Edge",
    "EdgeIndex",
    "FrontierEntry",
    "TerrainGrid",
    "derive_passable",
    "route_blocked",
    "shortest_route",
]
