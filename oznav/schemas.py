"""
Pydantic schemas for oznav.

Parsed scenario input, trace events and the run summary live here. The engine
itself works on the mutable ``environment`` classes; these models are the
serializable edges of the system (loaders produce them, trace sinks and the CLI
consume them).
"""

from typing import Dict, List, Literal, Optional, Tuple

from pydantic import BaseModel, Field

from oznav.environment import Coord


# ============================================================================
# Scenario Input
# ============================================================================


class Objective(BaseModel):
    """A waypoint the agent must reach, with optional terrain-clearing options.

    An empty ``options`` list means "just path there". Otherwise exactly one of
    the listed terrain types is cleared to terrain 0 before pathing, picked by
    the cheapest resulting route.
    """

    x: int
    y: int
    options: List[int] = Field(default_factory=list, description="Terrain types the objective may clear")

    @property
    def target(self) -> Coord:
        return Coord(self.x, self.y)


class EdgeSpec(BaseModel):
    """Undirected edge between two coordinates."""

    source: Tuple[int, int]
    target: Tuple[int, int]
    cost: float = Field(..., ge=0, description="Travel cost in both directions")


class NavigationScenario(BaseModel):
    """Everything one run needs: grid, edges, sight radius, start and objectives."""

    width: int = Field(..., ge=0, description="Grid extent along x (maxX)")
    height: int = Field(..., ge=0, description="Grid extent along y (maxY)")
    cells: List[Tuple[int, int, int]] = Field(
        default_factory=list,
        description="(x, y, terrain) triples",
    )
    edges: List[EdgeSpec] = Field(default_factory=list)
    sight_radius: int = 0
    start: Tuple[int, int] = (0, 0)
    objectives: List[Objective] = Field(default_factory=list)


# ============================================================================
# Trace Output
# ============================================================================

TraceKind = Literal["option_chosen", "path_impassable", "moving", "objective_reached"]


class TraceEvent(BaseModel):
    """One line of the run trace.

    ``objective`` is the 1-based index of the objective being worked on when the
    event was emitted.
    """

    kind: TraceKind
    objective: int
    option: Optional[int] = None
    x: Optional[int] = None
    y: Optional[int] = None

    def render(self) -> str:
        if self.kind == "option_chosen":
            return f"Number {self.option} is chosen!"
        if self.kind == "path_impassable":
            return "Path is impassable!"
        if self.kind == "moving":
            return f"Moving to {self.x}-{self.y}"
        return f"Objective {self.objective} reached!"


class RunSummary(BaseModel):
    """Aggregate counters for a finished run."""

    objectives_reached: int = 0
    moves: int = 0
    replans: int = 0
    chosen_options: Dict[int, int] = Field(
        default_factory=dict,
        description="Objective index (1-based) → committed terrain option",
    )
    final_position: Tuple[int, int]
    revealed_cells: int = 0
