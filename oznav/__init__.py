"""
oznav - fog-of-war navigation over weighted grid graphs.

An agent walks a terrain grid toward an ordered list of objectives. High
terrain becomes an obstacle once it comes into sight, some objectives let the
agent clear one terrain type first, and every decision is written to a trace.
"""

__version__ = "0.1.0"

# Main simulation components
from .navigator import Navigator

# Data structures and environment
from .structures import AssociativeMap, PriorityQueue
from .environment import (
    Cell,
    Coord,
    Edge,
    EdgeIndex,
    TerrainGrid,
    route_blocked,
    shortest_route,
)
from .perception import VisibilityEngine

# Schemas
from .schemas import (
    EdgeSpec,
    NavigationScenario,
    Objective,
    RunSummary,
    TraceEvent,
)

# Input and output
from .scenario import ScenarioFormatError, ScenarioLoader
from .persistence import (
    TraceStrategy,
    InMemoryTrace,
    TextFileTrace,
    JsonlTrace,
    open_trace,
)

__all__ = [
    # Main class
    "Navigator",
    # Containers
    "AssociativeMap",
    "PriorityQueue",
    # Environment
    "Cell",
    "Coord",
    "Edge",
    "EdgeIndex",
    "TerrainGrid",
    "VisibilityEngine",
    "route_blocked",
    "shortest_route",
    # Schemas
    "EdgeSpec",
    "NavigationScenario",
    "Objective",
    "RunSummary",
    "TraceEvent",
    # Scenario helpers
    "ScenarioFormatError",
    "ScenarioLoader",
    # Trace strategies
    "TraceStrategy",
    "InMemoryTrace",
    "TextFileTrace",
    "JsonlTrace",
    "open_trace",
]
