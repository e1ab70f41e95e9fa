"""
Objective resolver: drives one agent through an ordered list of objectives.

For every objective, in order:
1. Reveal obstacles around the agent.
2. If the objective lists terrain options, trial each one (clear every cell of
   that terrain, reveal, measure the route cost, restore the terrain) and keep
   the first option with the strictly lowest cost.
3. Commit the winner by clearing its terrain for good.
4. Reveal and plan a route; if a freshly revealed cell sits on the route,
   report it and plan again.
5. Walk the route one step at a time, revealing before each step and
   replanning from the current position when a fresh obstacle lands on the
   route.
6. Report the objective as reached.

An unreachable objective produces an empty route; nothing is walked and the
objective is still reported as reached.
"""

from __future__ import annotations

import math
from typing import Callable, Dict, List, Optional, Sequence

from .config import Config
from .environment import Coord, EdgeIndex, TerrainGrid, route_blocked, shortest_route
from .logging_utils import log_info, log_step, log_success, log_warning
from .perception import VisibilityEngine
from .persistence import InMemoryTrace, TraceStrategy
from .schemas import NavigationScenario, Objective, RunSummary, TraceEvent

TraceListener = Callable[[TraceEvent], None]


class Navigator:
    """
    Single-agent navigation run.

    Owns the mutable grid, the edge index and the agent position for the
    duration of the run. Trace events go to ``trace`` and then to each listener.
    """

    def __init__(
        self,
        grid: TerrainGrid,
        edges: EdgeIndex,
        objectives: Sequence[Objective],
        start: Coord,
        sight_radius: int,
        trace: Optional[TraceStrategy] = None,
        listeners: Optional[List[TraceListener]] = None,
        verbose: Optional[bool] = None,
    ):
        self.grid = grid
        self.edges = edges
        self.objectives = list(objectives)
        self.start = Coord(*start)
        self.position = self.start
        self.visibility = VisibilityEngine(grid, sight_radius)
        self.trace = trace or InMemoryTrace()
        self.listeners = listeners or []
        self.verbose = Config.VERBOSE if verbose is None else verbose

        self._objective_index = 0
        self._moves = 0
        self._replans = 0
        self._chosen: Dict[int, int] = {}

    @classmethod
    def from_scenario(
        cls,
        scenario: NavigationScenario,
        trace: Optional[TraceStrategy] = None,
        listeners: Optional[List[TraceListener]] = None,
        verbose: Optional[bool] = None,
    ) -> "Navigator":
        """Build the grid and edge index described by ``scenario``."""
        grid = TerrainGrid(scenario.width, scenario.height)
        for x, y, terrain in scenario.cells:
            grid.add_cell(x, y, terrain)

        edges = EdgeIndex()
        for edge_spec in scenario.edges:
            edges.add_edge(Coord(*edge_spec.source), Coord(*edge_spec.target), edge_spec.cost)

        return cls(
            grid=grid,
            edges=edges,
            objectives=scenario.objectives,
            start=Coord(*scenario.start),
            sight_radius=scenario.sight_radius,
            trace=trace,
            listeners=listeners,
            verbose=verbose,
        )

    # ------------------------------------------------------------------
    # Run loop
    # ------------------------------------------------------------------

    def run(self) -> RunSummary:
        """Resolve every objective in order and return the run summary."""
        print(
            f"Starting navigation from {self.position} "
            f"({len(self.objectives)} objectives, sight radius {self.visibility.sight_radius})"
        )

        for index, objective in enumerate(self.objectives, start=1):
            self._objective_index = index
            self.resolve_objective(objective)

        summary = self.summary()
        log_success(
            f"Navigation complete: {summary.objectives_reached} objectives, "
            f"{summary.moves} moves, {summary.replans} replans"
        )
        return summary

    def resolve_objective(self, objective: Objective) -> None:
        target = objective.target
        if self.verbose:
            log_info(f"Objective {self._objective_index}: {self.position} -> {target}")

        self._reveal()

        if objective.options:
            option = self.choose_option(objective)
            self.commit_option(option)
            self._chosen[self._objective_index] = option
            self._emit("option_chosen", option=option)

        fresh = self._reveal()
        route = self._plan(target)
        if route_blocked(fresh, route):
            route = self._replan(target)

        self._traverse(route, target)
        self._emit("objective_reached")

    def choose_option(self, objective: Objective) -> int:
        """Trial every option and return the one with the cheapest route.

        Ties keep the earlier option. Cells touched by a trial are restored to
        the option's terrain afterwards; restoring goes through
        :meth:`TerrainGrid.set_terrain`, so revealed cells stay blocked. When
        no option reaches the target the first one is returned.
        """
        target = objective.target
        best_option: Optional[int] = None
        best_cost = math.inf

        for option in objective.options:
            touched = self.grid.cells_of_type(option)
            for coord in touched:
                self.grid.clear_terrain(coord)

            self._reveal()
            cost = self.edges.route_cost(self._plan(target))
            if self.verbose:
                log_step(f"Option {option}: cleared {len(touched)} cells, route cost {cost}")

            if cost < best_cost:
                best_cost = cost
                best_option = option

            for coord in touched:
                self.grid.set_terrain(coord, option)

        if best_option is None:
            best_option = objective.options[0]
            log_warning(
                f"Objective {self._objective_index}: no option reaches {target}; "
                f"falling back to option {best_option}"
            )
        return best_option

    def commit_option(self, option: int) -> List[Coord]:
        """Permanently clear every cell of terrain ``option``."""
        cleared = self.grid.cells_of_type(option)
        for coord in cleared:
            self.grid.clear_terrain(coord)
        if self.verbose:
            log_step(f"Committed option {option}: {len(cleared)} cells cleared")
        return cleared

    def _traverse(self, route: List[Coord], target: Coord) -> None:
        idx = 0
        if route:
            if route[0] == self.position:
                idx = 1
            fresh = self._reveal()
            if route_blocked(fresh, route):
                idx = 1
                route = self._replan(target)

        while idx < len(route):
            fresh = self._reveal()
            if route_blocked(fresh, route):
                idx = 1
                route = self._replan(target)
                if idx >= len(route):
                    log_warning(
                        f"Objective {self._objective_index}: no route left from {self.position} to {target}"
                    )
                    break

            step = route[idx]
            self.position = step
            self._moves += 1
            self._emit("moving", x=step.x, y=step.y)
            idx += 1

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _reveal(self) -> List[Coord]:
        fresh = self.visibility.reveal_around(self.position)
        if fresh and self.verbose:
            log_step(f"Revealed {len(fresh)} obstacle(s) around {self.position}: {', '.join(map(str, fresh))}")
        return fresh

    def _plan(self, target: Coord) -> List[Coord]:
        route = shortest_route(self.grid, self.edges, self.position, target)
        if self.verbose:
            if route:
                log_step(f"Route to {target}: {len(route) - 1} steps")
            else:
                log_step(f"No route from {self.position} to {target}")
        return route

    def _replan(self, target: Coord) -> List[Coord]:
        self._replans += 1
        self._emit("path_impassable")
        return self._plan(target)

    def _emit(self, kind: str, **fields: int) -> TraceEvent:
        event = TraceEvent(kind=kind, objective=self._objective_index, **fields)
        self.trace.record(event)
        for listener in self.listeners:
            listener(event)
        return event

    def summary(self) -> RunSummary:
        return RunSummary(
            objectives_reached=self._objective_index,
            moves=self._moves,
            replans=self._replans,
            chosen_options=dict(self._chosen),
            final_position=self.position,
            revealed_cells=len(self.visibility.revealed),
        )
