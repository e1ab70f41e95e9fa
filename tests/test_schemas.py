"""Tests for pydantic schemas."""

import pytest
from pydantic import ValidationError

from oznav.environment import Coord
from oznav.schemas import EdgeSpec, NavigationScenario, Objective, RunSummary, TraceEvent


def test_trace_event_rendering():
    assert TraceEvent(kind="option_chosen", objective=3, option=4).render() == "Number 4 is chosen!"
    assert TraceEvent(kind="path_impassable", objective=1).render() == "Path is impassable!"
    assert TraceEvent(kind="moving", objective=1, x=12, y=7).render() == "Moving to 12-7"
    assert TraceEvent(kind="objective_reached", objective=5).render() == "Objective 5 reached!"


def test_trace_event_rejects_unknown_kind():
    with pytest.raises(ValidationError):
        TraceEvent(kind="teleport", objective=1)


def test_objective_defaults_and_target():
    objective = Objective(x=2, y=3)
    assert objective.options == []
    assert objective.target == Coord(2, 3)
    assert isinstance(objective.target, Coord)


def test_edge_spec_rejects_negative_cost():
    with pytest.raises(ValidationError):
        EdgeSpec(source=(0, 0), target=(1, 0), cost=-1)


def test_scenario_round_trips_through_json():
    scenario = NavigationScenario(
        width=2,
        height=1,
        cells=[(0, 0, 0), (1, 0, 3)],
        edges=[EdgeSpec(source=(0, 0), target=(1, 0), cost=1.5)],
        sight_radius=2,
        start=(0, 0),
        objectives=[Objective(x=1, y=0, options=[3])],
    )
    restored = NavigationScenario.model_validate_json(scenario.model_dump_json())
    assert restored == scenario


def test_run_summary_accepts_coord():
    summary = RunSummary(final_position=Coord(4, 1), chosen_options={2: 3})
    assert summary.final_position == (4, 1)
    assert summary.moves == 0
