"""Define test fixtures providing the "drive son to school" example problem."""

from __future__ import annotations

from pathlib import Path

import pytest

from gps_planner.classical_planning import Action, PlannerState
from gps_planner.problems.school import SCHOOL_ACTIONS, SCHOOL_VARIANTS


@pytest.fixture
def school_actions() -> tuple[Action, ...]:
    """Return the action library of the school problem.

    Reference: Chapter 4 of Paradigms of AI Programming (PAIP) by Peter Norvig.
    """
    return SCHOOL_ACTIONS


@pytest.fixture
def battery_state(school_actions: tuple[Action, ...]) -> PlannerState:
    """Return a fresh planner state in which the car needs a new battery."""
    return PlannerState.create(SCHOOL_VARIANTS["battery"], school_actions)


@pytest.fixture
def problems_path() -> Path:
    """Retrieve the path to the folder of example problem YAML files."""
    path = Path(__file__).parent / "test_data" / "problems"
    assert path.exists()
    return path
