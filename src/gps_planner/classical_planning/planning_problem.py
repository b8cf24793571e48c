"""Define a dataclass to represent means-ends planning problems."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from gps_planner.classical_planning.actions import Action
from gps_planner.classical_planning.set_algebra import Condition


@dataclass(frozen=True)
class PlanningProblem:
    """A planning problem defines an initial world state, goals, and an action library."""

    name: str
    initial_state: tuple[Condition, ...]
    goals: tuple[Condition, ...]  # Achieved in order
    actions: tuple[Action, ...]

    def to_yaml_data(self) -> dict[str, Any]:
        """Convert the problem into a dictionary of data to be exported to YAML."""
        return {
            "name": self.name,
            "initial_state": list(self.initial_state),
            "goals": list(self.goals),
            "actions": [action.to_yaml_data() for action in self.actions],
        }
