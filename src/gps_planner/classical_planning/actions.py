"""Define a class to represent actions (i.e., named operators with add and delete lists)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Sequence

from gps_planner.classical_planning.set_algebra import Condition, contains


@dataclass(frozen=True)
class Action:
    """A named transition with preconditions, an add-list, and a delete-list."""

    name: str
    """Label used only for tracing and reporting."""

    preconditions: tuple[Condition, ...] = ()  # Conditions that must be achieved to apply
    adds: tuple[Condition, ...] = ()  # Conditions made true by the action
    deletes: tuple[Condition, ...] = ()  # Conditions made false by the action

    def __post_init__(self) -> None:
        """Store the action's condition sequences as tuples so the action stays immutable."""
        object.__setattr__(self, "preconditions", tuple(self.preconditions))
        object.__setattr__(self, "adds", tuple(self.adds))
        object.__setattr__(self, "deletes", tuple(self.deletes))

    def __str__(self) -> str:
        """Create a readable string representation of the action."""
        pre = ", ".join(map(str, self.preconditions))
        add = ", ".join(map(str, self.adds))
        delete = ", ".join(map(str, self.deletes))
        return f"{self.name}[pre: {pre}; add: {add}; del: {delete}]"

    def asserts(self, goal: Condition) -> bool:
        """Evaluate whether the action's add-list contains the given goal."""
        return contains(self.adds, goal)

    @classmethod
    def from_yaml_data(cls, action_data: dict[str, Any]) -> Action:
        """Import an Action instance from YAML data."""
        return Action(
            name=action_data["name"],
            preconditions=tuple(action_data.get("preconditions", ())),
            adds=tuple(action_data.get("adds", ())),
            deletes=tuple(action_data.get("deletes", ())),
        )

    def to_yaml_data(self) -> dict[str, Any]:
        """Convert the action into a dictionary of data to be exported to YAML."""
        return {
            "name": self.name,
            "preconditions": list(self.preconditions),
            "adds": list(self.adds),
            "deletes": list(self.deletes),
        }


def applicable_for_goal(goal: Condition, library: Sequence[Action]) -> list[Action]:
    """Find the actions in a library whose add-lists contain the given goal.

    :param goal: Condition the returned actions would make true
    :param library: Ordered sequence of available actions
    :return: Candidate actions for the goal, in library order (possibly empty)
    """
    return [action for action in library if action.asserts(goal)]
