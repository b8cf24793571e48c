"""Define a class to represent the mutable state of a single planning run."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from gps_planner.classical_planning.actions import Action
from gps_planner.classical_planning.set_algebra import Condition, contains, difference, union


@dataclass
class PlannerState:
    """The current world state and the action library used by one planning run."""

    facts: list[Condition]
    """Conditions currently true in the world, in insertion order and without duplicates."""

    library: tuple[Action, ...]
    """Ordered actions available to the planner (read-only while planning)."""

    @classmethod
    def create(cls, initial_state: Iterable[Condition], library: Iterable[Action]) -> PlannerState:
        """Construct a fresh planner state that owns copies of the given inputs.

        :param initial_state: Conditions true before planning begins (duplicates are dropped)
        :param library: Actions available during planning
        :return: Constructed PlannerState instance
        """
        return PlannerState(facts=union([], list(initial_state)), library=tuple(library))

    def __contains__(self, condition: Condition) -> bool:
        """Evaluate whether a condition is currently true in the world state."""
        return contains(self.facts, condition)

    def __str__(self) -> str:
        """Create a readable string representation of the world state."""
        all_facts = "\n\t".join(str(fact) for fact in self.facts)
        return f"PlannerState(\n\t{all_facts}\n)"

    def apply_effects(self, action: Action) -> None:
        """Update the world state using an action's delete-list, then its add-list."""
        self.facts = difference(self.facts, action.deletes)
        self.facts = union(self.facts, action.adds)
