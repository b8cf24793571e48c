"""Define the means-ends achievement engine used by the General Problem Solver.

Reference: Chapter 4 ("GPS: The General Problem Solver") of Paradigms of Artificial
Intelligence Programming by Peter Norvig.

Goals are achieved by recursively applying actions whose add-lists contain them. Applying an
action first achieves each of its preconditions, so `achieve` and `apply_op` are mutually
recursive. Every successful application mutates the shared world state, and nothing is rolled
back when a later precondition or goal fails.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from gps_planner.classical_planning.actions import Action, applicable_for_goal
from gps_planner.classical_planning.planner_state import PlannerState
from gps_planner.classical_planning.set_algebra import Condition
from gps_planner.io.logging import log_debug, log_info


@dataclass(frozen=True)
class PlannerConfig:
    """Configuration of the achievement engine."""

    max_depth: int | None = None
    """Optional limit on nested goal attempts (if None, only Python's recursion limit applies)."""

    def __post_init__(self) -> None:
        """Verify that the configured maximum depth is usable."""
        if self.max_depth is not None and self.max_depth < 1:
            raise ValueError(f"Maximum planning depth must be positive, got {self.max_depth}.")


@dataclass(frozen=True)
class ActionEvent:
    """Records that an action was applied during a planning run."""

    action: Action
    step: int  # 1-based position of the application in the run's execution order

    @property
    def name(self) -> str:
        """Retrieve the name of the applied action."""
        return self.action.name


ActionListener = Callable[[ActionEvent], None]
"""A callback notified each time the engine applies an action."""


class PlanningDidNotTerminateError(RuntimeError):
    """Raised when goal achievement recurses without bound (e.g., due to cyclic preconditions)."""

    def __init__(self, goal: Condition, depth: int) -> None:
        """Initialize the error using the goal being attempted and the depth reached."""
        super().__init__(f"Planning did not terminate: exceeded depth {depth} achieving '{goal}'.")
        self.goal = goal
        self.depth = depth


class AchievementEngine:
    """Achieves goals by chaining actions against a single planner state."""

    def __init__(self, state: PlannerState, config: PlannerConfig | None = None) -> None:
        """Initialize the engine for one planning run.

        :param state: Planner state owned by this run (mutated as actions are applied)
        :param config: Optional engine configuration (defaults to PlannerConfig())
        """
        self.state = state
        self.config = config if config is not None else PlannerConfig()

        self.trace: list[str] = []
        """Names of the actions applied during this run, in execution order."""

        self._listeners: list[ActionListener] = []
        self._depth = 0
        """Number of goal attempts currently in progress (i.e., on the call stack)."""

    def add_listener(self, listener: ActionListener) -> None:
        """Register a callback to be notified of each applied action."""
        self._listeners.append(listener)

    def achieve(self, goal: Condition) -> bool:
        """Attempt to make the given goal true in the world state.

        :param goal: Condition to be achieved
        :return: True if the goal holds or some candidate action was applied, else False
        :raises PlanningDidNotTerminateError: If achievement recursed beyond the allowed depth
        """
        if goal in self.state:
            return True

        if self.config.max_depth is not None and self._depth >= self.config.max_depth:
            raise PlanningDidNotTerminateError(goal, self._depth)

        self._depth += 1
        try:
            log_debug(f"{'  ' * (self._depth - 1)}Achieving goal: {goal}.")
            for action in applicable_for_goal(goal, self.state.library):
                if self.apply_op(action):
                    return True
            return False
        except RecursionError as error:
            raise PlanningDidNotTerminateError(goal, self._depth) from error
        finally:
            self._depth -= 1

    def apply_op(self, action: Action) -> bool:
        """Attempt to apply an action by first achieving each of its preconditions.

        Preconditions achieved before a failing one keep their effects on the world state.

        :param action: Action to be applied
        :return: True if every precondition was achieved and the action applied, else False
        """
        for precondition in action.preconditions:
            if not self.achieve(precondition):
                return False

        self.trace.append(action.name)
        log_info(f"Executing action: {action.name}.")

        event = ActionEvent(action, step=len(self.trace))
        for listener in self._listeners:
            listener(event)

        self.state.apply_effects(action)  # Deletes are applied before adds
        return True
