"""Define the top-level driver of the General Problem Solver."""

from __future__ import annotations

from typing import Iterable, Sequence

from gps_planner.classical_planning.actions import Action
from gps_planner.classical_planning.planner_state import PlannerState
from gps_planner.classical_planning.set_algebra import Condition
from gps_planner.io.logging import log_info
from gps_planner.planning.achievement import AchievementEngine, ActionListener, PlannerConfig


def run(engine: AchievementEngine, goals: Sequence[Condition]) -> bool:
    """Achieve each goal in order against the engine's current planner state.

    Stops at the first goal that cannot be achieved. The world state keeps every effect of the
    actions applied along the way, including those applied for a goal that ultimately failed.

    :param engine: Achievement engine owning the planner state for this run
    :param goals: Ordered goal conditions
    :return: True if every goal was achieved, else False
    """
    solved = all(engine.achieve(goal) for goal in goals)
    log_info("SOLVED." if solved else "FAILED.")
    return solved


def gps(
    initial_state: Iterable[Condition],
    goals: Sequence[Condition],
    library: Iterable[Action],
    config: PlannerConfig | None = None,
    listeners: Iterable[ActionListener] = (),
) -> bool:
    """Solve a planning problem using a fresh planner state.

    :param initial_state: Conditions true before planning begins
    :param goals: Ordered goal conditions to be achieved
    :param library: Ordered actions available to the planner
    :param config: Optional engine configuration (defaults to PlannerConfig())
    :param listeners: Callbacks notified of each applied action, in execution order
    :return: True if every goal was achieved, else False
    :raises PlanningDidNotTerminateError: If goal achievement recursed without bound
    """
    engine = AchievementEngine(PlannerState.create(initial_state, library), config)
    for listener in listeners:
        engine.add_listener(listener)

    return run(engine, goals)
