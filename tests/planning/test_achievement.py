"""Unit tests for the achievement engine's mutually recursive achieve/apply_op operations."""

from __future__ import annotations

import logging

import pytest

from gps_planner.classical_planning import Action, PlannerState
from gps_planner.planning import (
    AchievementEngine,
    ActionEvent,
    PlannerConfig,
    PlanningDidNotTerminateError,
    gps,
)


@pytest.fixture
def cyclic_actions() -> list[Action]:
    """Define actions whose preconditions depend on one another without progress."""
    return [
        Action("hatch-chicken", preconditions=("have-egg",), adds=("have-chicken",)),
        Action("lay-egg", preconditions=("have-chicken",), adds=("have-egg",)),
    ]


def test_achieve_goal_already_true(battery_state: PlannerState) -> None:
    """Verify that achieving a goal that already holds performs no mutations or applications."""
    # Arrange - Record the world state and listen for applied actions
    engine = AchievementEngine(battery_state)
    events: list[ActionEvent] = []
    engine.add_listener(events.append)
    facts_before = list(battery_state.facts)

    # Act - Achieve a condition that's already true
    result = engine.achieve("have-money")

    # Assert - Expect success without any change to the world state or trace
    assert result
    assert battery_state.facts == facts_before
    assert engine.trace == []
    assert events == []


def test_achieve_goal_without_candidates(battery_state: PlannerState) -> None:
    """Verify that a goal no action asserts (and that doesn't hold) cannot be achieved."""
    # Arrange - Record the world state before the attempt
    engine = AchievementEngine(battery_state)
    facts_before = list(battery_state.facts)

    # Act - Attempt to achieve a condition no action can make true
    result = engine.achieve("have-spare-key")

    # Assert - Expect failure with the world state unchanged
    assert not result
    assert battery_state.facts == facts_before
    assert engine.trace == []


def test_achieve_is_idempotent(battery_state: PlannerState) -> None:
    """Verify that achieving a goal twice applies actions only during the first attempt."""
    # Arrange - Listen for applied actions
    engine = AchievementEngine(battery_state)
    events: list[ActionEvent] = []
    engine.add_listener(events.append)

    # Act - Achieve the same goal twice in a row
    first_result = engine.achieve("know-phone-number")
    num_events_after_first = len(events)
    second_result = engine.achieve("know-phone-number")

    # Assert - Expect both attempts to succeed, but only the first to apply an action
    assert first_result
    assert second_result
    assert num_events_after_first == 1
    assert [e.name for e in events] == ["look-up-number"]
    assert events[0].step == 1


def test_achieve_stops_at_first_successful_candidate() -> None:
    """Verify that later candidate actions are not attempted once one succeeds."""
    # Arrange - Define two applicable actions that both assert the goal
    library = [
        Action("walk-to-school", adds=("son-at-school",), deletes=("son-at-home",)),
        Action("bike-to-school", adds=("son-at-school",)),
    ]
    engine = AchievementEngine(PlannerState.create(["son-at-home"], library))

    # Act - Achieve the goal
    result = engine.achieve("son-at-school")

    # Assert - Expect that only the first candidate was applied
    assert result
    assert engine.trace == ["walk-to-school"]
    assert engine.state.facts == ["son-at-school"]


def test_achieve_falls_back_to_later_candidate() -> None:
    """Verify that a candidate whose preconditions fail is skipped in favor of the next one."""
    # Arrange - The first candidate needs an unachievable precondition
    library = [
        Action("drive-son-to-school", preconditions=("car-works",), adds=("son-at-school",)),
        Action("take-bus", preconditions=("have-bus-pass",), adds=("son-at-school",)),
    ]
    engine = AchievementEngine(PlannerState.create(["have-bus-pass"], library))

    # Act - Achieve the goal
    result = engine.achieve("son-at-school")

    # Assert - Expect that the second candidate was applied
    assert result
    assert engine.trace == ["take-bus"]


def test_failed_apply_op_keeps_side_effects() -> None:
    """Verify that preconditions achieved before a failing one are not rolled back."""
    # Arrange - The action's first precondition is achievable but its second is not
    look_up_number = Action("look-up-number", ("have-phone-book",), ("know-phone-number",))
    call_shop = Action("call-shop", ("know-phone-number", "have-phone"), ("shop-knows-problem",))
    state = PlannerState.create(["have-phone-book"], [look_up_number, call_shop])
    engine = AchievementEngine(state)

    # Act - Attempt to apply the action
    result = engine.apply_op(call_shop)

    # Assert - Expect failure, yet the first precondition's action remains applied
    assert not result
    assert engine.trace == ["look-up-number"]
    assert engine.state.facts == ["have-phone-book", "know-phone-number"]


def test_apply_op_notifies_listeners_in_order(battery_state: PlannerState) -> None:
    """Verify that listeners receive one event per applied action, in execution order."""
    # Arrange - Listen for applied actions
    engine = AchievementEngine(battery_state)
    events: list[ActionEvent] = []
    engine.add_listener(events.append)
    tell_shop_problem = battery_state.library[2]

    # Act - Apply an action with a chain of preconditions
    result = engine.apply_op(tell_shop_problem)

    # Assert - Expect the precondition chain to be applied before the action itself
    assert result
    assert [e.name for e in events] == ["look-up-number", "telephone-shop", "tell-shop-problem"]
    assert [e.step for e in events] == [1, 2, 3]
    assert engine.trace == [e.name for e in events]


def test_apply_op_logs_executed_action(
    battery_state: PlannerState,
    caplog: pytest.LogCaptureFixture,
) -> None:
    """Verify that each applied action is reported in the log."""
    # Arrange - Capture INFO records from the package logger
    caplog.set_level(logging.INFO, logger="gps_planner")
    engine = AchievementEngine(battery_state)

    # Act - Apply an action whose precondition already holds
    engine.apply_op(battery_state.library[-1])

    # Assert - Expect a record naming the executed action
    assert "Executing action: give-shop-money." in caplog.messages


def test_cyclic_preconditions_raise(cyclic_actions: list[Action]) -> None:
    """Verify that cyclic preconditions trigger the depth guard rather than overflow the stack."""
    # Arrange - Create an engine with a small depth limit
    state = PlannerState.create([], cyclic_actions)
    engine = AchievementEngine(state, PlannerConfig(max_depth=10))

    # Act/Assert - Expect the non-terminating attempt to raise a distinct error
    with pytest.raises(PlanningDidNotTerminateError) as exc_info:
        engine.achieve("have-egg")

    assert exc_info.value.depth == 10
    assert engine.trace == []


def test_recursion_error_is_surfaced(cyclic_actions: list[Action]) -> None:
    """Verify that exhausting Python's recursion limit surfaces as a planning error."""
    # Arrange - Disable the depth guard so only Python's recursion limit applies
    state = PlannerState.create([], cyclic_actions)
    engine = AchievementEngine(state, PlannerConfig(max_depth=None))

    # Act/Assert - Expect the recursion error to be converted into a planning error
    with pytest.raises(PlanningDidNotTerminateError):
        engine.achieve("have-chicken")


def test_depth_guard_preserves_terminating_outcomes(battery_state: PlannerState) -> None:
    """Verify that a depth limit covering the deepest goal chain doesn't change the outcome."""
    # Arrange - The school problem nests at most five goal attempts
    engine = AchievementEngine(battery_state, PlannerConfig(max_depth=5))

    # Act - Achieve the goal
    result = engine.achieve("son-at-school")

    # Assert - Expect the problem to be solved as without a limit
    assert result
    assert engine.trace[-1] == "drive-son-to-school"


def test_depth_guard_below_goal_chain(battery_state: PlannerState) -> None:
    """Verify that a depth limit shorter than the goal chain raises an error."""
    engine = AchievementEngine(battery_state, PlannerConfig(max_depth=4))

    with pytest.raises(PlanningDidNotTerminateError):
        engine.achieve("son-at-school")


def test_config_rejects_nonpositive_depth() -> None:
    """Verify that a non-positive maximum depth is rejected."""
    with pytest.raises(ValueError, match="must be positive"):
        PlannerConfig(max_depth=0)


def test_default_config_solves_long_chain() -> None:
    """Verify that the default configuration doesn't cut off a long but terminating chain."""
    # Arrange - Define a chain in which each action's effect enables the next action
    chain = [Action(f"step-{i}", preconditions=(f"c{i}",), adds=(f"c{i + 1}",)) for i in range(150)]
    events: list[ActionEvent] = []

    # Act - Solve for the end of the chain using the default configuration
    solved = gps(["c0"], ["c150"], chain, PlannerConfig(), listeners=[events.append])

    # Assert - Expect every action in the chain to be applied, in order
    assert solved
    assert len(events) == 150
    assert events[0].name == "step-0"
    assert events[-1].name == "step-149"
