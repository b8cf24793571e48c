"""Define the "drive son to school" problem from Chapter 4 of PAIP by Peter Norvig."""

from __future__ import annotations

from gps_planner.classical_planning.actions import Action
from gps_planner.classical_planning.planning_problem import PlanningProblem

SCHOOL_ACTIONS = (
    Action(
        "drive-son-to-school",
        preconditions=("son-at-home", "car-works"),
        adds=("son-at-school",),
        deletes=("son-at-home",),
    ),
    Action(
        "shop-installs-battery",
        preconditions=("car-needs-battery", "shop-knows-problem", "shop-has-money"),
        adds=("car-works",),
    ),
    Action(
        "tell-shop-problem",
        preconditions=("in-communication-with-shop",),
        adds=("shop-knows-problem",),
    ),
    Action(
        "telephone-shop",
        preconditions=("know-phone-number",),
        adds=("in-communication-with-shop",),
    ),
    Action("look-up-number", preconditions=("have-phone-book",), adds=("know-phone-number",)),
    Action(
        "give-shop-money",
        preconditions=("have-money",),
        adds=("shop-has-money",),
        deletes=("have-money",),
    ),
)

SCHOOL_GOALS = ("son-at-school",)

SCHOOL_VARIANTS: dict[str, tuple[str, ...]] = {
    "battery": ("son-at-home", "car-needs-battery", "have-money", "have-phone-book"),
    "car-works": ("son-at-home", "car-works"),
    "stranded": ("son-at-home",),
    "no-phone-book": ("son-at-home", "car-needs-battery", "have-money"),
}
"""Map from variant names to the initial world states of the problem's four variants."""


def school_problem(variant: str = "battery") -> PlanningProblem:
    """Construct a variant of the school problem.

    :param variant: Name of the initial-state variant (defaults to "battery")
    :return: Planning problem whose goal is to get the son to school
    :raises KeyError: If the variant name is unknown
    """
    if variant not in SCHOOL_VARIANTS:
        raise KeyError(f"Unknown school problem variant: '{variant}'.")

    return PlanningProblem(
        name=f"school-{variant}",
        initial_state=SCHOOL_VARIANTS[variant],
        goals=SCHOOL_GOALS,
        actions=SCHOOL_ACTIONS,
    )
