"""Import classes and functions from the modules in this directory."""

from .actions import Action as Action
from .actions import applicable_for_goal as applicable_for_goal
from .planner_state import PlannerState as PlannerState
from .planning_problem import PlanningProblem as PlanningProblem
from .set_algebra import Condition as Condition
from .set_algebra import contains as contains
from .set_algebra import difference as difference
from .set_algebra import union as union
