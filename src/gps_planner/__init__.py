"""A means-ends goal-achievement planner in the style of the General Problem Solver."""

from .classical_planning import Action as Action
from .classical_planning import PlannerState as PlannerState
from .classical_planning import PlanningProblem as PlanningProblem
from .classical_planning import applicable_for_goal as applicable_for_goal
from .planning import AchievementEngine as AchievementEngine
from .planning import ActionEvent as ActionEvent
from .planning import PlannerConfig as PlannerConfig
from .planning import PlanningDidNotTerminateError as PlanningDidNotTerminateError
from .planning import gps as gps
from .planning import run as run
