"""Import classes and functions used to solve means-ends planning problems."""

from .achievement import AchievementEngine as AchievementEngine
from .achievement import ActionEvent as ActionEvent
from .achievement import ActionListener as ActionListener
from .achievement import PlannerConfig as PlannerConfig
from .achievement import PlanningDidNotTerminateError as PlanningDidNotTerminateError
from .gps import gps as gps
from .gps import run as run
