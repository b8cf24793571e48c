"""Import example planning problems."""

from .school import SCHOOL_VARIANTS as SCHOOL_VARIANTS
from .school import school_problem as school_problem
