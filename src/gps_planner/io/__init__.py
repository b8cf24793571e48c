"""Import definitions used for logging and console output."""

from .logging import configure_logging as configure_logging
from .logging import console as console
from .logging import log_info as log_info
