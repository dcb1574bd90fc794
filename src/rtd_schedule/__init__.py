"""RTD Schedule Package

A Python package for extracting bus and rail schedules from RTD Denver
schedule pages, with a command line interface.
"""

__version__ = "0.1.0"

from .core.extractor import ScheduleExtractor, parse_schedule
from .core.models import ScheduleResult, StopEntry

__all__ = ["ScheduleExtractor", "ScheduleResult", "StopEntry", "parse_schedule"]
