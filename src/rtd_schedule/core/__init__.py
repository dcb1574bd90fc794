"""Core schedule extraction functionality."""

from .cache import ScheduleCache
from .client import RtdScheduleClient
from .config import ScheduleSelectors
from .exceptions import (
    NetworkError,
    RowAlignmentError,
    ScheduleError,
    StructuralError,
    UnresolvedMetadataError,
    ValidationError,
)
from .extractor import ExtractionVariant, ScheduleExtractor, parse_schedule
from .models import Direction, ScheduleResult, StopEntry, UpcomingStop
from .service_day import DayType, day_type_for, parse_day
from .timetable import StopQuery, next_stops, next_stops_for
from .tree import ScheduleTree

__all__ = [
    "DayType",
    "Direction",
    "ExtractionVariant",
    "RtdScheduleClient",
    "ScheduleCache",
    "ScheduleExtractor",
    "ScheduleResult",
    "ScheduleSelectors",
    "ScheduleTree",
    "StopEntry",
    "StopQuery",
    "UpcomingStop",
    "day_type_for",
    "next_stops",
    "next_stops_for",
    "parse_day",
    "parse_schedule",
    "ScheduleError",
    "StructuralError",
    "RowAlignmentError",
    "UnresolvedMetadataError",
    "NetworkError",
    "ValidationError",
]
