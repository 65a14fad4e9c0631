"""
Data models for the course day mapper.

This package contains the dataclasses and enums passed between the algorithm
layer and its callers. They are plain values, created per call and never
shared.
"""

from .period import CalendarDate, Period, PeriodKind
from .result import MappingResult

__all__ = [
    "CalendarDate",
    "Period",
    "PeriodKind",
    "MappingResult",
]
