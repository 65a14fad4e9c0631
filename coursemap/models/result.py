"""
Mapping result data model.

The MappingResult is what the algorithm layer hands back to any caller: the
mapped course date plus enough context to describe both periods.
"""

from dataclasses import dataclass
from typing import Optional

from .period import CalendarDate


@dataclass(frozen=True)
class MappingResult:
    """
    Result of mapping one trimester date onto the online course.

    Example for trimester 2024-01-08 and course 2024-02-01 (12 / 20 weeks):
        course_date: 2024-02-01   (target 2024-01-08 is day 0)
        trimester_end: 2024-03-31
        course_end: 2024-06-19
        course_index: 0
        course_day_count: 100
    """
    course_date: CalendarDate
    trimester_end: CalendarDate
    course_end: CalendarDate
    # Context for display; not needed to use the mapped date itself
    trimester_start: Optional[CalendarDate] = None
    course_start: Optional[CalendarDate] = None
    target_date: Optional[CalendarDate] = None
    course_index: int = 0
    course_day_count: int = 0

    def to_dict(self) -> dict:
        """Render as a JSON-friendly dict with YYYY-MM-DD strings."""
        def iso(value):
            return value.isoformat() if value is not None else None

        return {
            "trimester_start": iso(self.trimester_start),
            "trimester_end": iso(self.trimester_end),
            "course_start": iso(self.course_start),
            "course_end": iso(self.course_end),
            "target_date": iso(self.target_date),
            "course_date": iso(self.course_date),
            "course_index": self.course_index,
            "course_day_count": self.course_day_count,
        }
