"""
Period data models.

Contains the Period dataclass describing a fixed-length stretch of calendar
days (a trimester or an online course run).
"""

from dataclasses import dataclass
from datetime import date
from enum import Enum

from ..dates import get_weekdays_between


# All dates in the package are plain datetime.date values: no time of day and
# no timezone, so day arithmetic is never skewed by daylight saving.
CalendarDate = date


class PeriodKind(Enum):
    """
    The two timelines the mapper works with.

    TRIMESTER: the real academic term, counted in calendar days
    COURSE: the online course, counted in weekdays only
    """
    TRIMESTER = "trimester"
    COURSE = "course"


@dataclass(frozen=True)
class Period:
    """
    A run of whole weeks beginning on ``start``.

    ``end`` is always ``start + length_weeks * 7 - 1`` days, so a 12-week
    trimester starting on a Monday ends on the Sunday 12 weeks later.

    Attributes:
        kind: Which timeline this period belongs to
        start: First day of the period (inclusive)
        end: Last day of the period (inclusive)
        length_weeks: Configured length in weeks
    """
    kind: PeriodKind
    start: CalendarDate
    end: CalendarDate
    length_weeks: int

    @property
    def total_days(self) -> int:
        """Inclusive number of calendar days covered by the period."""
        return (self.end - self.start).days + 1

    def contains(self, day: CalendarDate) -> bool:
        """True if ``day`` falls inside the period, boundary days included."""
        return self.start <= day <= self.end

    def weekdays(self) -> list:
        """All Monday-Friday dates in the period, in order."""
        return get_weekdays_between(self.start, self.end)
