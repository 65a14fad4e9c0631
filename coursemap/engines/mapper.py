"""
Trimester to Online Course Mapping Engine.

This module maps a day of the trimester onto the matching class day of the
online course.
"""

import math
from datetime import date
from fractions import Fraction
from typing import Optional

from loguru import logger

from ..config import get_settings
from ..dates import calculate_end_date, days_between, get_weekdays_between
from ..errors import InvalidRange
from ..models import MappingResult, Period, PeriodKind


def round_half_up(value: Fraction) -> int:
    """
    Round to the nearest integer, sending exact halves up (2.5 -> 3, -2.5 -> -2).

    A trimester day sitting exactly between two class days maps to the later
    one. Working on a Fraction keeps ties exact: 5 * 7 / 14 is exactly 2.5
    here, never 2.4999999.
    """
    return math.floor(value + Fraction(1, 2))


def validate_dates(trimester_start: date, trimester_end: date,
                   course_start: date, course_end: date,
                   target_date: date) -> bool:
    """
    Check that both periods are well-formed and the target is in the trimester.

    Pure predicate: the caller decides what to do with a False.
    """
    return not (
        trimester_end < trimester_start
        or course_end < course_start
        or target_date < trimester_start
        or target_date > trimester_end
    )


def _require_positive(name: str, weeks: int) -> int:
    if weeks < 1:
        raise ValueError(f"{name} must be at least 1 week, got {weeks}")
    return weeks


def calculate_corresponding_date(trimester_start: date, course_start: date,
                                 target_date: date,
                                 trimester_weeks: Optional[int] = None,
                                 course_weeks: Optional[int] = None) -> MappingResult:
    """
    Map a trimester date to the equivalent class day of the online course.

    ═══════════════════════════════════════════════════════════════════════════
    ALGORITHM
    ═══════════════════════════════════════════════════════════════════════════

    1. Both period ends come from the configured week counts.
    2. The target's position is its day offset into the trimester, counted
       over ALL calendar days (weekends included).
    3. That offset is scaled onto the course's WEEKDAYS ONLY, since online
       course content is only scheduled Monday-Friday:

           index = round_half_up(days_into * course_weekdays / trimester_days)

    4. The index is clamped into the weekday list, so the first trimester day
       maps to the first course weekday and the last trimester day maps to
       the last course weekday.

    Targets outside the trimester are not rejected here; they clamp to the
    first or last course weekday. Call validate_dates() first to reject them.

    Example (12-week trimester from Mon 2024-01-08, 20-week course from
    Thu 2024-02-01):
        trimester: 84 days, ends 2024-03-31
        course: 100 weekdays, ends 2024-06-19
        target 2024-01-08 -> day 0 -> index 0 -> 2024-02-01
        target 2024-03-31 -> day 83 -> 98.8 -> index 99 -> 2024-06-19

    ═══════════════════════════════════════════════════════════════════════════

    Args:
        trimester_start: First day of the trimester
        course_start: First day of the online course
        target_date: The trimester day to map
        trimester_weeks: Trimester length (defaults to settings)
        course_weeks: Course length (defaults to settings)

    Returns:
        MappingResult with the course date and both computed end dates
    """
    settings = get_settings()
    if trimester_weeks is None:
        trimester_weeks = settings.trimester_weeks
    if course_weeks is None:
        course_weeks = settings.course_weeks
    _require_positive("trimester_weeks", trimester_weeks)
    _require_positive("course_weeks", course_weeks)

    trimester_end = calculate_end_date(trimester_start, trimester_weeks)
    course_end = calculate_end_date(course_start, course_weeks)

    days_into_trimester = days_between(trimester_start, target_date)
    total_trimester_days = days_between(trimester_start, trimester_end) + 1

    course_weekdays = get_weekdays_between(course_start, course_end)

    raw_index = round_half_up(
        Fraction(days_into_trimester * len(course_weekdays), total_trimester_days)
    )
    course_index = min(max(raw_index, 0), len(course_weekdays) - 1)
    if course_index != raw_index:
        logger.debug(f"Clamped course index {raw_index} to {course_index}")

    logger.debug(
        f"Day {days_into_trimester}/{total_trimester_days} of trimester -> "
        f"course weekday {course_index + 1}/{len(course_weekdays)}"
    )

    return MappingResult(
        course_date=course_weekdays[course_index],
        trimester_end=trimester_end,
        course_end=course_end,
        trimester_start=trimester_start,
        course_start=course_start,
        target_date=target_date,
        course_index=course_index,
        course_day_count=len(course_weekdays),
    )


class DateMapper:
    """
    Maps trimester days onto online course days for fixed period lengths.

    Holds only the two week counts, so one instance can be shared freely
    between callers and threads.

    USAGE:
        mapper = DateMapper()                       # lengths from settings
        mapper = DateMapper(trimester_weeks=13)     # explicit override

        result = mapper.map_date(
            trimester_start=date(2024, 1, 8),
            course_start=date(2024, 2, 1),
            target_date=date(2024, 2, 14),
        )
        result.course_date
    """

    def __init__(self, trimester_weeks: Optional[int] = None,
                 course_weeks: Optional[int] = None):
        settings = get_settings()
        self.trimester_weeks = _require_positive(
            "trimester_weeks",
            settings.trimester_weeks if trimester_weeks is None else trimester_weeks,
        )
        self.course_weeks = _require_positive(
            "course_weeks",
            settings.course_weeks if course_weeks is None else course_weeks,
        )

    def __repr__(self) -> str:
        return f"DateMapper(trimester_weeks={self.trimester_weeks}, course_weeks={self.course_weeks})"

    def trimester_period(self, start: date) -> Period:
        """The trimester that begins on ``start``."""
        return Period(
            kind=PeriodKind.TRIMESTER,
            start=start,
            end=calculate_end_date(start, self.trimester_weeks),
            length_weeks=self.trimester_weeks,
        )

    def course_period(self, start: date) -> Period:
        """The online course run that begins on ``start``."""
        return Period(
            kind=PeriodKind.COURSE,
            start=start,
            end=calculate_end_date(start, self.course_weeks),
            length_weeks=self.course_weeks,
        )

    def validate(self, trimester_start: date, course_start: date, target_date: date) -> bool:
        """True if ``target_date`` lies inside the trimester starting on ``trimester_start``."""
        trimester = self.trimester_period(trimester_start)
        course = self.course_period(course_start)
        return validate_dates(trimester.start, trimester.end,
                              course.start, course.end, target_date)

    def calculate(self, trimester_start: date, course_start: date,
                  target_date: date) -> MappingResult:
        """Map without validating; out-of-range targets clamp to the course edges."""
        return calculate_corresponding_date(
            trimester_start, course_start, target_date,
            trimester_weeks=self.trimester_weeks,
            course_weeks=self.course_weeks,
        )

    def map_date(self, trimester_start: date, course_start: date,
                 target_date: date) -> MappingResult:
        """
        Validate the dates, then map.

        Raises:
            InvalidRange: if the target date is outside the trimester
        """
        if not self.validate(trimester_start, course_start, target_date):
            trimester = self.trimester_period(trimester_start)
            raise InvalidRange(
                f"Target date {target_date.isoformat()} is outside the trimester "
                f"{trimester.start.isoformat()} to {trimester.end.isoformat()}",
                [target_date.isoformat()],
            )
        return self.calculate(trimester_start, course_start, target_date)
