"""
Course Day Advisor - Main Orchestrator.

This module contains the CourseDayAdvisor class that connects the
algorithm layer to the presentation layer.
"""

from datetime import date
from typing import Optional

from loguru import logger

from .config import (
    INVALID_FORMAT_MESSAGE,
    INVALID_RANGE_MESSAGE,
    MISSING_INPUT_MESSAGE,
    PERIOD_OUT_OF_RANGE_MESSAGE,
)
from .dates import format_date, parse_date
from .engines import DateMapper
from .errors import CourseMapError, InvalidFormat, InvalidRange, MissingInput, PeriodOutOfRange
from .models import MappingResult
from .ui import TerminalDisplay


def default_target_date(today: Optional[date] = None) -> str:
    """Today's date as YYYY-MM-DD, the usual answer to "where should I be now?"."""
    return format_date(today or date.today())


class CourseDayAdvisor:
    """
    Main interface for the course day mapper.

    ═══════════════════════════════════════════════════════════════════════════
    ROLE: ORCHESTRATOR
    ═══════════════════════════════════════════════════════════════════════════

    This class connects the Algorithm layer to the Presentation layer:

    1. Receives the three dates as entered by the user (strings)
    2. Parses and validates them, then calls the DateMapper (pure data)
    3. Passes the result, or an error message, to the display

    TO CHANGE THE UI:
    -----------------
    Pass a different display object: anything with print_results(result)
    and print_error(message) works.

    For an API, skip the display and call map_strings() directly; it raises
    instead of printing.

    ═══════════════════════════════════════════════════════════════════════════

    USAGE:
        advisor = CourseDayAdvisor()

        result = advisor.handle_submission(
            trimester_start="2024-01-08",
            course_start="2024-02-01",
            target_date="2024-02-14",
        )
    """

    def __init__(self, mapper: Optional[DateMapper] = None, display=None):
        self.mapper = mapper or DateMapper()
        self.display = display or TerminalDisplay()

    def map_strings(self, trimester_start: Optional[str], course_start: Optional[str],
                    target_date: Optional[str]) -> MappingResult:
        """
        Parse, validate and map three YYYY-MM-DD strings.

        Raises:
            MissingInput: if any field is blank
            InvalidFormat: if any field is not a real calendar date
            InvalidRange: if the target date is outside the trimester
        """
        fields = {
            "trimester_start": trimester_start,
            "course_start": course_start,
            "target_date": target_date,
        }
        missing = [name for name, value in fields.items() if not value or not value.strip()]
        if missing:
            raise MissingInput(missing)

        trimester_start_date = parse_date(trimester_start)
        course_start_date = parse_date(course_start)
        target = parse_date(target_date)

        return self.mapper.map_date(trimester_start_date, course_start_date, target)

    def handle_submission(self, trimester_start: Optional[str], course_start: Optional[str],
                          target_date: Optional[str]) -> Optional[MappingResult]:
        """
        Map the submitted dates and display the outcome.

        Returns:
            The MappingResult, or None if an error message was displayed instead
        """
        try:
            result = self.map_strings(trimester_start, course_start, target_date)
        except CourseMapError as exc:
            logger.warning(f"Submission rejected ({exc.code}): {exc}")
            self.display.print_error(self.message_for(exc))
            return None

        logger.info(
            f"Mapped {format_date(result.target_date)} -> {format_date(result.course_date)}"
        )
        self.display.print_results(result)
        return result

    @staticmethod
    def message_for(error: CourseMapError) -> str:
        """User-facing text for an error raised while mapping."""
        if isinstance(error, MissingInput):
            return MISSING_INPUT_MESSAGE
        if isinstance(error, InvalidRange):
            return INVALID_RANGE_MESSAGE
        if isinstance(error, InvalidFormat):
            return INVALID_FORMAT_MESSAGE.format(text=error.text)
        if isinstance(error, PeriodOutOfRange):
            return PERIOD_OUT_OF_RANGE_MESSAGE
        return str(error)
