"""
Error types for the course day mapper.

The core never recovers from an error: it either returns a value or raises
one of these to its immediate caller. Turning them into user-facing messages
is the presentation layer's job.

Error codes:
- INVALID_FORMAT: a date string is not a real YYYY-MM-DD calendar date
- INVALID_RANGE: the target date falls outside the trimester, or a period ends before it starts
- MISSING_INPUT: one of the required dates was left blank
- PERIOD_OUT_OF_RANGE: a period would end past 9999-12-31 or before 0001-01-01
"""

from typing import Optional


class CourseMapError(Exception):
    """Base class for every error raised by the mapper.

    Attributes:
        code: Stable error code (e.g., "INVALID_FORMAT")
        details: Human-readable detail strings
    """

    code = "COURSEMAP_ERROR"

    def __init__(self, message: str, details: Optional[list] = None):
        self.details = details or []
        super().__init__(message)


class InvalidFormat(CourseMapError, ValueError):
    """Raised by parse_date when the text is not a valid calendar date."""

    code = "INVALID_FORMAT"

    def __init__(self, text: str, reason: str = ""):
        self.text = text
        message = f"Invalid date {text!r}: expected YYYY-MM-DD"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message, [reason] if reason else [])


class InvalidRange(CourseMapError):
    """Raised by callers when validate_dates() rejects a set of dates."""

    code = "INVALID_RANGE"


class MissingInput(CourseMapError):
    """Raised when a required date field was not supplied."""

    code = "MISSING_INPUT"

    def __init__(self, fields: list):
        self.fields = fields
        super().__init__(f"Missing required field(s): {', '.join(fields)}", list(fields))


class PeriodOutOfRange(CourseMapError):
    """Raised when a period would end outside the supported calendar (years 1-9999)."""

    code = "PERIOD_OUT_OF_RANGE"

    def __init__(self, start, weeks: int):
        self.start = start
        self.weeks = weeks
        super().__init__(
            f"A {weeks}-week period starting {start.isoformat()} ends outside the calendar",
            [start.isoformat()],
        )
