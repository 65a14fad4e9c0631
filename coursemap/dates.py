"""
Calendar date primitives.

Parsing, formatting and whole-day arithmetic on ``datetime.date`` values.
Nothing here knows about trimesters or courses; the mapping engine builds on
these helpers.

WHY datetime.date:
------------------
A date has no time of day and no timezone, so adding days can never land on
23:00 the previous evening because of a daylight-saving switch. Every date in
the package is a plain ``date``; nothing is ever converted to local time.
"""

import re
from datetime import date, timedelta
from typing import Iterator

from .config import WEEKDAY_NUMBERS
from .errors import InvalidFormat, PeriodOutOfRange


# Year is four digits; month and day may drop their leading zero.
_DATE_PATTERN = re.compile(r"^(\d{4})-(\d{1,2})-(\d{1,2})$", re.ASCII)


def parse_date(text: str) -> date:
    """
    Parse a ``YYYY-MM-DD`` string into a date.

    Parsing is purely numeric: no locale, no month names, no time component.

    Raises:
        InvalidFormat: if the text is not three dash-separated numbers, or
            if the numbers do not name a real day (2024-13-01, 2024-02-30).
    """
    if not isinstance(text, str):
        raise InvalidFormat(repr(text), "not a string")

    match = _DATE_PATTERN.match(text.strip())
    if match is None:
        raise InvalidFormat(text, "expected three numeric components")

    year, month, day = (int(part) for part in match.groups())
    try:
        return date(year, month, day)
    except ValueError as exc:
        raise InvalidFormat(text, str(exc)) from exc


def format_date(value: date) -> str:
    """Render a date as zero-padded ``YYYY-MM-DD``."""
    return f"{value.year:04d}-{value.month:02d}-{value.day:02d}"


def calculate_end_date(start: date, weeks: int) -> date:
    """
    Last day of a period of ``weeks`` whole weeks starting on ``start``.

    Plain arithmetic: ``start + weeks * 7 - 1`` days. ``weeks=0`` gives the
    day before ``start``.

    Raises:
        PeriodOutOfRange: if the end falls outside the years 1-9999
    """
    try:
        return start + timedelta(days=weeks * 7 - 1)
    except OverflowError as exc:
        raise PeriodOutOfRange(start, weeks) from exc


def days_between(start: date, end: date) -> int:
    """Signed number of whole days from ``start`` to ``end``."""
    return (end - start).days


def is_weekday(value: date) -> bool:
    """True for Monday through Friday."""
    return value.weekday() in WEEKDAY_NUMBERS


def iter_weekdays_between(start: date, end: date) -> Iterator[date]:
    """Yield each Monday-Friday date from ``start`` to ``end`` inclusive."""
    current = start
    while current <= end:
        if is_weekday(current):
            yield current
        # date.max has no next day
        if current == end:
            break
        current += timedelta(days=1)


def get_weekdays_between(start: date, end: date) -> list:
    """
    All weekdays from ``start`` to ``end``, both inclusive, in order.

    Returns an empty list when ``end`` is before ``start``.
    """
    return list(iter_weekdays_between(start, end))
