"""
Mapping engines.

This package contains the engine that performs the core business logic of
the mapper: turning a trimester day into a course day.
"""

from .mapper import (
    DateMapper,
    calculate_corresponding_date,
    round_half_up,
    validate_dates,
)

__all__ = [
    "DateMapper",
    "calculate_corresponding_date",
    "round_half_up",
    "validate_dates",
]
