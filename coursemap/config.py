"""
Configuration constants for the course day mapper.

This module contains all configuration values used throughout the mapping
algorithm. Centralizing these makes it easy to adjust behavior when a school
changes its term lengths.

Every value can be overridden from the environment (or a ``.env`` file) using
the ``COURSEMAP_`` prefix, e.g. ``COURSEMAP_TRIMESTER_WEEKS=13``.
"""

from functools import lru_cache
from typing import Optional

from loguru import logger
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


# =============================================================================
# PERIOD LENGTHS
# =============================================================================
# Both periods are measured in whole weeks starting on their start date.
#   - Trimester: the real academic term, weekends included
#   - Online course: the asynchronous course calendar, weekdays only

TRIMESTER_WEEKS = 12
COURSE_WEEKS = 20


# =============================================================================
# DATE FORMAT
# =============================================================================

# Dates travel between the caller and the core as ISO calendar dates.
DATE_FORMAT = "YYYY-MM-DD"

# Monday=0 ... Sunday=6, as returned by date.weekday()
WEEKDAY_NUMBERS = frozenset({0, 1, 2, 3, 4})


# =============================================================================
# LOGGING
# =============================================================================

DEFAULT_LOG_LEVEL = "WARNING"
VALID_LOG_LEVELS = {"TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"}


class Settings(BaseSettings):
    """
    Runtime settings, read from ``COURSEMAP_*`` environment variables.

    The week counts are configuration, never user input, so an invalid value
    is rejected at load time instead of surfacing later as an empty period.
    """

    trimester_weeks: int = Field(default=TRIMESTER_WEEKS, ge=1)
    course_weeks: int = Field(default=COURSE_WEEKS, ge=1)
    log_level: str = Field(default=DEFAULT_LOG_LEVEL)
    log_file: Optional[str] = Field(default=None)

    model_config = SettingsConfigDict(
        env_prefix="COURSEMAP_",
        env_file=".env",
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Normalize the log level, falling back to the default if unknown."""
        upper_value = value.upper()
        if upper_value not in VALID_LOG_LEVELS:
            logger.warning(
                f"Invalid COURSEMAP_LOG_LEVEL '{value}'. "
                f"Valid levels are: {', '.join(sorted(VALID_LOG_LEVELS))}. "
                f"Defaulting to {DEFAULT_LOG_LEVEL}."
            )
            return DEFAULT_LOG_LEVEL
        return upper_value


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the process-wide settings, loading them on first use."""
    return Settings()


def reset_settings() -> None:
    """Forget cached settings so the next get_settings() re-reads the environment."""
    get_settings.cache_clear()


# =============================================================================
# USER MESSAGES
# =============================================================================
# Shown by the presentation layer when a submission cannot be mapped.

MISSING_INPUT_MESSAGE = "Please fill in all required fields."
INVALID_RANGE_MESSAGE = (
    "Please check your date ranges. "
    "Make sure the target date falls within the trimester period."
)
INVALID_FORMAT_MESSAGE = "Invalid date '{text}'. Use the YYYY-MM-DD format."
PERIOD_OUT_OF_RANGE_MESSAGE = (
    "These dates are too close to the end of the calendar: "
    "the trimester or course would run past 9999-12-31."
)
