"""Shared fixtures for the coursemap test suite."""

from datetime import date

import pytest
from loguru import logger

from coursemap import DateMapper, reset_settings


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Run every test against default settings and with logging silenced."""
    for name in ("COURSEMAP_TRIMESTER_WEEKS", "COURSEMAP_COURSE_WEEKS",
                 "COURSEMAP_LOG_LEVEL", "COURSEMAP_LOG_FILE"):
        monkeypatch.delenv(name, raising=False)
    reset_settings()
    logger.remove()
    yield
    logger.remove()
    reset_settings()


@pytest.fixture
def trimester_start():
    """Monday 2024-01-08."""
    return date(2024, 1, 8)


@pytest.fixture
def course_start():
    """Thursday 2024-02-01."""
    return date(2024, 2, 1)


@pytest.fixture
def mapper():
    """Mapper with the reference 12-week trimester and 20-week course."""
    return DateMapper(trimester_weeks=12, course_weeks=20)
