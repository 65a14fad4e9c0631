"""
Unit tests for the data models.
"""

import dataclasses
from datetime import date

import pytest

from coursemap import MappingResult, Period, PeriodKind


class TestPeriod:
    """Test cases for Period."""

    @pytest.fixture
    def trimester(self):
        return Period(PeriodKind.TRIMESTER, date(2024, 1, 8), date(2024, 3, 31), 12)

    def test_total_days(self, trimester):
        """Test the inclusive day count."""
        assert trimester.total_days == 84

    def test_contains_boundaries(self, trimester):
        """Test that both boundary days belong to the period."""
        assert trimester.contains(date(2024, 1, 8))
        assert trimester.contains(date(2024, 3, 31))
        assert not trimester.contains(date(2024, 1, 7))
        assert not trimester.contains(date(2024, 4, 1))

    def test_weekdays(self, trimester):
        """Test that twelve whole weeks hold sixty weekdays."""
        days = trimester.weekdays()

        assert len(days) == 60
        assert days[0] == date(2024, 1, 8)
        assert days[-1] == date(2024, 3, 29)

    def test_is_immutable(self, trimester):
        """Test that periods cannot be modified after creation."""
        with pytest.raises(dataclasses.FrozenInstanceError):
            trimester.end = date(2024, 4, 7)


class TestMappingResult:
    """Test cases for MappingResult."""

    def test_to_dict(self):
        """Test the JSON-friendly rendering."""
        result = MappingResult(
            course_date=date(2024, 4, 3),
            trimester_end=date(2024, 3, 31),
            course_end=date(2024, 6, 19),
            trimester_start=date(2024, 1, 8),
            course_start=date(2024, 2, 1),
            target_date=date(2024, 2, 14),
            course_index=44,
            course_day_count=100,
        )

        assert result.to_dict() == {
            "trimester_start": "2024-01-08",
            "trimester_end": "2024-03-31",
            "course_start": "2024-02-01",
            "course_end": "2024-06-19",
            "target_date": "2024-02-14",
            "course_date": "2024-04-03",
            "course_index": 44,
            "course_day_count": 100,
        }

    def test_to_dict_without_context(self):
        """Test that the optional context fields render as None."""
        result = MappingResult(date(2024, 4, 3), date(2024, 3, 31), date(2024, 6, 19))

        data = result.to_dict()

        assert data["course_date"] == "2024-04-03"
        assert data["trimester_start"] is None
        assert data["target_date"] is None
