#!/usr/bin/env python3
"""Tests for calculation helper functions."""
from datetime import date, datetime

import pytest

from fleet import (
    Status,
    calc_due_date,
    check_status,
    days_between,
    format_number,
    parse_instant,
)


class TestCheckStatus:
    """Tests for check_status helper function."""

    def test_overdue(self):
        """OVERDUE when nothing of the interval is left."""
        assert check_status(10000, 10000) == Status.OVERDUE
        assert check_status(12000, 10000) == Status.OVERDUE

    def test_due_soon_boundary_inclusive(self):
        """DUE_SOON when remaining is exactly 10% of the interval."""
        assert check_status(9000, 10000) == Status.DUE_SOON
        assert check_status(9999, 10000) == Status.DUE_SOON

    def test_upcoming(self):
        """UPCOMING when more than 10% remains."""
        assert check_status(8999, 10000) == Status.UPCOMING
        assert check_status(0, 10000) == Status.UPCOMING

    def test_zero_interval_is_always_overdue(self):
        assert check_status(0, 0) == Status.OVERDUE

    def test_days(self):
        """Works the same for whole-day intervals."""
        assert check_status(90, 100) == Status.DUE_SOON
        assert check_status(89, 100) == Status.UPCOMING
        assert check_status(100, 100) == Status.OVERDUE


class TestDaysBetween:
    """Tests for days_between helper function."""

    def test_whole_days(self):
        assert days_between(datetime(2026, 1, 1), datetime(2026, 1, 31)) == 30

    def test_floors_partial_days(self):
        start = datetime(2026, 1, 1)
        assert days_between(start, datetime(2026, 1, 2, 23, 59)) == 1

    def test_negative_when_end_before_start(self):
        assert days_between(datetime(2026, 1, 2), datetime(2026, 1, 1, 12)) == -1


class TestParseInstant:
    """Tests for parse_instant helper function."""

    def test_date_string_is_midnight(self):
        assert parse_instant("2025-01-15") == datetime(2025, 1, 15)

    def test_datetime_string(self):
        assert parse_instant("2025-01-15T08:30:00") == datetime(2025, 1, 15, 8, 30)

    def test_aware_string_converted_to_naive_utc(self):
        result = parse_instant("2025-01-15T08:30:00+02:00")
        assert result == datetime(2025, 1, 15, 6, 30)
        assert result.tzinfo is None

    def test_date_object(self):
        assert parse_instant(date(2025, 1, 15)) == datetime(2025, 1, 15)

    def test_datetime_object_passes_through(self):
        value = datetime(2025, 1, 15, 8, 30)
        assert parse_instant(value) == value

    def test_invalid_string_raises(self):
        with pytest.raises(ValueError):
            parse_instant("not a date")


class TestCalcDueDate:
    """Tests for calc_due_date helper function."""

    def test_adds_days(self):
        assert calc_due_date(datetime(2026, 1, 1), 180) == datetime(2026, 6, 30)

    def test_keeps_time_of_day(self):
        result = calc_due_date(datetime(2026, 1, 1, 8, 30), 1)
        assert result == datetime(2026, 1, 2, 8, 30)


class TestFormatNumber:
    """Tests for format_number helper function."""

    def test_int(self):
        assert format_number(1000) == "1000"

    def test_integral_float_drops_fraction(self):
        assert format_number(1000.0) == "1000"

    def test_fractional_float(self):
        assert format_number(0.5) == "0.5"
