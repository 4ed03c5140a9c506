# File: tests/unit/test_time_utils.py
"""
Unit tests for the shared time helpers.
"""

import pytest
import pytz
from datetime import date, datetime

from conftest import at
from agenda_layout.utils.time_utils import (
    resolve_timezone, to_local, local_date, start_of_day, end_of_day,
    hours_between, hours_since_midnight, week_days, shift_week,
    fmt_time, fmt_date, fmt_datetime, hour_grid
)


AMSTERDAM = "Europe/Amsterdam"


class TestTimezones:
    """Timezone resolution and conversion."""

    def test_resolve_by_name(self):
        assert resolve_timezone("UTC") is pytz.utc

    def test_tzinfo_passes_through(self):
        zone = pytz.timezone(AMSTERDAM)
        assert resolve_timezone(zone) is zone

    def test_unknown_timezone_raises(self):
        with pytest.raises(ValueError, match="Unknown timezone"):
            resolve_timezone("Mars/Olympus_Mons")

    def test_to_local_aware(self):
        local = to_local(at(2024, 1, 1, 23, 30), AMSTERDAM)

        assert (local.year, local.month, local.day, local.hour) == (2024, 1, 2, 0)

    def test_to_local_naive_is_wall_clock(self):
        local = to_local(datetime(2024, 7, 1, 9), AMSTERDAM)

        assert local.hour == 9
        assert local.utcoffset().total_seconds() == 2 * 3600

    def test_to_local_accepts_iso_string(self):
        assert to_local("2024-01-01T10:00:00Z", "UTC") == at(2024, 1, 1, 10)

    def test_local_date_crosses_midnight(self):
        instant = at(2024, 1, 1, 23, 30)

        assert local_date(instant, "UTC") == date(2024, 1, 1)
        assert local_date(instant, AMSTERDAM) == date(2024, 1, 2)


class TestDayBounds:
    """Start and end of day."""

    def test_start_of_day(self):
        assert start_of_day(date(2024, 1, 2), "UTC") == at(2024, 1, 2)

    def test_end_of_day_has_milliseconds(self):
        end = end_of_day(date(2024, 1, 1), "UTC")

        assert end == at(2024, 1, 1, 23, 59, 59, 999000)

    def test_dst_day_bounds_keep_local_midnight(self):
        """On the spring-forward day midnight still has the winter offset."""
        start = start_of_day(date(2024, 3, 31), AMSTERDAM)
        end = end_of_day(date(2024, 3, 31), AMSTERDAM)

        assert start.hour == 0
        assert start.utcoffset().total_seconds() == 3600
        assert end.utcoffset().total_seconds() == 7200


class TestHourMath:
    """Hour differences and time of day."""

    def test_hours_between(self):
        assert hours_between(at(2024, 1, 1, 9), at(2024, 1, 1, 10, 30)) == 1.5

    def test_hours_between_strings(self):
        assert hours_between("2024-01-01T09:00:00Z", "2024-01-01T12:00:00Z") == 3

    def test_hours_since_midnight(self):
        assert hours_since_midnight(at(2024, 1, 1, 9, 30), "UTC") == 9.5
        assert hours_since_midnight(at(2024, 1, 1, 0), "UTC") == 0

    def test_hours_since_midnight_uses_layout_zone(self):
        assert hours_since_midnight(at(2024, 1, 1, 9), AMSTERDAM) == 10

    def test_invalid_string_raises(self):
        with pytest.raises(ValueError, match="Invalid datetime"):
            hours_between("soon", "later")


class TestWeekMath:
    """Monday-first week navigation."""

    def test_week_days_from_wednesday(self):
        days = week_days(date(2024, 1, 3))

        assert days[0] == date(2024, 1, 1)
        assert days[-1] == date(2024, 1, 7)
        assert len(days) == 7

    def test_week_days_from_sunday(self):
        """Sunday belongs to the week that started the previous Monday."""
        assert week_days(date(2024, 1, 7))[0] == date(2024, 1, 1)

    def test_week_days_across_year_end(self):
        days = week_days(datetime(2025, 1, 1, 15))

        assert days[0] == date(2024, 12, 30)
        assert days[-1] == date(2025, 1, 5)

    def test_shift_week(self):
        days = week_days(date(2024, 1, 3))

        assert shift_week(days)[0] == date(2024, 1, 8)
        assert shift_week(days, -1)[0] == date(2023, 12, 25)


class TestFormatting:
    """Display formatting in the layout zone."""

    def test_fmt_time(self):
        assert fmt_time(at(2024, 1, 1, 9, 5), "UTC") == "09:05"
        assert fmt_time(at(2024, 1, 1, 9, 5), AMSTERDAM) == "10:05"

    def test_fmt_date(self):
        assert fmt_date(at(2024, 1, 1, 9), "UTC") == "Jan 1, 2024"

    def test_fmt_datetime(self):
        assert fmt_datetime("2024-01-01T21:00:00Z", "UTC") == "Jan 1, 2024, 21:00"

    def test_hour_grid(self):
        grid = hour_grid(80)

        assert len(grid) == 24
        assert grid[0] == ("00:00", 0)
        assert grid[9] == ("09:00", 720)
        assert grid[-1][0] == "23:00"
