"""Tests for calendar calculations."""

from __future__ import annotations

import datetime

import pendulum
import pytest

from datewise.arithmetic import (
    add_business_days,
    end_of_day,
    end_of_month,
    end_of_week,
    is_weekday,
    start_of_day,
    start_of_month,
    start_of_week,
)
from datewise.errors import UnresolvedZoneError
from datewise.format import parse_plain_date


class TestAddBusinessDays:
    """Tests for add_business_days."""

    def test_single_day_over_weekend(self):
        """Friday plus one business day is Monday."""
        assert add_business_days(parse_plain_date("2022-08-05"), 1) == pendulum.Date(
            2022, 8, 8
        )

    def test_several_days_over_weekend(self):
        """Friday plus three business days is Wednesday."""
        assert add_business_days(parse_plain_date("2022-08-05"), 3) == pendulum.Date(
            2022, 8, 10
        )

    def test_over_two_weekends(self):
        """Friday plus ten business days is the Friday two weeks on."""
        assert add_business_days(parse_plain_date("2022-08-05"), 10) == pendulum.Date(
            2022, 8, 19
        )

    def test_within_week(self):
        """Wednesday plus two business days is Friday."""
        assert add_business_days(parse_plain_date("2022-08-03"), 2) == pendulum.Date(
            2022, 8, 5
        )

    def test_from_weekend(self):
        """Starting on Saturday, the first business day is Monday."""
        assert add_business_days(pendulum.Date(2022, 8, 6), 1) == pendulum.Date(
            2022, 8, 8
        )

    @pytest.mark.parametrize("n", [0, -1, -5])
    def test_non_positive_is_noop(self, n):
        """Zero or negative counts leave the date unchanged."""
        start = pendulum.Date(2022, 8, 6)
        assert add_business_days(start, n) == start

    def test_custom_predicate(self):
        """A custom predicate can skip a holiday."""
        holiday = pendulum.Date(2022, 8, 8)

        def is_working_day(d: pendulum.Date) -> bool:
            return is_weekday(d) and d != holiday

        assert add_business_days(
            pendulum.Date(2022, 8, 5), 1, is_working_day
        ) == pendulum.Date(2022, 8, 9)

    def test_accepts_stdlib_date(self):
        """A stdlib date is accepted."""
        assert add_business_days(datetime.date(2022, 8, 5), 1) == pendulum.Date(
            2022, 8, 8
        )


class TestWeekBoundaries:
    """Tests for start_of_week and end_of_week."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("2022-08-05", "2022-08-01"),
            ("2022-08-04", "2022-08-01"),
            ("2022-08-03", "2022-08-01"),
            ("2022-08-02", "2022-08-01"),
            ("2022-08-01", "2022-08-01"),
            ("2022-07-31", "2022-07-25"),
        ],
    )
    def test_start_of_week(self, value, expected):
        """The week starts on Monday."""
        assert start_of_week(parse_plain_date(value)) == parse_plain_date(expected)

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("2022-08-08", "2022-08-14"),
            ("2022-08-07", "2022-08-07"),
            ("2022-08-06", "2022-08-07"),
            ("2022-08-05", "2022-08-07"),
            ("2022-08-01", "2022-08-07"),
            ("2022-07-31", "2022-07-31"),
        ],
    )
    def test_end_of_week(self, value, expected):
        """The week ends on Sunday."""
        assert end_of_week(parse_plain_date(value)) == parse_plain_date(expected)


class TestMonthBoundaries:
    """Tests for start_of_month and end_of_month."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("2022-08-05", "2022-08-01"),
            ("2022-08-01", "2022-08-01"),
            ("2022-07-31", "2022-07-01"),
            ("2022-12-15", "2022-12-01"),
            ("2022-01-01", "2022-01-01"),
        ],
    )
    def test_start_of_month(self, value, expected):
        """The first day of the month."""
        assert start_of_month(parse_plain_date(value)) == parse_plain_date(expected)

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("2022-08-05", "2022-08-31"),
            ("2022-08-31", "2022-08-31"),
            ("2022-07-01", "2022-07-31"),
            ("2022-12-15", "2022-12-31"),
            ("2022-02-15", "2022-02-28"),
            ("2024-02-15", "2024-02-29"),
        ],
    )
    def test_end_of_month(self, value, expected):
        """The last day of the month, leap years included."""
        assert end_of_month(parse_plain_date(value)) == parse_plain_date(expected)


class TestDayBoundaries:
    """Tests for start_of_day and end_of_day."""

    def test_start_of_day_utc(self):
        """Midnight in UTC."""
        result = start_of_day(pendulum.Date(2022, 8, 5), "UTC")
        assert result.isoformat() == "2022-08-05T00:00:00+00:00"
        assert result.timezone_name == "UTC"

    def test_start_of_day_new_york(self):
        """Midnight in New York during daylight time."""
        result = start_of_day(pendulum.Date(2022, 8, 5), "America/New_York")
        assert result.isoformat() == "2022-08-05T00:00:00-04:00"
        assert result.timezone_name == "America/New_York"

    def test_end_of_day_utc(self):
        """The last microsecond of the day in UTC."""
        result = end_of_day(pendulum.Date(2022, 8, 5), "UTC")
        assert result.isoformat() == "2022-08-05T23:59:59.999999+00:00"

    def test_end_of_day_new_york(self):
        """The last microsecond of the day in New York."""
        result = end_of_day(pendulum.Date(2022, 8, 5), "America/New_York")
        assert result.isoformat() == "2022-08-05T23:59:59.999999-04:00"

    def test_day_is_one_microsecond_short(self):
        """end_of_day is one microsecond before the next start_of_day."""
        date = pendulum.Date(2022, 8, 5)
        gap = start_of_day(date.add(days=1), "Europe/London") - end_of_day(
            date, "Europe/London"
        )
        assert gap.total_seconds() == pytest.approx(0.000001)

    def test_unknown_zone(self):
        """An unknown zone raises UnresolvedZoneError."""
        with pytest.raises(UnresolvedZoneError):
            start_of_day(pendulum.Date(2022, 8, 5), "Not/AZone")
