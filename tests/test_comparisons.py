"""Tests for comparison predicates and interval overlap."""

from __future__ import annotations

import datetime

import pendulum
import pytest

from datewise.arithmetic import (
    Interval,
    are_intervals_overlapping,
    is_date_after,
    is_date_before,
    is_date_equal,
    is_duration_equal,
    is_duration_greater,
    is_duration_less,
    is_instant_after,
    is_instant_before,
    is_instant_equal,
    is_optional_date_equal,
    is_optional_instant_equal,
    is_time_after,
    is_time_before,
    is_time_equal,
    is_today,
    is_tomorrow,
    is_yesterday,
)
from datewise.errors import UnresolvedZoneError
from datewise.format import parse_instant, parse_plain_date, parse_plain_time


class TestIsToday:
    """Tests for is_today with the clock at 8pm UTC on 2022-07-09."""

    @pytest.mark.parametrize("tz", ["UTC", "Europe/London", "America/Halifax"])
    def test_same_date(self, evening_clock, tz):
        """Still the 9th in zones at or behind UTC+1."""
        assert is_today(parse_plain_date("2022-07-09"), tz, evening_clock)

    def test_ahead_zone(self, evening_clock):
        """Already the 10th in Tokyo."""
        assert not is_today(parse_plain_date("2022-07-09"), "Asia/Tokyo", evening_clock)
        assert is_today(parse_plain_date("2022-07-10"), "Asia/Tokyo", evening_clock)

    def test_unknown_zone(self, evening_clock):
        """An unknown zone raises UnresolvedZoneError."""
        with pytest.raises(UnresolvedZoneError):
            is_today(parse_plain_date("2022-07-09"), "Atlantis/City", evening_clock)


class TestIsTomorrow:
    """Tests for is_tomorrow with the clock at 2am UTC on 2022-07-09."""

    @pytest.mark.parametrize("tz", ["UTC", "Europe/London"])
    def test_next_date(self, early_clock, tz):
        """The 10th is tomorrow where it is already the 9th."""
        assert is_tomorrow(parse_plain_date("2022-07-10"), tz, early_clock)

    def test_behind_zone(self, early_clock):
        """In Halifax it is still the 8th, so the 9th is tomorrow."""
        assert is_tomorrow(parse_plain_date("2022-07-09"), "America/Halifax", early_clock)

    @pytest.mark.parametrize("tz", ["UTC", "Europe/London", "Asia/Tokyo"])
    def test_today_is_not_tomorrow(self, early_clock, tz):
        """The 9th is today, not tomorrow."""
        assert not is_tomorrow(parse_plain_date("2022-07-09"), tz, early_clock)

    def test_defined_through_is_today(self, early_clock):
        """is_tomorrow(d) is is_today(d - 1 day)."""
        date = parse_plain_date("2022-07-10")
        assert is_tomorrow(date, "UTC", early_clock) == is_today(
            date - datetime.timedelta(days=1), "UTC", early_clock
        )


class TestIsYesterday:
    """Tests for is_yesterday with the clock at 8pm UTC on 2022-07-09."""

    @pytest.mark.parametrize("tz", ["UTC", "Europe/London"])
    def test_previous_date(self, evening_clock, tz):
        """The 8th is yesterday where it is the 9th."""
        assert is_yesterday(parse_plain_date("2022-07-08"), tz, evening_clock)

    def test_behind_zone(self, evening_clock):
        """In Halifax it is the 9th, so the 9th is not yesterday."""
        assert not is_yesterday(
            parse_plain_date("2022-07-09"), "America/Halifax", evening_clock
        )

    def test_ahead_zone(self, evening_clock):
        """In Tokyo it is the 10th, so the 9th is yesterday."""
        assert is_yesterday(parse_plain_date("2022-07-09"), "Asia/Tokyo", evening_clock)


class TestDateComparisons:
    """Tests for plain date predicates."""

    def test_equal(self):
        """Same calendar date."""
        assert is_date_equal(pendulum.Date(2024, 6, 12), pendulum.Date(2024, 6, 12))
        assert not is_date_equal(pendulum.Date(2024, 6, 12), pendulum.Date(2024, 6, 13))

    def test_after_and_before(self):
        """Chronological ordering."""
        early, late = pendulum.Date(2024, 6, 12), pendulum.Date(2024, 6, 13)
        assert is_date_after(late, early)
        assert not is_date_after(early, late)
        assert is_date_before(early, late)
        assert not is_date_before(early, early)

    def test_optional_equal(self):
        """Absent values on either side."""
        date = pendulum.Date(2024, 6, 12)
        assert is_optional_date_equal(None, None)
        assert not is_optional_date_equal(date, None)
        assert not is_optional_date_equal(None, date)
        assert is_optional_date_equal(date, pendulum.Date(2024, 6, 12))


class TestTimeComparisons:
    """Tests for plain time predicates."""

    def test_equal(self):
        """Same wall-clock time."""
        assert is_time_equal(parse_plain_time("10:30"), parse_plain_time("10:30:00"))

    def test_after_and_before(self):
        """Earlier and later in the day."""
        morning, evening = parse_plain_time("09:00"), parse_plain_time("18:00")
        assert is_time_after(evening, morning)
        assert is_time_before(morning, evening)
        assert not is_time_before(evening, morning)


class TestInstantComparisons:
    """Tests for instant predicates."""

    def test_equal_across_offsets(self):
        """The same moment written with different offsets."""
        assert is_instant_equal(
            parse_instant("2024-06-12T14:00:00Z"),
            parse_instant("2024-06-12T15:00:00+01:00"),
        )

    def test_after_and_before(self):
        """Timeline ordering."""
        first = parse_instant("2024-06-12T14:00:00Z")
        second = parse_instant("2024-06-12T14:00:01Z")
        assert is_instant_after(second, first)
        assert is_instant_before(first, second)
        assert not is_instant_before(first, first)

    def test_rejects_naive(self):
        """Naive values are not instants."""
        with pytest.raises(TypeError):
            is_instant_before(
                datetime.datetime(2024, 1, 1), parse_instant("2024-01-01T00:00:00Z")
            )

    def test_optional_equal(self):
        """Absent values on either side."""
        instant = parse_instant("2024-06-12T14:00:00Z")
        assert is_optional_instant_equal(None, None)
        assert not is_optional_instant_equal(instant, None)
        assert not is_optional_instant_equal(None, instant)
        assert is_optional_instant_equal(instant, parse_instant("2024-06-12T14:00:00Z"))


class TestDurationComparisons:
    """Tests for duration predicates."""

    @pytest.mark.parametrize(
        "duration,compared_with,expected",
        [
            (pendulum.duration(hours=1), pendulum.duration(hours=2), False),
            (pendulum.duration(hours=2), pendulum.duration(hours=1), True),
            (pendulum.duration(hours=1), pendulum.duration(hours=1), False),
            (pendulum.duration(hours=1), pendulum.duration(minutes=59), True),
        ],
    )
    def test_greater(self, duration, compared_with, expected):
        """Longer durations are greater."""
        assert is_duration_greater(duration, compared_with) is expected

    def test_equal_canonical(self):
        """One hour equals sixty minutes."""
        assert is_duration_equal(pendulum.duration(hours=1), pendulum.duration(minutes=60))
        assert not is_duration_equal(
            pendulum.duration(hours=1), pendulum.duration(minutes=61)
        )

    def test_less(self):
        """Shorter durations are less."""
        assert is_duration_less(pendulum.duration(minutes=59), pendulum.duration(hours=1))
        assert not is_duration_less(pendulum.duration(hours=1), pendulum.duration(hours=1))


class TestIntervalOverlap:
    """Tests for are_intervals_overlapping."""

    def span(self, start: str, end: str) -> Interval:
        return Interval(
            parse_instant(f"2024-06-12T{start}Z"), parse_instant(f"2024-06-12T{end}Z")
        )

    def test_overlapping(self):
        """Partially overlapping intervals."""
        assert are_intervals_overlapping(
            self.span("09:00:00", "11:00:00"), self.span("10:00:00", "12:00:00")
        )

    def test_contained(self):
        """One interval inside another."""
        assert are_intervals_overlapping(
            self.span("09:00:00", "17:00:00"), self.span("10:00:00", "11:00:00")
        )

    def test_touching_is_not_overlap(self):
        """Half-open intervals that only touch do not overlap."""
        assert not are_intervals_overlapping(
            self.span("09:00:00", "10:00:00"), self.span("10:00:00", "11:00:00")
        )
        assert not are_intervals_overlapping(
            self.span("10:00:00", "11:00:00"), self.span("09:00:00", "10:00:00")
        )

    def test_disjoint(self):
        """Separate intervals."""
        assert not are_intervals_overlapping(
            self.span("09:00:00", "10:00:00"), self.span("11:00:00", "12:00:00")
        )

    def test_pendulum_interval(self):
        """Any object with start and end works."""
        first = pendulum.interval(
            parse_instant("2024-06-12T09:00:00Z"), parse_instant("2024-06-12T11:00:00Z")
        )
        assert are_intervals_overlapping(first, self.span("10:00:00", "12:00:00"))
