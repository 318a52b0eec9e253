"""Calendar calculations and comparisons.

Calendar Operations (from datewise.arithmetic.calendar_ops):
    - add_business_days: Step forward over working days
    - start_of_day, end_of_day: First and last moment of a date in a zone
    - start_of_week, end_of_week: ISO week boundaries
    - start_of_month, end_of_month: Month boundaries

Comparison Operations (from datewise.arithmetic.comparisons):
    - is_today, is_tomorrow, is_yesterday: Relative to today in a zone
    - is_date_*, is_time_*, is_instant_*, is_duration_*: Ordering and equality
    - is_optional_date_equal, is_optional_instant_equal: Equality with None

Interval Operations (from datewise.arithmetic.range_ops):
    - Interval: Half-open start/end pair
    - are_intervals_overlapping: Overlap test
"""

from __future__ import annotations

from datewise.arithmetic.calendar_ops import (
    BusinessDayPredicate,
    add_business_days,
    end_of_day,
    end_of_month,
    end_of_week,
    is_weekday,
    start_of_day,
    start_of_month,
    start_of_week,
)
from datewise.arithmetic.comparisons import (
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
from datewise.arithmetic.range_ops import Interval, are_intervals_overlapping

__all__ = [
    # Calendar operations
    "BusinessDayPredicate",
    "is_weekday",
    "add_business_days",
    "start_of_day",
    "end_of_day",
    "start_of_week",
    "end_of_week",
    "start_of_month",
    "end_of_month",
    # Comparisons
    "is_today",
    "is_tomorrow",
    "is_yesterday",
    "is_date_equal",
    "is_date_after",
    "is_date_before",
    "is_optional_date_equal",
    "is_time_equal",
    "is_time_after",
    "is_time_before",
    "is_instant_equal",
    "is_instant_after",
    "is_instant_before",
    "is_optional_instant_equal",
    "is_duration_equal",
    "is_duration_greater",
    "is_duration_less",
    # Intervals
    "Interval",
    "are_intervals_overlapping",
]
