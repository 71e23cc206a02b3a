"""
Occurrence calculation for recurring service plans
Turns a plan's cadence (weekly, bi-weekly, monthly) into the calendar dates
on which a visit is due within a date window
"""

import calendar
from datetime import date, datetime, timedelta
from typing import Iterator, Optional, Union

DateLike = Union[date, datetime]

FREQUENCY_INTERVAL_DAYS = {
    "WEEKLY": 7,
    "BIWEEKLY": 14,
}


def _as_date(value: DateLike) -> date:
    if isinstance(value, datetime):
        return value.date()
    return value


def sunday_based_weekday(day: date) -> int:
    """Weekday with Sunday=0..Saturday=6 (Python's weekday() has Monday=0)"""
    return (day.weekday() + 1) % 7


def compute_occurrences(
    frequency: str,
    plan_start_date: DateLike,
    window_start: DateLike,
    window_end: DateLike,
    day_of_week: Optional[int] = None,
    day_of_month: Optional[int] = None,
) -> Iterator[date]:
    """
    Yield the dates in [window_start, window_end] on which a visit is due.

    Both bounds are compared as calendar dates; any time of day is dropped.
    Dates come out strictly increasing.

    Args:
        frequency: WEEKLY, BIWEEKLY or MONTHLY
        plan_start_date: Plan start, used when day_of_week / day_of_month is not set
        window_start: First date that may be emitted
        window_end: Last date that may be emitted
        day_of_week: 0=Sunday..6=Saturday (WEEKLY/BIWEEKLY)
        day_of_month: 1..31 (MONTHLY). Months without that day get no visit.

    Raises:
        ValueError: Unknown frequency or out-of-range day parameter
    """
    start = _as_date(window_start)
    end = _as_date(window_end)
    anchor = _as_date(plan_start_date)

    if frequency == "MONTHLY":
        if day_of_month is not None and not 1 <= day_of_month <= 31:
            raise ValueError(f"day_of_month must be between 1 and 31, got {day_of_month}")
        target_day = day_of_month if day_of_month is not None else anchor.day
        return _monthly_occurrences(target_day, start, end)

    if frequency not in FREQUENCY_INTERVAL_DAYS:
        raise ValueError(f"Unknown plan frequency: {frequency}")
    if day_of_week is not None and not 0 <= day_of_week <= 6:
        raise ValueError(f"day_of_week must be between 0 and 6, got {day_of_week}")

    target_weekday = day_of_week if day_of_week is not None else sunday_based_weekday(anchor)
    return _interval_occurrences(
        target_weekday, timedelta(days=FREQUENCY_INTERVAL_DAYS[frequency]), start, end
    )


def _interval_occurrences(
    target_weekday: int, step: timedelta, start: date, end: date
) -> Iterator[date]:
    if start > end:
        return

    current = start + timedelta(days=(target_weekday - sunday_based_weekday(start)) % 7)
    while current <= end:
        yield current
        current += step


def _monthly_occurrences(target_day: int, start: date, end: date) -> Iterator[date]:
    if start > end:
        return

    year, month = start.year, start.month
    while (year, month) <= (end.year, end.month):
        # Short months skip the cycle (no roll-over into the next month)
        if target_day <= calendar.monthrange(year, month)[1]:
            candidate = date(year, month, target_day)
            if start <= candidate <= end:
                yield candidate

        month += 1
        if month > 12:
            month = 1
            year += 1
