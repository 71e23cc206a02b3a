from datetime import date, datetime, timedelta

import pytest

from app.services.occurrences import compute_occurrences, sunday_based_weekday

# 2026-03-04 is a Wednesday
WEDNESDAY = date(2026, 3, 4)


def test_sunday_based_weekday():
    assert sunday_based_weekday(date(2026, 3, 1)) == 0  # Sunday
    assert sunday_based_weekday(date(2026, 3, 2)) == 1  # Monday
    assert sunday_based_weekday(date(2026, 3, 7)) == 6  # Saturday


def test_weekly_on_monday_from_a_wednesday_start():
    occurrences = list(
        compute_occurrences(
            "WEEKLY", WEDNESDAY, WEDNESDAY, WEDNESDAY + timedelta(days=14), day_of_week=1
        )
    )

    assert occurrences == [date(2026, 3, 9), date(2026, 3, 16)]


@pytest.mark.parametrize("day_of_week", range(7))
def test_weekly_occurrences_land_on_weekday_seven_days_apart(day_of_week):
    occurrences = list(
        compute_occurrences(
            "WEEKLY", date(2026, 1, 1), date(2026, 2, 3), date(2026, 5, 20), day_of_week=day_of_week
        )
    )

    assert len(occurrences) >= 15
    assert all(sunday_based_weekday(d) == day_of_week for d in occurrences)
    assert all((b - a).days == 7 for a, b in zip(occurrences, occurrences[1:]))
    assert occurrences[0] - date(2026, 2, 3) < timedelta(days=7)


def test_biweekly_occurrences_are_fourteen_days_apart():
    occurrences = list(
        compute_occurrences("BIWEEKLY", date(2026, 1, 5), date(2026, 1, 1), date(2026, 6, 30))
    )

    assert occurrences[0] == date(2026, 1, 5)
    assert all((b - a).days == 14 for a, b in zip(occurrences, occurrences[1:]))
    assert occurrences[-1] <= date(2026, 6, 30)


def test_weekday_defaults_to_plan_start_weekday():
    occurrences = list(
        compute_occurrences("WEEKLY", WEDNESDAY, date(2026, 4, 1), date(2026, 4, 30))
    )

    assert occurrences == [date(2026, 4, 1), date(2026, 4, 8), date(2026, 4, 15), date(2026, 4, 22), date(2026, 4, 29)]


def test_window_bounds_are_inclusive_and_time_of_day_is_ignored():
    occurrences = list(
        compute_occurrences(
            "WEEKLY",
            WEDNESDAY,
            datetime(2026, 3, 9, 23, 59),
            datetime(2026, 3, 16, 0, 1),
            day_of_week=1,
        )
    )

    assert occurrences == [date(2026, 3, 9), date(2026, 3, 16)]


def test_monthly_day_31_skips_april():
    occurrences = list(
        compute_occurrences(
            "MONTHLY", date(2026, 1, 31), date(2026, 4, 1), date(2026, 4, 30), day_of_month=31
        )
    )

    assert occurrences == []


def test_monthly_day_31_only_in_long_months():
    occurrences = list(
        compute_occurrences(
            "MONTHLY", date(2026, 1, 31), date(2026, 3, 15), date(2026, 5, 31), day_of_month=31
        )
    )

    assert occurrences == [date(2026, 3, 31), date(2026, 5, 31)]


def test_monthly_day_30_never_in_february():
    occurrences = list(
        compute_occurrences(
            "MONTHLY", date(2027, 1, 30), date(2027, 1, 1), date(2028, 12, 31), day_of_month=30
        )
    )

    months = [(d.year, d.month) for d in occurrences]
    assert all(d.day == 30 for d in occurrences)
    assert (2027, 2) not in months
    assert (2028, 2) not in months  # leap year too
    assert len(occurrences) == 22
    assert len(set(months)) == len(months)


def test_monthly_day_defaults_to_plan_start_day():
    occurrences = list(
        compute_occurrences("MONTHLY", date(2026, 1, 15), date(2026, 1, 16), date(2026, 4, 15))
    )

    assert occurrences == [date(2026, 2, 15), date(2026, 3, 15), date(2026, 4, 15)]


@pytest.mark.parametrize("frequency", ["WEEKLY", "BIWEEKLY", "MONTHLY"])
def test_empty_when_window_start_after_end(frequency):
    assert list(compute_occurrences(frequency, WEDNESDAY, date(2026, 5, 1), date(2026, 4, 1))) == []


def test_occurrences_are_produced_lazily():
    occurrences = compute_occurrences("WEEKLY", WEDNESDAY, WEDNESDAY, date(2030, 1, 1))

    assert iter(occurrences) is occurrences
    assert next(occurrences) == WEDNESDAY


@pytest.mark.parametrize(
    "kwargs",
    [
        {"frequency": "DAILY"},
        {"frequency": "WEEKLY", "day_of_week": 7},
        {"frequency": "BIWEEKLY", "day_of_week": -1},
        {"frequency": "MONTHLY", "day_of_month": 0},
        {"frequency": "MONTHLY", "day_of_month": 32},
    ],
)
def test_invalid_cadence_raises(kwargs):
    with pytest.raises(ValueError):
        compute_occurrences(
            plan_start_date=WEDNESDAY, window_start=WEDNESDAY, window_end=date(2026, 4, 1), **kwargs
        )
