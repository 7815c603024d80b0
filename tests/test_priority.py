# tests/test_priority.py
from datetime import date, datetime, timedelta

import pytest

from work_tracker_api.app.core.priority import (
    InvalidDateError,
    Priority,
    compare_for_display,
    days_until,
    days_until_text,
    format_date_for_display,
    is_priority_editable,
    resolve_effective_priority,
    sort_for_display,
    suggested_priority,
)

TODAY = date(2024, 6, 1)


def test_days_until_same_day_is_zero():
    assert days_until(TODAY, TODAY) == 0
    assert days_until("2024-02-29", "2024-02-29") == 0


def test_days_until_sign():
    assert days_until(date(2024, 6, 5), TODAY) == 4
    assert days_until(date(2024, 5, 29), TODAY) == -3


def test_days_until_ignores_time_of_day():
    late_evening = datetime(2024, 6, 1, 23, 59)
    early_morning = datetime(2024, 6, 5, 0, 1)
    assert days_until(early_morning, late_evening) == 4
    assert days_until("2024-06-05T08:30:00", TODAY) == 4


def test_days_until_rejects_malformed_dates():
    with pytest.raises(InvalidDateError):
        days_until("not-a-date", TODAY)
    with pytest.raises(InvalidDateError):
        days_until(None, TODAY)
    # a valid prefix does not make the whole string a date
    with pytest.raises(InvalidDateError):
        days_until("2024-06-05garbage", TODAY)
    with pytest.raises(InvalidDateError):
        days_until("2024-06-05 not a date", TODAY)
    # still a ValueError for callers that only catch that
    with pytest.raises(ValueError):
        days_until("2024-13-40", TODAY)


@pytest.mark.parametrize(
    "offset, expected",
    [
        (-5, Priority.HIGH),
        (0, Priority.HIGH),
        (7, Priority.HIGH),
        (8, Priority.MEDIUM),
        (14, Priority.MEDIUM),
        (15, Priority.LOW),
        (60, Priority.LOW),
    ],
)
def test_suggested_priority_tiers(offset, expected):
    assert suggested_priority(TODAY + timedelta(days=offset), TODAY) is expected


@pytest.mark.parametrize("offset", range(-3, 20))
def test_editable_matches_lock_threshold(offset):
    deadline = TODAY + timedelta(days=offset)
    assert is_priority_editable(deadline, TODAY) == (days_until(deadline, TODAY) >= 8)


@pytest.mark.parametrize("offset", [-10, 0, 1, 7])
@pytest.mark.parametrize("chosen", list(Priority))
def test_resolve_forces_high_inside_lock_window(offset, chosen):
    assert resolve_effective_priority(TODAY + timedelta(days=offset), chosen, TODAY) is Priority.HIGH


@pytest.mark.parametrize("offset", [8, 9, 30])
@pytest.mark.parametrize("chosen", list(Priority))
def test_resolve_keeps_choice_outside_lock_window(offset, chosen):
    assert resolve_effective_priority(TODAY + timedelta(days=offset), chosen, TODAY) is chosen


def test_resolve_accepts_plain_strings():
    assert resolve_effective_priority("2024-06-30", "Low", TODAY) is Priority.LOW


def test_suggestion_and_lock_thresholds_differ_by_one_day():
    # 8 days out: suggestion already drops to Medium, and the priority is editable
    deadline = date(2024, 6, 9)
    assert suggested_priority(deadline, TODAY) is Priority.MEDIUM
    assert is_priority_editable(deadline, TODAY)
    # 7 days out: suggestion is High and the priority is locked
    deadline = date(2024, 6, 8)
    assert suggested_priority(deadline, TODAY) is Priority.HIGH
    assert not is_priority_editable(deadline, TODAY)


def test_scenario_deadline_in_four_days():
    deadline = date(2024, 6, 5)
    assert days_until(deadline, TODAY) == 4
    assert suggested_priority(deadline, TODAY) is Priority.HIGH
    assert is_priority_editable(deadline, TODAY) is False
    assert resolve_effective_priority(deadline, Priority.LOW, TODAY) is Priority.HIGH


def test_scenario_deadline_in_nine_days():
    deadline = date(2024, 6, 10)
    assert days_until(deadline, TODAY) == 9
    assert is_priority_editable(deadline, TODAY) is True
    assert resolve_effective_priority(deadline, Priority.LOW, TODAY) is Priority.LOW


def test_sort_for_display_scenario():
    records = [
        {"name": "a", "priority": "High", "submission_date": "2024-07-01"},
        {"name": "b", "priority": "High", "submission_date": "2024-06-15"},
        {"name": "c", "priority": "Medium", "submission_date": "2024-06-01"},
    ]
    assert [r["name"] for r in sort_for_display(records)] == ["b", "a", "c"]
    # input is left untouched
    assert [r["name"] for r in records] == ["a", "b", "c"]


def test_sort_for_display_orders_tiers_then_dates():
    records = [
        {"priority": "Low", "submission_date": date(2024, 6, 2)},
        {"priority": "Medium", "submission_date": date(2024, 8, 1)},
        {"priority": "High", "submission_date": date(2024, 9, 1)},
        {"priority": "Medium", "submission_date": date(2024, 7, 1)},
        {"priority": "Low", "submission_date": date(2024, 6, 1)},
    ]
    ordered = sort_for_display(records)
    assert [(r["priority"], r["submission_date"].isoformat()) for r in ordered] == [
        ("High", "2024-09-01"),
        ("Medium", "2024-07-01"),
        ("Medium", "2024-08-01"),
        ("Low", "2024-06-01"),
        ("Low", "2024-06-02"),
    ]


def test_sort_for_display_is_stable_on_full_ties():
    records = [
        {"id": i, "priority": Priority.MEDIUM, "submission_date": date(2024, 6, 20)}
        for i in range(5)
    ]
    assert [r["id"] for r in sort_for_display(records)] == [0, 1, 2, 3, 4]


def test_compare_for_display_works_on_objects():
    class Record:
        def __init__(self, priority, submission_date):
            self.priority = priority
            self.submission_date = submission_date

    high = Record(Priority.HIGH, date(2024, 7, 1))
    low = Record(Priority.LOW, date(2024, 6, 2))
    assert compare_for_display(high, low) < 0
    assert compare_for_display(low, high) > 0
    assert compare_for_display(high, Record("High", "2024-07-01")) == 0


@pytest.mark.parametrize(
    "days, text",
    [(-3, "3 days overdue"), (0, "Due today"), (1, "1 day remaining"), (12, "12 days remaining")],
)
def test_days_until_text(days, text):
    assert days_until_text(days) == text


def test_format_date_for_display():
    assert format_date_for_display(date(2024, 6, 5)) == "Jun 5, 2024"
    assert format_date_for_display("2024-12-25") == "Dec 25, 2024"
