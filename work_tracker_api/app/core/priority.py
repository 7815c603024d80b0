"""
Deadline‑driven priority rules for service records.

Every function in this module is pure: the reference date ``today`` is
always passed in explicitly so callers (and tests) decide what "now"
means.  Two thresholds are used and they are intentionally separate:

* the **suggestion** rule proposes ``High`` when at most 7 days remain,
  ``Medium`` up to 14 days and ``Low`` otherwise;
* the **forcing** rule locks the stored priority to ``High`` when fewer
  than 8 days remain.

Dates may be given as ``date``, ``datetime`` (the time of day is
dropped) or ISO strings.  Anything else raises ``InvalidDateError``.
"""

from __future__ import annotations

from datetime import date, datetime
from enum import Enum
from functools import cmp_to_key
from typing import Any, Iterable, List, Union


class Priority(str, Enum):
    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"


# Suggested tiers (inclusive upper bounds in days).
SUGGEST_HIGH_MAX_DAYS = 7
SUGGEST_MEDIUM_MAX_DAYS = 14

# Fewer days than this forces High and disables manual selection.
PRIORITY_LOCK_DAYS = 8

PRIORITY_RANK = {
    Priority.HIGH: 3,
    Priority.MEDIUM: 2,
    Priority.LOW: 1,
}

DateLike = Union[date, datetime, str]


class InvalidDateError(ValueError):
    """Raised when a value cannot be interpreted as a calendar date."""


def to_date(value: DateLike) -> date:
    """Normalise ``value`` to a calendar date."""
    # datetime is a subclass of date, so it has to be checked first
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        text = value.strip()
        try:
            return datetime.fromisoformat(text).date()
        except ValueError as exc:
            raise InvalidDateError(f"Invalid date: {value!r}") from exc
    raise InvalidDateError(f"Invalid date: {value!r}")


def days_until(submission_date: DateLike, today: DateLike) -> int:
    """Return the number of whole days from ``today`` to ``submission_date``.

    Negative when the deadline has passed, zero when it is due today.
    """
    return (to_date(submission_date) - to_date(today)).days


def suggested_priority(submission_date: DateLike, today: DateLike) -> Priority:
    """Propose a priority tier for a new deadline."""
    days = days_until(submission_date, today)
    if days <= SUGGEST_HIGH_MAX_DAYS:
        return Priority.HIGH
    if days <= SUGGEST_MEDIUM_MAX_DAYS:
        return Priority.MEDIUM
    return Priority.LOW


def is_priority_editable(submission_date: DateLike, today: DateLike) -> bool:
    """Whether a user may choose the priority of a record due on ``submission_date``."""
    return days_until(submission_date, today) >= PRIORITY_LOCK_DAYS


def resolve_effective_priority(
    submission_date: DateLike,
    chosen_priority: Union[Priority, str],
    today: DateLike,
) -> Priority:
    """Apply the forcing rule to a user‑chosen priority.

    Returns ``High`` when fewer than ``PRIORITY_LOCK_DAYS`` days remain,
    otherwise the chosen priority unchanged.  This must be applied on
    every create and on every edit that touches the date or priority.
    """
    if not is_priority_editable(submission_date, today):
        return Priority.HIGH
    return Priority(chosen_priority)


def _field(record: Any, name: str) -> Any:
    if isinstance(record, dict):
        return record[name]
    return getattr(record, name)


def compare_for_display(a: Any, b: Any) -> int:
    """Order two records for the dashboard.

    Higher priority first, then the earliest ``submission_date``.
    Records may be objects with ``priority``/``submission_date``
    attributes or mappings with the same keys.
    """
    rank_diff = PRIORITY_RANK[Priority(_field(b, "priority"))] - PRIORITY_RANK[Priority(_field(a, "priority"))]
    if rank_diff:
        return rank_diff
    date_a = to_date(_field(a, "submission_date"))
    date_b = to_date(_field(b, "submission_date"))
    return (date_a > date_b) - (date_a < date_b)


def sort_for_display(records: Iterable[Any]) -> List[Any]:
    """Return a new list ordered by ``compare_for_display``.

    ``sorted`` is stable, so records that tie on both keys keep their
    input order.
    """
    return sorted(records, key=cmp_to_key(compare_for_display))


def days_until_text(days: int) -> str:
    """Human readable remaining time, e.g. ``"3 days overdue"``."""
    if days < 0:
        return f"{abs(days)} days overdue"
    if days == 0:
        return "Due today"
    if days == 1:
        return "1 day remaining"
    return f"{days} days remaining"


def format_date_for_display(value: DateLike) -> str:
    """Format a date like ``"Jun 5, 2024"``."""
    d = to_date(value)
    return f"{d.strftime('%b')} {d.day}, {d.year}"
