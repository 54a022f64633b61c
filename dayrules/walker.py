"""Ordinal walks over the days of a month.

Forward walks start at the first of the month and stop on the first day that
belongs to the requested class. Later occurrences of a specific weekday are a
fixed seven days apart; the weekday and weekend-day groups are not evenly
spaced, so those (and ``ANY_DAY``) step day by day to the next member.

Backward walks start at the last of the month. The walker does not check
whether an occurrence stays inside the month, that is left to the evaluator.
"""

from __future__ import annotations

from typing import Any

from dayrules.anchors import first_of_month, last_of_month
from dayrules.calendar_value import CalendarValue, add_days
from dayrules.classifier import matches
from dayrules.domain import DayClass, InvalidRule, Ordinal, normalize_day_class, normalize_ordinal

# every class has a member in any 7 consecutive days
_MAX_STEPS = 7


def _walk(day: CalendarValue, day_class: DayClass, step: int) -> CalendarValue:
    current = day
    for _ in range(_MAX_STEPS):
        if matches(current, day_class):
            return current
        current = add_days(current, step)
    raise RuntimeError(f"No {day_class.value!r} within {_MAX_STEPS} days of {day!r}")


def _occurrence_number(n: Any) -> int:
    ordinal = normalize_ordinal(n)
    if ordinal.n is None:
        raise InvalidRule("Use last_occurrence for the last position")
    return ordinal.n


def first_occurrence(day: CalendarValue, day_class: Any) -> CalendarValue:
    return _walk(first_of_month(day), normalize_day_class(day_class), 1)


def next_occurrence(day: CalendarValue, day_class: Any) -> CalendarValue:
    """The next member of ``day_class`` strictly after ``day``."""
    day_class = normalize_day_class(day_class)
    if day_class.is_specific_weekday and day.weekday() == day_class.weekday:
        return add_days(day, 7)
    return _walk(add_days(day, 1), day_class, 1)


def nth_occurrence(day: CalendarValue, day_class: Any, n: int | Ordinal) -> CalendarValue:
    """The ``n``-th (1-4) member of ``day_class`` in the month containing ``day``."""
    number = _occurrence_number(n)
    day_class = normalize_day_class(day_class)
    current = first_occurrence(day, day_class)
    if day_class.is_specific_weekday:
        return add_days(current, 7 * (number - 1))
    for _ in range(number - 1):
        current = next_occurrence(current, day_class)
    return current


def last_occurrence(day: CalendarValue, day_class: Any) -> CalendarValue:
    return _walk(last_of_month(day), normalize_day_class(day_class), -1)
