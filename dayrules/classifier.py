"""Day-class membership for calendar values."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import date

from dayrules.domain import DayClass, DayOfWeek

WEEKEND = (DayOfWeek.SATURDAY, DayOfWeek.SUNDAY)


def is_weekend(day: date) -> bool:
    return within(day, WEEKEND)


def is_weekday(day: date) -> bool:
    return not is_weekend(day)


def within(day: date, weekdays: Iterable[int]) -> bool:
    return day.weekday() in set(weekdays)


def matches(day: date, day_class: DayClass) -> bool:
    if day_class == DayClass.ANY_DAY:
        return True
    if day_class == DayClass.WEEKDAY:
        return is_weekday(day)
    if day_class == DayClass.WEEKEND_DAY:
        return is_weekend(day)
    return day.weekday() == day_class.weekday


def day_classes_of(day: date) -> frozenset[DayClass]:
    """Every day class the date belongs to."""
    group = DayClass.WEEKEND_DAY if is_weekend(day) else DayClass.WEEKDAY
    return frozenset({DayClass.ANY_DAY, DayClass.for_weekday(day.weekday()), group})
