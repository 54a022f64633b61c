"""Month and week anchors."""

from __future__ import annotations

from datetime import date

from dayrules.calendar_value import CalendarValue, add_days, add_months, coerce_calendar_value
from dayrules.classifier import is_weekday, is_weekend
from dayrules.domain import DayOfWeek


def first_of_month(day: CalendarValue) -> CalendarValue:
    day = coerce_calendar_value(day)
    return add_days(day, 1 - day.day)


def first_of_next_month(day: CalendarValue, months: int = 1) -> CalendarValue:
    return first_of_month(add_months(first_of_month(day), months))


def last_of_month(day: CalendarValue) -> CalendarValue:
    day = coerce_calendar_value(day)
    return add_days(first_of_next_month(day), -1)


def in_same_month(left: date, right: date) -> bool:
    return (left.year, left.month) == (right.year, right.month)


def month_days(day: CalendarValue) -> list[CalendarValue]:
    first = first_of_month(day)
    next_month = first_of_next_month(day)
    days: list[CalendarValue] = []
    current = first
    while current < next_month:
        days.append(current)
        current = add_days(current, 1)
    return days


def last_day_of_week(first_day_of_week: int) -> DayOfWeek:
    return DayOfWeek((first_day_of_week + 6) % 7)


def is_first_day_of_week(day: date, first_day_of_week: int = DayOfWeek.MONDAY) -> bool:
    return day.weekday() == first_day_of_week


def is_last_day_of_week(day: date, first_day_of_week: int = DayOfWeek.MONDAY) -> bool:
    return day.weekday() == last_day_of_week(first_day_of_week)


def first_of_week(day: CalendarValue, first_day_of_week: int = DayOfWeek.MONDAY) -> CalendarValue:
    """Start of the week containing ``day`` for weeks beginning on ``first_day_of_week``."""
    delta = (day.weekday() - first_day_of_week) % 7
    return add_days(day, -delta)


def last_of_week(day: CalendarValue, first_day_of_week: int = DayOfWeek.MONDAY) -> CalendarValue:
    return add_days(first_of_week(day, first_day_of_week), 6)


def next_weekday(day: CalendarValue) -> CalendarValue:
    current = add_days(day, 1)
    while not is_weekday(current):
        current = add_days(current, 1)
    return current


def next_weekend_day(day: CalendarValue) -> CalendarValue:
    current = add_days(day, 1)
    while not is_weekend(current):
        current = add_days(current, 1)
    return current
