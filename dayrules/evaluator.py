"""Rule computation and evaluation."""

from __future__ import annotations

from datetime import date
from typing import Any

from dayrules.anchors import first_of_month, first_of_next_month, in_same_month, last_of_month
from dayrules.calendar_value import CalendarValue, add_days, coerce_calendar_value, same_day
from dayrules.domain import DayClass, InvalidRule, OutOfMonthResult, PositionalRule, normalize_month
from dayrules.walker import last_occurrence, nth_occurrence


def _target(day: CalendarValue, rule: PositionalRule) -> CalendarValue:
    if rule.day is not None:
        return add_days(first_of_month(day), rule.day - 1)
    if rule.day_class == DayClass.ANY_DAY:
        if rule.is_last:
            return last_of_month(day)
        return add_days(first_of_month(day), rule.ordinal.n - 1)
    if rule.is_last:
        return last_occurrence(day, rule.day_class)
    return nth_occurrence(day, rule.day_class, rule.ordinal)


def compute(day: CalendarValue, rule: PositionalRule) -> CalendarValue:
    """Return the date in ``day``'s month that satisfies ``rule``.

    Raises ``OutOfMonthResult`` when the rule has no date in that month, for
    example day 31 of a 30-day month.
    """
    if not isinstance(rule, PositionalRule):
        raise InvalidRule(f"Expected a PositionalRule, got {type(rule).__name__}")
    day = coerce_calendar_value(day)
    target = _target(day, rule)
    if not in_same_month(target, day):
        raise OutOfMonthResult(day, target, rule)
    return target


evaluate_rule = compute


def try_compute(day: CalendarValue, rule: PositionalRule) -> CalendarValue | None:
    try:
        return compute(day, rule)
    except OutOfMonthResult:
        return None


def is_satisfied_by(day: date, rule: PositionalRule) -> bool:
    day = coerce_calendar_value(day)
    target = try_compute(day, rule)
    return target is not None and same_day(day, target)


rule_satisfied = is_satisfied_by


def satisfying_dates(day: CalendarValue, rule: PositionalRule) -> list[CalendarValue]:
    """Dates of ``day``'s month satisfying ``rule``; never more than one."""
    target = try_compute(day, rule)
    return [] if target is None else [target]


def occurrences(start: CalendarValue, rule: PositionalRule, months: int) -> list[CalendarValue]:
    """The rule's date in each of ``months`` consecutive months from ``start``.

    Months in which the rule does not apply are left out.
    """
    if months < 1:
        raise ValueError(f"months must be positive, got {months}")
    start = coerce_calendar_value(start)
    result: list[CalendarValue] = []
    for offset in range(months):
        anchor = first_of_next_month(start, offset)
        target = try_compute(anchor, rule)
        if target is not None:
            result.append(target)
    return result


def month_matches(day: date, month: Any) -> bool:
    return coerce_calendar_value(day).month == normalize_month(month)
