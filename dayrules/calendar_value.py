"""Calendar value helpers shared by the rule algorithms.

Every algorithm in the package is written once against ``datetime.date``.
``datetime`` is a ``date`` subclass, so naive and offset-aware datetimes go
through the same code; the helpers here keep the input's concrete type,
time-of-day and ``tzinfo`` on every derived value.
"""

from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import Any, TypeVar

from dateutil.relativedelta import relativedelta

from dayrules.domain import DayOfWeek

CalendarValue = TypeVar("CalendarValue", bound=date)


def coerce_calendar_value(value: Any) -> date:
    """Return ``value`` as a ``date``/``datetime``; pandas Timestamps are unwrapped."""
    if isinstance(value, datetime) and hasattr(value, "to_pydatetime"):
        return value.to_pydatetime()
    if isinstance(value, date):
        return value
    raise TypeError(f"Unsupported type for calendar value: {type(value)}")


def add_days(value: CalendarValue, days: int) -> CalendarValue:
    return value + timedelta(days=days)


def add_months(value: CalendarValue, months: int) -> CalendarValue:
    # relativedelta clamps to the target month's last day
    return value + relativedelta(months=months)


def day_of_week(value: date) -> DayOfWeek:
    return DayOfWeek(value.weekday())


def calendar_day(value: date) -> date:
    """Strip time-of-day and offset, keeping only the calendar date."""
    return date(value.year, value.month, value.day)


def same_day(left: date, right: date) -> bool:
    return calendar_day(left) == calendar_day(right)
