"""Rule models for positional day-of-month rules."""

from __future__ import annotations

from datetime import date
from enum import Enum, IntEnum
from typing import Any, Literal

from pydantic import BaseModel, field_validator, model_validator


class RuleError(Exception):
    """Base class for rule construction and evaluation failures."""


class InvalidRule(RuleError):
    pass


class OutOfMonthResult(RuleError):
    """A computed date fell outside the month it was anchored on."""

    def __init__(self, anchor: date, result: date, rule: Any = None) -> None:
        super().__init__(
            f"Rule {rule!r} yields {result.isoformat()} outside month "
            f"{anchor.year:04d}-{anchor.month:02d}"
        )
        self.anchor = anchor
        self.result = result
        self.rule = rule


class DayOfWeek(IntEnum):
    MONDAY = 0
    TUESDAY = 1
    WEDNESDAY = 2
    THURSDAY = 3
    FRIDAY = 4
    SATURDAY = 5
    SUNDAY = 6


class DayClass(str, Enum):
    MONDAY = "monday"
    TUESDAY = "tuesday"
    WEDNESDAY = "wednesday"
    THURSDAY = "thursday"
    FRIDAY = "friday"
    SATURDAY = "saturday"
    SUNDAY = "sunday"
    ANY_DAY = "day"
    WEEKDAY = "weekday"
    WEEKEND_DAY = "weekend_day"

    @property
    def weekday(self) -> DayOfWeek | None:
        """The specific weekday for weekday members, None for the group classes."""
        return _WEEKDAY_BY_CLASS.get(self)

    @property
    def is_specific_weekday(self) -> bool:
        return self in _WEEKDAY_BY_CLASS

    @classmethod
    def for_weekday(cls, weekday: int) -> "DayClass":
        return _CLASS_BY_WEEKDAY[DayOfWeek(weekday)]


_WEEKDAY_BY_CLASS = {
    DayClass.MONDAY: DayOfWeek.MONDAY,
    DayClass.TUESDAY: DayOfWeek.TUESDAY,
    DayClass.WEDNESDAY: DayOfWeek.WEDNESDAY,
    DayClass.THURSDAY: DayOfWeek.THURSDAY,
    DayClass.FRIDAY: DayOfWeek.FRIDAY,
    DayClass.SATURDAY: DayOfWeek.SATURDAY,
    DayClass.SUNDAY: DayOfWeek.SUNDAY,
}
_CLASS_BY_WEEKDAY = {weekday: day_class for day_class, weekday in _WEEKDAY_BY_CLASS.items()}


class Ordinal(str, Enum):
    FIRST = "first"
    SECOND = "second"
    THIRD = "third"
    FOURTH = "fourth"
    LAST = "last"

    @property
    def n(self) -> int | None:
        return _ORDINAL_NUMBERS.get(self)


_ORDINAL_NUMBERS = {
    Ordinal.FIRST: 1,
    Ordinal.SECOND: 2,
    Ordinal.THIRD: 3,
    Ordinal.FOURTH: 4,
}


class MonthOfYear(IntEnum):
    JANUARY = 1
    FEBRUARY = 2
    MARCH = 3
    APRIL = 4
    MAY = 5
    JUNE = 6
    JULY = 7
    AUGUST = 8
    SEPTEMBER = 9
    OCTOBER = 10
    NOVEMBER = 11
    DECEMBER = 12


def normalize_ordinal(value: Any) -> Ordinal:
    """Accept an Ordinal, its name/value, or a number 1-4."""
    if isinstance(value, Ordinal):
        return value
    if isinstance(value, bool) or value is None:
        raise InvalidRule(f"Invalid ordinal position: {value!r}")
    if isinstance(value, int):
        for ordinal, number in _ORDINAL_NUMBERS.items():
            if number == value:
                return ordinal
        raise InvalidRule(f"Ordinal position must be 1-4 or last, got {value!r}")
    text = str(value).strip().casefold().replace("-", "_")
    for ordinal in Ordinal:
        if text in {ordinal.value, ordinal.name.casefold()}:
            return ordinal
    if text.isdigit():
        return normalize_ordinal(int(text))
    raise InvalidRule(f"Invalid ordinal position: {value!r}")


def normalize_day_class(value: Any) -> DayClass:
    if isinstance(value, DayClass):
        return value
    if isinstance(value, DayOfWeek):
        return DayClass.for_weekday(value)
    if value is None:
        raise InvalidRule("Day class is required")
    text = str(value).strip().casefold().replace("-", "_").replace(" ", "_")
    aliases = {
        "any_day": DayClass.ANY_DAY,
        "anyday": DayClass.ANY_DAY,
        "any_weekday": DayClass.WEEKDAY,
        "weekend": DayClass.WEEKEND_DAY,
        "weekendday": DayClass.WEEKEND_DAY,
        "any_weekend_day": DayClass.WEEKEND_DAY,
    }
    if text in aliases:
        return aliases[text]
    for day_class in DayClass:
        if text in {day_class.value, day_class.name.casefold()}:
            return day_class
    raise InvalidRule(f"Invalid day class: {value!r}")


def normalize_month(value: Any) -> MonthOfYear:
    if isinstance(value, MonthOfYear):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        if 1 <= value <= 12:
            return MonthOfYear(value)
        raise InvalidRule(f"Month must be 1-12, got {value!r}")
    text = str(value).strip().upper()
    if text in MonthOfYear.__members__:
        return MonthOfYear[text]
    raise InvalidRule(f"Invalid month: {value!r}")


class PositionalRule(BaseModel):
    """An (ordinal position or day-of-month, day class) pair.

    Exactly one of ``ordinal`` and ``day`` is set. A raw ``day`` is only
    meaningful for ``DayClass.ANY_DAY``.
    """

    ordinal: Ordinal | None = None
    day: int | None = None
    day_class: DayClass = DayClass.ANY_DAY

    model_config = {
        "frozen": True,
    }

    @classmethod
    def nth(cls, n: Any, day_class: Any = DayClass.ANY_DAY) -> "PositionalRule":
        return cls(ordinal=n, day_class=day_class)

    @classmethod
    def last(cls, day_class: Any = DayClass.ANY_DAY) -> "PositionalRule":
        return cls(ordinal=Ordinal.LAST, day_class=day_class)

    @classmethod
    def day_of_month(cls, day: int) -> "PositionalRule":
        return cls(day=day)

    @field_validator("ordinal", mode="before")
    @classmethod
    def _normalize_ordinal(cls, value: Any) -> Ordinal | None:
        if value is None:
            return None
        return normalize_ordinal(value)

    @field_validator("day_class", mode="before")
    @classmethod
    def _normalize_day_class(cls, value: Any) -> DayClass:
        return normalize_day_class(value)

    @field_validator("day")
    @classmethod
    def _check_day_range(cls, value: int | None) -> int | None:
        if value is not None and not 1 <= value <= 31:
            raise InvalidRule(f"Day of month must be 1-31, got {value}")
        return value

    @model_validator(mode="after")
    def _validate_combination(self) -> "PositionalRule":
        if self.ordinal is None and self.day is None:
            raise InvalidRule("Rule needs an ordinal position or a day of month")
        if self.ordinal is not None and self.day is not None:
            raise InvalidRule("Rule cannot have both an ordinal position and a day of month")
        if self.day is not None and self.day_class != DayClass.ANY_DAY:
            raise InvalidRule(
                f"Day of month {self.day} cannot be combined with {self.day_class.value!r}"
            )
        return self

    @property
    def is_last(self) -> bool:
        return self.ordinal == Ordinal.LAST


class Settings(BaseModel):
    first_day_of_week: DayOfWeek = DayOfWeek.MONDAY
    out_of_month: Literal["raise", "skip"] = "raise"
