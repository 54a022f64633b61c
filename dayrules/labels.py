"""Human-readable labels and export tags for rule values."""

from __future__ import annotations

from enum import Enum
from typing import TypeVar

from dayrules.domain import DayClass, DayOfWeek, MonthOfYear, Ordinal, PositionalRule

E = TypeVar("E", bound=Enum)

DAY_NUMBER_LABELS = {
    1: "First",
    2: "Second",
    3: "Third",
    4: "Fourth",
    5: "Fifth",
    6: "Sixth",
    7: "Seventh",
    8: "Eighth",
    9: "Ninth",
    10: "Tenth",
    11: "Eleventh",
    12: "Twelfth",
    13: "Thirteenth",
    14: "Fourteenth",
    15: "Fifteenth",
    16: "Sixteenth",
    17: "Seventeenth",
    18: "Eighteenth",
    19: "Nineteenth",
    20: "Twentieth",
    21: "Twenty-first",
    22: "Twenty-second",
    23: "Twenty-third",
    24: "Twenty-fourth",
    25: "Twenty-fifth",
    26: "Twenty-sixth",
    27: "Twenty-seventh",
    28: "Twenty-eighth",
    29: "Twenty-ninth",
    30: "Thirtieth",
    31: "Thirty-first",
}

DAY_CLASS_LABELS = {
    DayClass.MONDAY: "Monday",
    DayClass.TUESDAY: "Tuesday",
    DayClass.WEDNESDAY: "Wednesday",
    DayClass.THURSDAY: "Thursday",
    DayClass.FRIDAY: "Friday",
    DayClass.SATURDAY: "Saturday",
    DayClass.SUNDAY: "Sunday",
    DayClass.ANY_DAY: "Day",
    DayClass.WEEKDAY: "Weekday",
    DayClass.WEEKEND_DAY: "Weekend day",
}

ORDINAL_LABELS = {
    Ordinal.FIRST: "First",
    Ordinal.SECOND: "Second",
    Ordinal.THIRD: "Third",
    Ordinal.FOURTH: "Fourth",
    Ordinal.LAST: "Last",
}

WEEKDAY_LABELS = {
    DayOfWeek.MONDAY: "Monday",
    DayOfWeek.TUESDAY: "Tuesday",
    DayOfWeek.WEDNESDAY: "Wednesday",
    DayOfWeek.THURSDAY: "Thursday",
    DayOfWeek.FRIDAY: "Friday",
    DayOfWeek.SATURDAY: "Saturday",
    DayOfWeek.SUNDAY: "Sunday",
}

MONTH_LABELS = {
    MonthOfYear.JANUARY: "January",
    MonthOfYear.FEBRUARY: "February",
    MonthOfYear.MARCH: "March",
    MonthOfYear.APRIL: "April",
    MonthOfYear.MAY: "May",
    MonthOfYear.JUNE: "June",
    MonthOfYear.JULY: "July",
    MonthOfYear.AUGUST: "August",
    MonthOfYear.SEPTEMBER: "September",
    MonthOfYear.OCTOBER: "October",
    MonthOfYear.NOVEMBER: "November",
    MonthOfYear.DECEMBER: "December",
}

# one table per enum: IntEnum members of different enums compare equal
_LABEL_TABLES: dict[type[Enum], dict] = {
    DayClass: DAY_CLASS_LABELS,
    Ordinal: ORDINAL_LABELS,
    DayOfWeek: WEEKDAY_LABELS,
    MonthOfYear: MONTH_LABELS,
}

# export tags equal the label except where the label contains a space
_EXPORT_TAG_OVERRIDES = {
    DayClass.WEEKEND_DAY: "WeekendDay",
}


def label(member: Enum) -> str:
    return _LABEL_TABLES[type(member)][member]


def export_tag(member: Enum) -> str:
    if isinstance(member, DayClass) and member in _EXPORT_TAG_OVERRIDES:
        return _EXPORT_TAG_OVERRIDES[member]
    return label(member)


def day_number_label(day: int) -> str:
    return DAY_NUMBER_LABELS[day]


def describe_rule(rule: PositionalRule) -> str:
    """E.g. ``Fourth Thursday``, ``Last Weekday`` or ``Fifteenth Day``."""
    if rule.day is not None:
        position = day_number_label(rule.day)
    else:
        position = label(rule.ordinal)
    return f"{position} {label(rule.day_class)}"


def from_label(enum_type: type[E], text: str) -> E:
    """Reverse lookup by label, export tag, member value or member name."""
    wanted = str(text).strip().casefold()
    for member in enum_type:
        candidates = {
            member.name.casefold(),
            str(member.value).casefold(),
            label(member).casefold(),
            export_tag(member).casefold(),
        }
        if wanted in candidates:
            return member
    raise KeyError(f"No {enum_type.__name__} labelled {text!r}")
