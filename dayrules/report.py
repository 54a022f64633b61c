"""Reporting helpers."""

from __future__ import annotations

import warnings
from datetime import date

from dayrules.anchors import first_of_next_month, first_of_week
from dayrules.calendar_value import day_of_week
from dayrules.domain import OutOfMonthResult, PositionalRule, Settings
from dayrules.evaluator import compute
from dayrules.labels import describe_rule, label

REPORT_COLUMNS = ["month", "date", "weekday", "week_of", "rule"]


def parse_month(ym: str) -> date:
    """Parse ``YYYY-MM`` into the first day of that month."""
    try:
        year_str, month_str = str(ym).strip().split("-", 1)
        return date(int(year_str), int(month_str), 1)
    except ValueError as exc:
        raise ValueError(f"Invalid month (YYYY-MM): {ym!r}") from exc


def occurrence_rows(
    rule: PositionalRule,
    start_month: str | date,
    months: int,
    settings: Settings | None = None,
) -> list[dict[str, object]]:
    """One row per month; ``week_of`` is the start of the target's week
    under ``settings.first_day_of_week``."""
    if settings is None:
        settings = Settings()
    if months < 1:
        raise ValueError(f"months must be positive, got {months}")

    start = parse_month(start_month) if isinstance(start_month, str) else start_month
    description = describe_rule(rule)
    rows: list[dict[str, object]] = []
    skipped: list[str] = []
    for offset in range(months):
        anchor = first_of_next_month(start, offset)
        month_key = f"{anchor.year:04d}-{anchor.month:02d}"
        try:
            target = compute(anchor, rule)
        except OutOfMonthResult:
            if settings.out_of_month == "raise":
                raise
            skipped.append(month_key)
            rows.append(
                {"month": month_key, "date": None, "weekday": "", "week_of": None, "rule": description}
            )
            continue
        rows.append(
            {
                "month": month_key,
                "date": target,
                "weekday": label(day_of_week(target)),
                "week_of": first_of_week(target, settings.first_day_of_week),
                "rule": description,
            }
        )

    if skipped:
        warnings.warn(
            f"Rule {description!r} does not apply in: {', '.join(skipped)}",
            UserWarning,
        )
    return rows
