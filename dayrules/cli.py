"""CLI for computing positional day rules."""

from __future__ import annotations

import argparse
from datetime import date
from pathlib import Path

import pandas as pd

from dayrules.domain import (
    DayClass,
    DayOfWeek,
    InvalidRule,
    Ordinal,
    PositionalRule,
    RuleError,
    Settings,
    normalize_day_class,
)
from dayrules.evaluator import is_satisfied_by
from dayrules.export_excel import export_occurrences_excel
from dayrules.labels import describe_rule
from dayrules.report import occurrence_rows, parse_month


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Positional day rule calculator")
    position = parser.add_mutually_exclusive_group(required=True)
    position.add_argument(
        "--ordinal",
        choices=[ordinal.value for ordinal in Ordinal],
        help="Ordinal position within the month",
    )
    position.add_argument("--day", type=int, help="Day of month (1-31), only with --day-class day")
    parser.add_argument(
        "--day-class",
        default=DayClass.ANY_DAY.value,
        help="Weekday name, 'day', 'weekday' or 'weekend_day' (default: day)",
    )
    parser.add_argument("--from", dest="start", help="First month in YYYY-MM format")
    parser.add_argument("--months", type=int, default=12, help="Number of months to list")
    parser.add_argument("--check", help="Check whether a date (YYYY-MM-DD) satisfies the rule")
    parser.add_argument(
        "--week-start",
        choices=[weekday.name.lower() for weekday in DayOfWeek],
        default=DayOfWeek.MONDAY.name.lower(),
        help="First day of the week for the week_of column (default: monday)",
    )
    parser.add_argument(
        "--skip-out-of-month",
        action="store_true",
        help="List months where the rule does not apply instead of failing",
    )
    parser.add_argument("--out", help="Path to output Excel file")
    return parser.parse_args(argv)


def _render_table(rows: list[dict[str, object]]) -> str:
    if not rows:
        return "(no rows)"
    return pd.DataFrame(rows).to_string(index=False)


def _build_rule_or_exit(args: argparse.Namespace) -> PositionalRule:
    try:
        day_class = normalize_day_class(args.day_class)
    except InvalidRule as exc:
        raise SystemExit(f"ERROR: unknown day class: {args.day_class!r}") from exc
    try:
        if args.day is not None:
            return PositionalRule(day=args.day, day_class=day_class)
        return PositionalRule(ordinal=args.ordinal, day_class=day_class)
    except RuleError as exc:
        print(f"ERROR: {exc}")
        raise SystemExit(1) from exc


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    rule = _build_rule_or_exit(args)
    print(f"Rule: {describe_rule(rule)}")

    if args.check:
        try:
            checked = date.fromisoformat(args.check)
        except ValueError as exc:
            raise SystemExit(f"ERROR: invalid date (YYYY-MM-DD): {args.check!r}") from exc
        verdict = "yes" if is_satisfied_by(checked, rule) else "no"
        print(f"{checked.isoformat()}: {verdict}")
        if not args.start:
            return

    settings = Settings(
        first_day_of_week=DayOfWeek[args.week_start.upper()],
        out_of_month="skip" if args.skip_out_of_month else "raise",
    )
    try:
        start = parse_month(args.start) if args.start else date.today().replace(day=1)
        rows = occurrence_rows(rule, start, args.months, settings)
    except (RuleError, ValueError) as exc:
        print(f"ERROR: {exc}")
        raise SystemExit(1) from exc
    print(_render_table(rows))

    if args.out:
        export_occurrences_excel(Path(args.out), rule, rows)
        print(f"OK: {args.out}")


if __name__ == "__main__":
    main()
