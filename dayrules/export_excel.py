"""Excel export helpers."""

from __future__ import annotations

from pathlib import Path

import pandas as pd
from openpyxl.utils import get_column_letter

from dayrules.domain import PositionalRule
from dayrules.labels import describe_rule, export_tag
from dayrules.report import REPORT_COLUMNS


def _auto_fit_columns(worksheet) -> None:
    for column_cells in worksheet.columns:
        values = [str(cell.value) if cell.value is not None else "" for cell in column_cells]
        max_length = max((len(value) for value in values), default=0)
        column_letter = get_column_letter(column_cells[0].column)
        worksheet.column_dimensions[column_letter].width = min(max_length + 2, 60)


def _apply_sheet_formatting(worksheet) -> None:
    worksheet.freeze_panes = "A2"
    worksheet.auto_filter.ref = worksheet.dimensions
    _auto_fit_columns(worksheet)


def _rule_rows(rule: PositionalRule) -> list[dict[str, object]]:
    if rule.day is not None:
        position = rule.day
    else:
        position = export_tag(rule.ordinal)
    return [
        {
            "description": describe_rule(rule),
            "position": position,
            "day_class": export_tag(rule.day_class),
        }
    ]


def export_occurrences_excel(
    path: str | Path,
    rule: PositionalRule,
    rows: list[dict[str, object]],
) -> None:
    output_path = Path(path)
    occurrences_df = pd.DataFrame(rows, columns=REPORT_COLUMNS)
    rule_df = pd.DataFrame(_rule_rows(rule))

    with pd.ExcelWriter(output_path, engine="openpyxl") as writer:
        occurrences_df.to_excel(writer, sheet_name="occurrences", index=False)
        rule_df.to_excel(writer, sheet_name="rule", index=False)

        for sheet_name in ("occurrences", "rule"):
            worksheet = writer.sheets[sheet_name]
            _apply_sheet_formatting(worksheet)
