"""Excel export of report tables."""

from pathlib import Path
from typing import Iterable, List

import pandas as pd
from openpyxl.utils import get_column_letter

from rlstats.report.tables import Report

# Excel refuses sheet names longer than this or containing these characters.
MAX_SHEET_NAME = 31
INVALID_SHEET_CHARS = set('[]:*?/\\')


def _write_sheet(writer, dataframe: pd.DataFrame, sheet_name: str) -> None:
    """Write DataFrame to Excel sheet with formatting.

    Args:
        writer: pandas ExcelWriter object
        dataframe: DataFrame to write
        sheet_name: Name of Excel sheet
    """
    if dataframe is None or dataframe.empty:
        pd.DataFrame().to_excel(writer, sheet_name=sheet_name, index=False)
        return

    dataframe.to_excel(writer, sheet_name=sheet_name, index=False)
    worksheet = writer.sheets[sheet_name]

    # Set up auto-filter and freeze panes
    worksheet.auto_filter.ref = worksheet.dimensions
    worksheet.freeze_panes = "A2"

    # Auto-size columns with reasonable limits
    for column_index, column_name in enumerate(dataframe.columns, start=1):
        values = [str(column_name)] + dataframe.iloc[:, column_index - 1].astype(str).tolist()
        max_length = max(len(value) for value in values) if values else 10
        column_width = min(max(10, max_length + 2), 60)
        worksheet.column_dimensions[get_column_letter(column_index)].width = column_width


def _sheet_name(title: str, used: List[str]) -> str:
    name = "".join("_" if ch in INVALID_SHEET_CHARS else ch for ch in title)[:MAX_SHEET_NAME] or "Sheet"
    candidate, suffix = name, 2
    while candidate in used:
        tail = f" ({suffix})"
        candidate = name[:MAX_SHEET_NAME - len(tail)] + tail
        suffix += 1
    used.append(candidate)
    return candidate


def report_to_dataframe(report: Report) -> pd.DataFrame:
    """Convert a report into a DataFrame; untitled columns get positional names."""
    columns = list(report.columns) or [f"Column {i + 1}" for i in range(report.width)]
    # blank titles (the search position column) would collide
    columns = [title or f"Column {i + 1}" for i, title in enumerate(columns)]
    return pd.DataFrame(report.values(), columns=columns)


def reports_to_excel(reports: Iterable[Report], excel_path: Path) -> None:
    """Export reports to an Excel workbook, one sheet per report.

    Args:
        reports: Reports in sheet order
        excel_path: Destination Excel file path
    """
    # Ensure output directory exists
    excel_path.parent.mkdir(parents=True, exist_ok=True)

    used: List[str] = []
    with pd.ExcelWriter(excel_path, engine="openpyxl") as writer:
        for report in reports:
            _write_sheet(writer, report_to_dataframe(report), _sheet_name(report.title, used))
