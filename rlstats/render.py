"""Terminal rendering of reports."""

from __future__ import annotations

from typing import Iterable, Optional

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from rlstats.report.tables import EMPHASIS, HEADER, Report

TITLE_STYLE = "bold yellow"
ROW_STYLES = {HEADER: "bold yellow", EMPHASIS: "yellow"}

console = Console(highlight=False)
err_console = Console(stderr=True, highlight=False)


def build_table(report: Report) -> Table:
    table = Table(
        title=report.title,
        title_justify="left",
        title_style=TITLE_STYLE,
        box=box.SIMPLE,
        show_header=bool(report.columns),
        header_style=TITLE_STYLE,
        show_edge=False,
        pad_edge=False,
    )

    if report.columns:
        for title in report.columns:
            table.add_column(Text(title))
    else:
        for _ in range(report.width):
            table.add_column()

    if report.label_column and table.columns:
        table.columns[0].style = TITLE_STYLE

    # cells hold remote text such as player names; render it literally
    for r in report.rows:
        table.add_row(*(Text(str(cell)) for cell in r.cells), style=ROW_STYLES.get(r.tag))

    return table


def render_report(report: Report, out: Optional[Console] = None) -> None:
    (out or console).print(build_table(report))


def render_reports(reports: Iterable[Report], out: Optional[Console] = None) -> None:
    out = out or console
    for index, report in enumerate(reports):
        if index:
            out.print()
        render_report(report, out)
