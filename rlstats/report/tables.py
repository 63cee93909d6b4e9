"""Structured report rows handed to the renderer and exporters."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence, Tuple

# Row tags understood by the renderer.
HEADER = "header"
EMPHASIS = "emphasis"


@dataclass(frozen=True)
class Row:
    """One table row: display cells plus an optional tag ("header"/"emphasis")."""
    cells: Tuple[Any, ...]
    tag: Optional[str] = None

    def __len__(self) -> int:
        return len(self.cells)

    def __iter__(self):
        return iter(self.cells)

    def __getitem__(self, index):
        return self.cells[index]


def row(*cells: Any, tag: Optional[str] = None) -> Row:
    return Row(tuple(cells), tag)


@dataclass(frozen=True)
class Report:
    """A titled table.

    Attributes:
        title: Name of the report section
        columns: Column titles; empty when the table has no header line
        rows: Body rows in display order
        label_column: True when the first column holds row labels
    """
    title: str
    columns: Tuple[str, ...] = ()
    rows: Tuple[Row, ...] = field(default_factory=tuple)
    label_column: bool = False

    @property
    def width(self) -> int:
        if self.columns:
            return len(self.columns)
        return max((len(r) for r in self.rows), default=0)

    def values(self) -> List[List[Any]]:
        """Body rows as plain lists of cell values."""
        return [list(r.cells) for r in self.rows]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "title": self.title,
            "columns": list(self.columns),
            "rows": [{"cells": list(r.cells), "tag": r.tag} for r in self.rows],
        }


def make_report(
    title: str,
    columns: Sequence[str],
    rows: Sequence[Row],
    label_column: bool = False,
) -> Report:
    return Report(title=title, columns=tuple(columns), rows=tuple(rows), label_column=label_column)
