"""
report.py
=========

Does: Snapshot a finished tally into a ColorReport and render it as the
      "CSS Color Value Inventory" summary plus a table sorted by occurrences.
Returns: ColorReport, format_report() -> str, report_to_dict() -> dict,
         print_report() -> None (stdout by default).
Used By: Orchestrator (build), CLI (print / --json).
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, TextIO, Tuple

from css_color_inventory.inventory.aggregate import ColorTally

__all__ = [
    "ColorReport",
    "format_report",
    "format_table",
    "report_to_dict",
    "print_report",
]

TITLE = "CSS Color Value Inventory"
COLUMNS = ("(index)", "Color Values", "Occurrences")


@dataclass(frozen=True)
class ColorReport:
    file_count: int
    counts: Mapping[str, int]

    @classmethod
    def from_tally(cls, file_count: int, tally: ColorTally) -> "ColorReport":
        return cls(file_count=file_count, counts=MappingProxyType(dict(tally.counts)))

    @property
    def unique_color_count(self) -> int:
        return len(self.counts)

    @property
    def total_occurrences(self) -> int:
        return sum(self.counts.values())

    def rows(self) -> List[Tuple[str, int]]:
        """Colors by occurrences, most frequent first; ties keep discovery order."""
        return sorted(self.counts.items(), key=lambda item: item[1], reverse=True)


def format_table(rows: List[Tuple[str, int]]) -> str:
    """Does: Render rows in a box-drawn table with an index column."""
    body = [(str(i), color, str(n)) for i, (color, n) in enumerate(rows)]
    widths = [max(len(cell) for cell in column) for column in zip(COLUMNS, *body)]

    def line(left: str, mid: str, right: str) -> str:
        return left + mid.join("─" * (w + 2) for w in widths) + right

    def row(cells: Tuple[str, ...]) -> str:
        return "│" + "│".join(f" {c.ljust(w)} " for c, w in zip(cells, widths)) + "│"

    out = [line("┌", "┬", "┐"), row(COLUMNS), line("├", "┼", "┤")]
    out.extend(row(cells) for cells in body)
    out.append(line("└", "┴", "┘"))
    return "\n".join(out)


def format_report(report: ColorReport) -> str:
    summary = (
        f"{TITLE}\n\n"
        f"# of CSS files: {report.file_count}\n"
        f"# of unique color values: {report.unique_color_count}\n"
    )
    return f"{summary}\n{format_table(report.rows())}"


def report_to_dict(report: ColorReport) -> Dict[str, Any]:
    return {
        "file_count": report.file_count,
        "unique_color_count": report.unique_color_count,
        "colors": [{"color": c, "occurrences": n} for c, n in report.rows()],
    }


def print_report(report: ColorReport, stream: Optional[TextIO] = None) -> None:
    print(format_report(report), file=stream or sys.stdout)
