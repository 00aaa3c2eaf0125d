"""
orchestrator.py
===============

Does: Wire one complete pass: scan -> extract -> tokenize -> normalize -> aggregate.
Returns:
  - build_report(root) -> ColorReport for every stylesheet under `root`
  - tally_stylesheet(css_text) -> ColorTally for one stylesheet's text
Used by: CLI and tests.

The run is all-or-nothing: a file-system or parse error anywhere propagates
and no report is returned.
"""

from __future__ import annotations

import logging
import os
from typing import AbstractSet, Optional, Union

from css_color_inventory.inventory.aggregate import ColorTally
from css_color_inventory.inventory.general.declarations import extract_file, iter_declarations
from css_color_inventory.inventory.general.scan import find_stylesheets
from css_color_inventory.inventory.general.utils.load_config import load_themable_properties
from css_color_inventory.inventory.report import ColorReport

logger = logging.getLogger(__name__)

__all__ = ["build_report", "tally_stylesheet"]


def tally_stylesheet(
    css_text: str,
    properties: Optional[AbstractSet[str]] = None,
    tally: Optional[ColorTally] = None,
) -> ColorTally:
    """Does: Count the themable colors of one stylesheet's text into `tally` (new if None)."""
    props = properties if properties is not None else load_themable_properties()
    tally = tally if tally is not None else ColorTally()
    tally.add_values(d.value for d in iter_declarations(css_text, props))
    return tally


def build_report(
    root: Union[str, "os.PathLike[str]"],
    properties: Optional[AbstractSet[str]] = None,
) -> ColorReport:
    """Does: Scan `root` and count colors across all of its stylesheets."""
    props = properties if properties is not None else load_themable_properties()
    files = find_stylesheets(root)
    tally = ColorTally()
    for path in files:
        added = tally.add_values(d.value for d in extract_file(path, props))
        logger.debug("%s: %d color occurrence(s)", path, added)
    logger.info("Scanned %d file(s), %d unique color(s)", len(files), len(tally))
    return ColorReport.from_tally(len(files), tally)
