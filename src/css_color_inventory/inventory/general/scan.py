"""
scan.py
=======

Does: Recursively enumerate stylesheet files under a root directory.
Returns: find_stylesheets(root) -> list[Path] of every file ending in ".css".
Used By: Orchestrator (build_report).

Notes:
- Order follows the file system and is not meaningful; counts downstream
  don't depend on it.
- Any failure to list a directory or stat an entry propagates (OSError);
  there is no partial result.
"""

from __future__ import annotations

import logging
import os
import stat
from pathlib import Path
from typing import List, Union

from css_color_inventory.inventory.general.utils.log import debug

logger = logging.getLogger(__name__)

__all__ = ["STYLESHEET_SUFFIX", "find_stylesheets", "is_stylesheet"]

STYLESHEET_SUFFIX = ".css"


def is_stylesheet(name: str, suffix: str = STYLESHEET_SUFFIX) -> bool:
    """Does: Exact, case-sensitive suffix check ("a.CSS" is not a stylesheet)."""
    return name.endswith(suffix)


def find_stylesheets(root: Union[str, "os.PathLike[str]"], suffix: str = STYLESHEET_SUFFIX) -> List[Path]:
    """Does: Walk `root` depth-first with an explicit stack and collect stylesheet paths."""
    found: List[Path] = []
    pending = [os.fspath(root)]
    while pending:
        directory = pending.pop()
        with os.scandir(directory) as entries:
            for entry in entries:
                # follows symlinks; a dangling link raises like any other stat failure
                mode = entry.stat().st_mode
                if stat.S_ISDIR(mode):
                    pending.append(entry.path)
                elif is_stylesheet(entry.name, suffix):
                    found.append(Path(entry.path))
    logger.debug("Found %d stylesheet(s) under %s", len(found), root)
    debug(f"{len(found)} stylesheet(s) under {root}", topic="scan")
    return found
