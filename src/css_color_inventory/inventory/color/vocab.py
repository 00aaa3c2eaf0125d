"""
vocab
=====

Does: Resolve CSS named color keywords to RGB triples using the CSS3 table
      shipped with webcolors, plus the few keywords it lacks.
Used By: Color normalizer.
Returns: RGB triples or None (no side effects beyond lazy caching).
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Optional, Tuple

import webcolors

from css_color_inventory.inventory.color.constants import (
    EXTRA_NAMED_COLORS,
    UNRESOLVABLE_KEYWORDS,
)

log = logging.getLogger(__name__)

RGB = Tuple[int, int, int]

__all__ = ["RGB", "lookup_named_color", "is_named_color"]


@lru_cache(maxsize=512)
def lookup_named_color(name: str) -> Optional[RGB]:
    """Does: Map a CSS color keyword (case-insensitive) to its RGB triple, or None."""
    if not isinstance(name, str):
        return None
    key = name.strip().lower()
    if not key or key in UNRESOLVABLE_KEYWORDS:
        return None
    if key in EXTRA_NAMED_COLORS:
        return EXTRA_NAMED_COLORS[key]
    try:
        rgb = webcolors.name_to_rgb(key, spec=webcolors.CSS3)
    except ValueError:
        return None
    return (rgb.red, rgb.green, rgb.blue)


def is_named_color(name: str) -> bool:
    """Does: Tell whether `name` is a known CSS color keyword."""
    return lookup_named_color(name) is not None
