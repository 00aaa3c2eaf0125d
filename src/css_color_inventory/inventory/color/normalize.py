"""
normalize.py
============

Does: Parse a single color token (hex, rgb[a](), hsl[a](), named keyword) into an
      RGBA model and render its canonical "rgb(r, g, b)" / "rgba(r, g, b, a)" form.
Used By: Aggregator (ColorTally.add_value) after the value tokenizer.
Returns: RGBA / canonical string, or None when the token is not a color.

Notes:
- Hex and functional notations go through tinycss2's CSS Color 4 parser, so the
  legacy comma form, the space/slash form, "deg" hues and any letter case work.
- Bare keywords resolve through the webcolors table (see vocab.py).
- Failures are routine (the tokenizer over-matches bare words like "solid"),
  so nothing here raises for bad input; callers skip None.
- Two tokens denoting the same color always render to the same string
  ("red", "#f00", "#ff0000", "rgb(100%, 0%, 0%)" -> "rgb(255, 0, 0)").
- Alpha is kept only when < 1, rounded to ALPHA_PRECISION decimals.
"""

from __future__ import annotations

import math
from typing import NamedTuple, Optional

from tinycss2 import color4

from css_color_inventory.inventory.color.constants import (
    ALPHA_PRECISION,
    TRANSPARENT_KEYWORD,
)
from css_color_inventory.inventory.color.vocab import lookup_named_color
from css_color_inventory.inventory.general.utils.log import debug

__all__ = [
    "RGBA",
    "parse_color",
    "format_rgb",
    "normalize_color",
]
__docformat__ = "google"


class RGBA(NamedTuple):
    red: int
    green: int
    blue: int
    alpha: float = 1.0


# =============================================================================
# 1) CHANNEL HELPERS
# =============================================================================

def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _to_channel(fraction: Optional[float]) -> Optional[int]:
    """Does: Map an sRGB coordinate in [0, 1] to 0..255; None for inf/NaN."""
    if fraction is None:
        fraction = 0.0
    if not math.isfinite(fraction):
        return None
    fraction = min(1.0, max(0.0, fraction))
    # 6 places absorb float noise like 127.49999999 before rounding half up
    return _round_half_up(round(fraction * 255, 6))


# =============================================================================
# 2) FUNCTIONAL / HEX NOTATIONS
# =============================================================================

def _parse_css_color(token: str) -> Optional[RGBA]:
    parsed = color4.parse_color(token)
    # a bare str is a keyword tinycss2 cannot resolve ("currentcolor")
    if parsed is None or isinstance(parsed, str):
        return None
    if parsed.space != "srgb":
        try:
            parsed = parsed.to("srgb")
        except (NotImplementedError, ValueError, ArithmeticError):
            return None
    channels = [_to_channel(c) for c in parsed.coordinates]
    if None in channels or not math.isfinite(parsed.alpha):
        return None
    alpha = round(min(1.0, max(0.0, parsed.alpha)), ALPHA_PRECISION)
    return RGBA(*channels, alpha)


# =============================================================================
# 3) PUBLIC API
# =============================================================================

def parse_color(token: str) -> Optional[RGBA]:
    """
    Does: Parse one color token into RGBA.
    Returns: RGBA, or None if `token` is not a recognizable color.
    """
    if not isinstance(token, str):
        return None
    t = token.strip().lower()
    if not t:
        return None
    if t.startswith("#") or "(" in t:
        return _parse_css_color(t)
    if t == TRANSPARENT_KEYWORD:
        return RGBA(0, 0, 0, 0.0)
    rgb = lookup_named_color(t)
    if rgb is None:
        return None
    return RGBA(*rgb)


def format_rgb(color: RGBA) -> str:
    """Does: Render RGBA as "rgb(r, g, b)" when opaque, "rgba(r, g, b, a)" otherwise."""
    r, g, b, a = color
    if a >= 1:
        return f"rgb({r}, {g}, {b})"
    return f"rgba({r}, {g}, {b}, {format(round(a, ALPHA_PRECISION), 'g')})"


def normalize_color(token: str) -> Optional[str]:
    """Does: Parse + render in one step; None means "not a color, skip it"."""
    color = parse_color(token)
    if color is None:
        debug(f"not a color: {token!r}", topic="color")
        return None
    return format_rgb(color)
