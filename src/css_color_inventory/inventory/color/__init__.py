"""
color.
=====

Does: Aggregate the color-domain pieces: recognition constants, named-color
      vocabulary, value tokenizer and normalizer.
Used By: Aggregator, orchestrator, tests.
Returns: Pure data structures and functions; no side effects beyond lazy caching.
"""

# ── Constants ────────────────────────────────────────────────────────────────
from .constants import (
    ALPHA_PRECISION,
    COLOR_TOKEN_RE,
    EXTRA_NAMED_COLORS,
    TRANSPARENT_KEYWORD,
    UNRESOLVABLE_KEYWORDS,
)

# ── Normalizer & vocabulary ──────────────────────────────────────────────────
from .normalize import RGBA, format_rgb, normalize_color, parse_color
from .token import split_color_tokens, split_value_segments
from .vocab import is_named_color, lookup_named_color

__all__ = [
    # constants
    "ALPHA_PRECISION",
    "COLOR_TOKEN_RE",
    "EXTRA_NAMED_COLORS",
    "TRANSPARENT_KEYWORD",
    "UNRESOLVABLE_KEYWORDS",
    # vocab
    "lookup_named_color",
    "is_named_color",
    # tokenizer
    "split_color_tokens",
    "split_value_segments",
    # normalizer
    "RGBA",
    "parse_color",
    "format_rgb",
    "normalize_color",
]
