# constants.py
# ============

"""
constants.
=========

Does: Define immutable color-domain constants for token recognition and
      canonical rendering.
Used By: Value tokenizer, color normalizer.
Returns: Pure data structures only (no side effects).
"""

import re
from types import MappingProxyType

# ── 1) Token recognition ─────────────────────────────────────────────────────

# Functional notations first, then the longest hex forms, then bare words.
# A bare word directly followed by '-' is part of a compound keyword
# (e.g. "linear-gradient"), never a color name.
COLOR_TOKEN_RE = re.compile(
    r"((?:rgb|hsl)a?\([^)]+\)"
    r"|#[0-9a-fA-F]{8}"
    r"|#[0-9a-fA-F]{6}"
    r"|#[0-9a-fA-F]{3,4}"
    r"|\b[a-zA-Z]+\b(?!-))"
)

# Marker inserted around every match before splitting the value string.
TOKEN_BOUNDARY = "\0"


# ── 2) Keywords outside the CSS3 named-color table ───────────────────────────

# CSS Color 4 addition missing from older named-color tables.
EXTRA_NAMED_COLORS = MappingProxyType({
    "rebeccapurple": (102, 51, 153),
})

TRANSPARENT_KEYWORD = "transparent"

# Valid CSS, but not a concrete color: never counted.
UNRESOLVABLE_KEYWORDS = frozenset({"currentcolor", "inherit", "initial", "unset", "revert"})


# ── 3) Canonical rendering ───────────────────────────────────────────────────

# Decimal places kept for the alpha channel in rgba(...) output.
ALPHA_PRECISION = 3
