"""
split.py
========

Does: Cut a lower-cased CSS declaration value into candidate color tokens by
      fencing every COLOR_TOKEN_RE match with boundary markers and splitting.
Returns: Ordered list of candidate tokens (possibly non-colors such as "solid";
         the normalizer rejects those).
Used By: ColorTally.add_value.
"""

from __future__ import annotations

from typing import List

from css_color_inventory.inventory.color.constants import COLOR_TOKEN_RE, TOKEN_BOUNDARY
from css_color_inventory.inventory.general.utils.log import debug

__all__ = ["split_color_tokens", "split_value_segments"]


def split_value_segments(value: str) -> List[str]:
    """
    Does: Split `value` into alternating non-color / candidate segments.
    Returns: List whose odd indexes hold the candidates; even indexes hold the
             text between them (units, offsets, "!important", ...).
    """
    if not isinstance(value, str):
        return []
    # a stray marker in the input would shift the alternation
    clean = value.replace(TOKEN_BOUNDARY, "")
    marked = COLOR_TOKEN_RE.sub(lambda m: f"{TOKEN_BOUNDARY}{m.group(1)}{TOKEN_BOUNDARY}", clean)
    return marked.split(TOKEN_BOUNDARY)


def split_color_tokens(value: str) -> List[str]:
    """
    Does: Keep only the candidate color tokens of a declaration value.
    Returns: e.g. "0 0 0 2px #ff0000" -> ["#ff0000"],
             "1px solid red !important" -> ["solid", "red", "important"].
    """
    tokens = split_value_segments(value)[1::2]
    debug(f"{value!r} -> {tokens}", topic="token")
    return tokens
