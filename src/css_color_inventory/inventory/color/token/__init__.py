"""
token package.
==============

Does: Expose the value tokenizer that isolates color-like fragments from CSS values.
"""

from .split import split_color_tokens, split_value_segments

__all__ = ["split_color_tokens", "split_value_segments"]
