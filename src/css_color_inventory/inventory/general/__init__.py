# css_color_inventory/inventory/general/__init__.py
"""
general
=======

Does: File-system scanning, stylesheet parsing and shared utilities (config, logging).
"""

from .declarations import (
    Declaration,
    StylesheetParseError,
    extract_file,
    iter_declarations,
    parse_stylesheet,
    read_stylesheet,
)
from .scan import STYLESHEET_SUFFIX, find_stylesheets, is_stylesheet

__all__ = [
    "STYLESHEET_SUFFIX",
    "find_stylesheets",
    "is_stylesheet",
    "Declaration",
    "StylesheetParseError",
    "parse_stylesheet",
    "iter_declarations",
    "read_stylesheet",
    "extract_file",
]
