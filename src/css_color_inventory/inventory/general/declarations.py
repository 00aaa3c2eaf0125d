"""
declarations.py
===============

Does: Parse stylesheet text with tinycss2 and yield the declarations of plain
      style rules whose property is in the themable allow-list.
Returns: iter_declarations() -> Iterator[Declaration(property, value)], value lower-cased.
Used By: Orchestrator, once per scanned file.

Notes:
- The parse is purely syntactic: values are handed on as raw text, never
  checked against a property grammar.
- Only top-level style rules are visited. @media, @supports, @font-face,
  comments and anything nested inside them are skipped entirely.
- Property names match the allow-list exactly ("COLOR" is not "color").
- Every declaration counts, including a property repeated inside one rule.
- A syntax error (unbalanced braces, missing selector, broken declaration)
  is fatal: it surfaces as StylesheetParseError.
"""

from __future__ import annotations

import logging
import os
import re
from pathlib import Path
from typing import AbstractSet, Iterator, List, NamedTuple, Optional, Union

import tinycss2

from css_color_inventory.inventory.general.utils.log import debug

logger = logging.getLogger(__name__)

__all__ = [
    "Declaration",
    "StylesheetParseError",
    "parse_stylesheet",
    "iter_declarations",
    "read_stylesheet",
    "extract_file",
]

PathLike = Union[str, "os.PathLike[str]"]

# Comments, strings and escapes never count as braces.
_NON_STRUCTURAL_RE = re.compile(
    r"/\*.*?\*/|\"(?:\\.|[^\"\\\n])*\"|'(?:\\.|[^'\\\n])*'|\\.",
    re.DOTALL,
)


class StylesheetParseError(ValueError):
    """Raise when a stylesheet cannot be parsed; carries the offending source."""

    def __init__(self, message: str, source: Optional[str] = None):
        super().__init__(message)
        self.source = source


class Declaration(NamedTuple):
    property: str
    value: str


def _fail(reason: str, source: Optional[str], node=None) -> StylesheetParseError:
    where = source or "<string>"
    if node is not None:
        where = f"{where}:{node.source_line}:{node.source_column}"
    return StylesheetParseError(f"Cannot parse {where}: {reason}", source=source)


def _check_braces(css_text: str, source: Optional[str]) -> None:
    """Does: Reject an unterminated block or a stray '}' (tinycss2 silently repairs both)."""
    depth = 0
    for ch in _NON_STRUCTURAL_RE.sub("", css_text):
        if ch == "{":
            depth += 1
        elif ch == "}":
            depth -= 1
            if depth < 0:
                raise _fail("unexpected '}'", source)
    if depth:
        raise _fail("missing '}'", source)


def parse_stylesheet(css_text: str, *, source: Optional[str] = None) -> list:
    """Does: Build the list of top-level rules, raising on any structural error."""
    _check_braces(css_text, source)
    rules = tinycss2.parse_stylesheet(css_text, skip_comments=True, skip_whitespace=True)
    for rule in rules:
        if rule.type == "error":
            raise _fail(rule.message, source, rule)
        if rule.type == "qualified-rule" and not tinycss2.serialize(rule.prelude).strip():
            raise _fail("selector missing", source, rule)
    return rules


def _iter_style_declarations(
    rules: list,
    properties: AbstractSet[str],
    source: Optional[str],
) -> Iterator[Declaration]:
    for rule in rules:
        if rule.type != "qualified-rule":
            continue
        nodes = tinycss2.parse_blocks_contents(rule.content, skip_comments=True, skip_whitespace=True)
        for node in nodes:
            if node.type == "error":
                raise _fail(node.message, source, node)
            if node.type != "declaration" or node.name not in properties:
                continue
            yield Declaration(node.name, tinycss2.serialize(node.value).strip().lower())


def iter_declarations(
    css_text: str,
    properties: AbstractSet[str],
    *,
    source: Optional[str] = None,
) -> Iterator[Declaration]:
    """
    Does: Parse `css_text` eagerly, then lazily yield allow-listed declarations.
    Raises: StylesheetParseError before anything is yielded if the rule
            structure is broken; while iterating for a broken declaration.
    """
    rules = parse_stylesheet(css_text, source=source)
    return _iter_style_declarations(rules, properties, source)


def read_stylesheet(path: PathLike, encoding: str = "utf-8") -> str:
    """Does: Read one stylesheet fully; the handle is closed before returning."""
    with open(path, "r", encoding=encoding) as f:
        return f.read()


def extract_file(path: PathLike, properties: AbstractSet[str]) -> List[Declaration]:
    """Does: Read + parse one file and return its allow-listed declarations."""
    source = os.fspath(path)
    declarations = list(iter_declarations(read_stylesheet(path), properties, source=source))
    debug(f"{Path(source).name}: {len(declarations)} themable declaration(s)", topic="extract")
    return declarations
