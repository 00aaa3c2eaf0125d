"""
aggregate.py
============

Does: Fold normalized color tokens into a frequency map (canonical color -> count).
Returns: ColorTally with add()/add_value() and read-only views of the counts.
Used By: Orchestrator; ColorReport.from_tally.
"""

from __future__ import annotations

from collections import Counter
from typing import Iterable, Optional

from css_color_inventory.inventory.color.normalize import normalize_color
from css_color_inventory.inventory.color.token import split_color_tokens

__all__ = ["ColorTally"]


class ColorTally:
    """Occurrence counts per canonical color. Counts only ever go up."""

    def __init__(self) -> None:
        self._counts: Counter[str] = Counter()

    def add(self, canonical: str) -> None:
        self._counts[canonical] += 1

    def add_token(self, token: str) -> Optional[str]:
        """Does: Normalize one candidate token and count it; None when it isn't a color."""
        canonical = normalize_color(token)
        if canonical is not None:
            self.add(canonical)
        return canonical

    def add_value(self, value: str) -> int:
        """Does: Tokenize a declaration value and count every color in it.
        Returns: How many tokens normalized successfully.
        """
        added = 0
        for token in split_color_tokens(value):
            if self.add_token(token) is not None:
                added += 1
        return added

    def add_values(self, values: Iterable[str]) -> int:
        return sum(self.add_value(v) for v in values)

    @property
    def counts(self) -> Counter[str]:
        """A copy, so callers can't rewind the tally."""
        return Counter(self._counts)

    @property
    def total(self) -> int:
        return sum(self._counts.values())

    def __len__(self) -> int:
        return len(self._counts)

    def __contains__(self, canonical: object) -> bool:
        return canonical in self._counts

    def __getitem__(self, canonical: str) -> int:
        return self._counts[canonical]
