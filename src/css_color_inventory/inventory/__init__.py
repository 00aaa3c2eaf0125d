# css_color_inventory/inventory/__init__.py

"""
inventory
=========

Does: Collect color values used on themable CSS properties across a tree of
      stylesheets and summarize how often each canonical color occurs.
"""

from __future__ import annotations

__all__: list[str] = []
__docformat__ = "google"
