"""
css_color_inventory
===================

Does: Root package initializer for the CSS color inventory tool.
Returns: Exposes the `inventory` subpackage and the `cli` entry point.
Used by: `css-color-inventory` console script and `python -m css_color_inventory`.
"""

__all__: list[str] = []
__docformat__ = "google"
