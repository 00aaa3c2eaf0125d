# css_color_inventory/inventory/general/utils/__init__.py
"""

Does: Provide config loading and lightweight debug logging utilities for the inventory stack.
Returns: Public API via load_config/load_themable_properties/clear_config_cache and debug helpers.
Used by: Declaration extraction, the orchestrator, the CLI and tests.
"""

from __future__ import annotations

from .load_config import (
    ConfigFileNotFound,
    ConfigParseError,
    ConfigTypeError,
    DataDirNotFound,
    clear_config_cache,
    load_config,
    load_themable_properties,
)
from .log import (
    debug,
    enable_topics,
    is_enabled,
    reload_topics,
)

__all__ = [
    # Config loading
    "load_config",
    "load_themable_properties",
    "clear_config_cache",
    "DataDirNotFound",
    "ConfigFileNotFound",
    "ConfigParseError",
    "ConfigTypeError",
    # Logging helpers
    "debug",
    "enable_topics",
    "is_enabled",
    "reload_topics",
]
