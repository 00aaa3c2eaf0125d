# src/css_color_inventory/inventory/general/utils/load_config.py

"""Load JSON list configs from the package <data/> directory as cached frozensets.

Used by the orchestrator (themable-property allow-list) and tests.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path

__all__ = [
    "load_config",
    "load_themable_properties",
    "clear_config_cache",
    "DataDirNotFound",
    "ConfigFileNotFound",
    "ConfigParseError",
    "ConfigTypeError",
]

THEMABLE_PROPERTIES_FILE = "themable_properties"


# ── Exceptions ───────────────────────────────────────────────────────────────
class DataDirNotFound(FileNotFoundError):
    """Raise when no 'data' directory is found while walking upwards."""


class ConfigFileNotFound(FileNotFoundError):
    """Raise when the requested config file cannot be read or resolved."""


class ConfigParseError(ValueError):
    """Raise when a config file is not valid JSON."""


class ConfigTypeError(TypeError):
    """Raise when the parsed JSON is not a flat list of scalars."""


# ── Logging & cache ──────────────────────────────────────────────────────────
log = logging.getLogger(__name__)
# keyed by (path, mtime) so an edited file is reloaded
_CONFIG_CACHE: dict[tuple[Path, float], frozenset[str]] = {}


def clear_config_cache() -> None:
    """Empty the in-memory config cache (useful for pytest)."""
    _CONFIG_CACHE.clear()
    log.debug("Config cache cleared.")


def _candidate_data_dirs(start: Path | None = None) -> list[Path]:
    """Compute candidate 'data' directories walking up from start."""
    start = (start or Path(__file__)).resolve()
    return [(p / "data").resolve() for p in [start, *start.parents]]


def _default_data_dir(start: Path | None = None) -> Path:
    """Return the first existing candidate directory or raise."""
    for cand in _candidate_data_dirs(start):
        if cand.is_dir():
            return cand
    raise DataDirNotFound(
        "No 'data' directory found.\n"
        "Tried:\n  " + "\n  ".join(str(p) for p in _candidate_data_dirs(start))
    )


def _resolve(file: str | os.PathLike[str], base_dir: Path | None) -> Path:
    data_dir = Path(base_dir or _default_data_dir()).resolve()
    file_str = os.fspath(file)
    file_name = file_str if file_str.endswith(".json") else f"{file_str}.json"
    path = (data_dir / file_name).resolve()
    try:
        path.relative_to(data_dir)
    except ValueError as e:
        raise ConfigFileNotFound(
            f"Refusing to access file outside data dir: {path} (base={data_dir})"
        ) from e
    if not path.is_file():
        raise ConfigFileNotFound(f"Config file not found: {path}")
    return path


def load_config(
    file: str | os.PathLike[str],
    *,
    base_dir: Path | None = None,
    encoding: str = "utf-8",
) -> frozenset[str]:
    """Load <data>/<file>.json (a JSON list), coerce items to str, and cache the set."""
    path = _resolve(file, base_dir)
    try:
        mtime = path.stat().st_mtime
    except OSError as e:
        raise ConfigFileNotFound(f"Cannot stat {path}: {e}") from e

    cache_key = (path, mtime)
    if cache_key in _CONFIG_CACHE:
        log.debug("Config cache HIT: %s", path.name)
        return _CONFIG_CACHE[cache_key]

    try:
        with path.open("r", encoding=encoding, errors="strict", newline="") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigParseError(f"Invalid JSON in {path}: {e}") from e
    except OSError as e:
        raise ConfigFileNotFound(f"Cannot read {path}: {e}") from e

    if not isinstance(data, list):
        raise ConfigTypeError(f"{path.name}: expected a list, got {type(data).__name__}")
    non_scalars = [x for x in data if not isinstance(x, (str, int, float, bool))]
    if non_scalars:
        preview = ", ".join(type(x).__name__ for x in non_scalars[:3])
        raise ConfigTypeError(f"{path.name}: list must contain only scalars (first bad types: {preview})")

    result = frozenset(map(str, data))
    _CONFIG_CACHE[cache_key] = result
    log.debug("Config cache MISS → STORED: %s", path.name)
    return result


def load_themable_properties(base_dir: Path | None = None) -> frozenset[str]:
    """Return the allow-list of CSS properties whose colors are theme-relevant."""
    props = load_config(THEMABLE_PROPERTIES_FILE, base_dir=base_dir)
    if not props:
        raise ConfigTypeError(f"{THEMABLE_PROPERTIES_FILE}.json: allow-list is empty")
    return props
