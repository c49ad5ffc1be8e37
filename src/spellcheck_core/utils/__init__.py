# src/spellcheck_core/utils/__init__.py
"""

Does: Provide settings-file loading and lightweight debug logging utilities.
Returns: Public API via load_config/clear_config_cache and debug/reload_topics.
Used by: The splitter configuration loader, the glob compiler, the demo CLI and tests.
"""

from __future__ import annotations

from .load_config import (
    ConfigFileNotFound,
    ConfigParseError,
    ConfigTypeError,
    DataDirNotFound,
    clear_config_cache,
    load_config,
)
from .log import (
    TOPICS,
    debug,
    enabled,
    reload_topics,
)

__all__ = [
    # Settings loading
    "load_config",
    "clear_config_cache",
    "DataDirNotFound",
    "ConfigFileNotFound",
    "ConfigParseError",
    "ConfigTypeError",
    # Logging helpers
    "TOPICS",
    "debug",
    "enabled",
    "reload_topics",
]
