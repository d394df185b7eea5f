# token_theme_index/indexing/general/utils/__init__.py
"""

Does: Provide config loading and lightweight debug logging utilities for the index stack.
Returns: Public API via load_config/clear_config_cache and debug/reload_topics.
Used by: Index settings, the builder, tests, and the demo CLI.
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
    debug,
    is_topic_enabled,
    reload_topics,
)

__all__ = [
    # Config loading
    "load_config",
    "clear_config_cache",
    "DataDirNotFound",
    "ConfigFileNotFound",
    "ConfigParseError",
    "ConfigTypeError",
    # Logging helpers
    "debug",
    "is_topic_enabled",
    "reload_topics",
]
