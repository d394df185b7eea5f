"""
color.
=====

Does: Aggregate the color-index building blocks: typed records, settings,
      classification, naming, the TokenIndex store, builders and queries.
Used By: The orchestrator, the demo CLI and template integrations.
Returns: Pure functions plus the TokenIndex class; no module-level state.
"""

# ── Records & settings ───────────────────────────────────────────────────────
from .types import (
    ColorEntry,
    ColorStyle,
    ColorValue,
    MalformedTokenError,
    NameResolution,
    RawToken,
    ThemeRecord,
)
from .settings import DEFAULT_SETTINGS, IndexSettings, load_settings

# ── Build phase ──────────────────────────────────────────────────────────────
from .style import classify_style, is_color_styles_token
from .naming import resolve_name
from .token_index import TokenIndex
from .builder import (
    BuildReport,
    build_index,
    build_index_from_path,
    build_index_from_path_with_report,
    build_index_with_report,
    theme_id_for_path,
)

# ── Queries ──────────────────────────────────────────────────────────────────
from .resolver import resolve_color, suggest_name
from .consistency import is_themed, unthemed_colors
from .reverse_lookup import name_for_value

__all__ = [
    # records & settings
    "ColorEntry",
    "ColorStyle",
    "ColorValue",
    "MalformedTokenError",
    "NameResolution",
    "RawToken",
    "ThemeRecord",
    "IndexSettings",
    "DEFAULT_SETTINGS",
    "load_settings",
    # build phase
    "classify_style",
    "is_color_styles_token",
    "resolve_name",
    "TokenIndex",
    "BuildReport",
    "build_index",
    "build_index_with_report",
    "build_index_from_path",
    "build_index_from_path_with_report",
    "theme_id_for_path",
    # queries
    "resolve_color",
    "suggest_name",
    "is_themed",
    "unthemed_colors",
    "name_for_value",
]
