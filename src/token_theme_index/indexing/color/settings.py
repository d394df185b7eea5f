"""
settings
========

Does: Hold the recognized theme ids, collection names, path markers and naming
      rules as one frozen `IndexSettings`, loadable from data/index_settings.json.
Used By: Style classification, name resolution, builders and consistency analysis.
Returns: IndexSettings instances; `load_settings()` falls back to built-in defaults.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Any

from token_theme_index.indexing.general.formatting import RESERVED_COLOR_NAMES
from token_theme_index.indexing.general.utils.load_config import (
    ConfigFileNotFound,
    DataDirNotFound,
    load_config,
)

from .constants import (
    BRAND_COLOR_STYLES_COLLECTION,
    BRAND_GRADIENT_SUFFIX,
    COLLECTION_CODE_NAME,
    COLOR_STYLES_COLLECTION,
    DARK_THEME_ID,
    GRADIENT_BASE_MARKER,
    LIGHT_THEME_ID,
    PATH_THEME_MARKERS,
    PRIMARY_THEME_IDS,
)

__all__ = ["IndexSettings", "DEFAULT_SETTINGS", "load_settings", "SETTINGS_FILE"]

log = logging.getLogger(__name__)

SETTINGS_FILE = "index_settings"


@dataclass(frozen=True)
class IndexSettings:
    dark_theme_id: str = DARK_THEME_ID
    light_theme_id: str = LIGHT_THEME_ID
    primary_theme_ids: tuple[str, ...] = PRIMARY_THEME_IDS
    path_theme_markers: tuple[str, ...] = PATH_THEME_MARKERS
    collection_code_name: str = COLLECTION_CODE_NAME
    color_styles_collection: str = COLOR_STYLES_COLLECTION
    brand_color_styles_collection: str = BRAND_COLOR_STYLES_COLLECTION
    gradient_base_marker: str = GRADIENT_BASE_MARKER
    brand_gradient_suffix: str = BRAND_GRADIENT_SUFFIX
    reserved_color_names: frozenset[str] = RESERVED_COLOR_NAMES

    @classmethod
    def from_mapping(cls, data: dict[str, Any]) -> IndexSettings:
        """Does: Build settings from a JSON object; unknown keys raise ValueError."""
        known = {f for f in cls.__dataclass_fields__}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValueError(f"unknown settings: {', '.join(unknown)}")

        overrides: dict[str, Any] = {}
        for key, value in data.items():
            default = getattr(DEFAULT_SETTINGS, key)
            if isinstance(default, str):
                if not isinstance(value, str) or not value:
                    raise ValueError(f"'{key}' must be a non-empty string")
                overrides[key] = value
            else:
                if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
                    raise ValueError(f"'{key}' must be a list of strings")
                overrides[key] = frozenset(value) if isinstance(default, frozenset) else tuple(value)
        return replace(DEFAULT_SETTINGS, **overrides)


DEFAULT_SETTINGS = IndexSettings()


def load_settings(file: str = SETTINGS_FILE) -> IndexSettings:
    """
    Does: Load <data>/index_settings.json through load_config() with validation.
    Returns: Parsed settings, or DEFAULT_SETTINGS when no data dir/file exists.
    Raises: ConfigParseError / ConfigTypeError on invalid content.
    """
    try:
        return load_config(file, validator=_validate)
    except (DataDirNotFound, ConfigFileNotFound) as e:
        log.info("Index settings not found (%s); using defaults", e)
        return DEFAULT_SETTINGS


def _validate(data: dict[str, Any]) -> Any:
    return IndexSettings.from_mapping(data)
