# orchestrator.py
from __future__ import annotations

"""
orchestrator.py
===============

Does: High-level surface used by code templates. Keeps one process-wide
      TokenIndex (created empty at import, filled by group_tokens_by_name) and
      exposes the template-named operations on it, plus the host function table.
Returns:
  - group_tokens_by_name(theme_data, brand) -> ""            (build pass)
  - group_tokens_from_path(tokens, path, brand) -> ""        (path-driven build)
  - get_colors_for(name, theme_id) -> ColorEntry | None
  - is_color_themed(name) -> bool
  - get_name_for_color(value) -> str | None
  - get_color_map() -> dict[str, list[ColorEntry]]
  - template_functions(index) -> {"getColorsFor": callable, ...}
Used by: Template renderers and the demo CLI.
"""

import logging
from collections.abc import Callable, Iterable, Mapping
from functools import partial
from typing import Any, Optional

from token_theme_index.indexing.color import (
    ColorEntry,
    IndexSettings,
    TokenIndex,
    build_index,
    build_index_from_path,
    is_color_styles_token,
    is_themed,
    load_settings,
    name_for_value,
    resolve_color,
)
from token_theme_index.indexing.general.formatting import (
    create_documentation_comment,
    current_date_stamp,
    is_color_allowed,
    object_to_pretty_json,
    token_group_ids,
)

__all__ = [
    "get_default_index",
    "reset_index",
    "group_tokens_by_name",
    "group_tokens_from_path",
    "get_colors_for",
    "is_color_themed",
    "get_name_for_color",
    "get_color_map",
    "template_functions",
]

logger = logging.getLogger(__name__)

_DEFAULT_INDEX: Optional[TokenIndex] = None


def get_default_index() -> TokenIndex:
    """Does: Lazily create the process-wide index with settings from data/."""
    global _DEFAULT_INDEX
    if _DEFAULT_INDEX is None:
        _DEFAULT_INDEX = TokenIndex(load_settings())
    return _DEFAULT_INDEX


def reset_index() -> None:
    """Does: Empty the process-wide index (entries and unthemed cache)."""
    get_default_index().reset()


def _pick(index: Optional[TokenIndex]) -> TokenIndex:
    return index if index is not None else get_default_index()


# ── Build ────────────────────────────────────────────────────────────────────
def group_tokens_by_name(
    theme_data: Mapping[str, Any],
    brand: Optional[str] = None,
    index: Optional[TokenIndex] = None,
) -> str:
    return build_index(theme_data, brand, index=_pick(index))


def group_tokens_from_path(
    tokens: Iterable[Any],
    source_path: str,
    brand: Optional[str] = None,
    index: Optional[TokenIndex] = None,
) -> str:
    return build_index_from_path(tokens, source_path, brand, index=_pick(index))


# ── Queries ──────────────────────────────────────────────────────────────────
def get_colors_for(
    color_name: str,
    theme_id: str,
    index: Optional[TokenIndex] = None,
) -> Optional[ColorEntry]:
    return resolve_color(color_name, theme_id, _pick(index))


def is_color_themed(color_name: str, index: Optional[TokenIndex] = None) -> bool:
    return is_themed(color_name, _pick(index))


def get_name_for_color(color_value: Any, index: Optional[TokenIndex] = None) -> Optional[str]:
    return name_for_value(color_value, _pick(index))


def get_color_map(index: Optional[TokenIndex] = None) -> dict[str, list[ColorEntry]]:
    return _pick(index).color_map()


# ── Host function table ──────────────────────────────────────────────────────
def template_functions(index: Optional[TokenIndex] = None) -> dict[str, Callable[..., Any]]:
    """
    Does: Build the name → callable table handed to the template host, with the
          index-bound operations tied to `index` (default: process-wide one).
    """
    idx = _pick(index)
    settings: IndexSettings = idx.settings
    return {
        "createDocumentationComment": create_documentation_comment,
        "isColorStylesToken": partial(is_color_styles_token, settings=settings),
        "groupTokensByName": partial(group_tokens_by_name, index=idx),
        "groupTokensFromPath": partial(group_tokens_from_path, index=idx),
        "getColorsFor": partial(get_colors_for, index=idx),
        "isColorThemed": partial(is_color_themed, index=idx),
        "getNameForColor": partial(get_name_for_color, index=idx),
        "getColorMap": partial(get_color_map, index=idx),
        "isColorAllowed": partial(is_color_allowed, reserved=settings.reserved_color_names),
        "getTokenGroupIds": token_group_ids,
        "objectToPrettyJson": object_to_pretty_json,
        "currentDateStamp": current_date_stamp,
    }
