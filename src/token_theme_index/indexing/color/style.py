"""
style.py
========

Does: Decide which recognized color collection (if any) a raw token belongs to.
      The token only carries an opaque collection id; the human collection name
      lives in the option list of its "collection" property.
Returns: classify_style() → ColorStyle | None; is_color_styles_token() → bool
         (plain color-style collection only).
Used by: Index builders (the single gate into the ColorEntry domain).
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from .settings import DEFAULT_SETTINGS, IndexSettings
from .types import ColorStyle, MalformedTokenError, RawToken

__all__ = ["classify_style", "is_color_styles_token"]

log = logging.getLogger(__name__)


def _style_for_collection(name: str, settings: IndexSettings) -> Optional[ColorStyle]:
    if name == settings.color_styles_collection:
        return ColorStyle.COLOR_STYLES
    if name == settings.brand_color_styles_collection:
        return ColorStyle.BRAND_COLOR_STYLES
    return None


def classify_style(
    token: Any,
    settings: IndexSettings = DEFAULT_SETTINGS,
) -> Optional[ColorStyle]:
    """
    Does: Match the token's collection id against the options of its
          "collection" property and map the option name to a ColorStyle.
    Returns: The style, or None for unknown collections and malformed records.
    """
    if token is None:
        return None
    if not isinstance(token, RawToken):
        try:
            token = RawToken.from_record(token)
        except MalformedTokenError as e:
            log.debug("Unclassifiable token record: %s", e)
            return None

    if not token.collection_id or not token.properties:
        return None

    collection = next(
        (p for p in token.properties if p.code_name == settings.collection_code_name),
        None,
    )
    if collection is None or not collection.options:
        return None

    for option in collection.options:
        if option.id == token.collection_id:
            return _style_for_collection(option.name, settings)
    return None


def is_color_styles_token(token: Any, settings: IndexSettings = DEFAULT_SETTINGS) -> bool:
    """Does: True only for the plain "Color Styles" collection (brand styles excluded)."""
    return classify_style(token, settings) is ColorStyle.COLOR_STYLES
