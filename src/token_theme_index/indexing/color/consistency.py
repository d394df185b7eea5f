"""
consistency.py
==============

Does: Classify canonical names as themed (distinct Dark and Light hex values)
      or unthemed, and derive the unthemed sub-index used by reverse lookup.
Returns: entries_are_themed(), is_themed(), unthemed_colors().
Used by: TokenIndex (cached unthemed view), templates, reverse lookup.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING, Optional

from .settings import DEFAULT_SETTINGS, IndexSettings
from .types import ColorEntry

if TYPE_CHECKING:
    from .token_index import TokenIndex

__all__ = ["entries_are_themed", "is_themed", "unthemed_colors"]

log = logging.getLogger(__name__)


def entries_are_themed(
    entries: Iterable[ColorEntry],
    settings: IndexSettings = DEFAULT_SETTINGS,
) -> bool:
    """
    Does: Track the raw hex string seen under the dark and light theme ids (other theme ids
          are ignored) until both are known.
    Returns: True iff both were observed and differ.
    """
    dark: Optional[str] = None
    light: Optional[str] = None
    for entry in entries:
        if entry.theme_id == settings.dark_theme_id:
            dark = entry.value.hex
        elif entry.theme_id == settings.light_theme_id:
            light = entry.value.hex
        if dark is not None and light is not None:
            break
    return dark is not None and light is not None and dark != light


def is_themed(name: str, index: TokenIndex) -> bool:
    """Does: Themed check for one canonical name; unknown names are unthemed."""
    entries = index.entries(name)
    if not entries:
        log.debug("is_themed: no entries for %r", name)
        return False
    return entries_are_themed(entries, index.settings)


def unthemed_colors(index: TokenIndex) -> dict[str, list[ColorEntry]]:
    """
    Does: Map every unthemed name to its full (unfiltered) entry list.
    Returns: A fresh dict in index insertion order.
    """
    return {
        name: list(entries)
        for name, entries in index.items()
        if not entries_are_themed(entries, index.settings)
    }
