# token_theme_index/indexing/color/resolver.py
from __future__ import annotations

"""
resolver.py

Does: Answer "which value does <name> take under <theme>?" from a TokenIndex.
      The first entry recorded for the theme wins; when the theme was never
      recorded for that name, the first inserted entry is returned instead.
Returns: resolve_color() → ColorEntry | None; suggest_name() → str | None.
Used by: Templates (getColorsFor) and the demo CLI.
"""

import logging
from typing import Optional

from rapidfuzz import fuzz, process

from .token_index import TokenIndex
from .types import ColorEntry

__all__ = ["resolve_color", "suggest_name", "SUGGESTION_CUTOFF"]

__docformat__ = "google"

log = logging.getLogger(__name__)

# ── Tunables ─────────────────────────────────────────────────────────────────
SUGGESTION_CUTOFF = 80


def suggest_name(name: str, index: TokenIndex, cutoff: float = SUGGESTION_CUTOFF) -> Optional[str]:
    """
    Does: Closest indexed name to `name` (rapidfuzz WRatio), for diagnostics only.
    Returns: The candidate, or None below `cutoff` / on an empty index.
    """
    names = index.names()
    if not name or not names:
        return None
    hit = process.extractOne(name, names, scorer=fuzz.WRatio, score_cutoff=cutoff)
    return hit[0] if hit else None


def resolve_color(name: str, theme_id: str, index: TokenIndex) -> Optional[ColorEntry]:
    """
    Does: Theme-specific lookup with deterministic first-inserted fallback.
    Returns: ColorEntry, or None (logged) when `name` is not indexed.
    """
    entries = index.entries(name)
    if not entries:
        hint = suggest_name(name, index)
        if hint:
            log.warning("Color %r not found in token index (did you mean %r?)", name, hint)
        else:
            log.warning("Color %r not found in token index", name)
        return None

    for entry in entries:
        if entry.theme_id == theme_id:
            return entry

    log.debug("No %r entry for %r; falling back to %r", theme_id, name, entries[0].theme_id)
    return entries[0]
