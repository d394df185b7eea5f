# token_theme_index/indexing/color/token_index.py
from __future__ import annotations

"""
token_index.py

Does: Own the canonical-name → [ColorEntry] mapping and its cached unthemed view.
      Insertion order is kept per name (it decides the resolver fallback), and an
      exact (theme id, hex) repeat under the same name is ignored, so running a
      build twice over the same dataset leaves the index unchanged.
Returns: TokenIndex.
Used by: Builders (single writer) and all query functions (readers).
"""

import logging
from collections.abc import Iterator, Mapping
from types import MappingProxyType
from typing import Optional

from .consistency import unthemed_colors
from .settings import DEFAULT_SETTINGS, IndexSettings
from .types import ColorEntry

__all__ = ["TokenIndex"]

log = logging.getLogger(__name__)


class TokenIndex:
    """In-memory color index; not thread-safe (one builder, then readers)."""

    def __init__(self, settings: IndexSettings = DEFAULT_SETTINGS) -> None:
        self.settings = settings
        self._entries: dict[str, list[ColorEntry]] = {}
        self._unthemed: Optional[dict[str, tuple[ColorEntry, ...]]] = None

    # ── Mutation ─────────────────────────────────────────────────────────────
    def add(self, entry: ColorEntry) -> bool:
        """Does: Append `entry` under its name. Returns False for a duplicate."""
        bucket = self._entries.setdefault(entry.name, [])
        key = (entry.theme_id, entry.value.hex)
        if any((e.theme_id, e.value.hex) == key for e in bucket):
            return False
        bucket.append(entry)
        self._unthemed = None
        return True

    def reset(self) -> None:
        """Does: Drop every entry and the cached unthemed view."""
        self._entries.clear()
        self._unthemed = None
        log.debug("Token index reset")

    def refresh_unthemed(self) -> None:
        self._unthemed = {name: tuple(entries) for name, entries in unthemed_colors(self).items()}

    # ── Reads ────────────────────────────────────────────────────────────────
    def entries(self, name: str) -> list[ColorEntry]:
        return list(self._entries.get(name, ()))

    def names(self) -> list[str]:
        return list(self._entries)

    def items(self) -> Iterator[tuple[str, list[ColorEntry]]]:
        return iter(self._entries.items())

    def unthemed_view(self) -> Mapping[str, tuple[ColorEntry, ...]]:
        """Does: Read-only view of the cached unthemed sub-index, recomputed after any change."""
        if self._unthemed is None:
            self.refresh_unthemed()
        return MappingProxyType(self._unthemed)

    def unthemed(self) -> dict[str, list[ColorEntry]]:
        """Does: Copy of the unthemed sub-index (name → full entry list)."""
        return {name: list(entries) for name, entries in self.unthemed_view().items()}

    def color_map(self) -> dict[str, list[ColorEntry]]:
        """Does: Shallow copy of the whole index (name → entries)."""
        return {name: list(entries) for name, entries in self._entries.items()}

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        total = sum(len(v) for v in self._entries.values())
        return f"TokenIndex(names={len(self._entries)}, entries={total})"
