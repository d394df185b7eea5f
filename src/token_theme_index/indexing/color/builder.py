"""
builder.py
==========

Does: Fill a TokenIndex from a multi-theme dataset. Only the Dark/Light theme
      partitions (or, for flat token lists, a source path carrying a recognized
      UI marker) are read; every override is classified, named and stored as a
      ColorEntry. The unthemed cache is refreshed at the end of each pass.
Returns: build_index() / build_index_from_path() → "" (template sentinel);
         the *_with_report variants → BuildReport.
Used by: The orchestrator (default index), the demo CLI and tests.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any, Optional

from token_theme_index.indexing.general.utils.log import debug

from .naming import resolve_name
from .settings import DEFAULT_SETTINGS, IndexSettings
from .style import classify_style
from .token_index import TokenIndex
from .types import ColorEntry, MalformedTokenError, RawToken, ThemeRecord

__all__ = [
    "BuildReport",
    "build_index",
    "build_index_with_report",
    "build_index_from_path",
    "build_index_from_path_with_report",
    "theme_id_for_path",
]

log = logging.getLogger(__name__)

_TOPIC = "index"


@dataclass
class BuildReport:
    seen: int = 0
    indexed: int = 0
    duplicates: int = 0
    skipped: int = 0
    themes: tuple[str, ...] = ()


# ─────────────────────────────────────────────────────────────────────────────
# Per-token step (shared by both variants)
# ─────────────────────────────────────────────────────────────────────────────
def _index_token(
    record: Any,
    theme_id: str,
    brand: Optional[str],
    index: TokenIndex,
    settings: IndexSettings,
    report: BuildReport,
) -> None:
    report.seen += 1
    try:
        token = RawToken.from_record(record)
    except MalformedTokenError as e:
        log.warning("Skipping malformed token in theme %r: %s", theme_id, e)
        report.skipped += 1
        return

    style = classify_style(token, settings)
    if style is None:
        debug(f"{token.name!r}: no recognized collection", topic=_TOPIC)
        report.skipped += 1
        return

    resolution = resolve_name(token, style, brand, settings)
    if not resolution.ok:
        log.warning("Cannot name token %r in theme %r: %s", token.name, theme_id, resolution.reason)
        report.skipped += 1
        return

    if token.value is None:
        log.warning("Token %r in theme %r has no value", resolution.name, theme_id)
        report.skipped += 1
        return

    entry = ColorEntry(theme_id=theme_id, value=token.value, style=style, name=resolution.name)
    if index.add(entry):
        report.indexed += 1
        debug(f"{entry.name} [{theme_id}] = {entry.value.hex}", topic=_TOPIC)
    else:
        report.duplicates += 1


def _finish(index: TokenIndex, report: BuildReport) -> BuildReport:
    index.refresh_unthemed()
    log.debug(
        "Build pass: seen=%d indexed=%d duplicates=%d skipped=%d themes=%s",
        report.seen, report.indexed, report.duplicates, report.skipped, report.themes,
    )
    return report


# ─────────────────────────────────────────────────────────────────────────────
# Dataset variant (theme display names)
# ─────────────────────────────────────────────────────────────────────────────
def build_index_with_report(
    theme_data: Mapping[str, Any],
    brand: Optional[str] = None,
    *,
    index: TokenIndex,
    settings: Optional[IndexSettings] = None,
) -> BuildReport:
    """
    Does: Index the overrides of every theme whose stripped display name is a
          primary theme id, using that stripped name as the entry theme id.
    """
    settings = settings or index.settings
    report = BuildReport()
    themes: list[str] = []

    for key, raw_theme in (theme_data or {}).items():
        try:
            theme = ThemeRecord.from_record(key, raw_theme)
        except MalformedTokenError as e:
            log.warning("Skipping theme %r: %s", key, e)
            continue

        theme_id = theme.name.strip()
        if theme_id not in settings.primary_theme_ids:
            debug(f"theme {theme.name!r} ignored", topic=_TOPIC)
            continue

        themes.append(theme_id)
        for record in theme.overridden_tokens.values():
            _index_token(record, theme_id, brand, index, settings, report)

    report.themes = tuple(themes)
    return _finish(index, report)


def build_index(
    theme_data: Mapping[str, Any],
    brand: Optional[str] = None,
    *,
    index: TokenIndex,
    settings: Optional[IndexSettings] = None,
) -> str:
    build_index_with_report(theme_data, brand, index=index, settings=settings)
    return ""


# ─────────────────────────────────────────────────────────────────────────────
# Path variant (flat token list + source path)
# ─────────────────────────────────────────────────────────────────────────────
def theme_id_for_path(
    source_path: Optional[str],
    settings: IndexSettings = DEFAULT_SETTINGS,
) -> Optional[str]:
    """Does: First configured marker contained in `source_path`, else None."""
    if not source_path:
        return None
    for marker in settings.path_theme_markers:
        if marker in source_path:
            return marker
    return None


def build_index_from_path_with_report(
    tokens: Iterable[Any],
    source_path: str,
    brand: Optional[str] = None,
    *,
    index: TokenIndex,
    settings: Optional[IndexSettings] = None,
) -> BuildReport:
    settings = settings or index.settings
    report = BuildReport()

    theme_id = theme_id_for_path(source_path, settings)
    if theme_id is None:
        log.info("No theme marker in path %r; nothing indexed", source_path)
        return _finish(index, report)

    report.themes = (theme_id,)
    for record in tokens or ():
        _index_token(record, theme_id, brand, index, settings, report)
    return _finish(index, report)


def build_index_from_path(
    tokens: Iterable[Any],
    source_path: str,
    brand: Optional[str] = None,
    *,
    index: TokenIndex,
    settings: Optional[IndexSettings] = None,
) -> str:
    build_index_from_path_with_report(tokens, source_path, brand, index=index, settings=settings)
    return ""
