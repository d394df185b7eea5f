"""
reverse_lookup.py
=================

Does: Map a raw color value back to its canonical name, searching only the
      unthemed sub-index (themed names have no single value to match).
      Hex strings match exactly unless `lenient=True`, which compares the
      webcolors-normalized form instead ("#FFF" == "#ffffff").
Returns: name_for_value() → str | None; find_color_key() over any sub-index.
Used by: Templates (getNameForColor) and the demo CLI.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any, Optional

from .token_index import TokenIndex
from .types import ColorEntry, ColorValue, MalformedTokenError

__all__ = ["find_color_key", "name_for_value"]

log = logging.getLogger(__name__)


def find_color_key(
    colors: Mapping[str, Sequence[ColorEntry]],
    value: ColorValue,
    *,
    lenient: bool = False,
) -> Optional[str]:
    """Does: Linear scan; name of the first entry whose hex matches `value`."""
    wanted = value.hex_key if lenient else value.hex
    for name, entries in colors.items():
        for entry in entries:
            candidate = entry.value.hex_key if lenient else entry.value.hex
            if candidate == wanted:
                return name
    return None


def name_for_value(value: Any, index: TokenIndex, *, lenient: bool = False) -> Optional[str]:
    """
    Does: Reverse lookup of a hex string / value mapping / ColorValue.
    Returns: Canonical name, or None when nothing unthemed matches.
    """
    try:
        color = ColorValue.from_raw(value)
    except MalformedTokenError as e:
        log.warning("Cannot look up color value %r: %s", value, e)
        return None
    return find_color_key(index.unthemed_view(), color, lenient=lenient)
