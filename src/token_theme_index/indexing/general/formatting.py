# src/token_theme_index/indexing/general/formatting.py
from __future__ import annotations

"""
formatting.py

Does: Small stateless helpers consumed by templates next to the color index:
      doc-comment prefixing, cycle-safe pretty JSON, ISO date stamps,
      token-group id flattening and the reserved-color filter.
Returns: Plain strings, lists and booleans.
Used by: The orchestrator's template function table and the demo CLI.
"""

import dataclasses
import json
import logging
from collections.abc import Iterable, Mapping
from datetime import date
from enum import Enum
from typing import Any, Optional

__all__ = [
    "CIRCULAR_MARKER",
    "RESERVED_COLOR_NAMES",
    "create_documentation_comment",
    "object_to_pretty_json",
    "current_date_stamp",
    "token_group_ids",
    "is_color_allowed",
]

__docformat__ = "google"

log = logging.getLogger(__name__)

CIRCULAR_MARKER = "[Circular]"
DOC_COMMENT_PREFIX = "/// "
RESERVED_COLOR_NAMES: frozenset[str] = frozenset({"Black", "White"})


# ─────────────────────────────────────────────────────────────────────────────
# Documentation comments
# ─────────────────────────────────────────────────────────────────────────────
def create_documentation_comment(text: str, indentation: str) -> str:
    """
    Does: Trim `text`, prefix every line with '/// ' and put `indentation`
          in front of every line after the first.
    Returns: The joined comment block.
    """
    lines = (text or "").strip().split("\n")
    return "\n".join(
        (indentation if i > 0 else "") + f"{DOC_COMMENT_PREFIX}{line}"
        for i, line in enumerate(lines)
    )


# ─────────────────────────────────────────────────────────────────────────────
# Pretty JSON
# ─────────────────────────────────────────────────────────────────────────────
def _to_jsonable(obj: Any, ancestors: set[int]) -> Any:
    if isinstance(obj, Enum):
        return obj.value
    if obj is None or isinstance(obj, (str, int, float, bool)):
        return obj

    oid = id(obj)
    if oid in ancestors:
        return CIRCULAR_MARKER

    ancestors.add(oid)
    try:
        if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
            return {
                f.name: _to_jsonable(getattr(obj, f.name), ancestors)
                for f in dataclasses.fields(obj)
            }
        if isinstance(obj, Mapping):
            return {str(k): _to_jsonable(v, ancestors) for k, v in obj.items()}
        if isinstance(obj, (list, tuple, set, frozenset)):
            return [_to_jsonable(v, ancestors) for v in obj]
        return str(obj)
    finally:
        ancestors.discard(oid)


def object_to_pretty_json(obj: Any) -> str:
    """
    Does: Render `obj` as 2-space indented JSON; a container that appears again
          inside itself is written as "[Circular]" instead of recursing.
    Returns: JSON text.
    """
    return json.dumps(_to_jsonable(obj, set()), indent=2, ensure_ascii=False)


# ─────────────────────────────────────────────────────────────────────────────
# Misc
# ─────────────────────────────────────────────────────────────────────────────
def current_date_stamp(today: Optional[date] = None) -> str:
    """Does: Return today's date (or `today`) as YYYY-MM-DD."""
    return (today or date.today()).isoformat()


def token_group_ids(group: Optional[Mapping[str, Any]]) -> list[str]:
    """
    Does: Flatten a token group's direct token ids and child group ids.
    Returns: tokenIds followed by childrenIds; non-list fields count as empty.
    """
    if not group:
        return []
    token_ids = group.get("tokenIds")
    children_ids = group.get("childrenIds")
    out: list[str] = []
    out.extend(token_ids if isinstance(token_ids, list) else [])
    out.extend(children_ids if isinstance(children_ids, list) else [])
    return out


def is_color_allowed(color: Any, reserved: Iterable[str] = RESERVED_COLOR_NAMES) -> bool:
    """Does: Reject the reserved color names (Black/White) by exact match."""
    name = color.get("name") if isinstance(color, Mapping) else getattr(color, "name", None)
    return name not in frozenset(reserved)
