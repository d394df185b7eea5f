# token_theme_index/indexing/color/types.py
from __future__ import annotations

"""
types.py.

Does: Define the typed records of the color index: raw token records read from
      a theme dataset, the recognized collection styles, and the immutable
      ColorEntry stored per canonical name.
Returns: Frozen dataclasses with `from_record()` constructors that validate shape.
Used by: Style classification, name resolution, builders and queries.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional

import webcolors

from .constants import BRAND_COLOR_STYLES_COLLECTION, COLOR_STYLES_COLLECTION

__all__ = [
    "MalformedTokenError",
    "ColorStyle",
    "ColorValue",
    "PropertyOption",
    "TokenProperty",
    "TokenOrigin",
    "RawToken",
    "ThemeRecord",
    "ColorEntry",
    "NameResolution",
]

__docformat__ = "google"


class MalformedTokenError(ValueError):
    """Raise when a raw record does not have the shape of a token/theme."""


class ColorStyle(str, Enum):
    """Recognized color collections; values are the collection option names."""

    COLOR_STYLES = COLOR_STYLES_COLLECTION
    BRAND_COLOR_STYLES = BRAND_COLOR_STYLES_COLLECTION


def _optional_str(record: Mapping[str, Any], key: str) -> Optional[str]:
    value = record.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise MalformedTokenError(f"'{key}' must be a string, got {type(value).__name__}")
    return value


def _require_mapping(obj: Any, what: str) -> Mapping[str, Any]:
    if not isinstance(obj, Mapping):
        raise MalformedTokenError(f"{what} must be a mapping, got {type(obj).__name__}")
    return obj


# ── Values ───────────────────────────────────────────────────────────────────
@dataclass(frozen=True)
class ColorValue:
    """Opaque token color; the raw `hex` string is the identity used in comparisons."""

    hex: str
    r: Optional[int] = None
    g: Optional[int] = None
    b: Optional[int] = None
    a: Optional[int] = None

    @property
    def hex_key(self) -> str:
        """Lenient key (normalized web hex, else trimmed lowercase text) for opt-in matching."""
        raw = self.hex.strip()
        try:
            return webcolors.normalize_hex(raw if raw.startswith("#") else f"#{raw}")
        except ValueError:
            return raw.lower()

    @classmethod
    def from_raw(cls, obj: Any) -> ColorValue:
        if isinstance(obj, ColorValue):
            return obj
        if isinstance(obj, str):
            return cls(hex=obj)
        if isinstance(obj, Mapping):
            hx = obj.get("hex")
            if not isinstance(hx, str):
                raise MalformedTokenError("color value has no 'hex' string")
            channels = {k: obj.get(k) for k in ("r", "g", "b", "a")}
            return cls(hex=hx, **{k: v for k, v in channels.items() if isinstance(v, int)})
        raise MalformedTokenError(f"unsupported color value: {type(obj).__name__}")


# ── Raw token records ────────────────────────────────────────────────────────
@dataclass(frozen=True)
class PropertyOption:
    id: str
    name: str


@dataclass(frozen=True)
class TokenProperty:
    code_name: str
    options: tuple[PropertyOption, ...] = ()

    @classmethod
    def from_record(cls, record: Any) -> TokenProperty:
        record = _require_mapping(record, "token property")
        options = []
        for raw in record.get("options") or ():
            raw = _require_mapping(raw, "property option")
            options.append(PropertyOption(id=str(raw.get("id")), name=str(raw.get("name"))))
        return cls(code_name=str(record.get("codeName", "")), options=tuple(options))


@dataclass(frozen=True)
class TokenOrigin:
    name: Optional[str] = None
    id: Optional[str] = None


@dataclass(frozen=True)
class RawToken:
    """
    Does: Read-only view of a token override record.
    Notes: Only the shape is validated; `value`, `origin` and the collection
           fields stay optional and are checked by the components that need them.
    """

    name: Optional[str]
    value: Optional[ColorValue] = None
    parent_id: Optional[str] = None
    origin: Optional[TokenOrigin] = None
    collection_id: Optional[str] = None
    properties: tuple[TokenProperty, ...] = ()

    @classmethod
    def from_record(cls, record: Any) -> RawToken:
        if isinstance(record, RawToken):
            return record
        record = _require_mapping(record, "token record")

        raw_value = record.get("value")
        value = ColorValue.from_raw(raw_value) if raw_value is not None else None

        origin = None
        raw_origin = record.get("origin")
        if raw_origin is not None:
            raw_origin = _require_mapping(raw_origin, "token origin")
            origin = TokenOrigin(
                name=_optional_str(raw_origin, "name"),
                id=_optional_str(raw_origin, "id"),
            )

        property_values = record.get("propertyValues") or {}
        property_values = _require_mapping(property_values, "propertyValues")
        collection_id = property_values.get("collection")

        raw_props = record.get("properties") or ()
        if isinstance(raw_props, (str, bytes)) or not hasattr(raw_props, "__iter__"):
            raise MalformedTokenError("'properties' must be a list")

        return cls(
            name=_optional_str(record, "name"),
            value=value,
            parent_id=_optional_str(record, "parentId"),
            origin=origin,
            collection_id=str(collection_id) if collection_id else None,
            properties=tuple(TokenProperty.from_record(p) for p in raw_props),
        )


@dataclass(frozen=True)
class ThemeRecord:
    """A theme partition: display name plus its token overrides (id → record)."""

    key: str
    name: str
    overridden_tokens: Mapping[str, Any] = field(default_factory=dict)

    @classmethod
    def from_record(cls, key: str, record: Any) -> ThemeRecord:
        record = _require_mapping(record, f"theme '{key}'")
        name = record.get("name")
        if not isinstance(name, str):
            raise MalformedTokenError(f"theme '{key}' has no display name")
        tokens = record.get("overriddenTokens") or {}
        tokens = _require_mapping(tokens, f"theme '{key}' overriddenTokens")
        return cls(key=str(key), name=name, overridden_tokens=tokens)


# ── Index records ────────────────────────────────────────────────────────────
@dataclass(frozen=True)
class ColorEntry:
    theme_id: str
    value: ColorValue
    style: ColorStyle
    name: str


@dataclass(frozen=True)
class NameResolution:
    """Outcome of canonical-name derivation: `name` on success, `reason` on failure."""

    name: Optional[str] = None
    reason: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.name is not None

    @classmethod
    def failed(cls, reason: str) -> NameResolution:
        return cls(name=None, reason=reason)
