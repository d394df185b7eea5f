# token_theme_index/indexing/color/naming.py
from __future__ import annotations

"""
naming.py

Does: Derive the canonical (theme-independent) name of a color token.
      Brand-scoped tokens take their identity from the origin name (slashes
      removed) and get the brand folded in; plain color-style tokens keep
      their declared name.
Returns: resolve_name() → NameResolution (never raises on incomplete input).
Used by: Index builders.
"""

import logging
from typing import Optional

from .settings import DEFAULT_SETTINGS, IndexSettings
from .constants import ORIGIN_PATH_SEPARATOR
from .types import ColorStyle, NameResolution, RawToken

__all__ = ["base_name", "apply_brand", "resolve_name"]

__docformat__ = "google"

log = logging.getLogger(__name__)


def base_name(token: RawToken) -> Optional[str]:
    """
    Does: Origin name without '/' when the origin has a non-empty name,
          otherwise the declared token name.
    """
    origin = token.origin
    if origin is not None and origin.name:
        return origin.name.replace(ORIGIN_PATH_SEPARATOR, "")
    return token.name


def apply_brand(
    name: str,
    brand: Optional[str],
    settings: IndexSettings = DEFAULT_SETTINGS,
) -> str:
    """
    Does: 'GradientBase' → '<brand>GB' when present, else prefix with the brand.
    """
    brand = brand or ""
    marker = settings.gradient_base_marker
    if marker in name:
        return name.replace(marker, f"{brand}{settings.brand_gradient_suffix}")
    return f"{brand}{name}"


def resolve_name(
    token: RawToken,
    style: ColorStyle,
    brand: Optional[str] = None,
    settings: IndexSettings = DEFAULT_SETTINGS,
) -> NameResolution:
    """
    Does: Compute the index key for `token` under `style` and `brand`.
    Returns: NameResolution with `name`, or a failure carrying `reason`.
    """
    if style is ColorStyle.COLOR_STYLES:
        if not token.name:
            return NameResolution.failed("token has no declared name")
        return NameResolution(name=token.name)

    base = base_name(token)
    if not base:
        return NameResolution.failed("token has neither an origin name nor a declared name")
    return NameResolution(name=apply_brand(base, brand, settings))
