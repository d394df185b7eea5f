# constants.py
# ============

"""
constants.
=========

Does: Define the immutable defaults of the color index: recognized theme ids,
      collection names, path markers and the brand naming rules.
Used By: Index settings, style classification, name resolution, builders and
         consistency analysis.
Returns: Pure data structures only (no side effects).
"""

# ── 1) Theme partitions ──────────────────────────────────────────────────────

DARK_THEME_ID = "Dark"
LIGHT_THEME_ID = "Light"

# Display names admitted by the dataset builder (compared after strip())
PRIMARY_THEME_IDS: tuple[str, ...] = (DARK_THEME_ID, LIGHT_THEME_ID)

# Source-path markers for the path-driven builder, checked in this order.
# UI variants go first so "LightUI" never degrades to a shorter marker.
PATH_THEME_MARKERS: tuple[str, ...] = ("LightUI", "DarkUI", "Still", "Set")


# ── 2) Collections ───────────────────────────────────────────────────────────

COLLECTION_CODE_NAME = "collection"
COLOR_STYLES_COLLECTION = "Color Styles"
BRAND_COLOR_STYLES_COLLECTION = "Brand Color Styles"


# ── 3) Naming ────────────────────────────────────────────────────────────────

ORIGIN_PATH_SEPARATOR = "/"
GRADIENT_BASE_MARKER = "GradientBase"
BRAND_GRADIENT_SUFFIX = "GB"


__all__ = [
    "DARK_THEME_ID",
    "LIGHT_THEME_ID",
    "PRIMARY_THEME_IDS",
    "PATH_THEME_MARKERS",
    "COLLECTION_CODE_NAME",
    "COLOR_STYLES_COLLECTION",
    "BRAND_COLOR_STYLES_COLLECTION",
    "ORIGIN_PATH_SEPARATOR",
    "GRADIENT_BASE_MARKER",
    "BRAND_GRADIENT_SUFFIX",
]
