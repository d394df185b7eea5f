"""
token_theme_index
=================

Does: Root package initializer for the design-token theme-resolution index.
Returns: Exposes the `indexing` subpackage through a stable namespace.
Used by: All higher-level imports starting from `token_theme_index.*`.
"""

__all__: list[str] = []
__docformat__ = "google"
