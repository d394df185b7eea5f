# token_theme_index/indexing/__init__.py

"""
indexing.
=========

Does: Group the color-domain index (`color`) and the shared helpers (`general`)
      used to build and query multi-theme design-token catalogs.
Used by: The orchestrator, the demo CLI and template integrations.
"""

__all__: list[str] = []
__docformat__ = "google"
