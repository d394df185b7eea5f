"""
general.
========

Does: Shared, domain-agnostic helpers (config loading, topic logging, text/JSON
      formatting) used by the color index and its callers.
"""

__all__: list[str] = []
__docformat__ = "google"
