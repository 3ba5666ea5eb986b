"""
index
=====

Does: Expose the language search index and query helpers.
Example:
    idx = build_index(entries); query(idx, "rust")  # {"rust": Color(...)}
"""

from __future__ import annotations

from .search_index import LanguageEntry, Posting, SearchIndex, build_index, query
from .suggest import suggest

__all__ = [
    "LanguageEntry",
    "Posting",
    "SearchIndex",
    "build_index",
    "query",
    "suggest",
]

__docformat__ = "google"
