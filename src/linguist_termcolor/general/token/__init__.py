"""
token package.
==============

Does: Expose the shared tokenizer used to key the search index.
Returns: tokenize(), index_tokens().
"""

from __future__ import annotations

from .tokenize import index_tokens, tokenize

__all__ = [
    "tokenize",
    "index_tokens",
]

__docformat__ = "google"
