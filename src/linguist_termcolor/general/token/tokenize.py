# src/linguist_termcolor/general/token/tokenize.py
"""
tokenize.

Does: Split free text into search tokens: maximal runs of letters, digits and
      the symbols ``+ * _ # -`` so that "c++", "objective-c" or "f#" survive
      as single tokens. Slashes, spaces and other punctuation separate tokens.
Returns: tokenize() (case preserved) and index_tokens() (lowercased).
Used by: Search index construction, query lookup and fuzzy suggestions.
"""

from __future__ import annotations

import re
import unicodedata

__all__ = [
    "tokenize",
    "index_tokens",
]

# \w covers Unicode letters, digits and '_'
_WORD_RE = re.compile(r"[\w+*#-]+")

# ‐ ‑ ‒ – — −
_FANCY_HYPHENS = {"‐", "‑", "‒", "–", "—", "−"}


def _unicode_hygiene(s: str) -> str:
    """
    Does: NFKC fold and map fancy hyphens to ASCII '-'.
    Returns: Cleaned string.
    """
    s = unicodedata.normalize("NFKC", s)
    for ch in _FANCY_HYPHENS:
        s = s.replace(ch, "-")
    return s


def tokenize(text: str) -> list[str]:
    """
    Does: Extract tokens from `text` without changing their case.
    Returns: List of tokens in order of appearance (duplicates kept).
    """
    if not isinstance(text, str):
        return []
    return _WORD_RE.findall(_unicode_hygiene(text))


def index_tokens(text: str) -> list[str]:
    """
    Does: Tokenize and lowercase; the single key function shared by indexing
          and querying.
    Returns: List of lowercase tokens.
    """
    return [t.lower() for t in tokenize(text)]
