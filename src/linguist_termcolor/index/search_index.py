"""
search_index.py
===============

Does: Build a token → [(language, color)] inverted index from language entries
      (names, aliases and file extensions) and answer free-text queries
      against it.
Returns: LanguageEntry, SearchIndex, build_index(), query().
Used By: The `for` CLI command; fuzzy suggestions read the token set.

The index is a plain value: build it once, share it read-only.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Iterator, List, Mapping, Optional, Tuple

from linguist_termcolor.color import Color
from linguist_termcolor.general.token import index_tokens
from linguist_termcolor.general.utils import debug

__all__ = [
    "LanguageEntry",
    "SearchIndex",
    "Posting",
    "build_index",
    "query",
]
__docformat__ = "google"

logger = logging.getLogger(__name__)

# (canonical lowercase name, color)
Posting = Tuple[str, Color]


@dataclass(frozen=True)
class LanguageEntry:
    """One language of the dataset; only `color` is required to be searchable."""

    name: str
    color: Optional[Color] = None
    aliases: Tuple[str, ...] = field(default_factory=tuple)
    extensions: Tuple[str, ...] = field(default_factory=tuple)


class SearchIndex(Mapping[str, Tuple[Posting, ...]]):
    """Immutable token → postings mapping; missing tokens read as empty."""

    def __init__(self, buckets: Mapping[str, Tuple[Posting, ...]]):
        self._buckets = MappingProxyType(dict(buckets))

    def __getitem__(self, token: str) -> Tuple[Posting, ...]:
        return self._buckets[token]

    def __iter__(self) -> Iterator[str]:
        return iter(self._buckets)

    def __len__(self) -> int:
        return len(self._buckets)

    def lookup(self, token: str) -> Tuple[Posting, ...]:
        """Does: Return the bucket for an already-normalized token, () if absent."""
        return self._buckets.get(token, ())

    def __repr__(self) -> str:
        return f"SearchIndex(tokens={len(self)})"


def build_index(entries: Mapping[str, LanguageEntry]) -> SearchIndex:
    """Does: Index every colored entry under each token of its name, aliases
    and extensions. Entries without a color are skipped. Postings are not
    deduplicated: an entry appears once per token occurrence.
    """
    buckets: Dict[str, List[Posting]] = defaultdict(list)
    skipped = 0
    for key, entry in entries.items():
        if entry.color is None:
            skipped += 1
            continue
        name = key.lower()
        for keyword in (name, *entry.aliases, *entry.extensions):
            for token in index_tokens(keyword):
                buckets[token].append((name, entry.color))

    index = SearchIndex({t: tuple(p) for t, p in buckets.items()})
    debug(
        f"indexed {len(entries) - skipped} languages into {len(index)} tokens "
        f"({skipped} without color)",
        topic="index",
    )
    return index


def query(index: SearchIndex, text: str) -> Dict[str, Color]:
    """Does: Union the buckets of every token in `text`, keyed by language.

    Returns: {name: color} ordered by name; {} when nothing matched.
    """
    found: Dict[str, Color] = {}
    for token in index_tokens(text):
        for name, color in index.lookup(token):
            found[name] = color
    logger.debug("query %r matched %d languages", text, len(found))
    return {name: found[name] for name in sorted(found)}
