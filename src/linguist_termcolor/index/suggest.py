"""
suggest.py

Does: Offer close index tokens for query words that matched nothing
      ("pyhton" → "python"), using rapidfuzz similarity.
Returns: suggest() for the CLI's "nothing found" message.
"""

from __future__ import annotations

import logging
from typing import List

from rapidfuzz import fuzz, process

from linguist_termcolor.general.token import index_tokens

from .search_index import SearchIndex

__all__ = ["suggest"]

log = logging.getLogger(__name__)

# ── Tunables ─────────────────────────────────────────────────────────────────
DEFAULT_CUTOFF = 80
DEFAULT_LIMIT = 3


def suggest(
    index: SearchIndex,
    text: str,
    limit: int = DEFAULT_LIMIT,
    cutoff: float = DEFAULT_CUTOFF,
) -> List[str]:
    """
    Does: For each unmatched token of `text`, rank known tokens by fuzz.ratio.
    Returns: Up to `limit` distinct tokens scoring >= cutoff, best first.
    """
    missing = [t for t in index_tokens(text) if t not in index]
    if not missing or limit <= 0:
        return []

    choices = list(index)
    scored: dict[str, float] = {}
    for token in missing:
        for choice, score, _ in process.extract(
            token, choices, scorer=fuzz.ratio, limit=limit, score_cutoff=cutoff
        ):
            if score > scored.get(choice, -1.0):
                scored[choice] = score

    ranked = sorted(scored, key=lambda c: (-scored[c], c))[:limit]
    log.debug("suggestions for %r: %s", text, ranked)
    return ranked
