"""
utils package.
==============

Does: Provide the topic-gated debug logger shared by the index and CLI.
Returns: Public API via debug/reload_topics/is_enabled.
"""

from __future__ import annotations

from .log import (
    debug,
    is_enabled,
    reload_topics,
)

__all__ = [
    "debug",
    "is_enabled",
    "reload_topics",
]
