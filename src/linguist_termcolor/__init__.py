"""
linguist_termcolor
==================

Does: Look up GitHub Linguist language colors by name, alias or file
      extension, and map any color to its nearest xterm-256 palette entry
      under a selectable distance metric (rgb, cmyk, lab, xyz, hsl).
Example:
    index = build_index(fetch_dataset())
    for name, color in query(index, "rust").items():
        print(name, color.hex, nearest(color, metric="lab").index)
"""

from __future__ import annotations

from .color import (
    XTERM_PALETTE,
    Color,
    InvalidPaletteState,
    Metric,
    MetricConfigurationError,
    PaletteMatch,
    TermColor,
    TermColorMatch,
    distance,
    nearest,
    parse_metric,
)
from .general.token import index_tokens, tokenize
from .index import LanguageEntry, SearchIndex, build_index, query, suggest
from .linguist import (
    DatasetFetchError,
    DatasetNotFound,
    DatasetParseError,
    fetch_dataset,
    load_dataset,
    load_dataset_text,
    parse_dataset,
)

__all__ = [
    "Color",
    "Metric",
    "MetricConfigurationError",
    "parse_metric",
    "distance",
    "XTERM_PALETTE",
    "PaletteMatch",
    "InvalidPaletteState",
    "nearest",
    "TermColor",
    "TermColorMatch",
    "tokenize",
    "index_tokens",
    "LanguageEntry",
    "SearchIndex",
    "build_index",
    "query",
    "suggest",
    "DatasetParseError",
    "DatasetNotFound",
    "DatasetFetchError",
    "parse_dataset",
    "load_dataset",
    "load_dataset_text",
    "fetch_dataset",
]
__docformat__ = "google"
