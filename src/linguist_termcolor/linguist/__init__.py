"""
linguist
========

Does: Load GitHub Linguist's language dataset from text, a local file or
      the network into LanguageEntry values.
Example:
    entries = fetch_dataset(); index = build_index(entries)
"""

from __future__ import annotations

from .dataset import (
    DatasetNotFound,
    DatasetParseError,
    load_dataset,
    load_dataset_text,
    parse_dataset,
)
from .fetch import DatasetFetchError, fetch_dataset, fetch_dataset_text

__all__ = [
    "DatasetNotFound",
    "DatasetParseError",
    "DatasetFetchError",
    "parse_dataset",
    "load_dataset",
    "load_dataset_text",
    "fetch_dataset",
    "fetch_dataset_text",
]

__docformat__ = "google"
