# tests/conftest.py
from __future__ import annotations

import copy

import pytest

from linguist_termcolor.index import build_index
from linguist_termcolor.linguist import parse_dataset

# Sous-ensemble réaliste de languages.yml (couleurs réelles de Linguist)
RAW_LANGUAGES = {
    "Rust": {
        "type": "programming",
        "color": "#dea584",
        "aliases": ["rs"],
        "extensions": [".rs", ".rs.in"],
        "language_id": 327,
    },
    "Python": {
        "type": "programming",
        "color": "#3572A5",
        "aliases": ["python3", "rusthon"],
        "extensions": [".py", ".pyw"],
    },
    "C++": {
        "color": "#f34b7d",
        "aliases": ["cpp"],
        "extensions": [".cpp", ".h", ".h++"],
    },
    "Objective-C": {
        "color": "#438eff",
        "aliases": ["obj-c", "objc", "objectivec"],
        "extensions": [".m", ".h"],
    },
    "Vim Script": {
        "color": "#199f4b",
        "aliases": ["vim", "viml", "nvim"],
        "extensions": [".vim", ".vmb"],
    },
    "Text": {
        "type": "prose",
        "extensions": [".txt", ".fr"],
    },
    "JSON": {
        "color": "#292929",
        "extensions": [".json"],
    },
}


@pytest.fixture
def raw_languages():
    """Does: Fresh, mutable copy of the sample dataset."""
    return copy.deepcopy(RAW_LANGUAGES)


@pytest.fixture
def entries(raw_languages):
    return parse_dataset(raw_languages)


@pytest.fixture
def index(entries):
    return build_index(entries)
