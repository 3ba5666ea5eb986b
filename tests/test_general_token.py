from __future__ import annotations

import pytest

from linguist_termcolor.general.token import index_tokens, tokenize

"""
Tests: general/token/tokenize.py

- maximal runs of letters/digits/'+*_#-'
- case preserved by tokenize(), lowered by index_tokens()
"""


@pytest.mark.parametrize(
    "text,expect",
    [
        ("objective-c", ["objective-c"]),
        ("C++", ["C++"]),
        ("F#", ["F#"]),
        ("foo bar", ["foo", "bar"]),
        ("foo/bar", ["foo", "bar"]),
        (".rs.in", ["rs", "in"]),
        ("a*b_c", ["a*b_c"]),
        ("x, y; z!", ["x", "y", "z"]),
        ("café 2", ["café", "2"]),
        ("", []),
        ("  / . ", []),
    ],
)
def test_tokenize_splits_on_separators(text, expect):
    assert tokenize(text) == expect


def test_tokenize_preserves_case():
    assert tokenize("Vim Script") == ["Vim", "Script"]


def test_tokenize_maps_fancy_hyphens():
    assert tokenize("Objective‐C") == ["Objective-C"]
    assert tokenize("Objective–C") == ["Objective-C"]


def test_tokenize_non_string_is_empty():
    assert tokenize(None) == []  # type: ignore[arg-type]


def test_index_tokens_lowercases():
    assert index_tokens("C++ / Objective-C") == ["c++", "objective-c"]
    assert index_tokens("RUST") == index_tokens("rust") == ["rust"]
