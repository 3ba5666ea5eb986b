# src/linguist_termcolor/linguist/dataset.py

"""Parse GitHub Linguist's ``languages.yml`` into language entries.

Accepts the already-decoded mapping, YAML/JSON text, or a local file path.
Only ``color``, ``aliases`` and ``extensions`` are read; other fields are
ignored. Any malformed entry fails the whole load: there is no partial dataset.

See https://github.com/github-linguist/linguist/blob/master/lib/linguist/languages.yml
"""

from __future__ import annotations

import json
import logging
import os
import re
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Literal

import yaml

from linguist_termcolor.color import Color
from linguist_termcolor.index import LanguageEntry

Format = Literal["yaml", "json"]
__all__ = [
    "Format",
    "parse_dataset",
    "load_dataset_text",
    "load_dataset",
    "DatasetParseError",
    "DatasetNotFound",
]


# ── Exceptions ───────────────────────────────────────────────────────────────
class DatasetParseError(ValueError):
    """Raise when the dataset or one of its entries is malformed."""


class DatasetNotFound(FileNotFoundError):
    """Raise when a local dataset file cannot be read."""


log = logging.getLogger(__name__)

_SUFFIX_FORMATS: dict[str, Format] = {".yml": "yaml", ".yaml": "yaml", ".json": "json"}

# languages.yml colors are always "#RRGGBB"
_HEX_COLOR_RE = re.compile(r"#[0-9a-fA-F]{6}")


def _string_list(name: str, field: str, value: Any) -> tuple[str, ...]:
    """Coerce an optional list-of-strings field; null/missing means empty."""
    if value is None:
        return ()
    if not isinstance(value, list):
        raise DatasetParseError(
            f"{name}: '{field}' must be a list, got {type(value).__name__}"
        )
    bad = [x for x in value if not isinstance(x, str)]
    if bad:
        raise DatasetParseError(
            f"{name}: '{field}' must contain only strings (first bad: {bad[0]!r})"
        )
    return tuple(value)


def _parse_entry(key: str, raw: Any) -> LanguageEntry:
    if raw is None:
        raw = {}
    if not isinstance(raw, Mapping):
        raise DatasetParseError(f"{key}: expected a mapping, got {type(raw).__name__}")

    color = raw.get("color")
    if color is not None:
        if not isinstance(color, str):
            raise DatasetParseError(
                f"{key}: 'color' must be a hex string, got {type(color).__name__}"
            )
        if not _HEX_COLOR_RE.fullmatch(color):
            raise DatasetParseError(f"{key}: invalid color {color!r} (expected #RRGGBB)")
        color = Color.from_hex(color)

    return LanguageEntry(
        name=key.lower(),
        color=color,
        aliases=_string_list(key, "aliases", raw.get("aliases")),
        extensions=_string_list(key, "extensions", raw.get("extensions")),
    )


def parse_dataset(raw: Any) -> dict[str, LanguageEntry]:
    """Turn ``{name: {color, aliases, extensions, ...}}`` into entries keyed by
    lowercase name."""
    if not isinstance(raw, Mapping):
        raise DatasetParseError(f"dataset must be a mapping, got {type(raw).__name__}")

    entries: dict[str, LanguageEntry] = {}
    for key, value in raw.items():
        if not isinstance(key, str):
            raise DatasetParseError(f"language names must be strings, got {key!r}")
        entry = _parse_entry(key, value)
        if entry.name in entries:
            log.warning("Duplicate language %r after lowercasing; keeping the last one.", key)
        entries[entry.name] = entry

    log.debug("Parsed %d languages.", len(entries))
    return entries


def load_dataset_text(text: str, fmt: Format = "yaml") -> dict[str, LanguageEntry]:
    """Decode YAML or JSON text and parse it."""
    try:
        if fmt == "yaml":
            data = yaml.safe_load(text)
        elif fmt == "json":
            data = json.loads(text)
        else:
            raise ValueError(f"Unknown format '{fmt}'")
    except (yaml.YAMLError, json.JSONDecodeError) as e:
        raise DatasetParseError(f"Invalid {fmt.upper()} dataset: {e}") from e
    return parse_dataset(data)


def load_dataset(
    file: str | os.PathLike[str],
    *,
    encoding: str = "utf-8",
) -> dict[str, LanguageEntry]:
    """Load a local ``languages.yml`` (or ``.yaml``/``.json``); format by suffix."""
    path = Path(os.path.expanduser(os.fspath(file))).resolve()
    if not path.is_file():
        raise DatasetNotFound(f"Dataset file not found: {path}")

    fmt = _SUFFIX_FORMATS.get(path.suffix.lower(), "yaml")
    try:
        text = path.read_text(encoding=encoding, errors="strict")
    except UnicodeDecodeError as e:
        raise DatasetParseError(f"{path.name}: not valid {encoding}: {e}") from e
    except OSError as e:
        raise DatasetNotFound(f"Cannot read {path}: {e}") from e

    log.info("Loading dataset from %s", path)
    return load_dataset_text(text, fmt)
