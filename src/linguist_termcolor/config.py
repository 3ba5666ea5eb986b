"""
config.py

Does: Hold env-overridable settings for dataset retrieval and the default
      color metric. Values are read from the environment on demand so that a
      `.env` loaded by the CLI (python-dotenv) is honoured.
Returns: Settings, get_settings(), and import-time defaults.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

__all__ = [
    "DEFAULT_LINGUIST_URL",
    "DEFAULT_TIMEOUT",
    "DEFAULT_RETRIES",
    "DEFAULT_COLOR_SPACE",
    "Settings",
    "get_settings",
]

DEFAULT_LINGUIST_URL = (
    "https://raw.githubusercontent.com/github/linguist/master/lib/linguist/languages.yml"
)
DEFAULT_TIMEOUT = 10.0  # seconds
DEFAULT_RETRIES = 2
DEFAULT_COLOR_SPACE = "rgb"


@dataclass(frozen=True)
class Settings:
    linguist_url: str = DEFAULT_LINGUIST_URL
    timeout: float = DEFAULT_TIMEOUT
    retries: int = DEFAULT_RETRIES
    color_space: str = DEFAULT_COLOR_SPACE
    dataset_path: Optional[Path] = None


def get_settings() -> Settings:
    """Does: Snapshot LINGUIST_* environment variables into a Settings."""
    dataset = os.getenv("LINGUIST_DATASET")
    return Settings(
        linguist_url=os.getenv("LINGUIST_URL", DEFAULT_LINGUIST_URL),
        timeout=float(os.getenv("LINGUIST_TIMEOUT", str(DEFAULT_TIMEOUT))),
        retries=int(os.getenv("LINGUIST_RETRIES", str(DEFAULT_RETRIES))),
        color_space=os.getenv("LINGUIST_COLOR_SPACE", DEFAULT_COLOR_SPACE),
        dataset_path=Path(os.path.expanduser(dataset)).resolve() if dataset else None,
    )
