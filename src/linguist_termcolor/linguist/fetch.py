"""
fetch.py
========

Does: Download GitHub Linguist's languages.yml over HTTP (with retries and
      jittered backoff) and parse it into language entries.
Returns: dict[name → LanguageEntry], or raises DatasetFetchError.
Used by: The `for` CLI command when no local dataset is configured.
"""

from __future__ import annotations

# ── Imports & Typing ─────────────────────────────────────────────────────────
import logging
import random
import time

import requests  # type: ignore[import-untyped]

from linguist_termcolor.config import DEFAULT_LINGUIST_URL, DEFAULT_RETRIES, DEFAULT_TIMEOUT
from linguist_termcolor.index import LanguageEntry

from .dataset import load_dataset_text

# ── Logger ───────────────────────────────────────────────────────────────────
logger = logging.getLogger(__name__)

# Backoff config
BACKOFF_BASE = 1.0  # base seconds added each attempt
BACKOFF_MIN = 1.2  # min multiplier
BACKOFF_SPREAD = 0.6  # random spread added to multiplier

# Single session for connection reuse
_session = requests.Session()

__all__ = [
    "DatasetFetchError",
    "fetch_dataset_text",
    "fetch_dataset",
]


class DatasetFetchError(RuntimeError):
    """Raise when the dataset cannot be downloaded."""


def _backoff_sleep(attempt: int) -> None:
    """Does: Sleep with exponential backoff + jitter based on attempt index.
    Args: attempt: 0-based attempt number.
    """
    sleep_s = (BACKOFF_BASE + attempt) * (BACKOFF_MIN + random.random() * BACKOFF_SPREAD)
    time.sleep(sleep_s)


def fetch_dataset_text(
    url: str = DEFAULT_LINGUIST_URL,
    timeout: float = DEFAULT_TIMEOUT,
    retries: int = DEFAULT_RETRIES,
) -> str:
    """Does: GET `url`, retrying connection errors and 5xx answers.
    Args: url: dataset location; timeout: seconds per attempt; retries: extra attempts.
    Returns: Response body as text.
    """
    logger.info("Fetching %s", url)
    last_error = "no attempt made"
    for attempt in range(retries + 1):
        try:
            response = _session.get(url, timeout=timeout)
        except (requests.ConnectionError, requests.Timeout) as e:
            last_error = str(e)
            logger.warning("[FETCH] attempt %d failed: %s", attempt + 1, e)
        else:
            if response.status_code < 500:
                try:
                    response.raise_for_status()
                except requests.HTTPError as e:
                    raise DatasetFetchError(f"GET {url} failed: {e}") from e
                return response.text
            last_error = f"HTTP {response.status_code}"
            logger.warning("[FETCH] attempt %d: status %s", attempt + 1, response.status_code)

        if attempt < retries:
            _backoff_sleep(attempt)

    raise DatasetFetchError(f"GET {url} failed after {retries + 1} attempts: {last_error}")


def fetch_dataset(
    url: str = DEFAULT_LINGUIST_URL,
    timeout: float = DEFAULT_TIMEOUT,
    retries: int = DEFAULT_RETRIES,
) -> dict[str, LanguageEntry]:
    """Does: Download and parse the Linguist dataset (YAML)."""
    return load_dataset_text(fetch_dataset_text(url, timeout=timeout, retries=retries), "yaml")
