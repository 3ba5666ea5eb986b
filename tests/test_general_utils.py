# tests/test_general_utils.py
"""Tests for the topic-gated debug logger and env-driven settings."""

from __future__ import annotations

from pathlib import Path

import pytest

from linguist_termcolor import config
from linguist_termcolor.general.utils import log as LOG
from linguist_termcolor.index import build_index


@pytest.fixture(autouse=True)
def _reset_env(monkeypatch):
    monkeypatch.delenv("LINGUIST_DEBUG_TOPICS", raising=False)
    LOG.reload_topics()
    yield
    monkeypatch.delenv("LINGUIST_DEBUG_TOPICS", raising=False)
    LOG.reload_topics()


# ---------- log.debug ----------
def test_log_debug_silent_by_default(capsys):
    LOG.debug("quiet", topic="index")
    assert capsys.readouterr().err == ""


def test_log_debug_respects_topics_env(monkeypatch, capsys):
    monkeypatch.setenv("LINGUIST_DEBUG_TOPICS", "index")
    LOG.reload_topics()

    LOG.debug("hello on index", topic="index")
    LOG.debug("should be silent", topic="other")

    captured = capsys.readouterr()
    assert "hello on index" in captured.err
    assert "[index][DEBUG]" in captured.err
    assert "should be silent" not in captured.err


def test_log_debug_all_topics(monkeypatch, capsys):
    monkeypatch.setenv("LINGUIST_DEBUG_TOPICS", "all")
    LOG.reload_topics()

    LOG.debug("m1", topic="foo")
    LOG.debug("m2", topic="bar", level="warning")

    captured = capsys.readouterr()
    assert "m1" in captured.err and "[bar][WARNING] m2" in captured.err


def test_build_index_reports_stats(monkeypatch, capsys, entries):
    monkeypatch.setenv("LINGUIST_DEBUG_TOPICS", "index")
    LOG.reload_topics()
    build_index(entries)
    assert "indexed 6 languages" in capsys.readouterr().err


# ---------- config ----------
def test_settings_defaults(monkeypatch):
    for var in ("LINGUIST_URL", "LINGUIST_TIMEOUT", "LINGUIST_RETRIES", "LINGUIST_COLOR_SPACE", "LINGUIST_DATASET"):
        monkeypatch.delenv(var, raising=False)
    s = config.get_settings()
    assert s.linguist_url == config.DEFAULT_LINGUIST_URL
    assert s.timeout == 10.0 and s.retries == 2
    assert s.color_space == "rgb"
    assert s.dataset_path is None


def test_settings_from_env(monkeypatch, tmp_path):
    monkeypatch.setenv("LINGUIST_TIMEOUT", "2.5")
    monkeypatch.setenv("LINGUIST_RETRIES", "0")
    monkeypatch.setenv("LINGUIST_COLOR_SPACE", "lab")
    monkeypatch.setenv("LINGUIST_DATASET", str(tmp_path / "languages.yml"))
    s = config.get_settings()
    assert (s.timeout, s.retries, s.color_space) == (2.5, 0, "lab")
    assert s.dataset_path == Path(tmp_path / "languages.yml").resolve()
