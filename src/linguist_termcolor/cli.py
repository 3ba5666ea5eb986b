# src/linguist_termcolor/cli.py
"""
cli.py

Does: Command-line front end.
      `linguist-termcolor for rust`        → language colors + nearest xterm code
      `linguist-termcolor xterm '#dea584'` → nearest xterm code for given colors
      `-c/--colors {rgb,cmyk,lab,xyz,hsl}` picks the distance metric (default rgb).
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import Optional, Sequence

from dotenv import load_dotenv
from rich.console import Console

from .color import Color, Metric, MetricConfigurationError, TermColor, parse_metric
from .config import get_settings
from .index import build_index, query, suggest
from .linguist import (
    DatasetFetchError,
    DatasetNotFound,
    DatasetParseError,
    fetch_dataset,
    load_dataset,
)

log = logging.getLogger(__name__)


def _metric_arg(value: str) -> Metric:
    try:
        return parse_metric(value)
    except MetricConfigurationError as e:
        raise argparse.ArgumentTypeError(str(e)) from None


def build_parser() -> argparse.ArgumentParser:
    settings = get_settings()
    parser = argparse.ArgumentParser(
        prog="linguist-termcolor",
        description="Query GitHub Linguist's language colors and find the nearest xterm colors.",
    )
    parser.add_argument(
        "-c",
        "--colors",
        dest="metric",
        type=_metric_arg,
        default=settings.color_space,
        help="The color model used for distance calculation "
        f"({', '.join(m.value for m in Metric)}). Default: {settings.color_space}",
    )
    parser.add_argument(
        "--dataset",
        default=settings.dataset_path,
        help="Local languages.yml/.json to use instead of downloading it",
    )
    parser.add_argument("--debug", action="store_true", help="Verbose debug logs")

    sub = parser.add_subparsers(dest="command", required=True)
    p_for = sub.add_parser("for", help="Query GitHub Linguist's language colors")
    p_for.add_argument("query", nargs="+", help="Language names, aliases or file extensions")
    p_xterm = sub.add_parser(
        "xterm", help="Find nearest xterm colors for the colors given in hex notation"
    )
    p_xterm.add_argument("colors", nargs="+", help="Colors such as '#dea584'")
    return parser


def _run_xterm(colors: Sequence[str], metric: Metric, out: Console, err: Console) -> int:
    try:
        parsed = [Color.from_hex(c) for c in colors]
    except ValueError as e:
        err.print(f"Error: {e}", highlight=False, markup=False, soft_wrap=True)
        return 1
    for color in parsed:
        out.print(TermColor(color).render(metric), soft_wrap=True)
    return 0


def _run_for(
    words: Sequence[str],
    metric: Metric,
    dataset: Optional[str | os.PathLike[str]],
    out: Console,
    err: Console,
) -> int:
    settings = get_settings()
    if dataset:
        entries = load_dataset(dataset)
    else:
        err.print(f"Fetching {settings.linguist_url}", style="dim", highlight=False, soft_wrap=True)
        entries = fetch_dataset(settings.linguist_url, timeout=settings.timeout, retries=settings.retries)

    index = build_index(entries)
    text = " ".join(words)
    found = query(index, text)
    if not found:
        err.print("no colors found for this language", highlight=False, soft_wrap=True)
        hints = suggest(index, text)
        if hints:
            err.print(f"did you mean: {', '.join(hints)}?", highlight=False, soft_wrap=True)
        return 1

    for name, color in found.items():
        out.print(TermColor(color).render(metric, name=name), soft_wrap=True)
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """CLI: dispatch `for` / `xterm`; returns the process exit code."""
    load_dotenv()
    args = build_parser().parse_args(argv)
    if args.debug:
        logging.basicConfig(level=logging.DEBUG)

    out = Console()
    err = Console(stderr=True)
    try:
        if args.command == "xterm":
            return _run_xterm(args.colors, args.metric, out, err)
        return _run_for(args.query, args.metric, args.dataset, out, err)
    except (DatasetParseError, DatasetNotFound, DatasetFetchError) as e:
        err.print(f"Error: {e}", highlight=False, markup=False, soft_wrap=True)
        return 1


if __name__ == "__main__":
    sys.exit(main())
