"""
color.
======

Does: Aggregate the color value type, distance metrics, the xterm palette and
      the terminal presentation helper.
Used By: Index queries (colors of matched languages), CLI rendering.
"""

from __future__ import annotations

from .color import RGB, Color
from .metrics import (
    Metric,
    MetricConfigurationError,
    distance,
    parse_metric,
)
from .palette import XTERM_PALETTE, InvalidPaletteState, PaletteMatch, nearest
from .termcolor import TermColor, TermColorMatch

__all__ = [
    # value type
    "RGB",
    "Color",
    # metrics
    "Metric",
    "MetricConfigurationError",
    "parse_metric",
    "distance",
    # palette
    "XTERM_PALETTE",
    "PaletteMatch",
    "InvalidPaletteState",
    "nearest",
    # presentation
    "TermColor",
    "TermColorMatch",
]

__docformat__ = "google"
