"""
palette.py
==========

Does: Hold the fixed 256-entry xterm palette and find the palette entry
      closest to an arbitrary color under a chosen metric.
Returns: XTERM_PALETTE, PaletteMatch, nearest().
Used By: TermColor (presentation) and the `xterm` CLI command.

Palette sources:
- https://gist.github.com/jasonm23/2868981#file-xterm-256color-yaml
- https://commons.wikimedia.org/wiki/File:Xterm_256color_chart.svg
"""

from __future__ import annotations

import logging
from typing import NamedTuple, Sequence, Tuple, Union

from .color import Color
from .metrics import Metric, distance, parse_metric

__all__ = [
    "XTERM_PALETTE",
    "PaletteMatch",
    "InvalidPaletteState",
    "nearest",
]
__docformat__ = "google"

logger = logging.getLogger(__name__)


class InvalidPaletteState(ValueError):
    """Raise when a nearest-color search is given an empty palette."""


class PaletteMatch(NamedTuple):
    index: int
    color: Color
    distance: float


# ── xterm 256 ────────────────────────────────────────────────────────────────
_SYSTEM_COLORS = (
    0x000000, 0x800000, 0x008000, 0x808000, 0x000080, 0x800080, 0x008080, 0xC0C0C0,
    0x808080, 0xFF0000, 0x00FF00, 0xFFFF00, 0x0000FF, 0xFF00FF, 0x00FFFF, 0xFFFFFF,
)
_CUBE_LEVELS = (0x00, 0x5F, 0x87, 0xAF, 0xD7, 0xFF)


def _build_xterm_palette() -> Tuple[Color, ...]:
    colors = [Color.from_int(v) for v in _SYSTEM_COLORS]
    # 16..231: 6x6x6 cube, index = 16 + 36r + 6g + b
    colors.extend(
        Color(r, g, b) for r in _CUBE_LEVELS for g in _CUBE_LEVELS for b in _CUBE_LEVELS
    )
    # 232..255: grayscale ramp 0x08..0xee
    colors.extend(Color(v, v, v) for v in range(8, 248, 10))
    return tuple(colors)


XTERM_PALETTE: Tuple[Color, ...] = _build_xterm_palette()
if len(XTERM_PALETTE) != 256:
    raise RuntimeError(f"xterm palette has {len(XTERM_PALETTE)} entries, expected 256")


def nearest(
    color: Color,
    palette: Sequence[Color] = XTERM_PALETTE,
    metric: Union[str, Metric] = Metric.RGB,
) -> PaletteMatch:
    """Does: Find the palette entry with the smallest `metric` distance to `color`.

    Ties resolve to the first (lowest-index) entry.

    Raises:
        MetricConfigurationError: unknown metric (checked before any math).
        InvalidPaletteState: empty palette.
    """
    m = parse_metric(metric)
    if not palette:
        raise InvalidPaletteState("cannot search an empty palette")

    best: PaletteMatch | None = None
    for i, candidate in enumerate(palette):
        d = distance(candidate, color, m)
        if best is None or d < best.distance:
            best = PaletteMatch(i, candidate, d)
    logger.debug("nearest %s (%s) -> %d %s d=%.4f", color, m.value, best.index, best.color, best.distance)
    return best
