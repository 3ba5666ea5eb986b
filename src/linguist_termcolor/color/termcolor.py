"""
termcolor.py
============

Does: Pair a true color with its nearest xterm palette entry and render the
      pair for a terminal ("rgb #dea584 xterm 180 rust").
Returns: TermColor, TermColorMatch.
Used By: The CLI (`for` and `xterm` commands).
"""

from __future__ import annotations

from typing import NamedTuple, Optional, Sequence, Union

from rich.style import Style
from rich.text import Text

from .color import Color
from .metrics import Metric
from .palette import XTERM_PALETTE, nearest

__all__ = ["TermColor", "TermColorMatch"]
__docformat__ = "google"


class TermColorMatch(NamedTuple):
    rgb_hex: str
    xterm_index: int
    xterm_hex: str


class TermColor:
    """A color as shown in a terminal: its own value plus the closest palette code."""

    def __init__(self, color: Color, palette: Sequence[Color] = XTERM_PALETTE):
        self.color = color
        self.palette = palette

    def __repr__(self) -> str:
        return f"TermColor({self.color.hex!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TermColor):
            return NotImplemented
        return self.color == other.color

    def __hash__(self) -> int:
        return hash(self.color)

    def match(self, metric: Union[str, Metric] = Metric.RGB) -> TermColorMatch:
        """Does: Resolve the nearest palette entry under `metric`."""
        hit = nearest(self.color, self.palette, metric)
        return TermColorMatch(self.color.hex, hit.index, hit.color.hex)

    def render(self, metric: Union[str, Metric] = Metric.RGB, name: Optional[str] = None) -> Text:
        """Does: Build the styled line; each part is bold in the color it names."""
        m = self.match(metric)
        out = Text()
        out.append(f"rgb {m.rgb_hex}", style=Style(color=m.rgb_hex, bold=True))
        out.append(" ")
        out.append(f"xterm {m.xterm_index:<3}", style=Style(color=m.xterm_hex, bold=True))
        if name:
            out.append(f" {name}")
        return out

    def plain(self, metric: Union[str, Metric] = Metric.RGB, name: Optional[str] = None) -> str:
        return self.render(metric, name).plain
