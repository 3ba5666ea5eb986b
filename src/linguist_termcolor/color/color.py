"""
color.py
========

Does: Define the immutable RGB value type used by the index, the metrics and
      the palette. Channels are validated at construction so that no distance
      computed downstream can turn into NaN.
Returns: Color (with hex/int constructors and accessors).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

import webcolors

__all__ = ["RGB", "Color"]
__docformat__ = "google"

RGB = Tuple[int, int, int]


def _validate_channel(name: str, v: object) -> None:
    if isinstance(v, bool) or not isinstance(v, int):
        raise ValueError(f"{name} channel must be an int, got {type(v).__name__}")
    if not 0 <= v <= 255:
        raise ValueError(f"{name} channel out of bounds: {v}")


@dataclass(frozen=True)
class Color:
    """An sRGB color with 8-bit channels."""

    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        _validate_channel("red", self.r)
        _validate_channel("green", self.g)
        _validate_channel("blue", self.b)

    @classmethod
    def from_hex(cls, text: str) -> "Color":
        """Does: Parse ``#RRGGBB`` / ``#RGB`` (``#`` optional, any case).

        Raises:
            ValueError: if `text` is not a valid hex color.
        """
        if not isinstance(text, str):
            raise ValueError(f"hex color must be a string, got {type(text).__name__}")
        s = text.strip()
        if not s.startswith("#"):
            s = f"#{s}"
        r, g, b = webcolors.hex_to_rgb(s)
        return cls(r, g, b)

    @classmethod
    def from_int(cls, value: int) -> "Color":
        """Does: Build from a packed 24-bit ``0xRRGGBB`` integer."""
        if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= 0xFFFFFF:
            raise ValueError(f"not a 24-bit color value: {value!r}")
        return cls((value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF)

    @property
    def rgb(self) -> RGB:
        return (self.r, self.g, self.b)

    @property
    def value(self) -> int:
        return (self.r << 16) | (self.g << 8) | self.b

    @property
    def hex(self) -> str:
        """Lowercase ``#rrggbb``."""
        return webcolors.rgb_to_hex(self.rgb)

    def __str__(self) -> str:
        return self.hex
