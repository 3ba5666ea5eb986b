"""
metrics.py
==========

Does: Convert sRGB colors into other color models/spaces and score color
      differences there (RGB, CMYK, CIELAB, XYZ, HSL). A metric is chosen by a
      plain enumeration, not by subclassing.
Used By: Nearest palette lookups (palette.nearest) and the CLI `-c/--colors`.
Returns: Metric, parse_metric(), distance(), plus the raw conversions.
"""

from __future__ import annotations

import logging
import math
from enum import Enum
from functools import lru_cache
from typing import Callable, Dict, Tuple, Union

from .color import RGB, Color

__all__ = [
    "Metric",
    "MetricConfigurationError",
    "parse_metric",
    "distance",
    "rgb_to_cmyk",
    "rgb_to_xyz",
    "rgb_to_lab",
    "rgb_to_hsl",
]
__docformat__ = "google"

logger = logging.getLogger(__name__)

Vector = Tuple[float, ...]


class MetricConfigurationError(ValueError):
    """Raise when a distance metric identifier is not recognized."""


class Metric(str, Enum):
    """Color model or color space in which differences are measured."""

    RGB = "rgb"
    CMYK = "cmyk"
    LAB = "lab"
    XYZ = "xyz"
    HSL = "hsl"

    def __str__(self) -> str:
        return self.value


def parse_metric(name: Union[str, Metric]) -> Metric:
    """Does: Resolve a metric identifier case-insensitively.

    Raises:
        MetricConfigurationError: for anything outside the enumeration.
    """
    if isinstance(name, Metric):
        return name
    key = name.strip().lower() if isinstance(name, str) else None
    try:
        return Metric(key)
    except ValueError:
        choices = ", ".join(m.value for m in Metric)
        raise MetricConfigurationError(
            f"unknown color metric {name!r} (choose from: {choices})"
        ) from None


# =============================================================================
# 1) CONVERSIONS
# =============================================================================

@lru_cache(maxsize=4096)
def rgb_to_cmyk(rgb: RGB) -> Vector:
    """Does: Convert to (c, m, y, k), each in [0, 1].

    Full gray-component replacement without renormalizing the chromatic inks:
    C = 1 - R, K = min(C, M, Y), c = C - K. Pure black is (0, 0, 0, 1).
    """
    c, m, y = (1.0 - v / 255.0 for v in rgb)
    k = min(c, m, y)
    return (c - k, m - k, y - k, k)


def _srgb_to_linear(v: float) -> float:
    v = v / 255.0
    return v / 12.92 if v <= 0.04045 else ((v + 0.055) / 1.055) ** 2.4


@lru_cache(maxsize=4096)
def rgb_to_xyz(rgb: RGB) -> Vector:
    """Does: Convert to CIE XYZ (D65), Y of white = 1."""
    r, g, b = (_srgb_to_linear(float(c)) for c in rgb)
    x = 0.4124564 * r + 0.3575761 * g + 0.1804375 * b
    y = 0.2126729 * r + 0.7151522 * g + 0.0721750 * b
    z = 0.0193339 * r + 0.1191920 * g + 0.9503041 * b
    return x, y, z


def _f_lab(t: float) -> float:
    d = 6 / 29
    return t ** (1 / 3) if t > d ** 3 else (t / (3 * d * d) + 4 / 29)


@lru_cache(maxsize=4096)
def rgb_to_lab(rgb: RGB) -> Vector:
    """Does: Convert to CIELAB (D65 white)."""
    Xn, Yn, Zn = 0.95047, 1.00000, 1.08883  # D65 white
    x, y, z = rgb_to_xyz(rgb)
    fx, fy, fz = _f_lab(x / Xn), _f_lab(y / Yn), _f_lab(z / Zn)
    L = 116 * fy - 16
    a = 500 * (fx - fy)
    b = 200 * (fy - fz)
    return L, a, b


@lru_cache(maxsize=4096)
def rgb_to_hsl(rgb: RGB) -> Vector:
    """Does: Convert to (hue degrees, saturation, lightness), s/l in [0, 1]."""
    r, g, b = (c / 255.0 for c in rgb)
    hi, lo = max(r, g, b), min(r, g, b)
    light = (hi + lo) / 2
    delta = hi - lo
    if delta == 0:
        return (0.0, 0.0, light)
    sat = delta / (1 - abs(2 * light - 1))
    if hi == r:
        hue = ((g - b) / delta) % 6
    elif hi == g:
        hue = (b - r) / delta + 2
    else:
        hue = (r - g) / delta + 4
    return (hue * 60.0, sat, light)


def _hsl_cartesian(rgb: RGB) -> Vector:
    # hue is an angle: place (h, s) on a disc so 0° and 359° are neighbours
    h, s, light = rgb_to_hsl(rgb)
    rad = math.radians(h)
    return (s * math.cos(rad), s * math.sin(rad), light)


# =============================================================================
# 2) DISTANCES
# =============================================================================

_VECTORS: Dict[Metric, Callable[[RGB], Vector]] = {
    Metric.RGB: lambda rgb: tuple(float(c) for c in rgb),
    Metric.CMYK: rgb_to_cmyk,
    Metric.LAB: rgb_to_lab,
    Metric.XYZ: rgb_to_xyz,
    Metric.HSL: _hsl_cartesian,
}


def distance(a: Color, b: Color, metric: Union[str, Metric] = Metric.RGB) -> float:
    """Does: Euclidean distance between `a` and `b` in the space of `metric`
    (CIE76 ΔE for lab).

    Raises:
        MetricConfigurationError: unknown metric.
        ArithmeticError: the result is NaN (cannot happen for valid Colors).
    """
    m = parse_metric(metric)
    to_vec = _VECTORS[m]
    d = math.dist(to_vec(a.rgb), to_vec(b.rgb))
    if math.isnan(d):
        raise ArithmeticError(f"NaN {m.value} distance between {a} and {b}")
    return d
