# tests/test_color_metrics.py
from __future__ import annotations

import math

import pytest

from linguist_termcolor.color import Color, Metric, MetricConfigurationError, distance, parse_metric
from linguist_termcolor.color import metrics as M

"""
Color value type + distance metrics
===================================

Does: Validate hex/int parsing, channel bounds, metric parsing and the basic
      properties of every distance (zero on identity, symmetry, known values).
"""

BLACK = Color(0, 0, 0)
WHITE = Color(255, 255, 255)
PYTHON = Color.from_hex("#3572a5")


# ──────────────────────────────────────────────────────────────────────────────
# Color
# ──────────────────────────────────────────────────────────────────────────────
@pytest.mark.parametrize("text", ["#3572A5", "#3572a5", "3572a5", " #3572a5 "])
def test_color_from_hex_variants(text):
    assert Color.from_hex(text) == Color(0x35, 0x72, 0xA5)


def test_color_accessors():
    c = Color.from_hex("#DEA584")
    assert c.rgb == (222, 165, 132)
    assert c.value == 0xDEA584
    assert c.hex == "#dea584"
    assert str(c) == "#dea584"
    assert Color.from_int(0xDEA584) == c


@pytest.mark.parametrize("text", ["#zzzzzz", "#12345", "", "#1234567", 123])
def test_color_from_hex_invalid(text):
    with pytest.raises(ValueError):
        Color.from_hex(text)


@pytest.mark.parametrize("rgb", [(256, 0, 0), (-1, 0, 0), (0, 0, 1.5), (True, 0, 0)])
def test_color_channel_validation(rgb):
    with pytest.raises(ValueError):
        Color(*rgb)


@pytest.mark.parametrize("value", [-1, 0x1000000, True])
def test_color_from_int_invalid(value):
    with pytest.raises(ValueError):
        Color.from_int(value)


def test_color_is_hashable_and_frozen():
    assert len({Color(1, 2, 3), Color(1, 2, 3)}) == 1
    with pytest.raises(AttributeError):
        BLACK.r = 1  # type: ignore[misc]


# ──────────────────────────────────────────────────────────────────────────────
# parse_metric
# ──────────────────────────────────────────────────────────────────────────────
@pytest.mark.parametrize(
    "name,expect",
    [("rgb", Metric.RGB), ("RGB", Metric.RGB), (" cmyk ", Metric.CMYK), ("Lab", Metric.LAB), (Metric.HSL, Metric.HSL)],
)
def test_parse_metric_ok(name, expect):
    assert parse_metric(name) is expect


@pytest.mark.parametrize("name", ["hsv", "", "cielab2000", None])
def test_parse_metric_unknown(name):
    with pytest.raises(MetricConfigurationError) as exc:
        parse_metric(name)
    assert isinstance(exc.value, ValueError)


def test_distance_unknown_metric_fails_first():
    with pytest.raises(MetricConfigurationError):
        distance(BLACK, WHITE, "oklab")


# ──────────────────────────────────────────────────────────────────────────────
# distances
# ──────────────────────────────────────────────────────────────────────────────
@pytest.mark.parametrize("metric", list(Metric))
def test_distance_identity_and_symmetry(metric):
    other = Color(120, 100, 90)
    assert distance(PYTHON, PYTHON, metric) == 0.0
    d1 = distance(PYTHON, other, metric)
    d2 = distance(other, PYTHON, metric)
    assert d1 > 0.0 and math.isclose(d1, d2, rel_tol=1e-12)


def test_rgb_distance_black_white():
    assert distance(BLACK, WHITE, "rgb") == pytest.approx(math.sqrt(3) * 255)


def test_cmyk_conversion_and_distance():
    assert M.rgb_to_cmyk(BLACK.rgb) == (0.0, 0.0, 0.0, 1.0)
    assert M.rgb_to_cmyk(WHITE.rgb) == (0.0, 0.0, 0.0, 0.0)
    assert M.rgb_to_cmyk((255, 0, 0)) == pytest.approx((0.0, 1.0, 1.0, 0.0))
    assert distance(BLACK, WHITE, Metric.CMYK) == pytest.approx(1.0)


def test_cmyk_removes_gray_component_without_renormalizing():
    # #3572a5: C,M,Y = 1 - rgb/255, K = min(C, M, Y), inks = C - K
    c, m, y, k = M.rgb_to_cmyk((0x35, 0x72, 0xA5))
    assert (c, m, y, k) == pytest.approx((112 / 255, 51 / 255, 0.0, 90 / 255))
    assert M.rgb_to_cmyk((128, 128, 128)) == pytest.approx((0.0, 0.0, 0.0, 127 / 255))


def test_lab_white_and_black():
    L, a, b = M.rgb_to_lab(WHITE.rgb)
    assert L == pytest.approx(100.0, abs=0.05)
    assert a == pytest.approx(0.0, abs=0.05) and b == pytest.approx(0.0, abs=0.05)
    assert M.rgb_to_lab(BLACK.rgb) == pytest.approx((0.0, 0.0, 0.0), abs=1e-9)
    assert distance(BLACK, WHITE, "lab") == pytest.approx(100.0, abs=0.05)


def test_xyz_white_is_d65():
    assert M.rgb_to_xyz(WHITE.rgb) == pytest.approx((0.95047, 1.0, 1.08883), abs=1e-3)


def test_hsl_conversion():
    assert M.rgb_to_hsl((255, 0, 0)) == pytest.approx((0.0, 1.0, 0.5))
    assert M.rgb_to_hsl((0, 255, 0)) == pytest.approx((120.0, 1.0, 0.5))
    assert M.rgb_to_hsl((128, 128, 128))[:2] == (0.0, 0.0)


def test_hsl_hue_wraps_around():
    red = Color(255, 0, 0)
    almost_red = Color(255, 0, 4)  # hue ~359°
    green = Color(0, 255, 0)
    assert distance(red, almost_red, "hsl") < 0.05
    assert distance(red, green, "hsl") > 1.0


def test_lab_is_not_rgb():
    # same pair, different ranking between spaces
    a, b, c = Color(0, 0, 255), Color(0, 0, 200), Color(60, 0, 255)
    assert distance(a, b, "rgb") == pytest.approx(55.0)
    assert distance(a, c, "rgb") == pytest.approx(60.0)
    assert distance(a, b, "lab") != pytest.approx(distance(a, c, "lab"))
