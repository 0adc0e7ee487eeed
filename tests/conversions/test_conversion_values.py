import math

from tincture.conversions import (
    convert, rgba_tuple, is_rgba_tuple,
    rgba_to_hsl, hsl_to_rgba,
    rgba_to_cmyk, cmyk_to_rgba,
    rgba_to_xyz, xyz_to_rgba,
    rgba_to_lab, lab_to_rgba,
)
from tincture.conversions.xyz import gamma_channel
from tincture.utils import nth_root, round_half_up

tolerance = 1e-9


def test_rgba_tuple_rounds_and_clamps():
    assert rgba_tuple(255.4, -3, 127.5, 1.7) == (255, 0, 128, 1.0)
    assert rgba_tuple(10, 20, 30, 0.25) == (10, 20, 30, 0.25)
    assert is_rgba_tuple((10, 20, 30, 0.25))
    assert not is_rgba_tuple((10, 20, 30, 1))
    assert not is_rgba_tuple((256, 0, 0, 1.0))
    assert not is_rgba_tuple((10.0, 20, 30, 1.0))


def test_round_half_up():
    assert round_half_up(0.5) == 1
    assert round_half_up(2.5) == 3
    assert round_half_up(-2.5) == -3
    assert round_half_up(95.05000000000001, 4) == 95.05


def test_rgb_to_hsl_primaries():
    assert rgba_to_hsl((255, 0, 0, 1.0)) == (0.0, 1.0, 0.5, 1.0)
    h, s, l, a = rgba_to_hsl((0, 0, 255, 0.5))
    assert abs(h - 240) < tolerance
    assert (s, l, a) == (1.0, 0.5, 0.5)
    # gray has no hue or saturation
    assert rgba_to_hsl((128, 128, 128, 1.0))[:2] == (0.0, 0.0)


def test_hsl_to_rgb():
    assert hsl_to_rgba(0.0, 1.0, 0.5, 1.0) == (255, 0, 0, 1.0)
    assert hsl_to_rgba(120.0, 1.0, 0.5, 1.0) == (0, 255, 0, 1.0)
    assert hsl_to_rgba(0.0, 0.0, 0.5, 1.0) == (128, 128, 128, 1.0)
    assert hsl_to_rgba(0.0, 0.0, 1.0, 0.2) == (255, 255, 255, 0.2)


def test_cmyk_black_is_special_cased():
    assert rgba_to_cmyk((0, 0, 0, 1.0)) == (0.0, 0.0, 0.0, 1.0, 1.0)
    assert rgba_to_cmyk((255, 0, 0, 1.0)) == (0.0, 1.0, 1.0, 0.0, 1.0)
    assert cmyk_to_rgba(0.0, 0.0, 0.0, 1.0, 1.0) == (0, 0, 0, 1.0)
    assert cmyk_to_rgba(0.0, 0.0, 0.0, 0.0, 1.0) == (255, 255, 255, 1.0)


def test_xyz_white_and_black():
    assert rgba_to_xyz((255, 255, 255, 1.0)) == (95.05, 100.0, 108.9, 1.0)
    assert rgba_to_xyz((0, 0, 0, 1.0)) == (0.0, 0.0, 0.0, 1.0)
    assert xyz_to_rgba(95.047, 100.0, 108.883, 1.0) == (255, 255, 255, 1.0)
    assert xyz_to_rgba(0.0, 0.0, 0.0, 1.0) == (0, 0, 0, 1.0)


def test_xyz_gamma_domain_failure_is_zero():
    assert gamma_channel(-50.0) == 0
    assert gamma_channel(0.0) == 0


def test_lab_white_and_black():
    l, a, b, alpha = rgba_to_lab((255, 255, 255, 1.0))
    assert l == 100.0
    assert abs(a) < 0.05
    assert abs(b) < 0.05
    assert alpha == 1.0
    assert rgba_to_lab((0, 0, 0, 1.0))[:3] == (0.0, 0.0, 0.0)
    assert lab_to_rgba(100.0, 0.0, 0.0, 1.0) == (255, 255, 255, 1.0)


def test_lab_channels_have_four_decimals():
    for value in rgba_to_lab((51, 85, 221, 1.0))[:3]:
        assert round(value, 4) == value


def test_nth_root_is_bounded():
    assert abs(nth_root(27.0, 3) - 3.0) < 1e-6
    assert nth_root(0.0, 3) == 0.0
    assert nth_root(8.0, 3, max_iterations=1) == 5.375
    assert math.isfinite(nth_root(1e-12, 3))


def test_convert_dispatch():
    assert convert((255, 0, 0, 1.0), "rgb", "hsl") == (0.0, 1.0, 0.5, 1.0)
    assert convert((0.0, 1.0, 0.5, 1.0), "hsl", "rgb") == (255, 0, 0, 1.0)
    assert convert((0.1, 0.2, 0.3, 0.4), "hsl", "hsl") == (0.1, 0.2, 0.3, 0.4)
    assert convert((0.0, 0.0, 0.0, 0.0, 1.0), "cmyk", "rgb") == (255, 255, 255, 1.0)
