import pytest

from tincture import (
    parse, get, lighten, darken, saturate, desaturate, rotate_hue, grayscale,
    is_grayscale, shade_number, darkmode,
)
from tincture.colors import Color, HSL, RGB


def test_lighten_and_darken():
    color = parse("#3355FF")
    assert get(color, "lightness") == pytest.approx(0.6)
    assert get(lighten(color, 0.3), "lightness") == pytest.approx(0.72)
    assert get(darken(color, 0.5), "lightness") == pytest.approx(0.3)
    assert str(lighten(color, 1.0)) == "#FFFFFF"
    assert str(darken(color, 1.0)) == "#000000"
    assert isinstance(lighten(color, 0.1), Color)


def test_saturation_helpers():
    color = HSL(200, 0.5, 0.5)
    assert saturate(color, 0.5).saturation == pytest.approx(0.75)
    assert desaturate(color, 0.5).saturation == pytest.approx(0.25)
    assert saturate(color, 2.0).saturation == 1.0


def test_rotate_hue_wraps():
    assert rotate_hue(HSL(10, 0.5, 0.5), -20).hue == 350.0
    assert rotate_hue(HSL(350, 0.5, 0.5), 20).hue == 10.0
    assert str(rotate_hue(parse("#FF0000"), 120)) == "#00FF00"


def test_grayscale():
    gray = grayscale(parse("#3355FF"))
    assert get(gray, "saturation") == 0.0
    assert is_grayscale(gray)
    assert not is_grayscale(parse("#3355FF"))


def test_is_grayscale_threshold():
    assert is_grayscale(RGB(100, 100, 100))
    assert not is_grayscale(RGB(100, 102, 100))
    assert is_grayscale(RGB(100, 102, 100), threshold=2)
    assert is_grayscale(parse("#646664"), 2)


def test_shade_number():
    assert shade_number(parse("#FFFFFF")) == 255
    assert shade_number(parse("#000000")) == 0
    assert shade_number(RGB(255, 0, 0)) == 139
    assert shade_number(parse("#FFFF00")) > shade_number(parse("#0000FF"))


def test_darkmode():
    assert darkmode(HSL(0, 1.0, 0.5)).saturation == pytest.approx(0.66781, abs=1e-5)
    assert darkmode(HSL(0, 0.0, 0.5)).saturation == 0.0
    toned = darkmode(parse("#FF0000"))
    assert isinstance(toned, Color)
    assert get(toned, "saturation") == pytest.approx(0.66781, abs=1e-5)
    assert get(toned, "lightness") == pytest.approx(0.5)
