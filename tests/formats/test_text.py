import pytest

from tincture import parse, to_text, with_format, FormatError
from tincture.colors import Color, RGB, HSL, LAB
from tincture.types import FormatType


def test_rgb_text():
    assert to_text(RGB(255, 0, 0)) == "rgb(255 0 0)"
    assert to_text(RGB(255, 0, 0, 0.5)) == "rgb(255 0 0 / 50%)"
    assert to_text(RGB(1, 2, 3), "rgba") == "rgb(1 2 3)"


def test_hex_text():
    assert to_text(RGB(255, 0, 0), "hex") == "#FF0000"
    assert to_text(RGB(255, 0, 0, 0.5), "hex") == "#FF000080"
    assert to_text(RGB(255, 0, 0, 0.5), "hex24") == "#FF0000"
    assert to_text(RGB(255, 0, 0), FormatType.HEX32) == "#FF0000FF"
    assert to_text(RGB(10, 171, 255), "hex") == "#0AABFF"


def test_hsl_text():
    assert to_text(HSL(210, 0.5, 0.25)) == "hsl(210 50% 25%)"
    assert to_text(HSL(210, 0.5, 0.25, 0.25)) == "hsl(210 50% 25% / 25%)"
    assert to_text(RGB(255, 0, 0), "hsl") == "hsl(0 100% 50%)"


def test_alpha_rounding_to_full_is_dropped_in_rgb():
    assert to_text(RGB(0, 0, 0, 0.999)) == "rgb(0 0 0)"
    assert to_text(RGB(0, 0, 0, 0.999), "hex") == "#000000FF"


def test_wrapper_format_is_used():
    assert to_text(parse("hsl(0, 100%, 50%)")) == "hsl(0 100% 50%)"
    assert to_text(parse("hsl(0, 100%, 50%)"), "hex") == "#FF0000"
    assert str(LAB(100.0, 0.0, 0.0)) == "#FFFFFF"


def test_with_format():
    assert str(with_format(parse("#FF0000"), "hsl")).startswith("hsl")
    wrapped = with_format(RGB(1, 2, 3), "rgb")
    assert isinstance(wrapped, Color)
    assert str(wrapped) == "rgb(1 2 3)"


def test_unknown_format():
    with pytest.raises(FormatError):
        to_text(RGB(1, 2, 3), "cmyk")
    with pytest.raises(FormatError):
        parse("#FFFFFF").with_format("nope")


def test_hue_rounding_up_wraps_to_zero():
    assert to_text(HSL(359.7, 1.0, 0.5), "hsl") == "hsl(0 100% 50%)"
    assert to_text(HSL(359.4, 1.0, 0.5), "hsl") == "hsl(359 100% 50%)"
