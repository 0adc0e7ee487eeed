import pytest

from tincture import parse, between, put
from tincture.colors import Color, RGB, HSL, colorspace_op, convert, rgba_tuple, hsl, rgb
from tincture.types import ColorSpace, FormatType


def test_wrapper_defaults():
    color = Color(RGB(255, 0, 0))
    assert color.format is FormatType.HEX
    assert color.background is None
    assert color.space is ColorSpace.RGB
    assert str(color) == "#FF0000"
    assert repr(color) == "Color('#FF0000')"


def test_default_format_comes_from_settings(monkeypatch):
    monkeypatch.setenv("TINCTURE_FORMAT", "hsl")
    assert Color(RGB(255, 0, 0)).format is FormatType.HSL


def test_wrapper_is_immutable():
    color = Color(RGB(255, 0, 0))
    with pytest.raises(AttributeError):
        color._format = FormatType.RGB


def test_wrapper_only_holds_colorspace_values():
    with pytest.raises(TypeError):
        Color("#FF0000")
    assert Color(Color(RGB(1, 2, 3))).color == RGB(1, 2, 3)


def test_convert_keeps_format_and_background():
    color = Color(RGB(255, 0, 0), FormatType.RGB, background="#000000")
    as_hsl = color.convert("hsl")
    assert isinstance(as_hsl, Color)
    assert isinstance(as_hsl.color, HSL)
    assert as_hsl.format is FormatType.RGB
    assert as_hsl.background == "#000000"
    assert str(as_hsl) == "rgb(255 0 0)"


def test_module_level_convert():
    assert convert(RGB(255, 0, 0), "hsl") == HSL(0.0, 1.0, 0.5)
    assert isinstance(hsl(parse("#FF0000")), Color)
    assert rgb(HSL(0, 1.0, 0.5)) == RGB(255, 0, 0)
    assert rgba_tuple(parse("#FF000080")) == (255, 0, 0, 128 / 255)


def test_with_format():
    color = parse("#FF0000")
    assert str(color.with_format("hsl")) == "hsl(0 100% 50%)"
    assert str(color.with_format("rgba")) == "rgb(255 0 0)"
    assert color.with_format("hsl") != color


def test_results_keep_the_input_shape():
    wrapped = put(parse("#000000"), "lightness", 1.0)
    assert isinstance(wrapped, Color)
    bare = put(RGB(0, 0, 0), "lightness", 1.0)
    assert isinstance(bare, HSL)


def test_list_results_wrap_each_element():
    colors = between(parse("#000000"), parse("#FFFFFF"), 3)
    assert len(colors) == 3
    assert all(isinstance(c, Color) for c in colors)


def test_colorspace_op_converts_arguments():
    @colorspace_op(ColorSpace.HSL, ColorSpace.RGB)
    def spaces(a, b, extra=None):
        return (a.space, b.space, extra)

    assert spaces(parse("#FF0000"), HSL(0, 1, 0.5), extra=1) == (ColorSpace.HSL, ColorSpace.RGB, 1)

    @colorspace_op()
    def identity(value):
        return value

    wrapped = parse("rgb(1 2 3)")
    assert identity(wrapped) == wrapped
    assert identity(RGB(1, 2, 3)) == RGB(1, 2, 3)
