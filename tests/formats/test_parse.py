import pytest

from tincture import parse, try_parse, FormatError
from tincture.colors import Color, RGB, HSL
from tincture.formats import NAMED_COLORS, detect_format
from tincture.types import FormatType


def test_parse_hex():
    color = parse("#3355DD")
    assert isinstance(color, Color)
    assert color.format is FormatType.HEX
    assert color.to_rgba() == (0x33, 0x55, 0xDD, 1.0)
    assert parse("#35d").to_rgba() == (0x33, 0x55, 0xDD, 1.0)
    assert parse(" #3355dd ").to_rgba() == (0x33, 0x55, 0xDD, 1.0)
    assert parse("#3355DD43").to_rgba() == (0x33, 0x55, 0xDD, 0x43 / 255)
    assert str(parse("#3355DD43")) == "#3355DD43"
    assert parse("#35D8").alpha == 0x88 / 255


def test_parse_rgb_function():
    color = parse("rgb(51, 85, 221)")
    assert color.format is FormatType.RGB
    assert color.to_rgba() == (51, 85, 221, 1.0)
    assert str(color) == "rgb(51 85 221)"
    assert parse("rgba(51 85 221 / 50%)").alpha == 0.5
    assert parse("rgba(51, 85, 221, 0.5)").alpha == 0.5
    assert parse("rgba(51,85,221,.25)").alpha == 0.25
    assert parse("rgb(100%, 0%, 50%)").to_rgba() == (255, 0, 128, 1.0)
    assert str(parse("rgba(51 85 221 / 50%)")) == "rgb(51 85 221 / 50%)"


def test_parse_hsl_function():
    color = parse("hsl(120, 100%, 50%)")
    assert color.format is FormatType.HSL
    assert isinstance(color.color, HSL)
    assert color.to_rgba() == (0, 255, 0, 1.0)
    assert str(color) == "hsl(120 100% 50%)"
    quarter = parse("hsla(120deg 100% 25% / 50%)")
    assert quarter.to_rgba() == (0, 128, 0, 0.5)
    assert parse("hsl(480, 100%, 50%)").color.hue == 120.0


def test_parse_named_colors():
    assert str(parse("rebeccapurple")) == "#663399"
    assert str(parse("Red")) == "#FF0000"
    assert parse("transparent").alpha == 0.0
    assert len(NAMED_COLORS) == 149
    with pytest.raises(TypeError):
        NAMED_COLORS["red"] = "#000000"


def test_parse_tuples():
    assert str(parse((255, 0, 0))) == "#FF0000"
    assert parse((255, 0, 0, 127)).alpha == 127 / 255
    assert parse((255, 0, 0, 0.5)).alpha == 0.5
    assert parse((1.0, 0.5, 0.0)).to_rgba() == (255, 128, 0, 1.0)
    assert parse((255, 0, 0)).format is FormatType.HEX


def test_parse_passes_colors_through():
    color = parse("#FF0000")
    assert parse(color) is color
    assert parse(RGB(1, 2, 3)).color == RGB(1, 2, 3)


@pytest.mark.parametrize("bad", [
    "#GGG", "#12345", "rgb(1, 2)", "rgb(1, 2, 3", "hsl(foo)", "notacolor", "",
    "rgb(1, 2, 3) trailing", 42, (1, 2), (1, 2, "3"),
])
def test_malformed_input_raises(bad):
    with pytest.raises(FormatError):
        parse(bad)


def test_format_error_is_value_error():
    with pytest.raises(ValueError) as info:
        parse("notacolor")
    assert info.value.value == "notacolor"


def test_try_parse():
    assert try_parse("notacolor") is None
    assert try_parse("notacolor", "fallback") == "fallback"
    assert str(try_parse("#FFF")) == "#FFFFFF"


def test_detect_format():
    assert detect_format("#fff") is FormatType.HEX
    assert detect_format("RGBA(1, 2, 3)") is FormatType.RGB
    assert detect_format("hsl(1, 2%, 3%)") is FormatType.HSL
    assert detect_format("lab(1 2 3)") is None
