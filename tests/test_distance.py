import inspect

import pytest

from tincture import (
    parse, distance, similarity, fast_distance, fast_similarity, most_similar, text_color,
)
from tincture.colors import Color, RGB, HSL
from tincture.distance import REDMEAN_DISTANCE_MAX

pairs = [
    ("#FF0000", "#00FF00"),
    ("#3355DD", "#DD5533"),
    ("#123456", "#654321"),
    ("#000000", "#FFFFFF"),
    ("#808080", "#7F7F7F"),
]


def test_distance_is_symmetric_and_bounded():
    for fast in (False, True):
        for a, b in pairs:
            d = distance(parse(a), parse(b), fast=fast)
            assert d == distance(parse(b), parse(a), fast=fast)
            assert 0.0 <= d <= 1.0


def test_distance_to_self_is_zero():
    for fast in (False, True):
        for a, _ in pairs:
            assert distance(parse(a), parse(a), fast=fast) == pytest.approx(0.0)


def test_black_and_white_are_far_apart():
    black, white = parse("#000000"), parse("#FFFFFF")
    assert distance(black, white) > 0.75
    assert fast_distance(black, white) > 0.75


def test_similarity_is_one_minus_distance():
    for fast in (False, True):
        for a, b in pairs:
            ca, cb = parse(a), parse(b)
            assert similarity(ca, cb, fast=fast) == 1 - distance(ca, cb, fast=fast)
    assert fast_similarity(RGB(1, 2, 3), RGB(3, 2, 1)) == 1 - fast_distance(RGB(1, 2, 3), RGB(3, 2, 1))


def test_raw_distances():
    black, white = RGB(0, 0, 0), RGB(255, 255, 255)
    assert distance(black, white, fast=True, norm=False) == pytest.approx(REDMEAN_DISTANCE_MAX)
    assert distance(black, white, norm=False) == pytest.approx(100.0, abs=0.01)


def test_distance_accepts_any_colorspace():
    red = parse("#FF0000")
    assert distance(red, HSL(0, 1.0, 0.5)) == pytest.approx(0.0)
    assert distance(red.convert("lab"), red.convert("cmyk"), fast=True) == 0.0


def test_most_similar():
    target = parse("#454545")
    candidates = [parse("#454565"), parse("#654545"), parse("#505050")]
    assert str(most_similar(target, candidates)) == "#505050"
    assert str(most_similar(target, candidates, fast=True)) == "#505050"


def test_most_similar_first_minimum_wins():
    first, second = parse("#101010"), parse("#101010")
    assert most_similar(parse("#000000"), [first, second]) is first
    with pytest.raises(ValueError):
        most_similar(parse("#000000"), [])


def test_text_color():
    assert str(text_color(parse("#FFFFFF"))) == "#000000"
    assert str(text_color(parse("#000000"))) == "#FFFFFF"
    assert str(text_color(parse("#FFFF00"))) == "#000000"
    assert str(text_color(parse("#000080"), fast=False)) == "#FFFFFF"
    assert isinstance(text_color(parse("#000000")), Color)
    assert text_color(RGB(0, 0, 0)) == RGB(255, 255, 255)


def test_text_color_tokens():
    assert text_color(RGB(0, 0, 0), black="dark", white="light") == "light"
    assert text_color(RGB(255, 255, 255), black="dark", white="light") == "dark"


def test_distant_colors_keep_their_ranking():
    red, green, blue = parse("#FF0000"), parse("#00FF00"), parse("#0000FF")
    assert distance(red, green, norm=False) > 100
    assert distance(red, blue, norm=False) > 100
    assert distance(red, green) < distance(red, blue) < 1.0
    assert distance(blue, green) == pytest.approx(1.0)
    assert distance(parse("#0000FF"), parse("#FFFF00")) < 1.0


def test_normalized_distance_follows_raw_order():
    target = parse("#3355DD")
    others = [parse(c) for c in ("#3356DD", "#808080", "#FF0000", "#FFFF00", "#00FF00")]
    raw = [distance(target, c, norm=False) for c in others]
    normed = [distance(target, c) for c in others]
    assert sorted(range(5), key=raw.__getitem__) == sorted(range(5), key=normed.__getitem__)
    assert all(0.0 < d < 1.0 for d in normed)


def test_most_similar_among_distant_candidates():
    candidates = [parse("#00FFFF"), parse("#FF00FF")]
    assert str(most_similar(parse("#FF0000"), candidates, fast=False)) == "#FF00FF"
    assert str(most_similar(parse("#FF0000"), candidates)) == "#FF00FF"


def test_most_similar_defaults_to_fast_mode():
    assert inspect.signature(most_similar).parameters["fast"].default is True
