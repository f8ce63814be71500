import pytest

from boletolib.exceptions import InvalidCharacter, MissingRequiredField
from boletolib.lib.barcode import (BAR, DIGIT_PATTERNS, NARROW, SPACE,
                                   START_GUARD, STOP_GUARD, WIDE, Bar,
                                   bar_widths_to_pixels, encode_barcode,
                                   render_barcode_html)


def test_digit_patterns():
    assert len(DIGIT_PATTERNS) == 10
    assert len(set(DIGIT_PATTERNS)) == 10
    for pattern in DIGIT_PATTERNS:
        assert len(pattern) == 5
        assert pattern.count('1') == 2


def test_encode_barcode(febraban_code):
    bars = encode_barcode(febraban_code)
    assert bars[:4] == START_GUARD
    assert bars[-3:] == STOP_GUARD
    assert len(bars) - len(START_GUARD) - len(STOP_GUARD) == 44 * 5
    assert encode_barcode(febraban_code) == bars


def test_encode_barcode_guards():
    assert START_GUARD == (Bar(NARROW, BAR), Bar(NARROW, SPACE),
                           Bar(NARROW, BAR), Bar(NARROW, SPACE))
    assert STOP_GUARD == (Bar(WIDE, BAR), Bar(NARROW, SPACE),
                          Bar(NARROW, BAR))


def test_encode_barcode_alternates_colors(febraban_code):
    bars = encode_barcode(febraban_code)
    for i, bar in enumerate(bars):
        assert bar.color == (BAR if i % 2 == 0 else SPACE)


def test_encode_barcode_pair():
    # 1 = 10001 for the bars, 2 = 01001 for the spaces
    assert encode_barcode('12')[4:-3] == (
        Bar(WIDE, BAR), Bar(NARROW, SPACE),
        Bar(NARROW, BAR), Bar(WIDE, SPACE),
        Bar(NARROW, BAR), Bar(NARROW, SPACE),
        Bar(NARROW, BAR), Bar(NARROW, SPACE),
        Bar(WIDE, BAR), Bar(WIDE, SPACE))


def test_encode_barcode_odd_length():
    assert encode_barcode('1') == encode_barcode('01')
    assert len(encode_barcode('123')) == 4 + 20 + 3


def test_encode_barcode_invalid():
    with pytest.raises(MissingRequiredField):
        encode_barcode('')
    with pytest.raises(InvalidCharacter):
        encode_barcode('12a4')
    with pytest.raises(InvalidCharacter):
        encode_barcode('1234.')


def test_bar_widths_to_pixels():
    assert bar_widths_to_pixels(STOP_GUARD) == [(3, BAR), (1, SPACE),
                                                (1, BAR)]
    assert bar_widths_to_pixels(STOP_GUARD, narrow=2, wide=5) == [
        (5, BAR), (2, SPACE), (2, BAR)]


def test_render_barcode_html(config, febraban_code):
    config.set('Barcode', 'image_path', 'imgs')
    config.set('Barcode', 'height', '40')
    html = render_barcode_html(febraban_code)
    assert html.count('<img') == 4 + 220 + 3
    assert html.count("imgs/p.png") == 2 + 110 + 2
    assert html.count("imgs/b.png") == 2 + 110 + 1
    assert 'height="40"' in html
    assert 'width="3"' in html
