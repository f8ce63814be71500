from decimal import Decimal

import pytest

from boletolib.lib import formatters


def test_format_money():
    assert formatters.format_money(Decimal('1000')) == '1.000,00'
    assert formatters.format_money(Decimal('2952.95')) == '2.952,95'
    assert formatters.format_money('1234567.891') == '1.234.567,89'
    assert formatters.format_money(0.5) == '0,50'


def test_format_money_zero():
    assert formatters.format_money(0) == ''
    assert formatters.format_money(None) == ''
    assert formatters.format_money(0, show_zero=True) == '0,00'


def test_format_postal_code():
    assert formatters.format_postal_code("12345678") == "12345-678"
    assert formatters.format_postal_code("12345-678") == "12345-678"
    assert formatters.format_postal_code("1234") == "1234"


def test_format_document():
    assert formatters.format_document("12345678901") == "123.456.789-01"
    assert formatters.format_document("12345678000101") == "12.345.678/0001-01"
    assert formatters.format_document("123.456.789-01") == "123.456.789-01"
    with pytest.raises(ValueError):
        formatters.format_document("")
