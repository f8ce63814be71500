import pytest

from boletolib.lib.algorithms import (Modulo11, barcode_check_digit,
                                      double_check_digit, modulo10, modulo11)


@pytest.mark.parametrize('num, expected', [
    ('1234', 4),
    ('0', 0),
    ('8', 3),
    ('090900000', 2),
    ('0000000010', 9),
    ('0000000000', 0),
])
def test_modulo10(num, expected):
    assert modulo10(num) == expected


def test_modulo10_is_a_digit():
    for num in ['9', '99', '5555', '123456789', '98765432109876543210']:
        digit = modulo10(num)
        assert 0 <= digit <= 9
        assert modulo10(num) == digit


def test_modulo11_bank_code():
    # Banco do Brasil is printed as 001-9
    assert modulo11('001') == Modulo11(digit=9, remainder=2)


@pytest.mark.parametrize('num, digit, remainder', [
    ('1234', 3, 8),
    # a check digit of 10 becomes 0
    ('0295', 0, 1),
    ('1234567', 9, 2),
])
def test_modulo11(num, digit, remainder):
    result = modulo11(num)
    assert result.digit == digit
    assert result.remainder == remainder


def test_modulo11_base():
    # weights 2, 3, 2, 3... against 2 to 9
    assert modulo11('11111111', base=3).remainder == 9
    assert modulo11('11111111').remainder == 0
    assert modulo11('1236', base=7).remainder == 1


def test_barcode_check_digit():
    assert barcode_check_digit(
        '090' + '9' + '0001' + '0000010000' +
        '0000000000000000000000010') == 9
    # Banco do Brasil, 00196490000002952950000007777777000008765418
    code = '00196490000002952950000007777777000008765418'
    assert barcode_check_digit(code[:4] + code[5:]) == 6


def test_barcode_check_digit_special_remainders():
    # remainder 0
    assert barcode_check_digit('0') == 1
    # remainder 1, 6 * 2 = 12
    assert barcode_check_digit('6') == 1
    # remainder 10, 5 * 2 = 10
    assert barcode_check_digit('5') == 1
    # remainder 2, 1 * 2 = 2
    assert barcode_check_digit('1') == 9


def test_double_check_digit():
    assert double_check_digit('21110290001502283256340') == '59'
