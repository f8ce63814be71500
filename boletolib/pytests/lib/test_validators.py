import pytest

from boletolib.exceptions import (InvalidCharacter, InvalidFieldLength,
                                  MissingRequiredField)
from boletolib.lib import validators


def test_is_digits():
    assert validators.is_digits('0123456789')
    assert not validators.is_digits('')
    assert not validators.is_digits('12 3')
    assert not validators.is_digits('-1')
    # unicode digits are not accepted
    assert not validators.is_digits(u'١')


def test_validate_field():
    assert validators.validate_field('Bank', '001', 3) == '001'
    assert validators.validate_field('Currency', 9, 1) == '9'
    assert validators.validate_field('Code', '123') == '123'

    with pytest.raises(MissingRequiredField):
        validators.validate_field('Bank', None, 3)
    with pytest.raises(InvalidFieldLength):
        validators.validate_field('Bank', '01', 3)
    with pytest.raises(InvalidCharacter):
        validators.validate_field('Bank', '0a1', 3)
