import pytest

from boletolib.exceptions import (InvalidCharacter, InvalidFieldLength,
                                  MissingRequiredField)
from boletolib.lib import freefield
from boletolib.lib.freefield import (build_free_field,
                                     get_all_free_field_builders,
                                     get_free_field_builder,
                                     register_free_field, zerofill)


def test_get_all_free_field_builders():
    builders = get_all_free_field_builders()
    assert sorted(builders) == ['001', '033', '041', '090', '104', '237',
                                '341', '356']


def test_get_free_field_builder():
    assert get_free_field_builder('237') is freefield.bradesco
    with pytest.raises(NotImplementedError):
        get_free_field_builder('999')


def test_register_free_field(monkeypatch):
    monkeypatch.setattr(freefield, '_builders', {})

    @register_free_field('999')
    def test_bank(numero):
        return numero

    assert get_free_field_builder('999') is test_bank
    assert build_free_field('999', numero='1' * 25) == '1' * 25
    with pytest.raises(InvalidFieldLength):
        build_free_field('999', numero='1' * 24)
    with pytest.raises(InvalidCharacter):
        build_free_field('999', numero='1' * 24 + 'X')


def test_zerofill():
    assert zerofill('123', 6) == '000123'
    assert zerofill('278-0', 4) == '0278'
    assert zerofill('02752', 4) == '2752'
    assert zerofill(5, 2) == '05'
    assert zerofill('0', 3) == '000'
    with pytest.raises(InvalidFieldLength):
        zerofill('123456', 3)
    with pytest.raises(InvalidCharacter):
        zerofill('12a', 3)


@pytest.mark.parametrize('bank, fields, expected', [
    ('001', dict(agencia='9999', conta='99999', nosso_numero='87654',
                 convenio='7777777'),
     '0000007777777000008765418'),
    ('001', dict(agencia='1172', conta='00403005', nosso_numero='87654',
                 convenio='12345678', carteira='17'),
     '000000' + '12345678' + '000087654' + '17'),
    ('001', dict(agencia='1172', conta='403005', nosso_numero='12',
                 convenio='123456'),
     '123456' + '00012' + '1172' + '00403005' + '18'),
    ('001', dict(agencia='1172', conta='403005', nosso_numero='12',
                 convenio='123456', format_nnumero=2),
     '123456' + '0' * 15 + '12' + '21'),
    ('033', dict(conta='0707077', nosso_numero='1234567'),
     '9070707700000123456790102'),
    ('041', dict(agencia='1102', conta='9000150', nosso_numero='22832563'),
     '2111029000150228325634059'),
    ('090', dict(agencia='1234', conta='5678', nosso_numero='90'),
     '1234' + '0000005678' + '00000000090'),
    ('090', dict(agencia='1234', conta='5678', nosso_numero='1234567890-1'),
     '1234' + '0000005678' + '12345678901'),
    ('104', dict(agencia='1565', conta='414-3', nosso_numero='19525086'),
     '8019525086156500000000414'),
    ('237', dict(agencia='278-0', conta='039232-4', carteira='06',
                 nosso_numero='2125525'),
     '0278060000212552500392320'),
    ('237', dict(agencia='02752', conta='14978-0', carteira='9',
                 nosso_numero='75896452'),
     '2752090007589645200149780'),
    ('341', dict(agencia='0057', conta='12345-7', carteira='110',
                 nosso_numero='12345678'),
     '1101234567880057123457000'),
    ('356', dict(agencia='0531', conta='5705853', nosso_numero='123'),
     '0531570585390000000000123'),
])
def test_build_free_field(bank, fields, expected):
    assert build_free_field(bank, **fields) == expected


def test_build_free_field_missing_field():
    with pytest.raises(MissingRequiredField):
        build_free_field('341', agencia='0057', conta='12345')


def test_build_free_field_invalid_convenio():
    with pytest.raises(InvalidFieldLength):
        build_free_field('001', agencia='1172', conta='403005',
                         nosso_numero='12', convenio='1234')
