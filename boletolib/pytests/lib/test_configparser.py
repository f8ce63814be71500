import pytest

from boletolib.exceptions import ConfigError
from boletolib.lib.configparser import BoletoConfig, get_config


def test_defaults():
    config = BoletoConfig()
    assert config.get_int('Barcode', 'narrow') == 1
    assert config.get_int('Barcode', 'wide') == 3
    assert config.get_int('Barcode', 'height') == 50
    assert config.get('Barcode', 'image_path') == './images'
    assert config.get_int('Boleto', 'currency_code') == 9
    assert config.get('Boleto', 'aceite') == 'N'
    assert config.get('Boleto', 'unknown') is None


def test_load(tmp_path):
    filename = tmp_path / 'boletolib.conf'
    filename.write_text(u'[Barcode]\nwide = 2\n\n[Boleto]\n'
                        u'instrucoes = Não receber após 10%\n',
                        encoding='utf-8')
    config = BoletoConfig()
    config.load(str(filename))
    assert config.filename == str(filename)
    assert config.get_int('Barcode', 'wide') == 2
    assert config.get_int('Barcode', 'narrow') == 1
    assert config.get('Boleto', 'instrucoes') == u'Não receber após 10%'


def test_load_missing_file(tmp_path):
    config = BoletoConfig()
    config.load(str(tmp_path / 'missing.conf'))
    assert config.filename is None
    assert config.get_int('Barcode', 'wide') == 3

    with pytest.raises(TypeError):
        config.load('')


def test_set_and_flush(tmp_path):
    filename = str(tmp_path / 'boletolib.conf')
    config = BoletoConfig()
    config.set('Barcode', 'height', 30)
    config.set('Extra', 'foo', 'bar')
    config.flush(filename)

    other = BoletoConfig()
    other.load(filename)
    assert other.get_int('Barcode', 'height') == 30
    assert other.get('Extra', 'foo') == 'bar'

    with pytest.raises(TypeError):
        BoletoConfig().flush()


def test_errors():
    config = BoletoConfig()
    with pytest.raises(ConfigError):
        config.get('Missing', 'option')
    config.set('Barcode', 'wide', 'wide')
    with pytest.raises(ConfigError):
        config.get_int('Barcode', 'wide')


def test_get_config(config):
    assert get_config() is config
    assert get_config() is get_config()
