import datetime

import pytest

from boletolib.lib import configparser

# bank 090, due 1997-10-08, value 100.00
FREE_FIELD = '0000000000000000000000010'
FEBRABAN_CODE = ('090' + '9' + '9' + '0001' + '0000010000' + FREE_FIELD)


@pytest.fixture
def free_field():
    return FREE_FIELD


@pytest.fixture
def febraban_code():
    return FEBRABAN_CODE


@pytest.fixture
def due_date():
    return datetime.date(1997, 10, 8)


@pytest.fixture
def config(monkeypatch):
    """A fresh configuration, used by get_config() during the test"""
    config = configparser.BoletoConfig()
    monkeypatch.setattr(configparser, '_config', config)
    return config
