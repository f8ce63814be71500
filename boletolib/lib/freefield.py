# -*- coding: utf-8 -*-
# vi:si:et:sw=4:sts=4:ts=4

##
## Copyright (C) 2017 Async Open Source <http://www.async.com.br>
## All rights reserved
##
## This program is free software; you can redistribute it and/or modify
## it under the terms of the GNU Lesser General Public License as published by
## the Free Software Foundation; either version 2 of the License, or
## (at your option) any later version.
##
## This program is distributed in the hope that it will be useful,
## but WITHOUT ANY WARRANTY; without even the implied warranty of
## MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
## GNU Lesser General Public License for more details.
##
## You should have received a copy of the GNU Lesser General Public License
## along with this program; if not, write to the Free Software
## Foundation, Inc., or visit: http://www.gnu.org/.
##
## Author(s): Stoq Team <stoq-devel@async.com.br>
##

"""Bank specific free fields (positions 20 to 44 of the boleto code)

Each bank lays out its agency, account, wallet and document numbers in
its own way. A builder is a plain callable registered for a bank code
which receives those values as keyword arguments and returns the 25
digits of the free field. The code assembly never looks at the bank.
"""

import inspect
import logging

from boletolib.exceptions import (InvalidCharacter, InvalidFieldLength,
                                  MissingRequiredField)
from boletolib.lib.algorithms import double_check_digit, modulo10, modulo11
from boletolib.lib.translation import boletolib_gettext
from boletolib.lib.validators import is_digits, validate_field

_ = boletolib_gettext
log = logging.getLogger(__name__)

FREE_FIELD_LENGTH = 25

_builders = {}


def register_free_field(bank_code):
    """Registers the decorated function as the free field builder
    of *bank_code*
    """
    def _register(builder):
        assert bank_code not in _builders, bank_code
        log.debug('registering free field builder for bank %s', bank_code)
        _builders[bank_code] = builder
        return builder
    return _register


def get_free_field_builder(bank_code):
    try:
        return _builders[bank_code]
    except KeyError:
        raise NotImplementedError(bank_code)


def get_all_free_field_builders():
    return _builders


def build_free_field(bank_code, **fields):
    """Builds and validates the free field of *bank_code*

    :param str bank_code: the 3 digits bank code
    :param fields: the values the bank builder needs
    :returns: the 25 digits free field
    """
    builder = get_free_field_builder(bank_code)
    try:
        inspect.signature(builder).bind(**fields)
    except TypeError as e:
        raise MissingRequiredField(
            _('Bank %s free field: %s') % (bank_code, e))
    free_field = builder(**fields)
    return validate_field(_('Free field'), free_field, FREE_FIELD_LENGTH)


def zerofill(value, length):
    """Zero fills a number, dropping a ``-DV`` suffix it may have"""
    value = str(value).split('-')[0].strip()
    if not is_digits(value):
        raise InvalidCharacter(
            _('%r must contain only digits') % (value, ))
    value = value.lstrip('0')
    if len(value) > length:
        raise InvalidFieldLength(
            _('Number length must be less than %s') % (length + 1, ))
    return value.zfill(length)


@register_free_field('001')
def banco_do_brasil(agencia, conta, nosso_numero, convenio, carteira='18',
                    format_nnumero=1):
    convenio = str(convenio)
    if len(convenio) == 8:
        nosso_numero = convenio + zerofill(nosso_numero, 9)
    elif len(convenio) == 7:
        nosso_numero = convenio + zerofill(nosso_numero, 10)
    elif len(convenio) == 6:
        if int(format_nnumero) == 2:
            return '%s%s21' % (convenio, zerofill(nosso_numero, 17))
        return '%s%s%s%s%s' % (convenio,
                               zerofill(nosso_numero, 5),
                               zerofill(agencia, 4),
                               zerofill(conta, 8),
                               zerofill(carteira, 2))
    else:
        raise InvalidFieldLength(
            # TRANSLATORS: Do not translate 'Convenio'
            _("Convenio length must be 6, 7 or 8. Try filing it with "
              "'0's at the left."))
    return '000000%s%s' % (nosso_numero, zerofill(carteira, 2))


@register_free_field('033')
def santander(conta, nosso_numero, carteira='102', ios='0'):
    # IOS - somente para Seguradoras (Se 7% informar 7, limitado 9%)
    # Demais clientes usar 0 (zero)
    nosso_numero = zerofill(nosso_numero, 7)
    return '9%s00000%s%d%s%s' % (zerofill(conta, 7),
                                 nosso_numero,
                                 modulo11(nosso_numero).digit,
                                 ios,
                                 zerofill(carteira, 3))


@register_free_field('041')
def banrisul(agencia, conta, nosso_numero):
    content = '21%s%s%s40' % (zerofill(agencia, 4),
                              zerofill(conta, 7),
                              zerofill(nosso_numero, 8))
    return content + double_check_digit(content)


@register_free_field('090')
def unicred(agencia, conta, nosso_numero):
    # The nosso numero check digit is part of the free field
    nosso_numero = str(nosso_numero).replace('-', '')
    return '%s%s%s' % (zerofill(agencia, 4),
                       zerofill(conta, 10),
                       zerofill(nosso_numero, 11))


@register_free_field('104')
def caixa(agencia, conta, nosso_numero):
    # Nosso numero starts with 80 for the "sem registro" wallet
    return '80%s%s%s' % (zerofill(nosso_numero, 8),
                         zerofill(agencia, 4),
                         zerofill(conta, 11))


@register_free_field('237')
def bradesco(agencia, conta, nosso_numero, carteira):
    return '%s%s%s%s0' % (zerofill(agencia, 4),
                          zerofill(carteira, 2),
                          zerofill(nosso_numero, 11),
                          zerofill(conta, 7))


@register_free_field('341')
def itau(agencia, conta, nosso_numero, carteira):
    agencia = zerofill(agencia, 4)
    conta = zerofill(conta, 5)
    carteira = zerofill(carteira, 3)
    nosso_numero = zerofill(nosso_numero, 8)
    dac_nosso_numero = modulo10(agencia + conta + carteira + nosso_numero)
    return '%s%s%d%s%s%d000' % (carteira,
                                nosso_numero,
                                dac_nosso_numero,
                                agencia,
                                conta,
                                modulo10(agencia + conta))


@register_free_field('356')
def real(agencia, conta, nosso_numero):
    agencia = zerofill(agencia, 4)
    conta = zerofill(conta, 7)
    nosso_numero = zerofill(nosso_numero, 13)
    digitao = modulo10(nosso_numero + agencia + conta)
    return '%s%s%d%s' % (agencia, conta, digitao, nosso_numero)
