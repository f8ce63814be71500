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
"""Boleto generation code.

The FEBRABAN code has 44 digits::

    Posição  Conteúdo
    1 a 3    Número do banco
    4        Código da Moeda - 9 para Real
    5        Digito verificador do Código de Barras
    6 a 9    Fator de vencimento
    10 a 19  Valor (8 inteiros e 2 decimais)
    20 a 44  Campo Livre definido por cada banco
"""

from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
import logging

from boletolib.exceptions import (InvalidCharacter, InvalidFieldLength,
                                  MissingRequiredField)
from boletolib.lib.agent import Agent
from boletolib.lib.algorithms import barcode_check_digit, modulo10, modulo11
from boletolib.lib.barcode import encode_barcode, render_barcode_html
from boletolib.lib.configparser import get_config
from boletolib.lib.dateutils import compute_due_date_factor, localtoday
from boletolib.lib.formatters import format_money
from boletolib.lib.freefield import FREE_FIELD_LENGTH, build_free_field
from boletolib.lib.template import render_template
from boletolib.lib.translation import boletolib_gettext
from boletolib.lib.validators import is_digits, validate_field

_ = boletolib_gettext
log = logging.getLogger(__name__)

CURRENCY_REAL = 9

#: Currency names as printed on the slip
CURRENCY_NAMES = {
    CURRENCY_REAL: 'REAL',
}

BANK_CODE_LENGTH = 3
CURRENCY_CODE_LENGTH = 1
FACTOR_LENGTH = 4
VALUE_LENGTH = 10
CODE_LENGTH = 44

#: Bank logos, relative to the images directory
BANK_LOGOS = {
    '001': 'logo_bb.gif',
    '033': 'logo_santander.jpg',
    '041': 'logo_banrisul.jpg',
    '090': 'unicred.jpg',
    '104': 'logo_bancocaixa.jpg',
    '237': 'logo_bancobradesco.jpg',
    '341': 'logo_itau.gif',
    '356': 'logo_bancoreal.jpg',
}

#: Wallets printed by name instead of by number
WALLET_NAMES = {
    '104': {'1': 'RG', '2': 'SR'},
}

# demonstrativo and instrucoes lines available on the slip
MAX_DEMONSTRATIVO_LINES = 5
MAX_INSTRUCOES_LINES = 8


def format_value_field(value):
    """Converts a monetary value to the 10 digits value field

    :param value: the value in reais, or ``None`` for a slip without a
      fixed value
    :returns: the value in cents, zero filled
    """
    if value is None:
        return '0' * VALUE_LENGTH

    try:
        value = Decimal(str(value))
    except InvalidOperation:
        raise InvalidCharacter(_('Value %r is not a number') % (value, ))
    if not value.is_finite():
        raise InvalidCharacter(_('Value %s is not a number') % (value, ))
    if value < 0:
        raise InvalidCharacter(_('Value cannot be negative'))

    cents = value.quantize(Decimal('0.01'), rounding=ROUND_HALF_UP)
    txt = ('%.2f' % cents).replace('.', '')
    if len(txt) > VALUE_LENGTH:
        raise InvalidFieldLength(
            _('Number length must be less than %s') % (VALUE_LENGTH + 1, ))
    return txt.zfill(VALUE_LENGTH)


def assemble_febraban_code(bank_code, currency_code, due_date_factor,
                           value_field, free_field):
    """Assembles the 44 digits FEBRABAN code

    :param str bank_code: 3 digits
    :param currency_code: 1 digit, 9 for reais
    :param str due_date_factor: 4 digits,
      see :func:`boletolib.lib.dateutils.compute_due_date_factor`
    :param str value_field: 10 digits, see :func:`format_value_field`
    :param str free_field: 25 digits, built by the bank
    :returns: the code as a string
    """
    bank_code = validate_field(_('Bank code'), bank_code, BANK_CODE_LENGTH)
    currency_code = validate_field(_('Currency code'), currency_code,
                                   CURRENCY_CODE_LENGTH)
    due_date_factor = validate_field(_('Due date factor'), due_date_factor,
                                     FACTOR_LENGTH)
    value_field = validate_field(_('Value'), value_field, VALUE_LENGTH)
    free_field = validate_field(_('Free field'), free_field,
                                FREE_FIELD_LENGTH)

    dv = barcode_check_digit(bank_code + currency_code + due_date_factor +
                             value_field + free_field)
    code = '%s%s%d%s%s%s' % (bank_code, currency_code, dv, due_date_factor,
                             value_field, free_field)
    assert len(code) == CODE_LENGTH, code
    log.debug('assembled febraban code %s', code)
    return code


def bank_code_with_check_digit(bank_code):
    """Returns the bank code as printed on the slip header, like ``001-9``"""
    bank_code = validate_field(_('Bank code'), bank_code, BANK_CODE_LENGTH)
    return '%s-%d' % (bank_code, modulo11(bank_code).digit)


def _digitable_block(block, dot):
    block = '%s%d' % (block, modulo10(block))
    return '%s.%s' % (block[:dot], block[dot:])


def format_digitable_line(code):
    """Linha que o cliente pode utilizar para digitar se o código
    de barras não puder ser lido

    The free field (positions 20 to 44) is split in blocks of 5, 10 and
    10 digits. The first one is prefixed by the bank and currency codes,
    and each of them gets its own modulo 10 check digit. They are
    followed by the general check digit and by the due date factor
    with the value.

    :param str code: the 44 digits FEBRABAN code
    :returns: a line like ``00190.00009 07777.777009 00087.654182 6 49000000295295``
    """
    code = validate_field(_('Code'), code, CODE_LENGTH)

    campo1 = _digitable_block(code[0:4] + code[19:24], 5)
    campo2 = _digitable_block(code[24:34], 5)
    campo3 = _digitable_block(code[34:44], 5)
    campo4 = code[4]
    campo5 = code[5:19]

    return "%s %s %s %s %s" % (campo1, campo2, campo3, campo4, campo5)


def validate_digitable_line(line):
    """Checks the three block check digits of a digitable line

    :returns: ``True`` if all of them match
    """
    parts = line.split(' ')
    if len(parts) != 5:
        return False
    for part in parts[:3]:
        digits = part.replace('.', '', 1)
        if len(digits) not in [10, 11] or not is_digits(digits):
            return False
        if modulo10(digits[:-1]) != int(digits[-1]):
            return False
    return True


class Boleto(object):
    """A boleto and the information printed on it

    The codes are recomputed from the attributes every time they are
    accessed. The free field is either given already built, in
    *free_field*, or built by the bank from *free_field_fields*.

    Values some banks show on the slip and others don't (like
    *quantidade* or *mora_multa*) go into *extra_fields* and are read
    with :meth:`get`.
    """

    def __init__(self, bank_code, due_date=None, value=None,
                 free_field=None, free_field_fields=None,
                 currency_code=None, payee=None, payer=None, guarantor=None,
                 **kwargs):
        if not bank_code:
            raise MissingRequiredField(_('Bank code is required'))
        config = get_config()

        self.bank_code = str(bank_code).zfill(BANK_CODE_LENGTH)
        if currency_code is None:
            currency_code = config.get_int('Boleto', 'currency_code')
        self.currency_code = currency_code
        self.due_date = due_date
        self.value = value
        self._free_field = free_field
        self.free_field_fields = free_field_fields or {}

        self.payee = payee
        self.payer = payer
        self.guarantor = guarantor

        self.document_date = None
        self.processing_date = localtoday()
        self.document_number = ''
        self.nosso_numero = ''
        self.agencia = ''
        self.agencia_dv = ''
        self.conta = ''
        self.conta_dv = ''
        self.carteira = ''
        self.wallet_names = dict(WALLET_NAMES.get(self.bank_code, {}))
        self.especie_doc = ''
        self.uso_banco = ''
        self.minimum_payment = None
        self.aceite = config.get('Boleto', 'aceite')
        self.local_pagamento = config.get('Boleto', 'local_pagamento')
        self.instrucoes = [config.get('Boleto', 'instrucoes')]
        self.demonstrativo = []
        self.image_path = config.get('Barcode', 'image_path')
        self.logo_banco = BANK_LOGOS.get(self.bank_code, '')
        # The payee logo, a full path instead of one in image_path
        self.logotipo = ''
        self.extra_fields = {}
        # Overrides rendered fields, like a bank printing its own
        # nosso numero format
        self.view_vars = {}

        for key, attr_value in kwargs.items():
            if not hasattr(self, key):
                raise TypeError('Unknown boleto attribute: %s' % (key, ))
            setattr(self, key, attr_value)

    def __repr__(self):
        return '<Boleto %s %s>' % (self.bank_code, self.value)

    #
    # Properties
    #

    @property
    def free_field(self):
        if self._free_field is not None:
            return self._free_field
        return build_free_field(self.bank_code, **self.free_field_fields)

    @property
    def due_date_factor(self):
        return compute_due_date_factor(self.due_date)

    @property
    def value_field(self):
        return format_value_field(self.value)

    @property
    def febraban_code(self):
        return assemble_febraban_code(self.bank_code, self.currency_code,
                                      self.due_date_factor,
                                      self.value_field, self.free_field)

    @property
    def digitable_line(self):
        return format_digitable_line(self.febraban_code)

    @property
    def bar_widths(self):
        return encode_barcode(self.febraban_code)

    @property
    def bank_code_with_dv(self):
        return bank_code_with_check_digit(self.bank_code)

    @property
    def agencia_conta(self):
        agencia = self.agencia
        if self.agencia_dv:
            agencia = '%s-%s' % (agencia, self.agencia_dv)
        conta = self.conta
        if self.conta_dv:
            conta = '%s-%s' % (conta, self.conta_dv)
        return "%s / %s" % (agencia, conta)

    @property
    def carteira_nome(self):
        carteira = str(self.carteira)
        if carteira in self.wallet_names:
            return self.wallet_names[carteira]
        return carteira.zfill(2) if carteira else ''

    #
    # Public API
    #

    def get(self, name):
        """Returns an optional, bank specific, field or ``None``"""
        return self.extra_fields.get(name)

    def get_view_vars(self):
        """Returns the values needed to render the slip"""
        payee = self.payee or Agent(u'')
        payer = self.payer or Agent(u'')

        if self.due_date is None:
            due_date = _(u'Contra Apresentação')
        else:
            due_date = self.due_date.strftime('%d/%m/%Y')

        def _date(date):
            return date.strftime('%d/%m/%Y') if date else u''

        def _pad(lines, size):
            lines = list(lines)[:size]
            return lines + [None] * (size - len(lines))

        return dict(
            linha_digitavel=self.digitable_line,
            codigo_barras=self.febraban_code,
            cedente=payee.name,
            cedente_cpf_cnpj=payee.get_document(),
            cedente_endereco1=payee.address or u'',
            cedente_endereco2=payee.get_postal_code_city_state(),
            codigo_banco_com_dv=self.bank_code_with_dv,
            especie=CURRENCY_NAMES.get(int(self.currency_code), u''),
            quantidade=self.get('quantidade'),
            data_vencimento=due_date,
            data_processamento=_date(self.processing_date),
            data_documento=_date(self.document_date),
            pagamento_minimo=format_money(self.minimum_payment),
            valor_documento=format_money(self.value),
            desconto_abatimento=format_money(self.get('descontos_abatimentos')),
            outras_deducoes=format_money(self.get('outras_deducoes')),
            mora_multa=format_money(self.get('mora_multa')),
            outros_acrescimos=format_money(self.get('outros_acrescimos')),
            valor_cobrado=format_money(self.get('valor_cobrado')),
            valor_unitario=format_money(self.get('valor_unitario')),
            sacador_avalista=(self.guarantor.get_name_document()
                              if self.guarantor else None),
            sacado=payer.name,
            sacado_endereco1=payer.address or u'',
            sacado_endereco2=payer.get_postal_code_city_state(),
            demonstrativo=_pad(self.demonstrativo, MAX_DEMONSTRATIVO_LINES),
            instrucoes=_pad(self.instrucoes, MAX_INSTRUCOES_LINES),
            local_pagamento=self.local_pagamento,
            numero_documento=self.document_number,
            agencia_codigo_cedente=self.agencia_conta,
            nosso_numero=self.nosso_numero,
            especie_doc=self.especie_doc,
            aceite=self.aceite,
            carteira=self.carteira_nome,
            uso_banco=self.uso_banco,
            avalista=self.get('avalista'),
            logo_banco=self.logo_banco,
            logotipo=self.logotipo,
            images=self.image_path,
        )


def render_boleto_html(boleto, config=None):
    """Renders *boleto* as a HTML page"""
    ns = boleto.get_view_vars()
    ns.update(boleto.view_vars)
    ns['codigo_barras_html'] = render_barcode_html(ns['codigo_barras'],
                                                   config=config)
    return render_template('boleto.html', **ns)
