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

from decimal import Decimal, ROUND_HALF_UP
import re

from boletolib.lib.translation import boletolib_gettext

_ = boletolib_gettext


#
#  Money formatters
#


def format_money(value, show_zero=False):
    """Formats *value* for display in reais, like ``1.000,00``

    :param value: the amount, anything :class:`decimal.Decimal` accepts
    :param show_zero: if ``True`` a zero (or ``None``) value is shown as
      ``0,00``, otherwise an empty string is returned
    """
    if not value:
        return u'0,00' if show_zero else u''

    value = Decimal(str(value)).quantize(Decimal('0.01'),
                                         rounding=ROUND_HALF_UP)
    text = '{:,.2f}'.format(value)
    # 1,234.56 -> 1.234,56
    return text.replace(',', '_').replace('.', ',').replace('_', '.')


#
#  Adress formatters
#


def raw_postal_code(postal_code):
    return re.sub("[^0-9]", '', postal_code)


def format_postal_code(postal_code):
    postal_code = raw_postal_code(postal_code)
    if len(postal_code) != 8:
        return postal_code
    return "%s-%s" % (postal_code[:5],
                      postal_code[5:8])


#
#  Document formatters
#


def raw_document(document):
    return ''.join(c for c in document if c.isdigit())


def format_cpf(document):
    return '%s.%s.%s-%s' % (document[0:3], document[3:6], document[6:9],
                            document[9:11])


def format_cnpj(document):
    return '%s.%s.%s/%s-%s' % (document[0:2], document[2:5], document[5:8],
                               document[8:12], document[12:])


def format_document(document):
    document = raw_document(document)
    if len(document) == 11:
        return format_cpf(document)
    elif len(document) == 14:
        return format_cnpj(document)
    else:
        raise ValueError(_('Document format not valid'))
