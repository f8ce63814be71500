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

"""Payer and payee of a boleto"""

from boletolib.lib.formatters import format_document, format_postal_code


class Agent(object):
    """A person or company taking part in a boleto

    Used for the payee (cedente), the payer (sacado) and the
    guarantor (sacador avalista).
    """

    def __init__(self, name, document=None, address=None, postal_code=None,
                 city=None, state=None):
        self.name = name
        self.document = document
        self.address = address
        self.postal_code = postal_code
        self.city = city
        self.state = state

    def __repr__(self):
        return '<Agent %r>' % (self.name, )

    def get_document(self):
        """The CPF or CNPJ, formatted"""
        if not self.document:
            return u''
        return format_document(self.document)

    def get_name_document(self):
        document = self.get_document()
        if not document:
            return self.name
        return u'%s / %s' % (self.name, document)

    def get_postal_code_city_state(self):
        """Returns a line like ``01234-567 - São Paulo - SP``"""
        parts = []
        if self.postal_code:
            parts.append(format_postal_code(self.postal_code))
        if self.city:
            parts.append(self.city)
        if self.state:
            parts.append(self.state)
        return u' - '.join(parts)
