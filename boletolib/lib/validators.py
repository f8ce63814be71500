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

from boletolib.exceptions import (InvalidCharacter, InvalidFieldLength,
                                  MissingRequiredField)
from boletolib.lib.translation import boletolib_gettext

_ = boletolib_gettext


def is_digits(value):
    """Checks if *value* is a non empty string of ASCII decimal digits"""
    return bool(value) and all(c in '0123456789' for c in value)


def validate_field(name, value, length=None):
    """Validates a fixed width numeric field

    :param name: the field name, used in error messages
    :param value: the field value, must be a string
    :param length: the required length, or ``None`` to accept any
    :returns: the value
    :raises: :exc:`MissingRequiredField`, :exc:`InvalidFieldLength` or
      :exc:`InvalidCharacter`
    """
    if value is None or value == '':
        raise MissingRequiredField(_('%s is required') % (name, ))
    value = str(value)
    if length is not None and len(value) != length:
        raise InvalidFieldLength(
            _('%s must have %d digits, found %d') % (name, length,
                                                     len(value)))
    if not is_digits(value):
        raise InvalidCharacter(
            _('%s must contain only digits, got %r') % (name, value))
    return value
