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
""" Exception and warning definitions """


class ConfigError(Exception):
    """Error for config files which don't have a certain section"""


class BoletoException(Exception):
    """Base class for errors raised while generating a boleto"""


class InvalidFieldLength(BoletoException):
    """A fixed width field does not have its required length"""


class InvalidCharacter(BoletoException):
    """A field contains characters other than digits"""


class MissingRequiredField(BoletoException):
    """A required input, like the bank code, was not given"""


class DueDateFactorOverflow(BoletoException):
    """The due date cannot be written into the 4 digit factor field"""
