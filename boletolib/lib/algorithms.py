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

"""Check digit algorithms used by the FEBRABAN boleto code.

All functions here operate over strings of decimal digits and assume
the caller already made sure there is nothing else in them.
"""

import collections

Modulo11 = collections.namedtuple('Modulo11', 'digit remainder')


def modulo10(num):
    """Calculates the modulo 10 check digit of *num*

    Digits are weighted 2, 1, 2, 1... from the right and any product
    greater than 9 is replaced by the sum of its own digits.

    :param str num: a string of digits
    :returns: the check digit, an int between 0 and 9
    """
    total = 0
    weight = 2
    for char in reversed(num):
        partial = int(char) * weight
        if partial > 9:
            partial = partial // 10 + partial % 10
        total += partial
        weight = 1 if weight == 2 else 2

    return (10 - total % 10) % 10


def modulo11(num, base=9):
    """Calculates the modulo 11 check digit of *num*

    Digits are weighted from the right starting at 2, going up to *base*
    and then wrapping back to 2.

    :param str num: a string of digits
    :param int base: the highest weight before wrapping
    :returns: a :class:`Modulo11` with the check digit (10 becomes 0)
      and the raw remainder of the weighted sum
    """
    total = 0
    weight = 2
    for char in reversed(num):
        total += int(char) * weight
        if weight == base:
            weight = 1
        weight += 1

    digit = (total * 10) % 11
    if digit == 10:
        digit = 0
    return Modulo11(digit, total % 11)


def barcode_check_digit(num):
    """The general check digit of the 44 digits code (position 5)

    :param str num: the 43 digits of the code, without the check digit
    """
    remainder = modulo11(num).remainder
    if remainder in [0, 1, 10]:
        return 1
    return 11 - remainder


# Banrisul "duplo digito", from http://tinyurl.com/lu88m7g
def _sum11(num, lmin, lmax):
    total = 0
    weight = lmin
    for char in reversed(num):
        total += weight * int(char)
        weight += 1
        if weight > lmax:
            weight = lmin
    return total


def double_check_digit(num):
    """Calculates the two check digits Banrisul appends to its free field

    The first digit is a modulo 10 one, the second a modulo 11 (weights
    2 to 7) over *num* plus the first digit. A modulo 11 remainder of 1
    is not allowed, the first digit is incremented until it goes away.
    """
    first = modulo10(num)
    remainder = _sum11(num + str(first), 2, 7) % 11
    while remainder == 1:
        first = 0 if first == 9 else first + 1
        remainder = _sum11(num + str(first), 2, 7) % 11

    if remainder == 0:
        second = 0
    else:
        second = 11 - remainder
    return '%d%d' % (first, second)
