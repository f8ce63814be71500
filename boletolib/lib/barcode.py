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

"""Interleaved 2 of 5 encoding of the boleto code

http://en.wikipedia.org/wiki/Interleaved_2_of_5

Each pair of digits becomes five bars and five spaces, the bars taken
from the first digit pattern and the spaces from the second one. The
result is a sequence of :class:`Bar` and is not tied to any output
format, :func:`render_barcode_html` is just one way of drawing it.
"""

import collections

from boletolib.exceptions import InvalidCharacter, MissingRequiredField
from boletolib.lib.configparser import get_config
from boletolib.lib.template import render_template
from boletolib.lib.translation import boletolib_gettext
from boletolib.lib.validators import is_digits

_ = boletolib_gettext

(NARROW,
 WIDE) = range(2)

(BAR,
 SPACE) = range(2)

Bar = collections.namedtuple('Bar', 'width color')

#: Narrow (0) and wide (1) elements of each digit, 0 to 9
DIGIT_PATTERNS = ('00110', '10001', '01001', '11000', '00101',
                  '10100', '01100', '00011', '10010', '01010')

START_GUARD = (Bar(NARROW, BAR), Bar(NARROW, SPACE),
               Bar(NARROW, BAR), Bar(NARROW, SPACE))

STOP_GUARD = (Bar(WIDE, BAR), Bar(NARROW, SPACE), Bar(NARROW, BAR))


def _encode_pair(first, second):
    bars = DIGIT_PATTERNS[int(first)]
    spaces = DIGIT_PATTERNS[int(second)]
    for bar, space in zip(bars, spaces):
        yield Bar(int(bar), BAR)
        yield Bar(int(space), SPACE)


def encode_barcode(code):
    """Encodes *code* as interleaved 2 of 5 bars

    A code with an odd number of digits gets a leading zero.

    :param str code: a string of digits, usually the 44 digits code
    :returns: a tuple of :class:`Bar`, start and stop guards included
    """
    if not code:
        raise MissingRequiredField(_('Code is required'))
    if not is_digits(code):
        raise InvalidCharacter(
            _('Code must contain only digits, got %r') % (code, ))

    if len(code) % 2:
        code = '0' + code

    bars = list(START_GUARD)
    for i in range(0, len(code), 2):
        bars.extend(_encode_pair(code[i], code[i + 1]))
    bars.extend(STOP_GUARD)
    return tuple(bars)


def bar_widths_to_pixels(bars, narrow=1, wide=3):
    """Converts the width classes of *bars* to pixel widths

    :returns: a list of (width, color) tuples
    """
    widths = {NARROW: narrow, WIDE: wide}
    return [(widths[bar.width], bar.color) for bar in bars]


def render_barcode_html(code, config=None):
    """Renders *code* as a strip of black and white images

    Image path, bar widths and height come from the ``Barcode`` section
    of the configuration.
    """
    config = config or get_config()
    bars = bar_widths_to_pixels(encode_barcode(code),
                                config.get_int('Barcode', 'narrow'),
                                config.get_int('Barcode', 'wide'))
    return render_template('barcode.html',
                           bars=bars,
                           height=config.get_int('Barcode', 'height'),
                           images=config.get('Barcode', 'image_path'),
                           BAR=BAR)
