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

"""Command line generation of boleto codes"""

import logging
import optparse
import sys

from boletolib import version
from boletolib.exceptions import BoletoException
from boletolib.lib.barcode import render_barcode_html
from boletolib.lib.boleto import Boleto
from boletolib.lib.configparser import get_config
from boletolib.lib.dateutils import parse_date

log = logging.getLogger(__name__)


def get_parser():
    parser = optparse.OptionParser(
        usage='%prog --bank CODE [options]',
        version='%prog ' + version)

    group = optparse.OptionGroup(parser, 'Boleto')
    group.add_option('-b', '--bank',
                     action="store",
                     dest="bank",
                     help='Bank code, 3 digits')
    group.add_option('', '--currency',
                     action="store",
                     dest="currency",
                     help='Currency code, defaults to 9 (Real)')
    group.add_option('-d', '--due-date',
                     action="store",
                     dest="due_date",
                     help='Due date, dd/mm/yyyy. Without it the boleto '
                          'is payable on presentation')
    group.add_option('-v', '--value',
                     action="store",
                     dest="value",
                     help='Value, like 123.45')
    group.add_option('-f', '--free-field',
                     action="store",
                     dest="free_field",
                     help='Free field (25 digits), already built')
    group.add_option('', '--field',
                     action="append",
                     dest="fields",
                     default=[],
                     metavar='KEY=VALUE',
                     help='Value for the bank free field, like '
                          'agencia=1172. Can be repeated')
    parser.add_option_group(group)

    group = optparse.OptionGroup(parser, 'Output')
    group.add_option('-c', '--config',
                     action="store",
                     dest="config",
                     help='Configuration file')
    group.add_option('', '--html',
                     action="store",
                     dest="html",
                     metavar='FILE',
                     help='Write the barcode as HTML to FILE')
    group.add_option('', '--debug',
                     action="store_true",
                     dest="debug",
                     help='Show debug messages')
    parser.add_option_group(group)
    return parser


def _parse_fields(fields):
    rv = {}
    for field in fields:
        if '=' not in field:
            raise SystemExit("Invalid --field %r, use KEY=VALUE" % (field, ))
        key, value = field.split('=', 1)
        rv[key.strip()] = value.strip()
    return rv


def main(args):
    parser = get_parser()
    options, args = parser.parse_args(args[1:])

    logging.basicConfig(
        level=logging.DEBUG if options.debug else logging.WARNING,
        format='%(asctime)s %(name)s %(levelname)s %(message)s')

    if not options.bank:
        parser.error('--bank is required')

    config = get_config()
    if options.config:
        config.load(options.config)

    due_date = None
    if options.due_date:
        try:
            due_date = parse_date(options.due_date)
        except (ValueError, OverflowError):
            raise SystemExit("Invalid due date: %s" % (options.due_date, ))

    boleto = Boleto(options.bank,
                    due_date=due_date,
                    value=options.value,
                    free_field=options.free_field,
                    free_field_fields=_parse_fields(options.fields),
                    currency_code=options.currency)
    try:
        code = boleto.febraban_code
        print(code)
        print(boleto.bank_code_with_dv)
        print(boleto.digitable_line)
    except (BoletoException, NotImplementedError) as e:
        log.debug('failed to generate boleto', exc_info=True)
        raise SystemExit("Could not generate the boleto: %s" % (e, ))

    if options.html:
        with open(options.html, 'w', encoding='utf-8') as f:
            f.write(render_barcode_html(code, config=config))
    return 0


def run():
    sys.exit(main(sys.argv))


if __name__ == '__main__':  # pragma nocover
    run()
