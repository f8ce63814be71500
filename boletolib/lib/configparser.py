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
"""Routines for parsing the configuration file"""

import configparser
import logging
import os

from boletolib.exceptions import ConfigError
from boletolib.lib.translation import boletolib_gettext as _

log = logging.getLogger(__name__)

_config = None

_defaults = {
    'Barcode': {
        'narrow': '1',
        'wide': '3',
        'height': '50',
        'image_path': './images',
    },
    'Boleto': {
        'currency_code': '9',
        'aceite': 'N',
        'local_pagamento': (
            u'Pagável em qualquer agência bancária até o vencimento.'),
        'instrucoes': u'Pagar até a data do vencimento.',
    },
}


class BoletoConfig:
    domain = 'boletolib'

    def __init__(self):
        # Interpolation is off so values can have a literal %
        self._config = configparser.ConfigParser(interpolation=None)
        self._config.read_dict(_defaults)
        self.filename = None

    def _open_config(self, filename):
        if not os.path.exists(filename):
            return False
        self._config.read(filename, encoding='utf-8')
        return True

    #
    # Public API
    #

    def load(self, filename):
        """
        Loads the data from a configuration file
        :param filename: filename
        """
        if not filename:
            raise TypeError("Missing filename option")
        if not self._open_config(filename):
            log.info('config file %s does not exist, using defaults',
                     filename)
            return
        log.debug('loaded config file %s', filename)
        self.filename = filename

    def flush(self, filename=None):
        """
        Writes the current configuration data to disk.
        """
        filename = filename or self.filename
        if not filename:
            raise TypeError("Missing filename option")

        with open(filename, 'w', encoding='utf-8') as f:
            self._config.write(f)
        self.filename = filename

    def get(self, section, option):
        if not self._config.has_section(section):
            raise ConfigError(_("Invalid config file, missing section %s")
                              % (section, ))
        if not self._config.has_option(section, option):
            return None
        return self._config.get(section, option)

    def get_int(self, section, option):
        value = self.get(section, option)
        if value is None:
            return None
        try:
            return int(value)
        except ValueError:
            raise ConfigError(_("Option %s.%s must be a number, got %r")
                              % (section, option, value))

    def set(self, section, option, value):
        if not self._config.has_section(section):
            self._config.add_section(section)
        self._config.set(section, option, str(value))


def get_config():
    global _config
    if _config is None:
        _config = BoletoConfig()
    return _config
