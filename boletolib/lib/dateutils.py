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

import datetime
import logging

from dateutil import parser as dateparser

from boletolib.exceptions import DueDateFactorOverflow
from boletolib.lib.translation import boletolib_gettext

_ = boletolib_gettext
log = logging.getLogger(__name__)

#: Day zero of the due date factor
FACTOR_EPOCH = datetime.date(1997, 10, 7)

#: Factor used by slips without a due date (contra apresentação)
NO_DUE_DATE_FACTOR = '0000'

FACTOR_LENGTH = 4


def localnow():
    """Get the current date according to the local timezone.
    This is relative to the clock on the computer where boletolib is run.

    :rtype: datetime.datetime object
    :returns: right now according to the current locale
    """
    return datetime.datetime.now()


def localtoday():
    """Get the beginning of the current date according to the local timezone.

    :rtype: datetime.datetime object
    :returns: today according to the current locale
    """
    return localnow().replace(hour=0,
                              minute=0,
                              second=0,
                              microsecond=0)


def parse_date(text):
    """Parses a date typed by a user, day first as used in Brazil

    :param str text: a date like ``31/12/2017``
    :rtype: datetime.date object
    """
    return dateparser.parse(text, dayfirst=True).date()


def compute_due_date_factor(due_date):
    """Computes the FEBRABAN due date factor

    The factor is the number of days between :data:`FACTOR_EPOCH` and
    *due_date*, zero filled to 4 digits. Slips without a due date use
    :data:`NO_DUE_DATE_FACTOR`.

    :param due_date: a date, a datetime (only the calendar date is
      considered) or ``None``
    :returns: the factor as a string
    :raises: :exc:`DueDateFactorOverflow` if the factor does not fit
      in the field
    """
    if due_date is None:
        return NO_DUE_DATE_FACTOR

    if isinstance(due_date, datetime.datetime):
        due_date = due_date.date()

    days = (due_date - FACTOR_EPOCH).days
    if days < 0:
        raise DueDateFactorOverflow(
            _('Due date %s is before the factor epoch %s') % (
                due_date, FACTOR_EPOCH))

    factor = str(days).zfill(FACTOR_LENGTH)
    if len(factor) > FACTOR_LENGTH:
        log.warning('due date factor overflow: %s (%d days)',
                    due_date, days)
        raise DueDateFactorOverflow(
            _('Due date %s gives a factor of %d, which does not fit in '
              '%d digits') % (due_date, days, FACTOR_LENGTH))
    return factor
