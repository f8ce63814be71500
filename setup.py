# -*- coding: utf-8 -*-
# vi:si:et:sw=4:sts=4:ts=4

##
## Copyright (C) 2005-2017 Async Open Source
##
## This program is free software; you can redistribute it and/or
## modify it under the terms of the GNU Lesser General Public License
## as published by the Free Software Foundation; either version 2
## of the License, or (at your option) any later version.
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
##
## Author(s): Stoq Team <stoq-devel@async.com.br>
##

#
# Package installation
#

import os

from setuptools import setup, find_packages


def read_version():
    # boletolib/__init__.py can't be imported before the dependencies
    # are installed
    filename = os.path.join(os.path.dirname(__file__),
                            'boletolib', '__init__.py')
    with open(filename) as f:
        for line in f:
            if line.startswith('version = '):
                return line.split('=', 1)[1].strip().strip("'")
    raise SystemExit("Could not find boletolib version")


packages = find_packages(include=['boletolib', 'boletolib.*'],
                         exclude=['boletolib.pytests', 'boletolib.pytests.*'])

setup(
    name="boletolib",
    version=read_version(),
    author="Async Open Source",
    author_email="stoq-devel@async.com.br",
    description="FEBRABAN boleto codes, digitable lines and barcodes",
    long_description=open('README').read(),
    url="http://www.stoq.com.br",
    license="GNU LGPL 2.1",
    packages=packages,
    package_data={
        'boletolib': ['data/template/*.html'],
    },
    python_requires='>=3.6',
    install_requires=[
        'Mako',
        'python-dateutil',
    ],
    extras_require={
        'test': [
            'mock',
            'pytest',
        ],
    },
    entry_points={
        'console_scripts': [
            'boleto = boletolib.main:run',
        ],
    },
    zip_safe=False,
)
