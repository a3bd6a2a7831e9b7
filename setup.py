#!/usr/bin/env python

"""Set up the pygregtime package.

(C) Copyright 2013-2025 Dassault Systemes SE.  All Rights Reserved.

This software is licensed under a BSD 3-Clause License.
See the LICENSE file provided with this software.

This package can be installed using pip as follows:

    pip install pygregtime

To install with the test requirements:

    pip install 'pygregtime[test]'
"""

import os
import re

from setuptools import setup

with open(os.path.join(os.path.dirname(__file__), 'pygregtime', '__init__.py')) as v:
    m = re.search(r"^ *__version__ *= *'(.*?)'", v.read(), re.M)
    if m is None:
        raise RuntimeError("Cannot detect version in pygregtime/__init__.py")
    VERSION = m.group(1)

readme = os.path.join(os.path.dirname(__file__), 'README.rst')

with open(readme) as r:
    long_description = r.read()

setup(
    name='pygregtime',
    version=VERSION,
    author='NuoDB',
    author_email='drivers@nuodb.com',
    description='Gregorian dates and periods with microsecond resolution',
    keywords='date time period calendar gregorian julian',
    packages=['pygregtime'],
    license='BSD License',
    long_description=long_description,
    python_requires='>=3.7',
    install_requires=['pytz>=2015.4', 'tzlocal>=4.0', 'jdcal'],
    extras_require=dict(test=['pytest']),
    classifiers=[
        'Development Status :: 5 - Production/Stable',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: BSD License',
        'Operating System :: OS Independent',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Topic :: Software Development :: Libraries',
    ],
)
