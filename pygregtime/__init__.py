"""Dates and periods in the proleptic Gregorian calendar.

(C) Copyright 2013-2025 Dassault Systemes SE.  All Rights Reserved.

This software is licensed under a BSD 3-Clause License.
See the LICENSE file provided with this software.
"""

__version__ = '1.0.0'

from .datatype import *    # pylint: disable=wildcard-import
from .calendar import is_leap_year, end_of_month, weekday
from .clock import *       # pylint: disable=wildcard-import
from .exception import *   # pylint: disable=wildcard-import
