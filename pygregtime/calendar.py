"""A module to convert dates to and from Julian day numbers.

(C) Copyright 2013-2025 Dassault Systemes SE.  All Rights Reserved.

This software is licensed under a BSD 3-Clause License.
See the LICENSE file provided with this software.

Calendar functions for the proleptic Gregorian calendar restricted to
the years 1582 - 9999 inclusive:
  - conversion of (year, month, day) to and from a Julian day number.
  - leap years, length of months and ISO day of the week.
  - shifting a (year, month) pair by a number of months.

The Julian day conversions use jdcal.  jdcal reports Julian dates, which
start at noon, so the Julian day number of a date is its Julian date at
midnight plus half a day.
"""

__all__ = ['MIN_YEAR', 'MAX_YEAR', 'ymd2julian', 'julian2ymd',
           'is_leap_year', 'end_of_month', 'weekday', 'shift_months',
           'check_int', 'check_year', 'check_month', 'check_day']

import math
import numbers

import jdcal

from typing import Tuple  # pylint: disable=unused-import

from .exception import InvalidTypeError, ValidationError, RangeError

# 1582 is the year of adoption, 9999 keeps the year part at 4 characters.
MIN_YEAR = 1582
MAX_YEAR = 9999

_EOM = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def check_int(value):
    # type: (object) -> int
    """Return VALUE as an int if it is a whole number.

    Any real number with an integral value is accepted (so 3.0 is 3);
    booleans and anything else raise InvalidTypeError.
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise InvalidTypeError("integer number expected, got %r" % (value,))
    if isinstance(value, numbers.Integral):
        return int(value)
    if not math.isfinite(value) or value != math.floor(value):
        raise InvalidTypeError("integer number expected, got %r" % (value,))
    return int(value)


def check_year(year):
    # type: (object) -> int
    year = check_int(year)
    if not MIN_YEAR <= year <= MAX_YEAR:
        raise RangeError("year %d outside the allowed range [%d, %d]"
                         % (year, MIN_YEAR, MAX_YEAR))
    return year


def check_month(month):
    # type: (object) -> int
    month = check_int(month)
    if not 1 <= month <= 12:
        raise RangeError("month %d outside the allowed range [1, 12]" % (month))
    return month


def check_day(year, month, day):
    # type: (int, int, object) -> int
    """Return DAY if it exists in the given YEAR and MONTH.

    :raises ValidationError: If the month does not have that day.
    """
    day = check_int(day)
    if not 1 <= day <= end_of_month(year, month):
        raise ValidationError("%d-%d-%d is not a valid date" % (year, month, day))
    return day


def is_leap_year(year):
    # type: (int) -> bool
    year = check_year(year)
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def end_of_month(year, month):
    # type: (int, int) -> int
    """Return the number of days in MONTH of YEAR."""
    year = check_year(year)
    month = check_month(month)
    if month == 2 and is_leap_year(year):
        return 29
    return _EOM[month - 1]


def weekday(year, month, day):
    # type: (int, int, int) -> int
    """Return the day of the week, from 1 = Monday to 7 = Sunday."""
    year = check_year(year)
    month = check_month(month)
    day = check_day(year, month, day)
    a = (14 - month) // 12
    y = year - a
    m = month + 12 * a - 2
    d = (day + y + y // 4 - y // 100 + y // 400 + (31 * m) // 12) % 7
    return 7 if d == 0 else d


def shift_months(year, month, delta):
    # type: (int, int, int) -> Tuple[int, int]
    """Shift YEAR and MONTH by DELTA months, carrying into the year.

    :raises RangeError: If the resulting year is out of range.
    """
    delta = check_int(delta)
    newm = (month - 1 + delta) % 12 + 1
    newy = year + (month - 1 + delta) // 12
    return check_year(newy), check_month(newm)


def ymd2julian(year, month, day):
    # type: (int, int, int) -> int
    """Convert a calendar date to its Julian day number.

    The caller is responsible for validating the date first.
    """
    return int(sum(jdcal.gcal2jd(year, month, day)) + 0.5)


def julian2ymd(julian):
    # type: (int) -> Tuple[int, int, int]
    """Convert a Julian day number to a tuple (year, month, day).

       +---------+------------------+
       |  julian | (year,month,day) |
       |---------+------------------|
       | 2298874 | (1582,1,1)       |
       | 2440588 | (1970,1,1)       |
       | 2451545 | (2000,1,1)       |
       | 5373484 | (9999,12,31)     |
       +---------+------------------+
    """
    # Noon of the day, well clear of the midnight boundaries.
    y, m, d, _ = jdcal.jd2gcal(jdcal.MJD_0, julian - jdcal.MJD_0)
    return y, m, d
