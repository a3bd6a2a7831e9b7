"""Canonical text encoding of periods and dates.

(C) Copyright 2013-2025 Dassault Systemes SE.  All Rights Reserved.

This software is licensed under a BSD 3-Clause License.
See the LICENSE file provided with this software.

Text forms:
  period -- [-]HH:MM:SS.UUUUUU
  date   -- YYYY-MM-DDTHH:MM:SS.UUUUUU

Hours are not limited to two digits; minutes and seconds are always two
and microseconds always six digits when formatting.  Parsing accepts any
number of digits in each group but the whole string must match.
"""

__all__ = ['TICKS_PER_SECOND', 'TICKS_PER_MINUTE', 'TICKS_PER_HOUR',
           'TICKS_PER_DAY', 'split_ticks', 'period_to_str', 'date_to_str',
           'str_to_period_fields', 'str_to_date_fields']

import re

from typing import Tuple  # pylint: disable=unused-import

from .exception import FormatError

TICKS_PER_SECOND = 1000000
TICKS_PER_MINUTE = 60 * TICKS_PER_SECOND
TICKS_PER_HOUR = 60 * TICKS_PER_MINUTE
TICKS_PER_DAY = 24 * TICKS_PER_HOUR

_TIME = r'([0-9]+):([0-9]+):([0-9]+)\.([0-9]+)'
_PERIOD_RE = re.compile(r'(-?)' + _TIME)
_DATE_RE = re.compile(r'([0-9]+)-([0-9]+)-([0-9]+)T' + _TIME)


def split_ticks(ticks):
    # type: (int) -> Tuple[int, int, int, int]
    """Split TICKS into (hours, minutes, seconds, microseconds).

    Division truncates toward zero so every part has the sign of TICKS.
    """
    sign = -1 if ticks < 0 else 1
    ticks = abs(ticks)
    hours, ticks = divmod(ticks, TICKS_PER_HOUR)
    minutes, ticks = divmod(ticks, TICKS_PER_MINUTE)
    seconds, micro = divmod(ticks, TICKS_PER_SECOND)
    return (sign * hours, sign * minutes, sign * seconds, sign * micro)


def _hms(hours, minutes, seconds, micro):
    # type: (int, int, int, int) -> str
    return "%02d:%02d:%02d.%06d" % (hours, minutes, seconds, micro)


def period_to_str(ticks):
    # type: (int) -> str
    """Return the canonical text of a period of TICKS microseconds."""
    parts = split_ticks(abs(ticks))
    if ticks < 0:
        return '-' + _hms(*parts)
    return _hms(*parts)


def date_to_str(year, month, day, day_ticks):
    # type: (int, int, int, int) -> str
    """Return the canonical text of a date.

    DAY_TICKS is the time of day and must be non-negative.
    """
    return "%04d-%02d-%02dT%s" % (year, month, day,
                                   _hms(*split_ticks(day_ticks)))


def str_to_period_fields(text):
    # type: (str) -> Tuple[int, int, int, int, int]
    """Parse TEXT into (sign, hours, minutes, seconds, microseconds).

    :raises FormatError: If TEXT is not the text form of a period.
    """
    m = _PERIOD_RE.fullmatch(text) if isinstance(text, str) else None
    if m is None:
        raise FormatError("'%s' is not a string representation of a period"
                          % (text,))
    sign = -1 if m.group(1) else 1
    return (sign,) + tuple(int(g) for g in m.groups()[1:])  # type: ignore


def str_to_date_fields(text):
    # type: (str) -> Tuple[int, int, int, int, int, int, int]
    """Parse TEXT into (year, month, day, hours, minutes, seconds, micro).

    :raises FormatError: If TEXT is not the text form of a date.
    """
    m = _DATE_RE.fullmatch(text) if isinstance(text, str) else None
    if m is None:
        raise FormatError("'%s' is not a string representation of a date"
                          % (text,))
    return tuple(int(g) for g in m.groups())  # type: ignore
