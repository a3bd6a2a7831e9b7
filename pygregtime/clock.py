"""A module for reading the wall clock and sleeping.

(C) Copyright 2013-2025 Dassault Systemes SE.  All Rights Reserved.

This software is licensed under a BSD 3-Clause License.
See the LICENSE file provided with this software.

Exported Classes:
ClockSource -- Abstract source of the current time.
SystemClock -- ClockSource reading the operating system clock.

Exported Functions:
now_local -- Current local date and time as a Date.
now_utc -- Current UTC date and time as a Date.
sleep -- Suspend the calling thread for a Period.
reset -- Forget the default SystemClock.
"""

__all__ = ['ClockSource', 'SystemClock', 'LOCALZONE_NAME',
           'now_local', 'now_utc', 'sleep', 'reset']

import abc
import datetime
import logging
import time

from typing import Mapping, Optional, Tuple  # pylint: disable=unused-import

import pytz
import tzlocal

from .exception import InvalidTypeError, ValidationError
from .format import TICKS_PER_SECOND
from .datatype import Date, Period

_log = logging.getLogger(__name__)

FIELDS = Tuple[int, int, int, int, int, int, int]

# tzlocal can report no zone name on hosts without any zone configuration.
LOCALZONE_NAME = tzlocal.get_localzone_name() or 'UTC'


def _to_date(fields):
    # type: (FIELDS) -> Date
    year, month, day, hour, minute, second, micro = fields
    return Date(year, month, day) + Period(hour, minute, second, micro)


def _fields(value):
    # type: (datetime.datetime) -> FIELDS
    return (value.year, value.month, value.day, value.hour,
            value.minute, value.second, value.microsecond)


class ClockSource(abc.ABC):
    """A source of the current time.

    Subclasses report the raw fields of the current local and UTC time and
    know how to suspend the caller; this class turns the fields into Date
    values and validates sleep requests.
    """

    def now_local(self):
        # type: () -> Date
        """Return the current local date and time."""
        return _to_date(self._local_fields())

    def now_utc(self):
        # type: () -> Date
        """Return the current UTC date and time."""
        return _to_date(self._utc_fields())

    def sleep(self, period):
        # type: (Period) -> None
        """Suspend the caller for PERIOD.

        :raises ValidationError: If PERIOD is negative.
        """
        if not isinstance(period, Period):
            raise InvalidTypeError("period expected, got %r" % (period,))
        if period < Period():
            raise ValidationError("cannot sleep a negative amount of time")
        self._suspend(period.ticks / TICKS_PER_SECOND)

    @abc.abstractmethod
    def _local_fields(self):
        # type: () -> FIELDS
        """Return (year, month, day, hour, minute, second, microsecond)."""

    @abc.abstractmethod
    def _utc_fields(self):
        # type: () -> FIELDS
        """Return (year, month, day, hour, minute, second, microsecond)."""

    @abc.abstractmethod
    def _suspend(self, secs):
        # type: (float) -> None
        """Block for SECS seconds."""


class SystemClock(ClockSource):
    """Read the operating system clock, with microsecond resolution.

    :param options: Mapping of options.  The key TimeZone (in any case)
                    names the zone used for local time; by default the
                    host's zone is used.
    """

    def __init__(self, options=None):
        # type: (Optional[Mapping[str, str]]) -> None
        self.__zone_name = self._init_local_timezone(options)
        try:
            self.__zone = pytz.timezone(self.__zone_name)
        except pytz.UnknownTimeZoneError:
            raise ValidationError("unknown time zone '%s'" % (self.__zone_name))
        _log.debug("system clock local zone is %s", self.__zone_name)

    @staticmethod
    def _init_local_timezone(options):
        # type: (Optional[Mapping[str, str]]) -> str
        if options:
            for k, v in options.items():
                if k.lower() == 'timezone' and v:
                    return v
        return LOCALZONE_NAME

    @property
    def zone_name(self):
        # type: () -> str
        return self.__zone_name

    def _local_fields(self):
        # type: () -> FIELDS
        return _fields(datetime.datetime.now(self.__zone))

    def _utc_fields(self):
        # type: () -> FIELDS
        return _fields(datetime.datetime.now(pytz.utc))

    def _suspend(self, secs):
        # type: (float) -> None
        _log.debug("sleeping for %.6f seconds", secs)
        time.sleep(secs)


__default = None  # type: Optional[SystemClock]


def _default_clock():
    # type: () -> SystemClock
    global __default  # pylint: disable=global-statement
    if __default is None:
        __default = SystemClock()
    return __default


def now_local():
    # type: () -> Date
    """Return the current local date and time from the system clock."""
    return _default_clock().now_local()


def now_utc():
    # type: () -> Date
    """Return the current UTC date and time from the system clock."""
    return _default_clock().now_utc()


def sleep(period):
    # type: (Period) -> None
    """Suspend the calling thread for PERIOD.

    :raises ValidationError: If PERIOD is negative.
    """
    _default_clock().sleep(period)


def reset():
    # type: () -> None
    """Forget the default system clock.

    The next call to now_local, now_utc or sleep creates a new one.
    NOTE: this does not impact SystemClock objects created by the caller.
    """
    global __default  # pylint: disable=global-statement
    __default = None
