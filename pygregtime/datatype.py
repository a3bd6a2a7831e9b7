"""A module for housing the datatype classes.

(C) Copyright 2013-2025 Dassault Systemes SE.  All Rights Reserved.

This software is licensed under a BSD 3-Clause License.
See the LICENSE file provided with this software.

Exported Classes:
Period -- A signed duration with microsecond resolution.
Date -- A point in time between 1582-01-01 and 9999-12-31 inclusive.
Months -- A number of months to shift a Date by.
Years -- A number of years to shift a Date by.

Exported Functions:
weeks, days, hours, minutes, seconds, milliseconds, microseconds --
    Create a Period from a number of the given unit.
to_period -- Converts a string or ticks to a Period object.
to_date -- Converts a string or ticks to a Date object.

Both Period and Date are stored as a count of microsecond "ticks".  For a
Date the ticks are counted from the start of Julian day 0, so that
ticks // TICKS_PER_DAY is the Julian day number of the date.
"""

__all__ = ['Period', 'Date', 'Months', 'Years',
           'weeks', 'days', 'hours', 'minutes', 'seconds', 'milliseconds',
           'microseconds', 'to_period', 'to_date',
           'DATE_TICKS_MIN', 'DATE_TICKS_MAX']

import datetime
import numbers

from typing import Any, Tuple, Union  # pylint: disable=unused-import

from .exception import InvalidTypeError, RangeError
from .calendar import check_int, check_year, check_month, check_day
from .calendar import ymd2julian, julian2ymd, shift_months
from .calendar import is_leap_year, end_of_month, weekday
from .calendar import MIN_YEAR, MAX_YEAR
from .format import TICKS_PER_SECOND, TICKS_PER_MINUTE, TICKS_PER_HOUR
from .format import TICKS_PER_DAY, split_ticks
from .format import period_to_str, date_to_str
from .format import str_to_period_fields, str_to_date_fields

INT64_MIN = -2**63
INT64_MAX = 2**63 - 1

# date(1582, 1, 1)
DATE_TICKS_MIN = ymd2julian(MIN_YEAR, 1, 1) * TICKS_PER_DAY
# date(9999, 12, 31) + period(23, 59, 59, 999999)
DATE_TICKS_MAX = (ymd2julian(MAX_YEAR, 12, 31) + 1) * TICKS_PER_DAY - 1


def _int64(ticks):
    # type: (int) -> int
    if not INT64_MIN <= ticks <= INT64_MAX:
        raise RangeError("period of %d ticks does not fit in 64 bits" % (ticks))
    return ticks


def _p64(ticks):
    # type: (int) -> Period
    p = Period.__new__(Period)
    object.__setattr__(p, '_ticks', _int64(ticks))
    return p


def _d64(ticks):
    # type: (int) -> Date
    if not DATE_TICKS_MIN <= ticks <= DATE_TICKS_MAX:
        raise RangeError("resulting date is outside the allowed range")
    d = Date.__new__(Date)
    object.__setattr__(d, '_ticks', ticks)
    return d


class _TickValue(object):
    """Comparison and hashing shared by values stored as ticks."""

    __slots__ = ('_ticks',)

    _name = 'value'

    def __setattr__(self, name, value):
        raise AttributeError("%s values are immutable" % (self._name))

    def __delattr__(self, name):
        raise AttributeError("%s values are immutable" % (self._name))

    def _other_ticks(self, other):
        # type: (Any) -> int
        if not isinstance(other, _TickValue) or other._name != self._name:
            raise InvalidTypeError("%s expected, got %r" % (self._name, other))
        return other._ticks

    @property
    def ticks(self):
        # type: () -> int
        """Return the number of microseconds held by this value."""
        return self._ticks

    def __eq__(self, other):
        return self._ticks == self._other_ticks(other)

    def __ne__(self, other):
        return self._ticks != self._other_ticks(other)

    def __lt__(self, other):
        return self._ticks < self._other_ticks(other)

    def __le__(self, other):
        return self._ticks <= self._other_ticks(other)

    def __gt__(self, other):
        return self._ticks > self._other_ticks(other)

    def __ge__(self, other):
        return self._ticks >= self._other_ticks(other)

    def __hash__(self):
        return hash((self._name, self._ticks))

    def __reduce__(self):
        return (type(self).from_ticks, (self._ticks,))


class Period(_TickValue):
    """A signed duration, stored as a count of microseconds.

    The arguments are summed and may each have any sign or magnitude, so
    Period(1, -30) is half an hour.  Every argument must be a whole number.
    """

    __slots__ = ()

    _name = 'period'

    def __init__(self, hours=0, minutes=0, seconds=0, microseconds=0):
        # type: (int, int, int, int) -> None
        ticks = (check_int(hours) * TICKS_PER_HOUR
                 + check_int(minutes) * TICKS_PER_MINUTE
                 + check_int(seconds) * TICKS_PER_SECOND
                 + check_int(microseconds))
        object.__setattr__(self, '_ticks', _int64(ticks))

    @classmethod
    def from_ticks(cls, ticks):
        # type: (int) -> Period
        """Create a Period of TICKS microseconds."""
        return _p64(check_int(ticks))

    @classmethod
    def from_timedelta(cls, value):
        # type: (datetime.timedelta) -> Period
        """Create a Period with the same length as a datetime.timedelta."""
        if not isinstance(value, datetime.timedelta):
            raise InvalidTypeError("timedelta expected, got %r" % (value,))
        return _p64((value.days * 86400 + value.seconds) * TICKS_PER_SECOND
                    + value.microseconds)

    def to_timedelta(self):
        # type: () -> datetime.timedelta
        return datetime.timedelta(microseconds=self._ticks)

    def hours(self):
        # type: () -> int
        return split_ticks(self._ticks)[0]

    def minutes(self):
        # type: () -> int
        return split_ticks(self._ticks)[1]

    def seconds(self):
        # type: () -> int
        return split_ticks(self._ticks)[2]

    def microseconds(self):
        # type: () -> int
        return split_ticks(self._ticks)[3]

    def parts(self):
        # type: () -> Tuple[int, int, int, int]
        """Return (hours, minutes, seconds, microseconds).

        Each part has the sign of the period.
        """
        return split_ticks(self._ticks)

    def __add__(self, other):
        return _p64(self._ticks + self._other_ticks(other))

    def __sub__(self, other):
        return _p64(self._ticks - self._other_ticks(other))

    def __neg__(self):
        return _p64(-self._ticks)

    def __pos__(self):
        return self

    def __abs__(self):
        return _p64(abs(self._ticks))

    def __mul__(self, other):
        return _p64(self._ticks * check_int(other))

    __rmul__ = __mul__

    def __truediv__(self, other):
        # Approximate ratio, not reversible in either case.
        if isinstance(other, Period):
            return self._ticks / other._ticks
        if isinstance(other, numbers.Real):
            n = check_int(other)
            if n == 0:
                raise ZeroDivisionError("period division by zero")
            q = abs(self._ticks) // abs(n)
            return _p64(q if (self._ticks < 0) == (n < 0) else -q)
        raise InvalidTypeError("cannot divide a period by %r" % (other,))

    def __rtruediv__(self, other):
        raise InvalidTypeError("cannot divide %r by a period" % (other,))

    def _shift_date(self, date, sign):
        # type: (Date, int) -> Date
        return _d64(date._ticks + sign * self._ticks)

    def __str__(self):
        return period_to_str(self._ticks)

    def __repr__(self):
        return '<Period %s>' % (period_to_str(self._ticks))


class _CalendarShift(object):
    """A whole number of calendar units to move a Date by."""

    __slots__ = ('_amount',)

    def __setattr__(self, name, value):
        raise AttributeError("calendar shifts are immutable")

    def __delattr__(self, name):
        raise AttributeError("calendar shifts are immutable")

    def __init__(self, amount):
        # type: (int) -> None
        object.__setattr__(self, '_amount', check_int(amount))

    @property
    def amount(self):
        # type: () -> int
        return self._amount

    def __repr__(self):
        return '%s(%d)' % (type(self).__name__, self._amount)

    def __reduce__(self):
        return (type(self), (self._amount,))


class Months(_CalendarShift):
    __slots__ = ()

    def _shift_date(self, date, sign):
        # type: (Date, int) -> Date
        return date._shifted(0, sign * self._amount)


class Years(_CalendarShift):
    __slots__ = ()

    def _shift_date(self, date, sign):
        # type: (Date, int) -> Date
        return date._shifted(sign * self._amount, 0)


# Everything that may be added to or subtracted from a Date.
_DATE_ADDENDS = (Period, Months, Years)


def _cap_day(year, month, day):
    # type: (int, int, int) -> Date
    """Return a valid Date, moving DAY back to the end of the month if needed.

    After a month or year shift the day is the only part that may be
    invalid, e.g. January 31 plus one month.
    """
    return Date(year, month, min(day, end_of_month(year, month)))


class Date(_TickValue):
    """A point in time in the proleptic Gregorian calendar.

    Public Functions:
    ymd -- Return the (year, month, day) of the date.
    period -- Return the time of day as a Period.
    is_leap_year -- True if the date is in a leap year.
    end_of_month -- Number of days in the month of the date.
    weekday -- Day of the week, from 1 = Monday to 7 = Sunday.
    to_datetime -- Return an equivalent naive datetime.datetime.

    Arithmetic:
    date + period, date + Months(n), date + Years(n) -- a new Date.
    date - date -- the Period between the two dates.

    Adding months or years never overflows into the next month: the day is
    capped to the last day of the resulting month, so 2011-01-31 plus one
    month is 2011-02-28.
    """

    __slots__ = ()

    _name = 'date'

    def __init__(self, year, month, day):
        # type: (int, int, int) -> None
        year = check_year(year)
        month = check_month(month)
        day = check_day(year, month, day)
        object.__setattr__(self, '_ticks',
                           ymd2julian(year, month, day) * TICKS_PER_DAY)

    @classmethod
    def from_ticks(cls, ticks):
        # type: (int) -> Date
        """Create a Date from ticks since the start of Julian day 0."""
        return _d64(check_int(ticks))

    @classmethod
    def from_datetime(cls, value):
        # type: (Union[datetime.datetime, datetime.date]) -> Date
        """Create a Date from a datetime.datetime or datetime.date.

        Timezone-aware values are converted to UTC first.
        """
        if isinstance(value, datetime.datetime):
            if value.utcoffset() is not None:
                value = value.astimezone(datetime.timezone.utc)
            return Date(value.year, value.month, value.day) + Period(
                value.hour, value.minute, value.second, value.microsecond)
        if isinstance(value, datetime.date):
            return Date(value.year, value.month, value.day)
        raise InvalidTypeError("datetime expected, got %r" % (value,))

    def to_datetime(self):
        # type: () -> datetime.datetime
        year, month, day = self.ymd()
        hour, minute, second, micro = self.period().parts()
        return datetime.datetime(year, month, day, hour, minute, second, micro)

    def ymd(self):
        # type: () -> Tuple[int, int, int]
        return julian2ymd(self._ticks // TICKS_PER_DAY)

    @property
    def year(self):
        # type: () -> int
        return self.ymd()[0]

    @property
    def month(self):
        # type: () -> int
        return self.ymd()[1]

    @property
    def day(self):
        # type: () -> int
        return self.ymd()[2]

    def period(self):
        # type: () -> Period
        """Return the time of day, always non-negative."""
        return _p64(self._ticks % TICKS_PER_DAY)

    def is_leap_year(self):
        # type: () -> bool
        return is_leap_year(self.ymd()[0])

    def end_of_month(self):
        # type: () -> int
        year, month, _ = self.ymd()
        return end_of_month(year, month)

    def weekday(self):
        # type: () -> int
        return weekday(*self.ymd())

    def _shifted(self, years, months):
        # type: (int, int) -> Date
        year, month, day = self.ymd()
        if months:
            year, month = shift_months(year, month, months)
        return _cap_day(year + years, month, day) + self.period()

    def __add__(self, other):
        if isinstance(other, _DATE_ADDENDS):
            return other._shift_date(self, 1)
        raise InvalidTypeError("cannot add %r to a date" % (other,))

    def __radd__(self, other):
        # Only calendar shifts may appear on the left.
        if isinstance(other, (Months, Years)):
            return other._shift_date(self, 1)
        raise InvalidTypeError("cannot add a date to %r" % (other,))

    def __sub__(self, other):
        if isinstance(other, Date):
            return _p64(self._ticks - other._ticks)
        if isinstance(other, _DATE_ADDENDS):
            return other._shift_date(self, -1)
        raise InvalidTypeError("cannot subtract %r from a date" % (other,))

    def __rsub__(self, other):
        raise InvalidTypeError("cannot subtract a date from %r" % (other,))

    def __str__(self):
        year, month, day = self.ymd()
        return date_to_str(year, month, day, self._ticks % TICKS_PER_DAY)

    def __repr__(self):
        return '<Date %s>' % (str(self))


def weeks(x):
    # type: (int) -> Period
    return _p64(check_int(x) * 7 * TICKS_PER_DAY)


def days(x):
    # type: (int) -> Period
    return _p64(check_int(x) * TICKS_PER_DAY)


def hours(x):
    # type: (int) -> Period
    return _p64(check_int(x) * TICKS_PER_HOUR)


def minutes(x):
    # type: (int) -> Period
    return _p64(check_int(x) * TICKS_PER_MINUTE)


def seconds(x):
    # type: (int) -> Period
    return _p64(check_int(x) * TICKS_PER_SECOND)


def milliseconds(x):
    # type: (int) -> Period
    return _p64(check_int(x) * 1000)


def microseconds(x):
    # type: (int) -> Period
    return _p64(check_int(x))


def to_period(value):
    # type: (Union[str, int, Period]) -> Period
    """Convert the text form of a period, or a number of ticks, to a Period.

    :raises FormatError: If a string is not of the form [-]HH:MM:SS.UUUUUU.
    """
    if isinstance(value, Period):
        return value
    if isinstance(value, str):
        sign, h, m, s, us = str_to_period_fields(value)
        return _p64(sign * (h * TICKS_PER_HOUR + m * TICKS_PER_MINUTE
                            + s * TICKS_PER_SECOND + us))
    if isinstance(value, numbers.Integral) and not isinstance(value, bool):
        return _p64(int(value))
    raise InvalidTypeError("unexpected type %r" % (type(value).__name__))


def to_date(value):
    # type: (Union[str, int, Date]) -> Date
    """Convert the text form of a date, or a number of ticks, to a Date.

    :raises FormatError: If a string is not of the form
                         YYYY-MM-DDTHH:MM:SS.UUUUUU.
    """
    if isinstance(value, Date):
        return value
    if isinstance(value, str):
        year, month, day, h, m, s, us = str_to_date_fields(value)
        return Date(year, month, day) + Period(h, m, s, us)
    if isinstance(value, numbers.Integral) and not isinstance(value, bool):
        return _d64(int(value))
    raise InvalidTypeError("unexpected type %r" % (type(value).__name__))
