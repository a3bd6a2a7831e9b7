"""
(C) Copyright 2025 Dassault Systemes SE.  All Rights Reserved.

This software is licensed under a BSD 3-Clause License.
See the LICENSE file provided with this software.
"""

import pytest

from pygregtime import Date, Period, to_date, to_period
from pygregtime import days, hours, minutes, microseconds
from pygregtime import format as fmt
from pygregtime.exception import FormatError, InvalidTypeError
from pygregtime.exception import ValidationError, RangeError


class TestFormatFunctions(object):

    def test_split_ticks(self):
        # type: () -> None
        assert fmt.split_ticks(0) == (0, 0, 0, 0)
        assert fmt.split_ticks(3723000004) == (1, 2, 3, 4)
        assert fmt.split_ticks(-3723000004) == (-1, -2, -3, -4)

    def test_period_to_str(self):
        # type: () -> None
        assert fmt.period_to_str(0) == "00:00:00.000000"
        assert fmt.period_to_str(-1) == "-00:00:00.000001"
        assert fmt.period_to_str(100 * fmt.TICKS_PER_HOUR) == "100:00:00.000000"

    def test_date_to_str(self):
        # type: () -> None
        assert fmt.date_to_str(1582, 1, 1, 0) == "1582-01-01T00:00:00.000000"
        assert fmt.date_to_str(2012, 4, 30, fmt.TICKS_PER_DAY - 1) == \
            "2012-04-30T23:59:59.999999"

    def test_str_to_fields(self):
        # type: () -> None
        assert fmt.str_to_period_fields("13:30:00.000001") == (1, 13, 30, 0, 1)
        assert fmt.str_to_period_fields("-1:2:3.4") == (-1, 1, 2, 3, 4)
        assert fmt.str_to_date_fields("2012-04-30T13:30:00.000001") == \
            (2012, 4, 30, 13, 30, 0, 1)


class TestParsePeriod(object):

    PERIODS = [Period(), microseconds(1), hours(13) + minutes(30),
               Period(1, 2, 3, 4), hours(1000) + microseconds(999999),
               -microseconds(1), -Period(25, 59, 59, 999999), -days(365)]

    BAD = ["", "13:30:00", "13:30:00.", "13:30.000000", "13:30:00:000000",
           " 13:30:00.000000", "13:30:00.000000 ", "13:30:00.000000\n",
           "13-30-00.000000", "13:30:00,000000", "+13:30:00.000000",
           "--13:30:00.000000", "13:3a:00.000000", "1e3:00:00.000000",
           "١٣:30:00.000000",
           "2012-04-30T13:30:00.000000"]

    def test_parse(self):
        # type: () -> None
        assert to_period("13:30:00.000000") == hours(13) + minutes(30)
        assert to_period("00:00:00.000001") == microseconds(1)
        assert to_period("123:00:00.000000") == hours(123)

    def test_parse_negative(self):
        # type: () -> None
        assert to_period("-13:30:00.000000") == -(hours(13) + minutes(30))

    def test_digit_groups(self):
        # type: () -> None
        # groups are plain integers: the last one counts microseconds
        assert to_period("0:0:0.5") == microseconds(5)
        assert to_period("00:90:00.000000") == hours(1) + minutes(30)

    def test_round_trip(self):
        # type: () -> None
        for p in self.PERIODS:
            assert to_period(str(p)) == p

    def test_bad_text(self):
        # type: () -> None
        for text in self.BAD:
            with pytest.raises(FormatError):
                to_period(text)

    def test_error_quotes_input(self):
        # type: () -> None
        with pytest.raises(FormatError, match="not a string representation of a period"):
            to_period("noon")

    def test_ticks_and_identity(self):
        # type: () -> None
        p = Period(1, 2, 3, 4)
        assert to_period(p.ticks) == p
        assert to_period(p) is p

    def test_bad_type(self):
        # type: () -> None
        for value in (1.5, None, True, b"13:30:00.000000", Date(2012, 4, 30)):
            with pytest.raises(InvalidTypeError):
                to_period(value)


class TestParseDate(object):

    DATES = [Date(1582, 1, 1), Date(2012, 4, 30),
             Date(2012, 4, 30) + hours(13) + minutes(30),
             Date(2000, 2, 29) + Period(23, 59, 59, 999999),
             Date(9999, 12, 31) + Period(23, 59, 59, 999999)]

    BAD = ["", "2012-04-30", "2012-04-30T13:30:00",
           "2012-04-30 13:30:00.000000", "2012-04-30t13:30:00.000000",
           "2012/04/30T13:30:00.000000", "-2012-04-30T13:30:00.000000",
           "2012-04-30T13:30:00.000000Z", "2012-04-30T13:30:00.000000+01:00",
           "x2012-04-30T13:30:00.000000", "13:30:00.000000"]

    def test_parse(self):
        # type: () -> None
        assert to_date("2012-04-30T13:30:00.000000") == \
            Date(2012, 4, 30) + hours(13) + minutes(30)
        assert to_date("1582-01-01T00:00:00.000000") == Date(1582, 1, 1)

    def test_round_trip(self):
        # type: () -> None
        for d in self.DATES:
            assert to_date(str(d)) == d

    def test_round_trip_sampled(self):
        # type: () -> None
        d = Date(1582, 1, 1) + Period(0, 0, 1, 1)
        step = days(9973) + Period(7, 11, 13, 17)
        while d < Date(9999, 1, 1) - step:
            assert to_date(str(d)) == d
            d = d + step

    def test_time_overflows_into_next_day(self):
        # type: () -> None
        assert to_date("2012-04-30T24:00:00.000000") == Date(2012, 5, 1)

    def test_bad_text(self):
        # type: () -> None
        for text in self.BAD:
            with pytest.raises(FormatError):
                to_date(text)

    def test_invalid_calendar_date(self):
        # type: () -> None
        with pytest.raises(ValidationError):
            to_date("2021-02-30T00:00:00.000000")
        with pytest.raises(RangeError):
            to_date("1581-12-31T00:00:00.000000")
        with pytest.raises(RangeError):
            to_date("9999-12-31T24:00:00.000000")

    def test_ticks_and_identity(self):
        # type: () -> None
        d = Date(2012, 4, 30)
        assert to_date(d.ticks) == d
        assert to_date(d) is d
        with pytest.raises(RangeError):
            to_date(0)

    def test_bad_type(self):
        # type: () -> None
        for value in (1.5, None, hours(1)):
            with pytest.raises(InvalidTypeError):
                to_date(value)
