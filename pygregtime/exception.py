"""Classes containing the exceptions for reporting errors.

(C) Copyright 2013-2025 Dassault Systemes SE.  All Rights Reserved.

This software is licensed under a BSD 3-Clause License.
See the LICENSE file provided with this software.
"""

__all__ = ['Error', 'InvalidTypeError', 'ValidationError', 'RangeError',
           'FormatError']


class Error(Exception):
    def __init__(self, value):
        self.__value = value

    def __str__(self):
        return repr(self.__value)


class InvalidTypeError(Error, TypeError):
    """Raised for an operand or argument of the wrong kind."""

    def __init__(self, value):
        Error.__init__(self, value)


class ValidationError(Error, ValueError):
    """Raised when a value fails a domain constraint."""

    def __init__(self, value):
        Error.__init__(self, value)


class RangeError(Error, ValueError):
    """Raised when a year, month or tick count is outside the allowed range."""

    def __init__(self, value):
        Error.__init__(self, value)


class FormatError(Error, ValueError):
    """Raised when text is not in the canonical form."""

    def __init__(self, value):
        Error.__init__(self, value)
