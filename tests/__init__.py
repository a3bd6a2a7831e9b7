"""
(C) Copyright 2013-2025 Dassault Systemes SE.  All Rights Reserved.

This software is licensed under a BSD 3-Clause License.
See the LICENSE file provided with this software.
"""

import logging

from typing import List, Tuple  # pylint: disable=unused-import

from pygregtime.clock import ClockSource

_log = logging.getLogger("pygregtimetest")

FIELDS = Tuple[int, int, int, int, int, int, int]


class FakeClock(ClockSource):
    """A ClockSource reporting fixed times and recording sleeps."""

    def __init__(self, local, utc):
        # type: (FIELDS, FIELDS) -> None
        self.local = local
        self.utc = utc
        self.slept = []  # type: List[float]

    def _local_fields(self):
        # type: () -> FIELDS
        return self.local

    def _utc_fields(self):
        # type: () -> FIELDS
        return self.utc

    def _suspend(self, secs):
        # type: (float) -> None
        _log.info("fake sleep for %f seconds", secs)
        self.slept.append(secs)
