"""
(C) Copyright 2025 Dassault Systemes SE.  All Rights Reserved.

This software is licensed under a BSD 3-Clause License.
See the LICENSE file provided with this software.
"""

import time
import logging

import pytest

from typing import Generator, List  # pylint: disable=unused-import

import pygregtime

from . import FakeClock

_log = logging.getLogger("pygregtimetest")


@pytest.fixture
def fake_clock():
    # type: () -> FakeClock
    """A clock stopped at 2012-04-30T13:30:00.250000 local, 11:30 UTC."""
    return FakeClock(local=(2012, 4, 30, 13, 30, 0, 250000),
                     utc=(2012, 4, 30, 11, 30, 0, 250000))


@pytest.fixture
def system_sleeps(monkeypatch):
    # type: (pytest.MonkeyPatch) -> Generator[List[float], None, None]
    """Record calls to time.sleep instead of blocking."""
    slept = []  # type: List[float]
    monkeypatch.setattr(time, 'sleep', slept.append)
    pygregtime.reset()
    yield slept
    _log.info("recorded sleeps: %s", slept)
    pygregtime.reset()
