from __future__ import annotations

from io import StringIO

import pytest
from rich.console import Console

from tests.relay_doubles import ManualClock, ManualTimer, RecordingSink


@pytest.fixture
def clock() -> ManualClock:
    return ManualClock()


@pytest.fixture
def timer(clock: ManualClock) -> ManualTimer:
    return ManualTimer(clock=clock)


@pytest.fixture
def sink() -> RecordingSink:
    return RecordingSink()


@pytest.fixture
def record_console() -> Console:
    return Console(file=StringIO(), record=True, width=200, color_system=None)
