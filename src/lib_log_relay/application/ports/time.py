"""Ports for time and delayed execution."""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime, timedelta
from typing import Protocol, runtime_checkable


@runtime_checkable
class ClockPort(Protocol):
    """Provide the current timezone-aware timestamp."""

    def now(self) -> datetime: ...


@runtime_checkable
class TimerHandle(Protocol):
    """Handle for a single scheduled callback."""

    def cancel(self) -> None:
        """Prevent the callback from running if it has not fired yet."""


@runtime_checkable
class TimerPort(Protocol):
    """Schedule a callback to run once after a delay."""

    def call_later(self, delay: timedelta, callback: Callable[[], None]) -> TimerHandle: ...


__all__ = ["ClockPort", "TimerHandle", "TimerPort"]
