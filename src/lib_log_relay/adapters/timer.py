"""Wall-clock and thread-based timer adapters.

Purpose
-------
Back the :class:`ClockPort` and :class:`TimerPort` protocols with the real
system clock and :class:`threading.Timer`.

Contents
--------
* :class:`SystemClock` - timezone-aware UTC ``now`` that never steps backwards.
* :class:`ThreadingTimer` - one daemon timer thread per scheduled callback.

System Role
-----------
The timer thread is the fault boundary for delayed flushes: exceptions raised
by the callback are logged and the relay keeps serving.
"""

from __future__ import annotations

import logging
import threading
import time
from collections.abc import Callable
from datetime import datetime, timedelta, timezone

from lib_log_relay.application.ports.time import ClockPort, TimerHandle, TimerPort

LOGGER = logging.getLogger(__name__)


class SystemClock(ClockPort):
    """Return the current UTC time advanced by the monotonic clock.

    The wall clock is read once at construction; later readings add the
    elapsed :func:`time.monotonic` interval, so NTP steps or manual clock
    changes cannot shrink or stretch a debounce window.
    """

    def __init__(self) -> None:
        self._origin = datetime.now(timezone.utc)
        self._origin_monotonic = time.monotonic()

    def now(self) -> datetime:
        return self._origin + timedelta(seconds=time.monotonic() - self._origin_monotonic)


class _ThreadingTimerHandle(TimerHandle):
    def __init__(self, thread: threading.Timer) -> None:
        self._thread = thread

    @property
    def thread(self) -> threading.Timer:
        return self._thread

    def cancel(self) -> None:
        self._thread.cancel()


class ThreadingTimer(TimerPort):
    """Run callbacks on daemon :class:`threading.Timer` threads.

    Examples
    --------
    >>> fired = threading.Event()
    >>> handle = ThreadingTimer().call_later(timedelta(milliseconds=1), fired.set)
    >>> fired.wait(timeout=1.0)
    True
    """

    def __init__(self, *, name: str = "lib_log_relay-flush") -> None:
        self._name = name

    def call_later(self, delay: timedelta, callback: Callable[[], None]) -> TimerHandle:
        """Schedule ``callback`` to run once after ``delay``."""
        thread = threading.Timer(max(delay.total_seconds(), 0.0), self._guarded, args=(callback,))
        thread.name = self._name
        thread.daemon = True
        thread.start()
        return _ThreadingTimerHandle(thread)

    @staticmethod
    def _guarded(callback: Callable[[], None]) -> None:
        try:
            callback()
        except Exception:
            LOGGER.exception("Delayed flush failed")


__all__ = ["SystemClock", "ThreadingTimer"]
