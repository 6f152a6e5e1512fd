"""Debounce scheduler deciding when validated entries reach the sink.

Purpose
-------
Guarantee a minimum period between emissions without flooding the sink,
while never silently losing an entry that is not ``UNIMPORTANT``. Entries
that arrive inside the window are held in a single pending slot where the
most recent one wins.

Contents
--------
* :class:`DebounceScheduler` – owns the pending slot, the last-emit time and
  the single armed timer.
* :class:`SchedulerSnapshot` – read-only view used by tests and diagnostics.

System Role
-----------
Application-layer core of the relay. The HTTP adapter calls :meth:`submit`;
the timer adapter calls back into the scheduler when a flush is due. Both
paths share one lock because timers fire on their own thread.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Any

from lib_log_relay.application.ports import ClockPort, SinkPort, TimerHandle, TimerPort
from lib_log_relay.domain import LogEntry

logger = logging.getLogger(__name__)

DEFAULT_MIN_PERIOD = timedelta(seconds=10)

DiagnosticHook = Callable[[str, dict[str, Any]], None] | None


@dataclass(frozen=True)
class SchedulerSnapshot:
    """Immutable view over the scheduler state."""

    last_emit_time: datetime
    pending: LogEntry | None
    timer_armed: bool
    deadline: datetime | None


class DebounceScheduler:
    """Emit entries at most once per ``min_period`` with most-recent-wins holding.

    Examples
    --------
    >>> from datetime import datetime, timezone
    >>> class Clock:
    ...     def now(self):
    ...         return datetime(2025, 1, 1, tzinfo=timezone.utc)
    >>> class Timer:
    ...     def call_later(self, delay, callback):
    ...         return self
    ...     def cancel(self):
    ...         pass
    >>> class Sink:
    ...     def __init__(self):
    ...         self.entries = []
    ...     def emit(self, entry, *, timestamp):
    ...         self.entries.append(entry.message)
    >>> sink = Sink()
    >>> scheduler = DebounceScheduler(sink=sink, clock=Clock(), timer=Timer())
    >>> scheduler.submit(LogEntry("app", "first"))
    >>> scheduler.submit(LogEntry("app", "second"))
    >>> sink.entries, scheduler.snapshot().pending.message
    (['first'], 'second')
    """

    def __init__(
        self,
        *,
        sink: SinkPort,
        clock: ClockPort,
        timer: TimerPort,
        min_period: timedelta = DEFAULT_MIN_PERIOD,
        diagnostic: DiagnosticHook = None,
    ) -> None:
        if min_period <= timedelta(0):
            raise ValueError("min_period must be positive")
        self._sink = sink
        self._clock = clock
        self._timer = timer
        self._min_period = min_period
        self._diagnostic = diagnostic
        self._lock = threading.RLock()
        # first submission always takes the fast path
        self._last_emit_time = clock.now() - min_period - timedelta(milliseconds=1)
        self._pending: LogEntry | None = None
        self._timer_handle: TimerHandle | None = None
        self._deadline: datetime | None = None

    @property
    def min_period(self) -> timedelta:
        return self._min_period

    def submit(self, entry: LogEntry) -> None:
        """Emit, hold, or drop ``entry`` according to the debounce policy.

        Never blocks on a timer. Faults raised by the sink propagate to the
        caller.
        """
        with self._lock:
            now = self._clock.now()
            if self._pending is None and now - self._last_emit_time >= self._min_period:
                self._emit(entry, now)
            elif not entry.importance.droppable:
                superseded = self._pending
                self._pending = entry
                if superseded is not None:
                    self._notify("superseded", superseded)
                self._notify("queued", entry)
                self._arm(now)
            else:
                self._notify("dropped", entry)

    def flush(self) -> None:
        """Timer callback: emit the pending entry, if any, and re-arm when needed."""
        with self._lock:
            self._timer_handle = None
            self._deadline = None
            if self._pending is None:
                return
            now = self._clock.now()
            self._emit(self._pending, now)
            self._arm(now)

    def close(self, *, drain: bool = False) -> None:
        """Cancel the armed flush; emit the pending entry first when ``drain`` is set."""
        with self._lock:
            handle = self._timer_handle
            self._timer_handle = None
            self._deadline = None
            if handle is not None:
                handle.cancel()
            if self._pending is None:
                return
            if drain:
                self._emit(self._pending, self._clock.now())
            else:
                self._notify("discarded", self._pending)
                self._pending = None

    def snapshot(self) -> SchedulerSnapshot:
        """Return a consistent read-only view of the scheduler state."""
        with self._lock:
            return SchedulerSnapshot(
                last_emit_time=self._last_emit_time,
                pending=self._pending,
                timer_armed=self._timer_handle is not None,
                deadline=self._deadline,
            )

    def _arm(self, now: datetime) -> None:
        if self._timer_handle is not None or self._pending is None:
            return
        self._deadline = now + self._min_period
        self._timer_handle = self._timer.call_later(self._min_period, self.flush)
        self._emit_diagnostic("armed", {"deadline": self._deadline.isoformat()})

    def _emit(self, entry: LogEntry, now: datetime) -> None:
        self._last_emit_time = now
        self._pending = None
        self._sink.emit(entry, timestamp=now)
        self._notify("emitted", entry)

    def _notify(self, name: str, entry: LogEntry) -> None:
        self._emit_diagnostic(name, {"channel": entry.channel, "importance": entry.importance.name})

    def _emit_diagnostic(self, name: str, payload: dict[str, Any]) -> None:
        logger.debug("scheduler %s %s", name, payload)
        if self._diagnostic is not None:
            self._diagnostic(name, payload)


__all__ = ["DEFAULT_MIN_PERIOD", "DebounceScheduler", "DiagnosticHook", "SchedulerSnapshot"]
