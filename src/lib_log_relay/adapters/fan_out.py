"""Sink that forwards each emission to several downstream sinks.

Used to attach secondary side effects (e.g. push notifications) next to the
console without touching the scheduler.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime

from lib_log_relay.application.ports.sink import SinkPort
from lib_log_relay.domain.entries import LogEntry


class FanOutSink(SinkPort):
    """Deliver every entry to each configured sink in order.

    A failing sink aborts the fan-out and the exception propagates; later
    sinks do not see the entry.
    """

    def __init__(self, sinks: Iterable[SinkPort]) -> None:
        self._sinks = tuple(sinks)
        if not self._sinks:
            raise ValueError("FanOutSink requires at least one sink")

    @property
    def sinks(self) -> tuple[SinkPort, ...]:
        return self._sinks

    def emit(self, entry: LogEntry, *, timestamp: datetime) -> None:
        for sink in self._sinks:
            sink.emit(entry, timestamp=timestamp)


__all__ = ["FanOutSink"]
