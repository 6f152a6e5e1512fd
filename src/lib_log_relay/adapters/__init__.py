"""Adapter implementations for the relay ports."""

from __future__ import annotations

from .console.rich_console import RichConsoleSink
from .fan_out import FanOutSink
from .http.server import RelayHTTPServer
from .timer import SystemClock, ThreadingTimer

__all__ = [
    "FanOutSink",
    "RelayHTTPServer",
    "RichConsoleSink",
    "SystemClock",
    "ThreadingTimer",
]
