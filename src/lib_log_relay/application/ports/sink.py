"""Sink port describing where relayed entries end up.

Purpose
-------
Give the debounce scheduler a narrow emission capability so console output,
push notifications, or test recorders can plug in interchangeably.

Contents
--------
* :class:`SinkPort` – runtime-checkable protocol with a single ``emit`` method.

System Role
-----------
Outermost boundary of the relay pipeline. Implementations are expected to be
cheap; failures propagate to whoever triggered the emission.
"""

from __future__ import annotations

from datetime import datetime
from typing import Protocol, runtime_checkable

from lib_log_relay.domain.entries import LogEntry


@runtime_checkable
class SinkPort(Protocol):
    """Persist or display an emitted log entry."""

    def emit(self, entry: LogEntry, *, timestamp: datetime) -> None:
        """Deliver ``entry`` stamped with the emission ``timestamp``."""


__all__ = ["SinkPort"]
