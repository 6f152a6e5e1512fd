"""Public package surface of the HTTP log relay.

``import lib_log_relay`` exposes the domain types, the debounce scheduler and
the runtime helpers needed to embed the relay in another process.
"""

from __future__ import annotations

from .__init__conf__ import summary_info
from .application.use_cases import DebounceScheduler, SchedulerSnapshot
from .config import ConfigError, RelaySettings, load_settings
from .domain import (
    Importance,
    InvalidChannel,
    InvalidImportance,
    InvalidMessage,
    LogEntry,
    ValidationError,
    validate,
)
from .runtime import RelayRuntime, build_runtime, serve

__all__ = [
    "ConfigError",
    "DebounceScheduler",
    "Importance",
    "InvalidChannel",
    "InvalidImportance",
    "InvalidMessage",
    "LogEntry",
    "RelayRuntime",
    "RelaySettings",
    "SchedulerSnapshot",
    "ValidationError",
    "build_runtime",
    "load_settings",
    "serve",
    "summary_info",
    "validate",
]
