"""Application use cases orchestrating the relay core."""

from __future__ import annotations

from .accept_submission import AcceptSubmission, create_accept_submission
from .debounce import DEFAULT_MIN_PERIOD, DebounceScheduler, SchedulerSnapshot

__all__ = [
    "AcceptSubmission",
    "DEFAULT_MIN_PERIOD",
    "DebounceScheduler",
    "SchedulerSnapshot",
    "create_accept_submission",
]
