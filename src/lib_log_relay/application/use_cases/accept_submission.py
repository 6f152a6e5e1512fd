"""Use case turning a raw submission into a scheduled log entry.

Purpose
-------
Glue the validator to the debounce scheduler so transport adapters only deal
with request parsing and status codes.

Contents
--------
* :func:`create_accept_submission` factory returning the callable invoked per
  request.

System Role
-----------
Application-layer boundary between the HTTP adapter and the core. Validation
failures are raised before the scheduler is touched.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from lib_log_relay.domain import LogEntry, ValidationError, validate

from .debounce import DebounceScheduler

logger = logging.getLogger(__name__)

AcceptSubmission = Callable[[Any, Any, Any], LogEntry]


def create_accept_submission(*, scheduler: DebounceScheduler, trace: bool = False) -> AcceptSubmission:
    """Build the per-request callable bound to ``scheduler``.

    Parameters
    ----------
    scheduler:
        :class:`DebounceScheduler` receiving every validated entry.
    trace:
        When ``True`` each rejected submission is logged with the offending
        field and value.

    Returns
    -------
    Callable[[Any, Any, Any], LogEntry]
        Function accepting ``channel``, ``message`` and ``importance`` raw
        values. Raises :class:`ValidationError` on rejection.
    """

    def accept(raw_channel: Any, raw_message: Any, raw_importance: Any = None) -> LogEntry:
        try:
            entry = validate(raw_channel, raw_message, raw_importance)
        except ValidationError as exc:
            if trace:
                logger.info("%s", exc)
            raise
        scheduler.submit(entry)
        return entry

    return accept


__all__ = ["AcceptSubmission", "create_accept_submission"]
