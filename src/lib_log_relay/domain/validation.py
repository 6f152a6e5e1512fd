"""Validation of raw log submissions.

Purpose
-------
Turn untrusted request fields into a :class:`LogEntry` or a typed rejection.

Contents
--------
* :class:`ValidationError` and its three field-specific subclasses.
* :func:`validate` pure entry point used by the HTTP adapter.
* :func:`coerce_importance` ordinal parsing helper.

System Role
-----------
Guards the debounce scheduler: nothing reaches it unless every field passed.
"""

from __future__ import annotations

from typing import Any

from .entries import LogEntry, is_valid_channel, is_valid_message
from .importance import IMPORTANCE_COUNT, Importance


class ValidationError(ValueError):
    """Base class for rejected submissions.

    Attributes
    ----------
    field:
        Name of the offending request field.
    value:
        The raw value that failed validation.
    """

    field: str = ""

    def __init__(self, value: Any) -> None:
        super().__init__(f"Invalid request (field {self.field}: {value!r})")
        self.value = value


class InvalidChannel(ValidationError):
    field = "channel"


class InvalidMessage(ValidationError):
    field = "message"


class InvalidImportance(ValidationError):
    field = "importance"


def coerce_importance(raw: Any) -> Importance:
    """Resolve ``raw`` into an :class:`Importance`.

    ``None`` maps to :meth:`Importance.default`. Integers, integral floats and
    strings holding an integer literal are accepted when they fall inside the
    enumeration's ordinal range.

    Examples
    --------
    >>> coerce_importance(None)
    <Importance.NORMAL: 1>
    >>> coerce_importance(" 2 ")
    <Importance.IMPORTANT: 2>
    >>> coerce_importance(999)
    Traceback (most recent call last):
    ...
    lib_log_relay.domain.validation.InvalidImportance: Invalid request (field importance: 999)
    """
    if raw is None:
        return Importance.default()
    number = _parse_ordinal(raw)
    if number is None or not 0 <= number < IMPORTANCE_COUNT:
        raise InvalidImportance(raw)
    return Importance.from_ordinal(number)


def _parse_ordinal(raw: Any) -> int | None:
    # bool is an int subclass but never a meaningful ordinal
    if isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw
    if isinstance(raw, float):
        return int(raw) if raw.is_integer() else None
    if isinstance(raw, str):
        try:
            return int(raw.strip())
        except ValueError:
            return None
    return None


def validate(raw_channel: Any, raw_message: Any, raw_importance: Any = None) -> LogEntry:
    """Return a :class:`LogEntry` built from raw request fields.

    Raises the :class:`ValidationError` subclass for the first offending
    field. No side effects.

    Examples
    --------
    >>> validate("ab3", "hello", 0)
    LogEntry(channel='ab3', message='hello', importance=<Importance.UNIMPORTANT: 0>)
    >>> validate("AB3", "hello", 0)
    Traceback (most recent call last):
    ...
    lib_log_relay.domain.validation.InvalidChannel: Invalid request (field channel: 'AB3')
    """
    if not is_valid_channel(raw_channel):
        raise InvalidChannel(raw_channel)
    if not is_valid_message(raw_message):
        raise InvalidMessage(raw_message)
    importance = coerce_importance(raw_importance)
    return LogEntry(channel=raw_channel, message=raw_message, importance=importance)


__all__ = [
    "InvalidChannel",
    "InvalidImportance",
    "InvalidMessage",
    "ValidationError",
    "coerce_importance",
    "validate",
]
