"""Domain value describing a validated log submission.

Purpose
-------
Provide an immutable representation of a log entry travelling from the HTTP
boundary through the debounce scheduler to the sink.

Contents
--------
* :class:`LogEntry` dataclass enforcing channel/message invariants.
* Module constants describing the accepted channel and message shapes.

System Role
-----------
Sits in the domain layer so adapters and use cases only ever manipulate
entries that already satisfy the relay's input contract.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any

from .importance import Importance

CHANNEL_PATTERN = re.compile(r"^[a-z][a-z0-9]{0,7}$")
"""Lowercase alphanumeric, 1-8 characters, starting with a letter."""

MESSAGE_MAX_CHARS = 1024


def is_valid_channel(value: object) -> bool:
    """Return ``True`` when ``value`` is a well-formed channel name.

    Examples
    --------
    >>> is_valid_channel("ab3"), is_valid_channel("AB3"), is_valid_channel("3ab")
    (True, False, False)
    """
    return isinstance(value, str) and CHANNEL_PATTERN.fullmatch(value) is not None


def is_valid_message(value: object) -> bool:
    """Return ``True`` when ``value`` is a string of 1-1024 characters."""
    return isinstance(value, str) and 1 <= len(value) <= MESSAGE_MAX_CHARS


@dataclass(slots=True, frozen=True)
class LogEntry:
    """Immutable log entry accepted by the relay.

    Attributes
    ----------
    channel:
        Short routing identifier taken from the request path.
    message:
        Caller-supplied text, emitted verbatim.
    importance:
        :class:`Importance` deciding whether the entry may be dropped under
        load.
    """

    channel: str
    message: str
    importance: Importance = field(default_factory=Importance.default)

    def __post_init__(self) -> None:
        if not is_valid_channel(self.channel):
            raise ValueError(f"invalid channel: {self.channel!r}")
        if not is_valid_message(self.message):
            raise ValueError(f"message must be 1-{MESSAGE_MAX_CHARS} characters")
        if not isinstance(self.importance, Importance):
            raise ValueError(f"importance must be an Importance, got {self.importance!r}")

    def to_dict(self) -> dict[str, Any]:
        """Serialize the entry to a plain dictionary."""

        return {
            "channel": self.channel,
            "message": self.message,
            "importance": self.importance.ordinal,
        }


__all__ = [
    "CHANNEL_PATTERN",
    "MESSAGE_MAX_CHARS",
    "LogEntry",
    "is_valid_channel",
    "is_valid_message",
]
