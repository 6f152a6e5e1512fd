"""Domain entities and value objects used by the log relay."""

from __future__ import annotations

from .entries import LogEntry
from .importance import IMPORTANCE_COUNT, Importance
from .validation import (
    InvalidChannel,
    InvalidImportance,
    InvalidMessage,
    ValidationError,
    validate,
)

__all__ = [
    "IMPORTANCE_COUNT",
    "Importance",
    "InvalidChannel",
    "InvalidImportance",
    "InvalidMessage",
    "LogEntry",
    "ValidationError",
    "validate",
]
