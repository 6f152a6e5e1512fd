"""HTTP transport for the relay."""

from __future__ import annotations

from .server import (
    DEFAULT_REQUEST_TIMEOUT,
    LOG_ROUTE,
    MAX_BODY_BYTES,
    BodyTooLarge,
    MalformedBody,
    RelayHTTPServer,
    RelayRequestHandler,
)

__all__ = [
    "DEFAULT_REQUEST_TIMEOUT",
    "LOG_ROUTE",
    "MAX_BODY_BYTES",
    "BodyTooLarge",
    "MalformedBody",
    "RelayHTTPServer",
    "RelayRequestHandler",
]
