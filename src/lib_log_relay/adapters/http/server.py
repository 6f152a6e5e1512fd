"""HTTP adapter exposing ``POST /log/{channel}``.

Purpose
-------
Translate HTTP requests into calls of the accept-submission use case and map
the outcome onto status codes with empty bodies.

Contents
--------
* :class:`RelayHTTPServer` - single-threaded :class:`http.server.HTTPServer`
  carrying the use case callable.
* :class:`RelayRequestHandler` - routing, body parsing and the outermost
  fault boundary.

System Role
-----------
Outer shell of the relay. Requests are served one at a time, so the only
concurrency the core sees is the timer thread. Each connection gets a socket
timeout so a stalled client cannot hold the server past
:data:`DEFAULT_REQUEST_TIMEOUT` seconds.

Status mapping
--------------
* 200 - entry accepted (emitted, held, or dropped by the scheduler)
* 400 - validation failure or a body that is not a JSON object
* 404 - any other route or method
* 408 - the client stalled before its body arrived (connection closed)
* 413 - declared body larger than :data:`MAX_BODY_BYTES` (connection closed)
* 500 - unhandled fault, logged with traceback
"""

from __future__ import annotations

import json
import logging
import re
from http import HTTPStatus
from http.server import BaseHTTPRequestHandler, HTTPServer
from typing import Any
from urllib.parse import unquote, urlsplit

from lib_log_relay.application.use_cases.accept_submission import AcceptSubmission
from lib_log_relay.domain.validation import ValidationError

LOGGER = logging.getLogger(__name__)

LOG_ROUTE = re.compile(r"^/log/(?P<channel>[^/]+)/?$")
MESSAGE_FIELD = "m"
IMPORTANCE_FIELD = "i"

DEFAULT_REQUEST_TIMEOUT = 10.0
MAX_BODY_BYTES = 100 * 1024


class MalformedBody(ValueError):
    """Raised when the request body cannot be read as a JSON object."""


class BodyTooLarge(ValueError):
    """Raised when ``Content-Length`` exceeds the server's body cap."""


class RelayHTTPServer(HTTPServer):
    """HTTP server bound to an accept-submission callable.

    ``request_timeout`` bounds every blocking read on a client socket and
    ``max_body_bytes`` caps the declared request body.
    """

    allow_reuse_address = True

    def __init__(
        self,
        server_address: tuple[str, int],
        *,
        accept: AcceptSubmission,
        request_timeout: float = DEFAULT_REQUEST_TIMEOUT,
        max_body_bytes: int = MAX_BODY_BYTES,
    ) -> None:
        if request_timeout <= 0:
            raise ValueError("request_timeout must be positive")
        super().__init__(server_address, RelayRequestHandler)
        self.accept = accept
        self.request_timeout = request_timeout
        self.max_body_bytes = max_body_bytes

    @property
    def url(self) -> str:
        host, port = self.server_address[:2]
        return f"http://{host}:{port}"

    def handle_error(self, request: Any, client_address: Any) -> None:
        LOGGER.exception("Connection error from %s", client_address)


class RelayRequestHandler(BaseHTTPRequestHandler):
    """Route requests to the relay and answer with empty bodies."""

    server: RelayHTTPServer
    server_version = "lib_log_relay"

    def setup(self) -> None:
        # StreamRequestHandler.setup applies self.timeout to the socket
        self.timeout = self.server.request_timeout
        super().setup()

    def do_POST(self) -> None:
        self._dispatch()

    def do_GET(self) -> None:
        self._dispatch()

    def do_HEAD(self) -> None:
        self._dispatch()

    def do_PUT(self) -> None:
        self._dispatch()

    def do_PATCH(self) -> None:
        self._dispatch()

    def do_DELETE(self) -> None:
        self._dispatch()

    def do_OPTIONS(self) -> None:
        self._dispatch()

    def log_message(self, format: str, *args: Any) -> None:  # noqa: A002 - stdlib signature
        LOGGER.debug("%s - %s", self.address_string(), format % args)

    def _dispatch(self) -> None:
        try:
            status = self._route()
        except Exception:
            LOGGER.exception("%d: %s %s", HTTPStatus.INTERNAL_SERVER_ERROR, self.command, self.path)
            status = HTTPStatus.INTERNAL_SERVER_ERROR
        self._respond(status)

    def _route(self) -> HTTPStatus:
        # body is drained before routing
        try:
            raw = self._read_body()
        except BodyTooLarge as exc:
            LOGGER.info("%d: %s %s (%s)", HTTPStatus.REQUEST_ENTITY_TOO_LARGE, self.command, self.path, exc)
            # the unread body would be parsed as the next request
            self.close_connection = True
            return HTTPStatus.REQUEST_ENTITY_TOO_LARGE
        except TimeoutError:
            LOGGER.info("%d: %s %s (client stalled)", HTTPStatus.REQUEST_TIMEOUT, self.command, self.path)
            self.close_connection = True
            return HTTPStatus.REQUEST_TIMEOUT
        match = LOG_ROUTE.match(urlsplit(self.path).path)
        if self.command != "POST" or match is None:
            LOGGER.info("%d: %s %s", HTTPStatus.NOT_FOUND, self.command, self.path)
            return HTTPStatus.NOT_FOUND
        channel = unquote(match.group("channel"))
        try:
            body = self._parse_json_body(raw)
        except MalformedBody as exc:
            LOGGER.debug("Rejected body for %s: %s", self.path, exc)
            return HTTPStatus.BAD_REQUEST
        try:
            self.server.accept(channel, body.get(MESSAGE_FIELD), body.get(IMPORTANCE_FIELD))
        except ValidationError:
            return HTTPStatus.BAD_REQUEST
        return HTTPStatus.OK

    def _read_body(self) -> bytes | None:
        try:
            length = int(self.headers.get("Content-Length") or 0)
        except ValueError:
            return None
        if length > self.server.max_body_bytes:
            raise BodyTooLarge(f"Content-Length {length} exceeds {self.server.max_body_bytes} bytes")
        return self.rfile.read(length) if length > 0 else b""

    def _parse_json_body(self, raw: bytes | None) -> dict[str, Any]:
        if raw is None:
            raise MalformedBody("invalid Content-Length")
        content_type = self.headers.get_content_type()
        # non-JSON requests carry no fields, like an empty object
        if not raw or not content_type.endswith("json"):
            return {}
        try:
            payload = json.loads(raw)
        except (UnicodeDecodeError, json.JSONDecodeError) as exc:
            raise MalformedBody(str(exc)) from exc
        if not isinstance(payload, dict):
            raise MalformedBody("body must be a JSON object")
        return payload

    def _respond(self, status: HTTPStatus) -> None:
        self.send_response(status)
        self.send_header("Content-Length", "0")
        self.end_headers()


__all__ = [
    "DEFAULT_REQUEST_TIMEOUT",
    "LOG_ROUTE",
    "MAX_BODY_BYTES",
    "BodyTooLarge",
    "MalformedBody",
    "RelayHTTPServer",
    "RelayRequestHandler",
]
