"""Runtime façade that wires the relay and runs it.

Purpose
-------
Expose a stable entry point (``build_runtime``, ``serve``) that the CLI and
host applications use instead of importing the inner layers directly.

Contents
--------
* :func:`build_runtime` – composition root returning a :class:`RelayRuntime`.
* :func:`serve` – resolve settings, build the runtime and block until
  interrupted.
* :func:`configure_logging` – Rich-backed operator logging.
"""

from __future__ import annotations

import logging
from typing import Any

from lib_log_relay.config import RelaySettings, load_settings

from ._composition import RelayRuntime, build_runtime, create_console_sink
from ._logging import PACKAGE_LOGGER, configure_logging

logger = logging.getLogger(__name__)


def serve(settings: RelaySettings | None = None, **overrides: Any) -> None:
    """Run the relay in the foreground until interrupted.

    Parameters
    ----------
    settings:
        Pre-resolved settings; when omitted they are loaded from ``overrides``
        and the environment via :func:`load_settings`.
    """
    resolved = settings if settings is not None else load_settings(**overrides)
    runtime = build_runtime(resolved)
    try:
        runtime.serve_forever()
    except KeyboardInterrupt:
        logger.info("Interrupted, shutting down")
    finally:
        runtime.close()


__all__ = [
    "PACKAGE_LOGGER",
    "RelayRuntime",
    "build_runtime",
    "configure_logging",
    "create_console_sink",
    "serve",
]
