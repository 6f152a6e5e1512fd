"""Operator-facing logging setup backed by Rich."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

PACKAGE_LOGGER = "lib_log_relay"


def configure_logging(*, level: int = logging.INFO, console: Console | None = None) -> logging.Logger:
    """Attach a single :class:`RichHandler` to the package logger.

    Calling it again replaces the previous handler and only adjusts the level.
    Diagnostics go to stderr so they never interleave with relayed entries.
    """
    root = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(root.handlers):
        if getattr(handler, "_lib_log_relay", False):
            root.removeHandler(handler)
    handler = RichHandler(
        console=console if console is not None else Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
        markup=False,
    )
    handler._lib_log_relay = True  # type: ignore[attr-defined]
    root.addHandler(handler)
    root.setLevel(level)
    root.propagate = False
    return root


__all__ = ["PACKAGE_LOGGER", "configure_logging"]
