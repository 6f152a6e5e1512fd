"""Static package metadata surfaced by the CLI ``info`` command."""

from __future__ import annotations

from typing import Callable

name = "lib_log_relay"
title = "HTTP log relay with debounced console emission"
version = "0.1.0"
shell_command = "lib_log_relay"


def print_info(writer: Callable[[str], None] = print) -> None:
    """Write the metadata banner line by line through ``writer``."""
    fields = (
        ("name", name),
        ("title", title),
        ("version", version),
        ("shell_command", shell_command),
    )
    pad = max(len(label) for label, _ in fields)
    writer(f"Info for {name}:")
    writer("")
    for label, value in fields:
        writer(f"    {label:<{pad}} = {value}")


def summary_info() -> str:
    """Return the metadata banner as a single newline-terminated string.

    Examples
    --------
    >>> summary_info().splitlines()[0]
    'Info for lib_log_relay:'
    """
    lines: list[str] = []
    print_info(writer=lines.append)
    return "\n".join(lines) + "\n"
