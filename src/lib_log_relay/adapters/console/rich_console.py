"""Rich-powered console sink implementing :class:`SinkPort`.

Purpose
-------
Render emitted entries as ``<timestamp> <channel>: <message>`` lines on the
terminal, optionally coloured by importance.

Contents
--------
* :data:`_STYLE_MAP` - default importance-to-style mapping.
* :class:`RichConsoleSink` - default sink wired by the runtime.

System Role
-----------
Primary human-facing sink of the relay.
"""

from __future__ import annotations

from datetime import datetime
from typing import Mapping, MutableMapping

from rich.console import Console

from lib_log_relay.application.ports.sink import SinkPort
from lib_log_relay.domain.entries import LogEntry
from lib_log_relay.domain.importance import Importance


#: Default Rich styles keyed by :class:`Importance`.
_STYLE_MAP: Mapping[Importance, str] = {
    Importance.UNIMPORTANT: "dim",
    Importance.NORMAL: "",
    Importance.IMPORTANT: "bold yellow",
}


class RichConsoleSink(SinkPort):
    """Print entries with Rich, honouring colour overrides."""

    def __init__(
        self,
        *,
        console: Console | None = None,
        force_color: bool = False,
        no_color: bool = False,
        styles: MutableMapping[Importance | str, str] | None = None,
    ) -> None:
        if console is not None:
            self._console = console
        else:
            self._console = Console(force_terminal=force_color or None, no_color=no_color)
        self._no_color = no_color
        merged = dict(_STYLE_MAP)
        for key, value in (styles or {}).items():
            level = Importance.from_name(key) if isinstance(key, str) else key
            merged[level] = value
        self._style_map = merged

    def emit(self, entry: LogEntry, *, timestamp: datetime) -> None:
        """Print ``entry`` stamped with ``timestamp``.

        Examples
        --------
        >>> from datetime import timezone
        >>> from io import StringIO
        >>> console = Console(file=StringIO(), record=True, width=120)
        >>> sink = RichConsoleSink(console=console)
        >>> sink.emit(LogEntry("app", "hello"), timestamp=datetime(2025, 9, 30, 12, 0, tzinfo=timezone.utc))
        >>> console.export_text()
        '2025-09-30T12:00:00+00:00 app: hello\\n'
        """
        style = "" if self._no_color else self._style_map.get(entry.importance, "")
        self._console.print(
            self.format_line(entry, timestamp),
            style=style,
            highlight=False,
            markup=False,
            soft_wrap=True,
        )

    @staticmethod
    def format_line(entry: LogEntry, timestamp: datetime) -> str:
        """Return the console line for ``entry``."""
        return f"{timestamp.isoformat()} {entry.channel}: {entry.message}"


__all__ = ["RichConsoleSink"]
