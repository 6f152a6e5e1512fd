from __future__ import annotations

from datetime import datetime, timezone

import pytest

from lib_log_relay.adapters.console.rich_console import RichConsoleSink
from lib_log_relay.domain.entries import LogEntry
from lib_log_relay.domain.importance import Importance

TIMESTAMP = datetime(2025, 9, 23, 12, 0, tzinfo=timezone.utc)


def test_console_sink_renders_timestamp_channel_and_message(record_console) -> None:
    sink = RichConsoleSink(console=record_console)
    sink.emit(LogEntry(channel="app", message="hello"), timestamp=TIMESTAMP)

    assert record_console.export_text() == "2025-09-23T12:00:00+00:00 app: hello\n"


def test_console_sink_does_not_interpret_markup(record_console) -> None:
    sink = RichConsoleSink(console=record_console)
    sink.emit(LogEntry(channel="app", message="[bold]raw[/bold]"), timestamp=TIMESTAMP)

    assert "[bold]raw[/bold]" in record_console.export_text()


@pytest.mark.parametrize("importance", list(Importance))
def test_console_sink_emits_every_importance(record_console, importance: Importance) -> None:
    sink = RichConsoleSink(console=record_console, styles={"important": "red"})
    sink.emit(LogEntry(channel="app", message="hello", importance=importance), timestamp=TIMESTAMP)

    assert "app: hello" in record_console.export_text()


def test_console_sink_rejects_unknown_style_key(record_console) -> None:
    with pytest.raises(ValueError, match="Unknown importance level"):
        RichConsoleSink(console=record_console, styles={"urgent": "red"})


def test_format_line_is_plain_text() -> None:
    line = RichConsoleSink.format_line(LogEntry(channel="ci", message="build ok"), TIMESTAMP)

    assert line == "2025-09-23T12:00:00+00:00 ci: build ok"
