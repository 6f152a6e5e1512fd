"""Smoke tests for the public package surface."""

from __future__ import annotations

import lib_log_relay
from lib_log_relay import __init__conf__


def test_public_surface_exports_core_types() -> None:
    for name in ("DebounceScheduler", "LogEntry", "Importance", "validate", "build_runtime", "serve"):
        assert hasattr(lib_log_relay, name)


def test_summary_info_contains_metadata() -> None:
    summary = lib_log_relay.summary_info()

    assert "Info for lib_log_relay" in summary
    version_line = next(line for line in summary.splitlines() if line.strip().startswith("version"))
    assert version_line.endswith(f"= {__init__conf__.version}")
    assert summary.endswith("\n")


def test_summary_info_is_idempotent() -> None:
    assert lib_log_relay.summary_info() == lib_log_relay.summary_info()


def test_top_level_validate_round_trips_to_entry() -> None:
    entry = lib_log_relay.validate("ab3", "hello", 0)

    assert entry.to_dict() == {"channel": "ab3", "message": "hello", "importance": 0}
