from __future__ import annotations

import os
from datetime import timedelta
from pathlib import Path

import pytest
from click.testing import CliRunner

from lib_log_relay import cli as cli_module
from lib_log_relay import config as relay_config


@pytest.fixture(autouse=True)
def _reset_dotenv_state() -> None:
    """Reset shared dotenv state around each test."""

    relay_config._reset_dotenv_state_for_testing()
    yield
    relay_config._reset_dotenv_state_for_testing()


def test_enable_dotenv_populates_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Loading the nearest .env injects values found in a parent directory."""

    nested = tmp_path / "nested"
    nested.mkdir()
    env_file = tmp_path / ".env"
    env_file.write_text("LOG_RELAY_HOST=dotenv-host\n")
    monkeypatch.chdir(nested)
    monkeypatch.delenv("LOG_RELAY_HOST", raising=False)

    loaded = relay_config.enable_dotenv()

    assert loaded == env_file.resolve()
    assert os.environ["LOG_RELAY_HOST"] == "dotenv-host"

    os.environ.pop("LOG_RELAY_HOST", None)


def test_enable_dotenv_respects_existing_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Existing environment variables keep precedence over .env entries."""

    (tmp_path / ".env").write_text("LOG_RELAY_PORT=9000\n")
    monkeypatch.setenv("LOG_RELAY_PORT", "9100")

    result = relay_config.enable_dotenv(search_from=tmp_path)

    assert result is not None
    assert os.environ["LOG_RELAY_PORT"] == "9100"


def test_enable_dotenv_without_file_returns_none(tmp_path: Path) -> None:
    isolated = tmp_path / "a" / "b"
    isolated.mkdir(parents=True)

    if any((directory / ".env").is_file() for directory in (isolated, *isolated.parents)):
        pytest.skip("a .env exists above the temporary directory")
    assert relay_config.enable_dotenv(search_from=isolated) is None


def test_cli_dotenv_toggle_precedence(monkeypatch: pytest.MonkeyPatch) -> None:
    """CLI flag wins over environment toggle when deciding whether to load .env."""

    runner = CliRunner()

    calls: list[tuple[tuple[object, ...], dict[str, object]]] = []

    def record_enable(*args: object, **kwargs: object) -> None:
        calls.append((args, kwargs))

    monkeypatch.setattr(relay_config, "enable_dotenv", record_enable)
    monkeypatch.delenv(relay_config.DOTENV_ENV_VAR, raising=False)

    result = runner.invoke(cli_module.cli, ["--use-dotenv", "info"])
    assert result.exit_code == 0
    assert len(calls) == 1

    calls.clear()
    env = {relay_config.DOTENV_ENV_VAR: "1"}
    result = runner.invoke(cli_module.cli, ["info"], env=env)
    assert result.exit_code == 0
    assert len(calls) == 1

    calls.clear()
    result = runner.invoke(cli_module.cli, ["--no-use-dotenv", "info"], env=env)
    assert result.exit_code == 0
    assert calls == []


def test_load_settings_defaults() -> None:
    settings = relay_config.load_settings(environ={})

    assert settings == relay_config.RelaySettings()
    assert settings.min_period == timedelta(seconds=10)
    assert (settings.host, settings.port) == ("localhost", 8099)
    assert settings.drain_on_shutdown is True


def test_load_settings_reads_environment() -> None:
    environ = {
        "LOG_RELAY_HOST": "0.0.0.0",
        "LOG_RELAY_PORT": "8123",
        "LOG_RELAY_MIN_PERIOD": "2.5",
        "LOG_RELAY_TRACE": "yes",
        "LOG_RELAY_NO_COLOR": "1",
        "LOG_RELAY_DRAIN_ON_SHUTDOWN": "off",
    }

    settings = relay_config.load_settings(environ=environ)

    assert settings.host == "0.0.0.0"
    assert settings.port == 8123
    assert settings.min_period == timedelta(seconds=2.5)
    assert settings.trace is True
    assert settings.no_color is True
    assert settings.drain_on_shutdown is False


def test_overrides_beat_environment_and_none_is_ignored() -> None:
    environ = {"LOG_RELAY_PORT": "8123", "LOG_RELAY_TRACE": "1"}

    settings = relay_config.load_settings(environ=environ, port=9000, trace=None, min_period=1)

    assert settings.port == 9000
    assert settings.trace is True
    assert settings.min_period == timedelta(seconds=1)


@pytest.mark.parametrize(
    "environ, error_match",
    [
        ({"LOG_RELAY_PORT": "http"}, "must be an integer"),
        ({"LOG_RELAY_PORT": "70000"}, "between 0 and 65535"),
        ({"LOG_RELAY_MIN_PERIOD": "soon"}, "number of seconds"),
        ({"LOG_RELAY_MIN_PERIOD": "0"}, "must be positive"),
        ({"LOG_RELAY_TRACE": "maybe"}, "boolean flag"),
    ],
)
def test_invalid_environment_values(environ: dict[str, str], error_match: str) -> None:
    with pytest.raises(relay_config.ConfigError, match=error_match):
        relay_config.load_settings(environ=environ)


def test_unknown_override_is_rejected() -> None:
    with pytest.raises(TypeError, match="Unknown settings: colour"):
        relay_config.load_settings(environ={}, colour=True)


@pytest.mark.parametrize(
    "explicit, env_value, expected",
    [
        (True, None, True),
        (False, "1", False),
        (None, "on", True),
        (None, "0", False),
        (None, None, False),
    ],
)
def test_should_use_dotenv(explicit: bool | None, env_value: str | None, expected: bool) -> None:
    assert relay_config.should_use_dotenv(explicit=explicit, env_value=env_value) is expected
