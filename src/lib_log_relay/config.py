"""Configuration resolution for the relay.

Purpose
-------
Resolve :class:`RelaySettings` from explicit overrides, environment variables
and defaults, with optional ``.env`` loading via python-dotenv.

Contents
--------
* :func:`enable_dotenv` / :func:`should_use_dotenv` - ``.env`` handling.
* :class:`RelaySettings` and :func:`load_settings`.
* :class:`ConfigError` raised for unusable values.

Precedence
----------
Keyword overrides > environment variables > ``.env`` entries (which never
override variables already present) > defaults.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from datetime import timedelta
from pathlib import Path
from typing import Any, Mapping

from dotenv import find_dotenv, load_dotenv

DOTENV_ENV_VAR = "LOG_RELAY_USE_DOTENV"

ENV_HOST = "LOG_RELAY_HOST"
ENV_PORT = "LOG_RELAY_PORT"
ENV_MIN_PERIOD = "LOG_RELAY_MIN_PERIOD"
ENV_TRACE = "LOG_RELAY_TRACE"
ENV_FORCE_COLOR = "LOG_RELAY_FORCE_COLOR"
ENV_NO_COLOR = "LOG_RELAY_NO_COLOR"
ENV_DRAIN_ON_SHUTDOWN = "LOG_RELAY_DRAIN_ON_SHUTDOWN"

DEFAULT_HOST = "localhost"
DEFAULT_PORT = 8099
DEFAULT_MIN_PERIOD_SECONDS = 10.0

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}

_dotenv_loaded: Path | None = None


class ConfigError(ValueError):
    """Raised when a configuration value cannot be used."""


def should_use_dotenv(*, explicit: bool | None = None, env_value: str | None = None) -> bool:
    """Decide whether ``.env`` should be loaded.

    An explicit CLI choice wins; otherwise the ``LOG_RELAY_USE_DOTENV``
    toggle decides.

    Examples
    --------
    >>> should_use_dotenv(explicit=False, env_value="1")
    False
    >>> should_use_dotenv(env_value="yes")
    True
    >>> should_use_dotenv()
    False
    """
    if explicit is not None:
        return explicit
    if env_value is None:
        return False
    return env_value.strip().lower() in _TRUE_VALUES


def enable_dotenv(search_from: Path | None = None) -> Path | None:
    """Load the nearest ``.env`` without overriding existing variables.

    Returns the resolved path of the loaded file, or ``None`` when no file was
    found. Repeated calls return the first loaded path.
    """
    global _dotenv_loaded
    if _dotenv_loaded is not None:
        return _dotenv_loaded
    if search_from is not None:
        candidate = _find_upwards(search_from.resolve())
    else:
        found = find_dotenv(usecwd=True)
        candidate = Path(found).resolve() if found else None
    if candidate is None:
        return None
    load_dotenv(candidate, override=False)
    _dotenv_loaded = candidate
    return candidate


def _find_upwards(start: Path) -> Path | None:
    for directory in (start, *start.parents):
        candidate = directory / ".env"
        if candidate.is_file():
            return candidate
    return None


def _reset_dotenv_state_for_testing() -> None:
    global _dotenv_loaded
    _dotenv_loaded = None


@dataclass(frozen=True)
class RelaySettings:
    """Resolved relay configuration.

    Attributes
    ----------
    host / port:
        Address the HTTP server binds to. Port ``0`` picks an ephemeral port.
    min_period:
        Minimum interval between two emissions.
    trace:
        Log the offending field of every rejected submission.
    force_color / no_color:
        Console colour overrides for the Rich sink.
    drain_on_shutdown:
        Emit the pending entry when the relay shuts down instead of dropping it.
    """

    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    min_period: timedelta = timedelta(seconds=DEFAULT_MIN_PERIOD_SECONDS)
    trace: bool = False
    force_color: bool = False
    no_color: bool = False
    drain_on_shutdown: bool = True

    def __post_init__(self) -> None:
        if not self.host:
            raise ConfigError("host must not be empty")
        if not 0 <= self.port <= 65535:
            raise ConfigError(f"port must be between 0 and 65535, got {self.port}")
        if self.min_period <= timedelta(0):
            raise ConfigError("min_period must be positive")


def load_settings(
    *,
    environ: Mapping[str, str] | None = None,
    **overrides: Any,
) -> RelaySettings:
    """Build :class:`RelaySettings` from ``overrides`` and the environment.

    ``None`` overrides are ignored so CLI options can be forwarded verbatim.
    ``min_period`` accepts seconds (``int``/``float``) or a :class:`timedelta`.
    """
    env = os.environ if environ is None else environ
    given = {key: value for key, value in overrides.items() if value is not None}
    unknown = set(given) - set(RelaySettings.__dataclass_fields__)
    if unknown:
        raise TypeError(f"Unknown settings: {', '.join(sorted(unknown))}")

    min_period = given.get("min_period")
    if min_period is None:
        min_period = _env_float(env, ENV_MIN_PERIOD, DEFAULT_MIN_PERIOD_SECONDS)
    if not isinstance(min_period, timedelta):
        min_period = _seconds(min_period, name="min_period")

    return RelaySettings(
        host=given.get("host", env.get(ENV_HOST) or DEFAULT_HOST),
        port=given.get("port", _env_int(env, ENV_PORT, DEFAULT_PORT)),
        min_period=min_period,
        trace=given.get("trace", _env_bool(env, ENV_TRACE, False)),
        force_color=given.get("force_color", _env_bool(env, ENV_FORCE_COLOR, False)),
        no_color=given.get("no_color", _env_bool(env, ENV_NO_COLOR, False)),
        drain_on_shutdown=given.get("drain_on_shutdown", _env_bool(env, ENV_DRAIN_ON_SHUTDOWN, True)),
    )


def _seconds(value: Any, *, name: str) -> timedelta:
    try:
        seconds = float(value)
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"{name} must be a number of seconds, got {value!r}") from exc
    if seconds <= 0:
        raise ConfigError(f"{name} must be positive, got {value!r}")
    return timedelta(seconds=seconds)


def _env_bool(env: Mapping[str, str], name: str, default: bool) -> bool:
    raw = env.get(name)
    if raw is None:
        return default
    normalized = raw.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise ConfigError(f"{name} must be a boolean flag, got {raw!r}")


def _env_int(env: Mapping[str, str], name: str, default: int) -> int:
    raw = env.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ConfigError(f"{name} must be an integer, got {raw!r}") from exc


def _env_float(env: Mapping[str, str], name: str, default: float) -> float:
    raw = env.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = float(raw)
    except ValueError as exc:
        raise ConfigError(f"{name} must be a number of seconds, got {raw!r}") from exc
    if value <= 0:
        raise ConfigError(f"{name} must be positive, got {raw!r}")
    return value


__all__ = [
    "ConfigError",
    "DOTENV_ENV_VAR",
    "RelaySettings",
    "enable_dotenv",
    "load_settings",
    "should_use_dotenv",
]
