"""Click command group for running and inspecting the relay.

Purpose
-------
Offer ``lib_log_relay serve`` to run the HTTP relay plus ``info`` for the
metadata banner, with ``.env`` and trace toggles shared by all commands.

Contents
--------
* :func:`cli` – root group (``--version``, ``--use-dotenv``, ``--trace``).
* :func:`info_command`, :func:`serve_command` – subcommands.
* :func:`main` – test-friendly runner returning an exit code.
"""

from __future__ import annotations

import logging
import os
from typing import Sequence

import click

from . import __init__conf__
from . import config as relay_config
from . import runtime as relay_runtime

CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}


@click.group(invoke_without_command=True, context_settings=CONTEXT_SETTINGS)
@click.option("--version", "-V", is_flag=True, help="Print the installed version and exit.")
@click.option(
    "--use-dotenv/--no-use-dotenv",
    default=False,
    help=f"Load environment variables from a nearby .env (default from ${relay_config.DOTENV_ENV_VAR}).",
)
@click.option(
    "--trace/--no-trace",
    default=False,
    help=f"Log every rejected submission and scheduler decision (default from ${relay_config.ENV_TRACE}).",
)
@click.pass_context
def cli(ctx: click.Context, *, version: bool, use_dotenv: bool, trace: bool) -> None:
    """Relay log submissions from HTTP to the console, debounced."""

    if version:
        click.echo(__init__conf__.version)
        ctx.exit(0)

    explicit: bool | None = None
    if ctx.get_parameter_source("use_dotenv") is not click.core.ParameterSource.DEFAULT:
        explicit = use_dotenv
    env_toggle = os.getenv(relay_config.DOTENV_ENV_VAR)
    if relay_config.should_use_dotenv(explicit=explicit, env_value=env_toggle):
        relay_config.enable_dotenv()

    ctx.ensure_object(dict)
    # None lets LOG_RELAY_TRACE decide
    explicit_trace = trace if ctx.get_parameter_source("trace") is not click.core.ParameterSource.DEFAULT else None
    ctx.obj["trace"] = explicit_trace

    if ctx.invoked_subcommand is None:
        click.echo(__init__conf__.summary_info(), nl=False)


@cli.command("info", context_settings=CONTEXT_SETTINGS)
def info_command() -> None:
    """Print the package metadata banner."""

    click.echo(__init__conf__.summary_info(), nl=False)


@cli.command("serve", context_settings=CONTEXT_SETTINGS)
@click.option("--host", default=None, help="Interface to bind (default: localhost).")
@click.option("--port", type=click.IntRange(0, 65535), default=None, help="TCP port to bind.")
@click.option(
    "--min-period",
    type=click.FloatRange(min=0, min_open=True),
    default=None,
    help="Minimum seconds between two emitted entries (default: 10).",
)
@click.pass_context
def serve_command(ctx: click.Context, host: str | None, port: int | None, min_period: float | None) -> None:
    """Run the HTTP relay until interrupted."""

    trace = ctx.obj.get("trace") if ctx.obj else None
    try:
        settings = relay_config.load_settings(host=host, port=port, min_period=min_period, trace=trace)
    except relay_config.ConfigError as exc:
        raise click.UsageError(str(exc)) from exc
    relay_runtime.configure_logging(level=logging.DEBUG if settings.trace else logging.INFO)
    relay_runtime.serve(settings)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the Click group and return a process exit code.

    Examples
    --------
    >>> main(["--version"])  # doctest: +ELLIPSIS
    0...
    0
    """

    args = list(argv) if argv is not None else None
    try:
        cli.main(args=args, prog_name=__init__conf__.shell_command, standalone_mode=False)
    except click.ClickException as error:
        error.show()
        return error.exit_code
    except click.exceptions.Exit as exit_request:
        return exit_request.exit_code
    except click.Abort:
        click.echo("Aborted!", err=True)
        return 1
    return 0


__all__ = ["cli", "main"]
