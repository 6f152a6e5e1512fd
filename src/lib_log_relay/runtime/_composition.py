"""Runtime composition helpers wiring domain, application, and adapters.

Purpose
-------
Translate :class:`RelaySettings` into a live :class:`RelayRuntime`. Callers
may inject their own sink, clock or timer; everything else is built here.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from lib_log_relay.adapters import RelayHTTPServer, RichConsoleSink, SystemClock, ThreadingTimer
from lib_log_relay.application.ports import ClockPort, SinkPort, TimerPort
from lib_log_relay.application.use_cases import DebounceScheduler, create_accept_submission
from lib_log_relay.application.use_cases.debounce import DiagnosticHook
from lib_log_relay.config import RelaySettings

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class RelayRuntime:
    """Aggregate of live collaborators assembled by :func:`build_runtime`."""

    settings: RelaySettings
    scheduler: DebounceScheduler
    server: RelayHTTPServer

    @property
    def url(self) -> str:
        return self.server.url

    def serve_forever(self, poll_interval: float = 0.5) -> None:
        """Serve requests until :meth:`shutdown` is called from another thread."""
        logger.info("Listening on %s ...", self.url)
        self.server.serve_forever(poll_interval=poll_interval)

    def shutdown(self) -> None:
        """Stop accepting requests and settle the pending entry.

        ``serve_forever`` must not be running on the calling thread.
        """
        self.server.shutdown()
        self.close()

    def close(self) -> None:
        """Release the socket and cancel the armed flush."""
        self.server.server_close()
        self.scheduler.close(drain=self.settings.drain_on_shutdown)


def build_runtime(
    settings: RelaySettings,
    *,
    sink: SinkPort | None = None,
    clock: ClockPort | None = None,
    timer: TimerPort | None = None,
    diagnostic: DiagnosticHook = None,
) -> RelayRuntime:
    """Assemble the relay from resolved settings and optional overrides."""

    scheduler = DebounceScheduler(
        sink=sink if sink is not None else create_console_sink(settings),
        clock=clock if clock is not None else SystemClock(),
        timer=timer if timer is not None else ThreadingTimer(),
        min_period=settings.min_period,
        diagnostic=diagnostic,
    )
    accept = create_accept_submission(scheduler=scheduler, trace=settings.trace)
    server = RelayHTTPServer((settings.host, settings.port), accept=accept)
    return RelayRuntime(settings=settings, scheduler=scheduler, server=server)


def create_console_sink(settings: RelaySettings) -> RichConsoleSink:
    return RichConsoleSink(force_color=settings.force_color, no_color=settings.no_color)


__all__ = ["RelayRuntime", "build_runtime", "create_console_sink"]
