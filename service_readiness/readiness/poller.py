"""
Dependency Poller - per-dependency readiness retry loop.

Each critical dependency gets its own poller. A poller invokes the
dependency's readiness probe, and on a negative result or probe error
schedules the next attempt after the dependency's retry interval. There
is no retry limit; polling ends when the probe reports ready or when the
poller is stopped by the watchdog or an explicit shutdown.

Attempts for one dependency never overlap: the next attempt is only
scheduled once the current probe has settled.
"""

import asyncio
from dataclasses import dataclass, field
from typing import Callable

import msgspec

from service_readiness.logging.readiness_logging_models import (
    DependencyNotReady,
    DependencyProbeError,
    DependencyReady,
)
from service_readiness.logging.readiness_logger import ReadinessLogger

from .dependency import Dependency, DependencySnapshot
from .probe import describe_error, invoke_probe
from .retry_timer import RetryTimer


@dataclass(slots=True)
class PollState:
    """Mutable polling state, owned by a single poller."""

    retry_interval_ms: int
    ready: bool = False
    stopped: bool = False
    attempts: int = 0
    timer: RetryTimer = field(default_factory=RetryTimer)


class DependencyPoller:
    def __init__(
        self,
        dependency: Dependency,
        retry_interval_ms: int,
        on_ready: Callable[["DependencyPoller"], None],
        logger: ReadinessLogger,
        probe_timeout_ms: int | None = None,
        log_dependency_data: bool = False,
    ) -> None:
        """
        Initialize DependencyPoller.

        Args:
            dependency: Critical dependency to poll.
            retry_interval_ms: Delay between attempts.
            on_ready: Called exactly once, when the dependency becomes ready.
            logger: Destination for per-attempt log entries.
            probe_timeout_ms: Optional bound on a single probe invocation.
            log_dependency_data: Append dependency metadata to "not ready" entries.
        """
        self._dependency = dependency
        self._on_ready = on_ready
        self._logger = logger
        self._probe_timeout_ms = probe_timeout_ms
        self._log_dependency_data = log_dependency_data
        self._state = PollState(retry_interval_ms=retry_interval_ms)
        self._attempt_task: asyncio.Task | None = None

    @property
    def dependency(self) -> Dependency:
        return self._dependency

    @property
    def state(self) -> PollState:
        return self._state

    @property
    def ready(self) -> bool:
        return self._state.ready

    def snapshot(self) -> DependencySnapshot:
        return DependencySnapshot(
            name=self._dependency.name,
            metadata=dict(self._dependency.metadata),
            ready=self._state.ready,
        )

    def start(self) -> None:
        """Launch the first attempt immediately."""
        if self._state.stopped or self._state.ready:
            return

        self._launch_attempt()

    def stop(self) -> None:
        """
        Cancel any pending retry.

        An in-flight probe is left to settle, but its outcome is discarded.
        """
        self._state.stopped = True
        self._state.timer.cancel()

    def _launch_attempt(self) -> None:
        if self._state.stopped:
            return

        self._attempt_task = asyncio.get_running_loop().create_task(
            self._attempt()
        )

    async def _attempt(self) -> None:
        if self._state.stopped:
            return

        self._state.attempts += 1
        attempt = self._state.attempts
        name = self._dependency.name

        try:
            ready = await invoke_probe(
                self._dependency.probe_ready,
                timeout_ms=self._probe_timeout_ms,
            )

        except Exception as error:
            if self._state.stopped:
                return

            self._logger.log(
                DependencyProbeError(
                    message=(
                        f"An error occurred while checking readiness for critical "
                        f"dependency '{name}', error: {describe_error(error)}"
                    ),
                    dependency=name,
                    metadata=self._dependency.metadata,
                    attempt=attempt,
                    error=describe_error(error),
                )
            )
            self._schedule_retry()
            return

        if self._state.stopped:
            return

        if ready:
            self._mark_ready(attempt)
            return

        message = f"critical dependency '{name}' is not ready yet"
        if self._log_dependency_data:
            encoded = msgspec.json.encode(self._dependency.metadata).decode()
            message = f"{message}, data: {encoded}"

        self._logger.log(
            DependencyNotReady(
                message=message,
                dependency=name,
                metadata=self._dependency.metadata,
                attempt=attempt,
                retry_interval_ms=self._state.retry_interval_ms,
            )
        )
        self._schedule_retry()

    def _mark_ready(self, attempt: int) -> None:
        if self._state.ready:
            return

        self._state.ready = True
        self._state.timer.cancel()

        self._logger.log(
            DependencyReady(
                message=f"critical dependency '{self._dependency.name}' is ready",
                dependency=self._dependency.name,
                metadata=self._dependency.metadata,
                attempt=attempt,
            )
        )
        self._on_ready(self)

    def _schedule_retry(self) -> None:
        if self._state.stopped:
            return

        self._state.timer.schedule(
            self._state.retry_interval_ms,
            self._launch_attempt,
        )
