"""
Service readiness state machine.

Readiness wires the pieces together for one set of dependencies:

- A DependencyPoller per critical dependency, each on its own cadence
- A ReadinessAggregator owning the one-way readiness flag
- A TimeoutWatchdog bounding how long convergence may take

Example usage:
    readiness = Readiness(
        dependencies,
        config=ReadinessConfig(retry_interval_ms=500, max_wait_ms=10000),
        logger=ReadinessLogger(ConsoleSink()),
    )
    readiness.start()

    if readiness.critical_dependencies_ready():
        ...

    readiness.stop_checking_readiness()

Each instance owns its flag, poll states and watchdog, so multiple
instances never interfere with one another.
"""

import msgspec

from service_readiness.env.config import ReadinessConfig
from service_readiness.logging.readiness_logging_models import ReadinessTimeout
from service_readiness.logging.readiness_logger import ReadinessLogger

from .aggregator import ReadinessAggregator
from .dependency import Dependency, DependencySnapshot
from .failure_policy import FailurePolicy, exit_process
from .poller import DependencyPoller
from .watchdog import TimeoutWatchdog


class Readiness:
    def __init__(
        self,
        dependencies: list[Dependency],
        config: ReadinessConfig | None = None,
        logger: ReadinessLogger | None = None,
        failure_policy: FailurePolicy | None = None,
    ) -> None:
        self._dependencies = list(dependencies)
        self._config = config or ReadinessConfig()
        self._logger = logger or ReadinessLogger()
        self._failure_policy = failure_policy or exit_process

        self._critical = [
            dependency for dependency in self._dependencies if dependency.critical
        ]

        self._watchdog = TimeoutWatchdog(
            self._config.max_wait_ms,
            self._on_timeout,
        )
        self._aggregator = ReadinessAggregator(
            self._logger,
            on_ready=self._watchdog.cancel,
        )
        self._pollers = [
            DependencyPoller(
                dependency,
                dependency.resolve_retry_interval_ms(self._config.retry_interval_ms),
                on_ready=self._aggregator.notify_ready,
                logger=self._logger,
                probe_timeout_ms=self._config.probe_timeout_ms,
                log_dependency_data=self._config.log_dependency_data_on_failure,
            )
            for dependency in self._critical
        ]
        self._aggregator.register(self._pollers)
        self._started = False
        self._stopped = False

    @property
    def config(self) -> ReadinessConfig:
        return self._config

    @property
    def logger(self) -> ReadinessLogger:
        return self._logger

    @property
    def dependencies(self) -> list[Dependency]:
        return list(self._dependencies)

    @property
    def pollers(self) -> list[DependencyPoller]:
        return list(self._pollers)

    @property
    def watchdog(self) -> TimeoutWatchdog:
        return self._watchdog

    def start(self) -> None:
        """
        Begin polling. Requires a running event loop.

        With no critical dependencies the instance is ready immediately
        and neither the watchdog nor any poller is started.
        """
        if self._started or self._stopped:
            return

        self._started = True

        if not self._critical:
            self._aggregator.mark_ready_without_dependencies()
            return

        self._watchdog.start()

        for poller in self._pollers:
            poller.start()

    def critical_dependencies_ready(self) -> bool:
        return self._aggregator.ready

    def snapshot(self) -> list[DependencySnapshot]:
        return [poller.snapshot() for poller in self._pollers]

    def stop_checking_readiness(self) -> None:
        """
        Cancel the watchdog and every pending retry. Idempotent.

        Stopping before start() leaves the instance permanently idle.
        """
        self._stopped = True
        self._watchdog.cancel()

        for poller in self._pollers:
            poller.stop()

    def _on_timeout(self) -> None:
        if self._aggregator.ready:
            return

        self.stop_checking_readiness()

        snapshots = self.snapshot()
        unready = [snapshot for snapshot in snapshots if not snapshot.ready]

        message = "All critical dependencies did not become healthy"
        if self._config.log_dependency_data_on_failure:
            encoded = msgspec.json.encode(snapshots).decode()
            message = f"{message}. Critical dependencies: {encoded}"

        self._logger.log(
            ReadinessTimeout(
                message=message,
                max_wait_ms=self._watchdog.max_wait_ms,
                unready=[snapshot.name for snapshot in unready],
            )
        )

        self._failure_policy(unready)
