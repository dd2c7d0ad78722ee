"""
Request Gate - per-request readiness decision for the dispatch layer.

The gate is a pure read of the readiness flag plus a whitelist check.
Whitelisted paths are matched exactly, case-insensitively, with any
query string removed. Once the service is ready the gate never closes
again, even if a dependency later becomes unhealthy.
"""

import inspect
from typing import Any, Awaitable, Callable, Iterable

from service_readiness.logging.readiness_logging_models import RequestRejected
from service_readiness.readiness.readiness import Readiness

from .gate_decision import (
    SERVICE_UNAVAILABLE_STATUS,
    GateDecision,
    GateRejection,
)


def normalize_path(path: str) -> str:
    return path.split("?", 1)[0].lower()


class RequestGate:
    def __init__(
        self,
        readiness: Readiness,
        whitelisted_paths: Iterable[str] | None = None,
    ) -> None:
        self._readiness = readiness

        if whitelisted_paths is None:
            whitelisted_paths = readiness.config.whitelisted_paths

        self._whitelisted_paths = frozenset(
            path.lower() for path in whitelisted_paths
        )

    @property
    def readiness(self) -> Readiness:
        return self._readiness

    @property
    def whitelisted_paths(self) -> frozenset[str]:
        return self._whitelisted_paths

    def is_ready(self) -> bool:
        return self._readiness.critical_dependencies_ready()

    def critical_dependencies_ready(self) -> bool:
        return self._readiness.critical_dependencies_ready()

    def stop_checking_readiness(self) -> None:
        self._readiness.stop_checking_readiness()

    def should_bypass(self, path: str | None) -> bool:
        if not path or not self._whitelisted_paths:
            return False

        return normalize_path(path) in self._whitelisted_paths

    def decide(self, path: str | None) -> GateDecision:
        if self.is_ready():
            return GateDecision.PROCEED

        if self.should_bypass(path):
            return GateDecision.BYPASS

        self._readiness.logger.log(
            RequestRejected(
                message="Service is not yet ready to handle requests",
                path=path or "",
                status_code=SERVICE_UNAVAILABLE_STATUS,
            )
        )

        return GateDecision.REJECT

    async def __call__(
        self,
        path: str | None,
        proceed: Callable[[], Any | Awaitable[Any]],
    ) -> Any | GateRejection:
        if self.decide(path) == GateDecision.REJECT:
            return GateRejection()

        result = proceed()
        if inspect.isawaitable(result):
            result = await result

        return result
