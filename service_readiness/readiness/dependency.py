from dataclasses import dataclass, field
from typing import Awaitable, Callable

import msgspec


ProbeOutcome = bool | Awaitable[bool]
Probe = Callable[[], ProbeOutcome]


@dataclass(slots=True, frozen=True)
class Dependency:
    """
    Static description of a service dependency.

    Example usage:
        async def database_ready() -> bool:
            return await pool.ping()

        dependency = Dependency(
            name="postgres",
            metadata={"host": "db.internal"},
            critical=True,
            probe_ready=database_ready,
            retry_interval_ms=500,
        )

    Only critical dependencies gate readiness. Non-critical dependencies
    are evaluated solely by the health aggregator.
    """

    name: str
    probe_ready: Probe
    critical: bool = False
    metadata: dict[str, str] = field(default_factory=dict)
    probe_healthy: Probe | None = None
    retry_interval_ms: int | None = None

    @property
    def health_probe(self) -> Probe:
        """Probe used for health evaluation, falling back to readiness."""
        if self.probe_healthy is not None:
            return self.probe_healthy

        return self.probe_ready

    def resolve_retry_interval_ms(self, default_interval_ms: int) -> int:
        if self.retry_interval_ms is not None and self.retry_interval_ms > 0:
            return self.retry_interval_ms

        return default_interval_ms


class DependencySnapshot(msgspec.Struct, kw_only=True):
    """Point-in-time readiness view of one critical dependency."""

    name: str
    metadata: dict[str, str] = msgspec.field(default_factory=dict)
    ready: bool
