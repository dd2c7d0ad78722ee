"""
Health Aggregator - one-shot health evaluation of every dependency.

Unlike readiness, health is re-evaluated on every call and never cached.
All probes run concurrently; a slow or failing dependency cannot prevent
the others from being reported. Probe failures are logged and reported as
unhealthy, never raised to the caller.
"""

import asyncio
from typing import Iterable

from service_readiness.logging.readiness_logger import LogSink, ReadinessLogger
from service_readiness.logging.readiness_logging_models import (
    DependencyHealthError,
    DependencyHealthy,
)
from service_readiness.readiness.dependency import Dependency
from service_readiness.readiness.probe import describe_error, invoke_probe

from .models import DependenciesHealth, DependencyHealth


async def check_dependency_health(
    dependency: Dependency,
    logger: ReadinessLogger,
    probe_timeout_ms: int | None = None,
) -> bool:
    try:
        healthy = await invoke_probe(
            dependency.health_probe,
            timeout_ms=probe_timeout_ms,
        )

    except Exception as error:
        logger.log(
            DependencyHealthError(
                message=(
                    f"An error occurred while checking health for dependency "
                    f"'{dependency.name}', error: {describe_error(error)}"
                ),
                dependency=dependency.name,
                critical=dependency.critical,
                error=describe_error(error),
            )
        )
        return False

    logger.log(
        DependencyHealthy(
            message=f"dependency '{dependency.name}' is {'healthy' if healthy else 'not healthy'}",
            dependency=dependency.name,
            critical=dependency.critical,
            healthy=healthy,
        )
    )

    return healthy


async def check_dependencies_health(
    dependencies: Iterable[Dependency],
    logger: LogSink | ReadinessLogger | None = None,
    probe_timeout_ms: int | None = None,
) -> DependenciesHealth:
    """
    Evaluate the current health of all dependencies.

    Args:
        dependencies: Dependencies to evaluate, critical or not.
        logger: Sink for per-dependency health entries.
        probe_timeout_ms: Optional bound on each probe invocation.

    Returns:
        DependenciesHealth with one entry per dependency, in input order.
    """
    if not isinstance(logger, ReadinessLogger):
        logger = ReadinessLogger(logger)

    dependencies = list(dependencies)

    results = await asyncio.gather(
        *[
            check_dependency_health(
                dependency,
                logger,
                probe_timeout_ms=probe_timeout_ms,
            )
            for dependency in dependencies
        ],
        return_exceptions=True,
    )

    reports: list[DependencyHealth] = []
    for dependency, result in zip(dependencies, results):
        reports.append(
            DependencyHealth(
                name=dependency.name,
                metadata=dict(dependency.metadata),
                healthy=result is True,
                critical=dependency.critical,
            )
        )

    return DependenciesHealth(
        all_dependencies_healthy=all(report.healthy for report in reports),
        all_critical_dependencies_healthy=all(
            report.healthy for report in reports if report.critical
        ),
        dependencies=reports,
    )
