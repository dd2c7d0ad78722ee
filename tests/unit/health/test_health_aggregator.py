"""
Tests for one-shot dependency health aggregation.
"""

import asyncio
import time

import msgspec
import pytest

from service_readiness.health import (
    DependenciesHealth,
    DependencyHealth,
    check_dependencies_health,
)
from service_readiness.readiness import Dependency

from tests.unit.mocks import CountingProbe, FailingProbe


async def healthy() -> bool:
    return True


async def unhealthy() -> bool:
    return False


class TestAggregation:
    @pytest.mark.asyncio
    async def test_critical_healthy_non_critical_unhealthy(self):
        """Critical health ignores failing non-critical dependencies."""
        dependencies = [
            Dependency(
                name="dependency-1",
                metadata={"url": "https://api.co.uk"},
                critical=True,
                probe_ready=healthy,
                probe_healthy=healthy,
            ),
            Dependency(
                name="dependency-2",
                metadata={"connectionString": "protocol:://{user}:{password}/test"},
                critical=False,
                probe_ready=unhealthy,
                probe_healthy=unhealthy,
            ),
        ]

        report = await check_dependencies_health(dependencies)

        assert report == DependenciesHealth(
            all_dependencies_healthy=False,
            all_critical_dependencies_healthy=True,
            dependencies=[
                DependencyHealth(
                    name="dependency-1",
                    metadata={"url": "https://api.co.uk"},
                    healthy=True,
                    critical=True,
                ),
                DependencyHealth(
                    name="dependency-2",
                    metadata={"connectionString": "protocol:://{user}:{password}/test"},
                    healthy=False,
                    critical=False,
                ),
            ],
        )

    @pytest.mark.asyncio
    async def test_unhealthy_critical_dependency(self):
        dependencies = [
            Dependency(name="db", critical=True, probe_ready=unhealthy),
            Dependency(name="cache", critical=False, probe_ready=healthy),
        ]

        report = await check_dependencies_health(dependencies)

        assert not report.all_dependencies_healthy
        assert not report.all_critical_dependencies_healthy

    @pytest.mark.asyncio
    async def test_no_dependencies_vacuously_healthy(self):
        report = await check_dependencies_health([])

        assert report.all_dependencies_healthy
        assert report.all_critical_dependencies_healthy
        assert report.dependencies == []

    @pytest.mark.asyncio
    async def test_no_critical_dependencies_vacuously_critical_healthy(self):
        report = await check_dependencies_health(
            [Dependency(name="cache", critical=False, probe_ready=unhealthy)]
        )

        assert not report.all_dependencies_healthy
        assert report.all_critical_dependencies_healthy

    @pytest.mark.asyncio
    async def test_order_preserved(self):
        names = [f"dependency-{index}" for index in range(10)]

        report = await check_dependencies_health(
            [Dependency(name=name, probe_ready=healthy) for name in names]
        )

        assert [entry.name for entry in report.dependencies] == names


class TestProbeSelection:
    @pytest.mark.asyncio
    async def test_health_probe_preferred(self):
        """probe_healthy is used when defined."""
        ready_probe = CountingProbe()
        health_probe = CountingProbe(ready_on_attempt=None)

        report = await check_dependencies_health(
            [
                Dependency(
                    name="db",
                    probe_ready=ready_probe,
                    probe_healthy=health_probe,
                )
            ]
        )

        assert ready_probe.calls == 0
        assert health_probe.calls == 1
        assert not report.dependencies[0].healthy

    @pytest.mark.asyncio
    async def test_ready_probe_fallback(self):
        """Without probe_healthy the readiness probe is reused."""
        ready_probe = CountingProbe()

        report = await check_dependencies_health(
            [Dependency(name="db", probe_ready=ready_probe)]
        )

        assert ready_probe.calls == 1
        assert report.dependencies[0].healthy

    @pytest.mark.asyncio
    async def test_sync_probe(self):
        report = await check_dependencies_health(
            [Dependency(name="flag", probe_ready=lambda: True)]
        )

        assert report.dependencies[0].healthy


class TestFailureIsolation:
    @pytest.mark.asyncio
    async def test_probe_exception_absorbed(self, sink):
        """A raising probe is unhealthy, logged, and does not affect others."""
        dependencies = [
            Dependency(name="broken", critical=True, probe_ready=FailingProbe()),
            Dependency(name="fine", critical=True, probe_ready=healthy),
        ]

        report = await check_dependencies_health(dependencies, logger=sink)

        assert [entry.healthy for entry in report.dependencies] == [False, True]
        assert not report.all_critical_dependencies_healthy
        assert (
            "An error occurred while checking health for dependency 'broken', "
            "error: connection refused"
        ) in sink.messages
        assert "dependency 'fine' is healthy" in sink.messages

    @pytest.mark.asyncio
    async def test_sync_probe_exception_absorbed(self, sink):
        def explode() -> bool:
            raise ValueError("bad state")

        report = await check_dependencies_health(
            [Dependency(name="explode", probe_ready=explode)],
            logger=sink,
        )

        assert not report.dependencies[0].healthy
        assert sink.containing("error: bad state")

    @pytest.mark.asyncio
    async def test_probes_run_concurrently(self):
        """Total time tracks the slowest probe, not the sum."""

        async def slow() -> bool:
            await asyncio.sleep(0.1)
            return True

        start = time.monotonic()
        report = await check_dependencies_health(
            [Dependency(name=f"slow-{index}", probe_ready=slow) for index in range(5)]
        )
        elapsed = time.monotonic() - start

        assert report.all_dependencies_healthy
        assert elapsed < 0.4

    @pytest.mark.asyncio
    async def test_probe_timeout_reports_unhealthy(self, sink):
        async def hung() -> bool:
            await asyncio.sleep(1)
            return True

        report = await check_dependencies_health(
            [
                Dependency(name="hung", probe_ready=hung),
                Dependency(name="fine", probe_ready=healthy),
            ],
            logger=sink,
            probe_timeout_ms=20,
        )

        assert [entry.healthy for entry in report.dependencies] == [False, True]
        assert sink.containing("error: Probe timed out after 20ms")

    @pytest.mark.asyncio
    async def test_not_healthy_logged(self, sink):
        await check_dependencies_health(
            [Dependency(name="db", probe_ready=unhealthy)],
            logger=sink,
        )

        assert sink.messages == ["dependency 'db' is not healthy"]


class TestReportEncoding:
    @pytest.mark.asyncio
    async def test_report_metadata_is_a_copy(self):
        """Mutating the report leaves the dependency descriptor untouched."""
        dependency = Dependency(
            name="db",
            metadata={"host": "db.internal"},
            probe_ready=healthy,
        )

        report = await check_dependencies_health([dependency])
        report.dependencies[0].metadata["host"] = "changed"

        assert dependency.metadata == {"host": "db.internal"}

    @pytest.mark.asyncio
    async def test_to_dict(self):
        report = await check_dependencies_health(
            [
                Dependency(
                    name="db",
                    metadata={"host": "db.internal"},
                    critical=True,
                    probe_ready=healthy,
                )
            ]
        )

        assert report.to_dict() == {
            "all_dependencies_healthy": True,
            "all_critical_dependencies_healthy": True,
            "dependencies": [
                {
                    "name": "db",
                    "metadata": {"host": "db.internal"},
                    "healthy": True,
                    "critical": True,
                }
            ],
        }

    @pytest.mark.asyncio
    async def test_to_json_round_trips(self):
        report = await check_dependencies_health(
            [Dependency(name="db", probe_ready=unhealthy)]
        )

        decoded = msgspec.json.decode(report.to_json(), type=DependenciesHealth)

        assert decoded == report
