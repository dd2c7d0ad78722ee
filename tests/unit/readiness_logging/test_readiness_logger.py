import io

import pytest

from service_readiness.logging import (
    ConsoleSink,
    LoggingConfig,
    LogLevel,
    ReadinessLogger,
    StreamType,
)
from service_readiness.logging.readiness_logging_models import (
    DependencyNotReady,
    DependencyProbeError,
    ReadinessTimeout,
)

from tests.unit.mocks import RecordingSink


def not_ready_entry() -> DependencyNotReady:
    return DependencyNotReady(
        message="critical dependency 'db' is not ready yet",
        dependency="db",
        attempt=1,
        retry_interval_ms=100,
    )


class TestReadinessLogger:
    def test_forwards_rendered_message(self, sink: RecordingSink):
        logger = ReadinessLogger(sink)

        logger.log(not_ready_entry())

        assert sink.messages == ["critical dependency 'db' is not ready yet"]

    def test_missing_sink_drops_entries(self):
        logger = ReadinessLogger()

        logger.log(not_ready_entry())

        assert logger.sink is None

    def test_custom_template(self, sink: RecordingSink):
        logger = ReadinessLogger(sink, template="[{level}] {dependency}: {message}")

        logger.log(not_ready_entry())

        assert sink.messages == [
            "[INFO] db: critical dependency 'db' is not ready yet"
        ]

    def test_message_braces_are_not_interpreted(self, sink: RecordingSink):
        logger = ReadinessLogger(sink)

        logger.log(
            DependencyProbeError(
                message='error: {"detail": "x"}',
                dependency="db",
                attempt=1,
                error='{"detail": "x"}',
            )
        )

        assert sink.messages == ['error: {"detail": "x"}']

    def test_level_filtering(self, sink: RecordingSink):
        LoggingConfig().update(log_level="error")
        logger = ReadinessLogger(sink)

        logger.log(not_ready_entry())
        logger.log(
            ReadinessTimeout(
                message="All critical dependencies did not become healthy",
                max_wait_ms=100,
                unready=["db"],
            )
        )

        assert sink.messages == ["All critical dependencies did not become healthy"]

    def test_disabled_logger(self, sink: RecordingSink):
        LoggingConfig().update(disabled_loggers=["service_readiness"])
        logger = ReadinessLogger(sink)

        logger.log(not_ready_entry())

        assert sink.messages == []


class TestLogLevel:
    @pytest.mark.parametrize(
        "name,level",
        [
            ("trace", LogLevel.TRACE),
            ("WARN", LogLevel.WARN),
            ("fatal", LogLevel.FATAL),
            ("unknown", LogLevel.INFO),
        ],
    )
    def test_to_level(self, name, level):
        assert LogLevel.to_level(name) == level


class TestConsoleSink:
    def test_writes_line_to_selected_stream(self, monkeypatch):
        stdout = io.StringIO()
        stderr = io.StringIO()
        monkeypatch.setattr("sys.stdout", stdout)
        monkeypatch.setattr("sys.stderr", stderr)

        ConsoleSink(StreamType.STDERR).log("hello")
        ConsoleSink(StreamType.STDOUT).log("world")

        assert stderr.getvalue() == "hello\n"
        assert stdout.getvalue() == "world\n"

    def test_follows_logging_config_output(self, monkeypatch):
        stderr = io.StringIO()
        monkeypatch.setattr("sys.stderr", stderr)
        LoggingConfig().update(log_output="stderr")

        ConsoleSink().log("routed")

        assert stderr.getvalue() == "routed\n"
