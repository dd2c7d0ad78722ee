"""
Adapter between readiness log entries and the host's log sink.

Components emit structured Entry models. The adapter filters them through
LoggingConfig, renders them with the configured template, and forwards the
resulting plain string to the injected sink. A missing sink drops every
entry.
"""

from typing import Protocol, runtime_checkable

from .config import LoggingConfig
from .models import Entry


@runtime_checkable
class LogSink(Protocol):
    """Anything that consumes plain string messages."""

    def log(self, message: str) -> None: ...


class ReadinessLogger:
    def __init__(
        self,
        sink: LogSink | None = None,
        name: str = "service_readiness",
        template: str = "{message}",
    ) -> None:
        self._sink = sink
        self._name = name
        self._template = template
        self._config = LoggingConfig()

    @property
    def name(self) -> str:
        return self._name

    @property
    def sink(self) -> LogSink | None:
        return self._sink

    def log(self, entry: Entry) -> None:
        if self._sink is None:
            return

        if not self._config.enabled(self._name, entry.level):
            return

        self._sink.log(entry.to_template(self._template))
