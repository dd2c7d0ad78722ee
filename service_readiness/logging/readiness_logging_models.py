import msgspec

from .models import Entry, LogLevel


class DependencyReady(Entry, kw_only=True):
    dependency: str
    metadata: dict[str, str] = msgspec.field(default_factory=dict)
    attempt: int
    level: LogLevel = LogLevel.INFO

class DependencyNotReady(Entry, kw_only=True):
    dependency: str
    metadata: dict[str, str] = msgspec.field(default_factory=dict)
    attempt: int
    retry_interval_ms: int
    level: LogLevel = LogLevel.INFO

class DependencyProbeError(Entry, kw_only=True):
    dependency: str
    metadata: dict[str, str] = msgspec.field(default_factory=dict)
    attempt: int
    error: str
    level: LogLevel = LogLevel.ERROR

class DependencyHealthy(Entry, kw_only=True):
    dependency: str
    critical: bool
    healthy: bool
    level: LogLevel = LogLevel.INFO

class DependencyHealthError(Entry, kw_only=True):
    dependency: str
    critical: bool
    error: str
    level: LogLevel = LogLevel.ERROR

class ReadinessAchieved(Entry, kw_only=True):
    dependencies: list[str]
    level: LogLevel = LogLevel.INFO

class ReadinessTimeout(Entry, kw_only=True):
    max_wait_ms: int
    unready: list[str]
    level: LogLevel = LogLevel.FATAL

class RequestRejected(Entry, kw_only=True):
    path: str
    status_code: int
    level: LogLevel = LogLevel.WARN
