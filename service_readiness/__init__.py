from .env import (
    Env as Env,
    ReadinessConfig as ReadinessConfig,
    load_env as load_env,
)
from .gate import (
    GateDecision as GateDecision,
    GateRejection as GateRejection,
    ReadinessMiddleware as ReadinessMiddleware,
    RequestGate as RequestGate,
    create_readiness as create_readiness,
)
from .health import (
    DependenciesHealth as DependenciesHealth,
    DependencyHealth as DependencyHealth,
    check_dependencies_health as check_dependencies_health,
)
from .logging import (
    ConsoleSink as ConsoleSink,
    LogLevel as LogLevel,
    LoggingConfig as LoggingConfig,
    ReadinessLogger as ReadinessLogger,
)
from .readiness import (
    Dependency as Dependency,
    DependencySnapshot as DependencySnapshot,
    Readiness as Readiness,
    ReadinessTimeoutError as ReadinessTimeoutError,
    exit_process as exit_process,
    log_only as log_only,
    raise_timeout as raise_timeout,
)
