from .aggregator import ReadinessAggregator as ReadinessAggregator
from .dependency import (
    Dependency as Dependency,
    DependencySnapshot as DependencySnapshot,
)
from .errors import (
    ProbeTimeoutError as ProbeTimeoutError,
    ReadinessError as ReadinessError,
    ReadinessTimeoutError as ReadinessTimeoutError,
)
from .failure_policy import (
    FailurePolicy as FailurePolicy,
    exit_process as exit_process,
    log_only as log_only,
    raise_timeout as raise_timeout,
)
from .poller import (
    DependencyPoller as DependencyPoller,
    PollState as PollState,
)
from .readiness import Readiness as Readiness
from .retry_timer import RetryTimer as RetryTimer
from .watchdog import TimeoutWatchdog as TimeoutWatchdog
