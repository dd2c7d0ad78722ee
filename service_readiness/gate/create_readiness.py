from typing import Iterable

from service_readiness.env.config import ReadinessConfig
from service_readiness.logging.readiness_logger import LogSink, ReadinessLogger
from service_readiness.readiness.dependency import Dependency
from service_readiness.readiness.failure_policy import FailurePolicy
from service_readiness.readiness.readiness import Readiness

from .request_gate import RequestGate


def create_readiness(
    dependencies: Iterable[Dependency],
    config: ReadinessConfig | None = None,
    logger: LogSink | ReadinessLogger | None = None,
    failure_policy: FailurePolicy | None = None,
) -> RequestGate:
    """
    Build a readiness state machine and begin polling immediately.

    Must be called from within a running event loop. Returns the gate the
    dispatch layer consults for every request.
    """
    if not isinstance(logger, ReadinessLogger):
        logger = ReadinessLogger(logger)

    readiness = Readiness(
        list(dependencies),
        config=config,
        logger=logger,
        failure_policy=failure_policy,
    )
    readiness.start()

    return RequestGate(readiness)
