"""
Policies invoked when critical dependencies miss the readiness deadline.

A policy receives snapshots of the critical dependencies that never became
ready. Hosts substitute their own policy to restart, alarm, or merely
record the failure instead of exiting.
"""

import sys
from typing import Callable

from .dependency import DependencySnapshot
from .errors import ReadinessTimeoutError


FailurePolicy = Callable[[list[DependencySnapshot]], None]


def exit_process(unready: list[DependencySnapshot]) -> None:
    sys.exit(1)


def log_only(unready: list[DependencySnapshot]) -> None:
    pass


def raise_timeout(max_wait_ms: int) -> FailurePolicy:
    def policy(unready: list[DependencySnapshot]) -> None:
        raise ReadinessTimeoutError(max_wait_ms, unready)

    return policy
