from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .dependency import DependencySnapshot


class ReadinessError(Exception):
    pass


class ReadinessTimeoutError(ReadinessError):
    def __init__(
        self,
        max_wait_ms: int,
        unready: list[DependencySnapshot],
    ) -> None:
        self.max_wait_ms = max_wait_ms
        self.unready = unready

        names = ", ".join(snapshot.name for snapshot in unready)
        super().__init__(
            f"Critical dependencies not ready after {max_wait_ms}ms: {names}"
        )


class ProbeTimeoutError(ReadinessError):
    def __init__(self, timeout_ms: int) -> None:
        self.timeout_ms = timeout_ms
        super().__init__(f"Probe timed out after {timeout_ms}ms")
