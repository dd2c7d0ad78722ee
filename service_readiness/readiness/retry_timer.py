import asyncio
from typing import Callable


class RetryTimer:
    """
    Cancellable one-shot timer on the running event loop.

    A timer holds at most one pending callback. Scheduling again replaces
    the pending callback, and cancel() is idempotent.
    """

    def __init__(self) -> None:
        self._handle: asyncio.TimerHandle | None = None

    @property
    def pending(self) -> bool:
        return self._handle is not None and not self._handle.cancelled()

    def schedule(self, delay_ms: int, callback: Callable[[], None]) -> None:
        self.cancel()

        loop = asyncio.get_running_loop()
        self._handle = loop.call_later(delay_ms / 1000, self._fire, callback)

    def cancel(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def _fire(self, callback: Callable[[], None]) -> None:
        self._handle = None
        callback()
