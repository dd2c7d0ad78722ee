from typing import Callable

from .retry_timer import RetryTimer


class TimeoutWatchdog:
    """
    Bounds the total time allowed for critical dependencies to converge.

    The countdown fires its expiry callback at most once. Cancelling
    before expiry, or after it has fired, is a no-op.
    """

    def __init__(
        self,
        max_wait_ms: int,
        on_expire: Callable[[], None],
    ) -> None:
        self._max_wait_ms = max_wait_ms
        self._on_expire = on_expire
        self._timer = RetryTimer()
        self._fired = False

    @property
    def max_wait_ms(self) -> int:
        return self._max_wait_ms

    @property
    def fired(self) -> bool:
        return self._fired

    @property
    def running(self) -> bool:
        return self._timer.pending

    def start(self) -> None:
        if self._fired:
            return

        self._timer.schedule(self._max_wait_ms, self._expire)

    def cancel(self) -> None:
        self._timer.cancel()

    def _expire(self) -> None:
        if self._fired:
            return

        self._fired = True
        self._on_expire()
