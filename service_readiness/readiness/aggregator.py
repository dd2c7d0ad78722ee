import threading
from typing import Callable, Iterable

from service_readiness.logging.readiness_logging_models import ReadinessAchieved
from service_readiness.logging.readiness_logger import ReadinessLogger

from .poller import DependencyPoller


class ReadinessAggregator:
    """
    Owns the readiness flag and its single false -> true transition.

    Every "became ready" notification re-scans all registered pollers, so
    the flag flips when the last straggler converges regardless of the
    order in which notifications arrive.
    """

    def __init__(
        self,
        logger: ReadinessLogger,
        on_ready: Callable[[], None] | None = None,
    ) -> None:
        self._logger = logger
        self._on_ready = on_ready
        self._pollers: dict[tuple[int, str], DependencyPoller] = {}
        self._ready = False
        self._lock = threading.Lock()

    @property
    def ready(self) -> bool:
        with self._lock:
            return self._ready

    @property
    def pollers(self) -> list[DependencyPoller]:
        return list(self._pollers.values())

    def register(self, pollers: Iterable[DependencyPoller]) -> None:
        for poller in pollers:
            key = (len(self._pollers), poller.dependency.name)
            self._pollers[key] = poller

    def mark_ready_without_dependencies(self) -> None:
        with self._lock:
            self._ready = True

    def notify_ready(self, poller: DependencyPoller) -> None:
        with self._lock:
            if self._ready:
                return

            if not all(registered.ready for registered in self._pollers.values()):
                return

            self._ready = True

        if self._on_ready:
            self._on_ready()

        self._logger.log(
            ReadinessAchieved(
                message="All critical dependencies are now ready",
                dependencies=[
                    registered.dependency.name
                    for registered in self._pollers.values()
                ],
            )
        )
