import heapq
import itertools
import logging
from abc import ABC, abstractmethod
from collections.abc import Callable

LOGGER = logging.getLogger(__name__)


class Scheduler(ABC):
    @abstractmethod
    def call_later(self, delay: float, callback: Callable[[], None]) -> None:
        pass


class ManualScheduler(Scheduler):
    """Runs delayed callbacks against a virtual clock.

    Nothing fires on its own; the owner moves time forward with ``advance`` or
    drains every pending callback with ``run_all``. Callbacks scheduled while
    another one runs are queued relative to the current virtual time.
    """

    def __init__(self) -> None:
        self._counter = itertools.count()
        self._now = 0.0
        self._pending: list[tuple[float, int, Callable[[], None]]] = []

    @property
    def now(self) -> float:
        return self._now

    @property
    def pending_count(self) -> int:
        return len(self._pending)

    def advance(self, seconds: float) -> None:
        target = self._now + seconds
        while self._pending and self._pending[0][0] <= target:
            due, _, callback = heapq.heappop(self._pending)
            self._now = due
            callback()
        self._now = target

    def call_later(self, delay: float, callback: Callable[[], None]) -> None:
        heapq.heappush(self._pending, (self._now + max(0.0, delay), next(self._counter), callback))
        LOGGER.debug("Scheduled callback in %.2fs (%d pending)", delay, len(self._pending))

    def run_all(self) -> None:
        while self._pending:
            due, _, callback = heapq.heappop(self._pending)
            self._now = max(self._now, due)
            callback()
