from collections.abc import Callable

from PyQt6.QtCore import QTimer

from pokeworld.scheduler import Scheduler


class QtScheduler(Scheduler):
    def call_later(self, delay: float, callback: Callable[[], None]) -> None:
        QTimer.singleShot(int(delay * 1000), callback)
