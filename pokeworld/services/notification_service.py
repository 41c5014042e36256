import logging
from typing import TYPE_CHECKING

from pokeworld.models.models import EventType

if TYPE_CHECKING:
    from pokeworld.container import Container

LOGGER = logging.getLogger(__name__)


class NotificationService:
    def __init__(self, container: "Container") -> None:
        self._container = container
        self._current: str | None = None
        self._duration = self._container.config().notification_duration
        self._event_manager = self._container.event_manager()
        self._scheduler = self._container.scheduler()
        self._sequence = 0

    @property
    def current(self) -> str | None:
        return self._current

    def _expire(self, sequence: int) -> None:
        if sequence != self._sequence:
            return
        self._current = None
        self._event_manager.publish(EventType.NOTIFICATION_CHANGED, {"message": None})

    def show(self, message: str) -> None:
        self._sequence += 1
        sequence = self._sequence
        self._current = message
        LOGGER.info("Notification: %s", message)
        self._event_manager.publish(EventType.NOTIFICATION_CHANGED, {"message": message})
        self._scheduler.call_later(self._duration, lambda: self._expire(sequence))
