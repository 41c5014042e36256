import logging

from PyQt6.QtCore import QObject, QThread, pyqtSignal

from pokeworld.services.location_service import LocationProvider
from pokeworld.services.session_service import SessionService

LOGGER = logging.getLogger(__name__)


class NearbyWorker(QThread):
    """Acquires a location and generates the nearby sets off the GUI thread.

    Only ``generated`` is emitted from the worker; applying the result to the
    session happens in whichever slot receives it on the GUI thread.
    """

    generated = pyqtSignal(object, object, object)

    def __init__(
        self,
        session_service: SessionService,
        parent: QObject,
        location_provider: LocationProvider | None = None,
    ) -> None:
        super().__init__(parent)
        self._location_provider = location_provider
        self._session_service = session_service

    def run(self) -> None:
        if self._location_provider is not None:
            center = self._session_service.acquire_location(self._location_provider)
        else:
            center = self._session_service.player_state.location
        creatures, trainers = self._session_service.generate_nearby(center)
        LOGGER.debug("Generated nearby sets around %s in the background", center)
        self.generated.emit(center, creatures, trainers)
