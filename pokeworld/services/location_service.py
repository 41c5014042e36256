import logging
from collections.abc import Callable
from typing import TYPE_CHECKING

import requests

from pokeworld.exceptions import LocationUnavailableError
from pokeworld.models.models import Coordinate

if TYPE_CHECKING:
    from pokeworld.container import Container

LOGGER = logging.getLogger(__name__)

LocationProvider = Callable[[], Coordinate]


class IpLocationProvider:
    """Approximate position from an ip-api.com style lookup (``lat``/``lon`` keys)."""

    def __init__(self, url: str, timeout: float, session: requests.Session | None = None) -> None:
        self._session = session if session is not None else requests.Session()
        self._timeout = timeout
        self._url = url

    def __call__(self) -> Coordinate:
        try:
            response = self._session.get(self._url, timeout=self._timeout)
            response.raise_for_status()
            data = response.json()
        except (requests.RequestException, ValueError) as err:
            raise LocationUnavailableError(str(err)) from err
        try:
            return Coordinate(float(data["lat"]), float(data["lon"]))
        except (KeyError, TypeError, ValueError) as err:
            err_msg = f"Unexpected location payload: {data!r}"
            raise LocationUnavailableError(err_msg) from err


class LocationService:
    def __init__(self, container: "Container") -> None:
        self._container = container
        self._default_location = self._container.config().default_location

    def acquire(self, provider: LocationProvider | None = None) -> Coordinate:
        if provider is None:
            LOGGER.info("No location provider, using default location %s", self._default_location)
            return self._default_location
        try:
            location = provider()
        except LocationUnavailableError as err:
            LOGGER.warning("Location unavailable (%s), using default location %s", err, self._default_location)
            return self._default_location
        LOGGER.info("Player located at %s", location)
        return location
