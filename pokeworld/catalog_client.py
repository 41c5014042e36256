import logging
import threading
from typing import Any

import requests

from pokeworld.exceptions import CatalogLookupError
from pokeworld.models.models import CatalogEntry

LOGGER = logging.getLogger(__name__)


class CatalogClient:
    """Fetches species records from a PokeAPI-compatible catalog service.

    The service answers ``GET {base_url}{id}`` with the full species document;
    only the fields the game needs are kept. Any transport, HTTP or payload
    problem is reported as ``CatalogLookupError`` so callers can skip the
    species instead of aborting a generation cycle. Without an injected
    session every calling thread gets its own ``requests.Session``.
    """

    def __init__(self, base_url: str, timeout: float, session: requests.Session | None = None) -> None:
        self._base_url = base_url if base_url.endswith("/") else f"{base_url}/"
        self._local = threading.local()
        self._session = session
        self._timeout = timeout

    def _get_session(self) -> requests.Session:
        if self._session is not None:
            return self._session
        session = getattr(self._local, "session", None)
        if session is None:
            session = requests.Session()
            self._local.session = session
        return session

    @staticmethod
    def _normalize(catalog_id: int, data: dict[str, Any]) -> CatalogEntry:
        try:
            return {
                "id": int(data["id"]),
                "name": str(data["name"]),
                "image_ref": (data.get("sprites") or {}).get("front_default"),
                "types": [slot["type"]["name"] for slot in data["types"]],
                "stats": [{"name": stat["stat"]["name"], "value": int(stat["base_stat"])} for stat in data["stats"]],
            }
        except (KeyError, TypeError, ValueError) as err:
            raise CatalogLookupError(catalog_id, f"malformed payload ({err!r})") from err

    def fetch_creature(self, catalog_id: int) -> CatalogEntry:
        url = f"{self._base_url}{catalog_id}"
        try:
            response = self._get_session().get(url, timeout=self._timeout)
            response.raise_for_status()
            data = response.json()
        except requests.RequestException as err:
            raise CatalogLookupError(catalog_id, str(err)) from err
        except ValueError as err:
            raise CatalogLookupError(catalog_id, "response is not JSON") from err
        LOGGER.debug("Fetched catalog entry %s from %s", catalog_id, url)
        return self._normalize(catalog_id, data)
