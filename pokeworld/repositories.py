import logging
import threading

from pokeworld.catalog_client import CatalogClient
from pokeworld.models.models import CatalogEntry

LOGGER = logging.getLogger(__name__)


class CreatureRepository:
    def __init__(self, catalog_client: CatalogClient) -> None:
        self._cache: dict[int, CatalogEntry] = {}
        self._catalog_client = catalog_client
        self._lock = threading.Lock()

    def get_by_id(self, catalog_id: int) -> CatalogEntry:
        with self._lock:
            cached = self._cache.get(catalog_id)
        if cached is not None:
            return cached
        entry = self._catalog_client.fetch_creature(catalog_id)
        with self._lock:
            self._cache[catalog_id] = entry
        LOGGER.info("Cached catalog entry %s (%s)", catalog_id, entry["name"])
        return entry
