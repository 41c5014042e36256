import logging
from collections.abc import Callable, Sequence
from concurrent.futures import Future, ThreadPoolExecutor, wait
from typing import TYPE_CHECKING

from pokeworld.constants import (
    CATALOG_ID_MAX,
    CATALOG_ID_MIN,
    CREATURE_OFFSET_SPREAD,
    TRAINER_LEVEL_MAX,
    TRAINER_LEVEL_MIN,
    TRAINER_OFFSET_SPREAD,
    TRAINER_REWARD_MAX,
    TRAINER_REWARD_MIN,
)
from pokeworld.exceptions import CatalogLookupError
from pokeworld.models.models import BaseStat, CatalogEntry, Coordinate, CreatureRecord, TrainerRecord
from pokeworld.utils.utils import planar_distance_meters, random_offset

if TYPE_CHECKING:
    from pokeworld.container import Container

LOGGER = logging.getLogger(__name__)

CatalogLookup = Callable[[int], CatalogEntry]


class EntityService:
    def __init__(self, container: "Container") -> None:
        self._container = container
        self._config = self._container.config()
        self._creature_repository = self._container.creature_repository()
        self._rng = self._container.rng()

    @staticmethod
    def _build_creature(entry: CatalogEntry, center: Coordinate, offset: tuple[float, float]) -> CreatureRecord:
        d_lat, d_lng = offset
        return CreatureRecord(
            catalog_id=entry["id"],
            name=entry["name"],
            image_ref=entry["image_ref"],
            elemental_types=tuple(entry["types"]),
            base_stats=tuple(BaseStat(stat["name"], stat["value"]) for stat in entry["stats"]),
            position=center.offset(d_lat, d_lng),
            distance_meters=planar_distance_meters(d_lat, d_lng),
        )

    def _resolve_lookups(self, catalog_ids: list[int], catalog_lookup: CatalogLookup) -> list[Future]:
        executor = ThreadPoolExecutor(max_workers=len(catalog_ids), thread_name_prefix="catalog")
        try:
            futures = [executor.submit(catalog_lookup, catalog_id) for catalog_id in catalog_ids]
            _, not_done = wait(futures, timeout=self._config.catalog_timeout)
            if not_done:
                LOGGER.warning("%d catalog lookups did not finish in time", len(not_done))
        finally:
            executor.shutdown(wait=False, cancel_futures=True)
        return futures

    def generate_creatures(
        self,
        center: Coordinate,
        count: int,
        catalog_lookup: CatalogLookup | None = None,
    ) -> list[CreatureRecord]:
        """Spawn up to ``count`` wild creatures around ``center``.

        Species ids and position offsets are drawn up front, then every id is
        looked up concurrently. Results keep the draw order; a candidate whose
        lookup fails or times out is dropped, so the list can come back short.
        """
        if count <= 0:
            return []
        lookup = catalog_lookup if catalog_lookup is not None else self._creature_repository.get_by_id
        candidates = []
        for _ in range(count):
            catalog_id = self._rng.randint(CATALOG_ID_MIN, CATALOG_ID_MAX)
            candidates.append((catalog_id, random_offset(self._rng, CREATURE_OFFSET_SPREAD)))
        futures = self._resolve_lookups([catalog_id for catalog_id, _ in candidates], lookup)
        creatures = []
        for (catalog_id, offset), future in zip(candidates, futures, strict=True):
            if future.cancelled() or not future.done():
                LOGGER.warning("Skipping creature %s: catalog lookup timed out", catalog_id)
                continue
            try:
                entry = future.result()
            except CatalogLookupError as err:
                LOGGER.warning("Skipping creature %s: %s", catalog_id, err)
                continue
            except Exception:  # noqa: BLE001
                LOGGER.warning("Skipping creature %s: catalog lookup failed", catalog_id, exc_info=True)
                continue
            creatures.append(self._build_creature(entry, center, offset))
        LOGGER.info("Generated %d of %d creatures around %s", len(creatures), count, center)
        return creatures

    def generate_trainers(self, center: Coordinate, count: int, name_pool: Sequence[str]) -> list[TrainerRecord]:
        if not name_pool:
            err_msg = "Trainer name pool is empty"
            raise ValueError(err_msg)
        trainers = []
        for trainer_id in range(count):
            d_lat, d_lng = random_offset(self._rng, TRAINER_OFFSET_SPREAD)
            trainers.append(
                TrainerRecord(
                    id=trainer_id,
                    name=self._rng.choice(name_pool),
                    level=self._rng.randint(TRAINER_LEVEL_MIN, TRAINER_LEVEL_MAX),
                    reward_amount=self._rng.randint(TRAINER_REWARD_MIN, TRAINER_REWARD_MAX),
                    position=center.offset(d_lat, d_lng),
                    distance_meters=planar_distance_meters(d_lat, d_lng),
                ),
            )
        LOGGER.info("Generated %d trainers around %s", len(trainers), center)
        return trainers
