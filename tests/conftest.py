import random

import pytest
from dependency_injector import providers

from pokeworld.config import GameConfig
from pokeworld.container import Container
from pokeworld.exceptions import CatalogLookupError
from pokeworld.models.models import CatalogEntry, Coordinate, CreatureRecord, TrainerRecord

CENTER = Coordinate(-33.0246, -71.5518)


class FakeCatalogClient:
    def __init__(self, failing_ids: set[int] | None = None) -> None:
        self.calls: list[int] = []
        self.failing_ids = failing_ids or set()

    def fetch_creature(self, catalog_id: int) -> CatalogEntry:
        self.calls.append(catalog_id)
        if catalog_id in self.failing_ids:
            raise CatalogLookupError(catalog_id, "service unavailable")
        return catalog_entry(catalog_id)


class StubRandom:
    """Hands out scripted values, in order, for each kind of draw."""

    def __init__(self, rolls: list[float] | None = None, ints: list[int] | None = None) -> None:
        self.ints = list(ints or [])
        self.rolls = list(rolls or [])

    def choice(self, seq):  # noqa: ANN001, ANN201
        return seq[0]

    def randint(self, a: int, b: int) -> int:
        value = self.ints.pop(0)
        assert a <= value <= b
        return value

    def random(self) -> float:
        return self.rolls.pop(0)

    def uniform(self, a: float, b: float) -> float:
        return 0.0


def catalog_entry(catalog_id: int) -> CatalogEntry:
    return {
        "id": catalog_id,
        "name": f"species-{catalog_id}",
        "image_ref": f"https://img.example/{catalog_id}.png",
        "types": ["grass", "poison"],
        "stats": [{"name": "hp", "value": 45}, {"name": "attack", "value": 49}],
    }


def make_creature(catalog_id: int = 25, name: str = "pikachu", distance: int = 120) -> CreatureRecord:
    return CreatureRecord(catalog_id, name, None, ("electric",), (), CENTER.offset(0.001, 0.0), distance)


def make_trainer(trainer_id: int = 0, name: str = "Misty", reward: int = 450) -> TrainerRecord:
    return TrainerRecord(trainer_id, name, 20, reward, CENTER.offset(0.0, 0.002), 222)


@pytest.fixture
def catalog_client() -> FakeCatalogClient:
    return FakeCatalogClient()


@pytest.fixture
def config() -> GameConfig:
    return GameConfig()


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def container(config: GameConfig, rng: random.Random, catalog_client: FakeCatalogClient) -> Container:
    container = Container()
    container.config.override(providers.Object(config))
    container.rng.override(providers.Object(rng))
    container.catalog_client.override(providers.Object(catalog_client))
    yield container
    container.reset_override()


@pytest.fixture
def player_state(container: Container):  # noqa: ANN201
    return container.player_state()


@pytest.fixture
def scheduler(container: Container):  # noqa: ANN201
    return container.scheduler()

