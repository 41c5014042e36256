import math
import random
import time

import pytest
from conftest import CENTER, FakeCatalogClient, catalog_entry
from dependency_injector import providers

from pokeworld.config import GameConfig
from pokeworld.exceptions import CatalogLookupError
from pokeworld.services.entity_service import EntityService
from pokeworld.utils.utils import planar_distance_meters


def _expected_distance(d_lat: float, d_lng: float) -> int:
    return round(math.sqrt(d_lat**2 + d_lng**2) * 111000)


def test_planar_distance_formula() -> None:
    assert planar_distance_meters(0.0, 0.0) == 0
    assert planar_distance_meters(0.003, 0.004) == 555
    assert planar_distance_meters(-0.005, 0.005) == _expected_distance(-0.005, 0.005)


def test_creatures_follow_seeded_draws(container, catalog_client) -> None:
    creatures = EntityService(container).generate_creatures(CENTER, 5)
    replay = random.Random(1234)
    assert len(creatures) == 5
    for creature in creatures:
        catalog_id = replay.randint(1, 151)
        d_lat = replay.uniform(-0.005, 0.005)
        d_lng = replay.uniform(-0.005, 0.005)
        assert creature.catalog_id == catalog_id
        assert creature.position.latitude == CENTER.latitude + d_lat
        assert creature.position.longitude == CENTER.longitude + d_lng
        assert creature.distance_meters == _expected_distance(d_lat, d_lng)
        assert creature.elemental_types == ("grass", "poison")
        assert creature.base_stats[0].name == "hp"
    assert set(catalog_client.calls) == {c.catalog_id for c in creatures}


def test_creatures_stay_within_spread(container) -> None:
    creatures = EntityService(container).generate_creatures(CENTER, 50)
    for creature in creatures:
        assert 1 <= creature.catalog_id <= 151
        assert abs(creature.position.latitude - CENTER.latitude) <= 0.005 + 1e-9
        assert abs(creature.position.longitude - CENTER.longitude) <= 0.005 + 1e-9
        assert 0 <= creature.distance_meters <= 785


def test_failed_lookups_are_skipped(container) -> None:
    replay = random.Random(1234)
    drawn_ids = []
    for _ in range(3):
        drawn_ids.append(replay.randint(1, 151))
        replay.uniform(-0.005, 0.005)
        replay.uniform(-0.005, 0.005)
    failing_id = drawn_ids[0]

    def lookup(catalog_id: int):  # noqa: ANN202
        if catalog_id == failing_id:
            raise CatalogLookupError(catalog_id, "boom")
        return catalog_entry(catalog_id)

    creatures = EntityService(container).generate_creatures(CENTER, 3, catalog_lookup=lookup)
    assert [c.catalog_id for c in creatures] == [i for i in drawn_ids if i != failing_id]


def test_all_lookups_failing_gives_empty_set(container) -> None:
    container.catalog_client.override(providers.Object(FakeCatalogClient(failing_ids=set(range(1, 152)))))
    assert EntityService(container).generate_creatures(CENTER, 4) == []


def test_unexpected_lookup_errors_are_skipped(container) -> None:
    def lookup(catalog_id: int):  # noqa: ANN202
        if catalog_id % 2:
            err_msg = "socket closed"
            raise ConnectionError(err_msg)
        raise KeyError(catalog_id)

    assert EntityService(container).generate_creatures(CENTER, 2, catalog_lookup=lookup) == []


def test_mixed_lookup_errors_keep_the_rest(container) -> None:
    replay = random.Random(1234)
    drawn_ids = []
    for _ in range(3):
        drawn_ids.append(replay.randint(1, 151))
        replay.uniform(-0.005, 0.005)
        replay.uniform(-0.005, 0.005)
    broken_id = drawn_ids[1]

    def lookup(catalog_id: int):  # noqa: ANN202
        if catalog_id == broken_id:
            err_msg = "unexpected payload"
            raise RuntimeError(err_msg)
        return catalog_entry(catalog_id)

    creatures = EntityService(container).generate_creatures(CENTER, 3, catalog_lookup=lookup)
    assert [c.catalog_id for c in creatures] == [i for i in drawn_ids if i != broken_id]


def test_zero_count_issues_no_lookups(container, catalog_client) -> None:
    assert EntityService(container).generate_creatures(CENTER, 0) == []
    assert catalog_client.calls == []


def test_slow_lookups_are_dropped(container) -> None:
    container.config.override(providers.Object(GameConfig(catalog_timeout=0.05)))

    def lookup(catalog_id: int):  # noqa: ANN202
        time.sleep(0.5)
        return catalog_entry(catalog_id)

    assert EntityService(container).generate_creatures(CENTER, 2, catalog_lookup=lookup) == []


def test_trainers_within_bounds(container) -> None:
    names = ("Ash", "Misty", "Brock")
    trainers = EntityService(container).generate_trainers(CENTER, 200, names)
    assert [t.id for t in trainers] == list(range(200))
    for trainer in trainers:
        assert trainer.name in names
        assert 10 <= trainer.level <= 29
        assert 200 <= trainer.reward_amount <= 699
        assert abs(trainer.position.latitude - CENTER.latitude) <= 0.0075 + 1e-9
        assert abs(trainer.position.longitude - CENTER.longitude) <= 0.0075 + 1e-9


def test_trainer_distance_matches_offsets(container) -> None:
    trainers = EntityService(container).generate_trainers(CENTER, 3, ("Gary",))
    replay = random.Random(1234)
    for trainer in trainers:
        d_lat = replay.uniform(-0.0075, 0.0075)
        d_lng = replay.uniform(-0.0075, 0.0075)
        assert trainer.name == replay.choice(("Gary",))
        assert trainer.level == replay.randint(10, 29)
        assert trainer.reward_amount == replay.randint(200, 699)
        assert trainer.distance_meters == _expected_distance(d_lat, d_lng)


def test_empty_name_pool_is_rejected(container) -> None:
    with pytest.raises(ValueError):
        EntityService(container).generate_trainers(CENTER, 1, ())
