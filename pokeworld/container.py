import random

from dependency_injector import containers, providers

from pokeworld.catalog_client import CatalogClient
from pokeworld.config import GameConfig, PathConfig
from pokeworld.events import EventManager
from pokeworld.models.models import PlayerState
from pokeworld.repositories import CreatureRepository
from pokeworld.scheduler import ManualScheduler


class Container(containers.DeclarativeContainer):
    config = providers.Singleton(GameConfig.from_yaml, providers.Callable(PathConfig.settings_file))
    catalog_client = providers.Singleton(
        CatalogClient,
        base_url=config.provided.catalog_url,
        timeout=config.provided.catalog_timeout,
    )
    creature_repository = providers.Singleton(CreatureRepository, catalog_client=catalog_client)
    event_manager = providers.Singleton(EventManager)
    player_state = providers.Singleton(PlayerState.starting, config=config)
    rng = providers.Singleton(random.Random, config.provided.rng_seed)
    scheduler = providers.Singleton(ManualScheduler)
