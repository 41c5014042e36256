import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Self

from pokeworld.constants import (
    DEFAULT_CATALOG_TIMEOUT,
    DEFAULT_CATALOG_URL,
    DEFAULT_COUNTER_ATTACK_DELAY,
    DEFAULT_CREATURE_COUNT,
    DEFAULT_DEFEAT_TEARDOWN_DELAY,
    DEFAULT_LATITUDE,
    DEFAULT_LOCATION_TIMEOUT,
    DEFAULT_LOCATION_URL,
    DEFAULT_LONGITUDE,
    DEFAULT_NOTIFICATION_DURATION,
    DEFAULT_SHOP_PRICES,
    DEFAULT_STARTING_CURRENCY,
    DEFAULT_STARTING_INVENTORY,
    DEFAULT_TRAINER_COUNT,
    DEFAULT_TRAINER_NAMES,
)
from pokeworld.models.models import Coordinate, ItemKind
from pokeworld.utils.utils import load_yaml_file

LOGGER = logging.getLogger(__name__)


class PathConfig:
    @staticmethod
    def get_project_root() -> Path:
        return Path(__file__).parent.parent

    @staticmethod
    def logs_folder() -> Path:
        folder = PathConfig.get_project_root() / "logs"
        if not folder.exists():
            LOGGER.warning("Logs folder does not exist: %s", folder)
            folder.mkdir(parents=True, exist_ok=True)
            LOGGER.info("Logs folder created.")
        return folder

    @staticmethod
    def resources_folder() -> Path:
        folder = Path(__file__).parent / "resources"
        if not folder.exists():
            LOGGER.critical("Resources folder does not exist: %s", folder)
        return folder

    @staticmethod
    def settings_file() -> Path:
        file = PathConfig.resources_folder() / "settings.yaml"
        if not file.exists():
            LOGGER.critical("Settings file does not exist: %s", file)
        return file


def _lookup(data: dict[str, Any], keys: list[str], default: Any = None) -> Any:  # noqa: ANN401
    current = data
    for key in keys:
        if not isinstance(current, dict) or key not in current:
            return default
        current = current[key]
    return current


def _item_table(raw: dict[str, int] | None, default: dict[ItemKind, int]) -> dict[ItemKind, int]:
    if raw is None:
        return dict(default)
    table = dict(default)
    for key, value in raw.items():
        try:
            kind = ItemKind(key)
        except ValueError as err:
            err_msg = f"Unknown item kind in settings: {key}"
            raise ValueError(err_msg) from err
        table[kind] = int(value)
    return table


@dataclass(frozen=True)
class GameConfig:
    starting_currency: int = DEFAULT_STARTING_CURRENCY
    starting_inventory: dict[ItemKind, int] = field(default_factory=lambda: dict(DEFAULT_STARTING_INVENTORY))
    default_location: Coordinate = Coordinate(DEFAULT_LATITUDE, DEFAULT_LONGITUDE)
    creature_count: int = DEFAULT_CREATURE_COUNT
    trainer_count: int = DEFAULT_TRAINER_COUNT
    trainer_names: tuple[str, ...] = DEFAULT_TRAINER_NAMES
    shop_prices: dict[ItemKind, int] = field(default_factory=lambda: dict(DEFAULT_SHOP_PRICES))
    counter_attack_delay: float = DEFAULT_COUNTER_ATTACK_DELAY
    defeat_teardown_delay: float = DEFAULT_DEFEAT_TEARDOWN_DELAY
    notification_duration: float = DEFAULT_NOTIFICATION_DURATION
    catalog_url: str = DEFAULT_CATALOG_URL
    catalog_timeout: float = DEFAULT_CATALOG_TIMEOUT
    location_url: str = DEFAULT_LOCATION_URL
    location_timeout: float = DEFAULT_LOCATION_TIMEOUT
    rng_seed: int | None = None

    def __post_init__(self) -> None:
        if self.starting_currency < 0:
            err_msg = "player.currency must be >= 0"
            raise ValueError(err_msg)
        if any(count < 0 for count in self.starting_inventory.values()):
            err_msg = "player.inventory counts must be >= 0"
            raise ValueError(err_msg)
        if any(price < 0 for price in self.shop_prices.values()):
            err_msg = "shop prices must be >= 0"
            raise ValueError(err_msg)
        if set(self.shop_prices) != set(ItemKind):
            err_msg = "shop needs a price for every item kind"
            raise ValueError(err_msg)
        if self.creature_count < 0 or self.trainer_count < 0:
            err_msg = "encounter counts must be >= 0"
            raise ValueError(err_msg)
        if not self.trainer_names:
            err_msg = "encounters.trainer_names must not be empty"
            raise ValueError(err_msg)
        if self.catalog_timeout <= 0 or self.location_timeout <= 0:
            err_msg = "service timeouts must be > 0"
            raise ValueError(err_msg)
        if min(self.counter_attack_delay, self.defeat_teardown_delay, self.notification_duration) < 0:
            err_msg = "timing delays must be >= 0"
            raise ValueError(err_msg)

    @classmethod
    def from_yaml(cls, file_path: Path) -> Self:
        if not file_path.exists():
            LOGGER.warning("Settings file %s not found. Using defaults.", file_path)
            return cls()
        data = load_yaml_file(file_path)
        latitude = _lookup(data, ["player", "default_location", "latitude"], DEFAULT_LATITUDE)
        longitude = _lookup(data, ["player", "default_location", "longitude"], DEFAULT_LONGITUDE)
        seed = data.get("rng_seed")
        config = cls(
            starting_currency=int(_lookup(data, ["player", "currency"], DEFAULT_STARTING_CURRENCY)),
            starting_inventory=_item_table(_lookup(data, ["player", "inventory"]), DEFAULT_STARTING_INVENTORY),
            default_location=Coordinate(float(latitude), float(longitude)),
            creature_count=int(_lookup(data, ["encounters", "creatures"], DEFAULT_CREATURE_COUNT)),
            trainer_count=int(_lookup(data, ["encounters", "trainers"], DEFAULT_TRAINER_COUNT)),
            trainer_names=tuple(_lookup(data, ["encounters", "trainer_names"], DEFAULT_TRAINER_NAMES)),
            shop_prices=_item_table(data.get("shop"), DEFAULT_SHOP_PRICES),
            counter_attack_delay=float(
                _lookup(data, ["timing", "counter_attack_delay"], DEFAULT_COUNTER_ATTACK_DELAY),
            ),
            defeat_teardown_delay=float(
                _lookup(data, ["timing", "defeat_teardown_delay"], DEFAULT_DEFEAT_TEARDOWN_DELAY),
            ),
            notification_duration=float(
                _lookup(data, ["timing", "notification_duration"], DEFAULT_NOTIFICATION_DURATION),
            ),
            catalog_url=str(_lookup(data, ["services", "catalog_url"], DEFAULT_CATALOG_URL)),
            catalog_timeout=float(_lookup(data, ["services", "catalog_timeout"], DEFAULT_CATALOG_TIMEOUT)),
            location_url=str(_lookup(data, ["services", "location_url"], DEFAULT_LOCATION_URL)),
            location_timeout=float(_lookup(data, ["services", "location_timeout"], DEFAULT_LOCATION_TIMEOUT)),
            rng_seed=int(seed) if seed is not None else None,
        )
        LOGGER.info("Game settings loaded from %s", file_path)
        return config
