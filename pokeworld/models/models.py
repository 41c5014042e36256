from dataclasses import dataclass, field
from enum import Enum, auto
from typing import TYPE_CHECKING, Any, Self, TypedDict

if TYPE_CHECKING:
    from pokeworld.config import GameConfig

HEALTH_MAX = 100


class CatalogEntry(TypedDict):
    id: int
    name: str
    image_ref: str | None
    types: list[str]
    stats: list[dict[str, Any]]


class EventType(Enum):
    LOCATION_CHANGED = auto()
    NEARBY_UPDATED = auto()
    LEDGER_CHANGED = auto()
    COLLECTION_CHANGED = auto()
    CAPTURE_STARTED = auto()
    CAPTURE_ENDED = auto()
    BATTLE_STARTED = auto()
    BATTLE_UPDATED = auto()
    BATTLE_ENDED = auto()
    NOTIFICATION_CHANGED = auto()
    RECENTER_REQUESTED = auto()


class ItemKind(Enum):
    BASIC = "basic"
    GREAT = "great"
    ULTRA = "ultra"


class BattlePhase(Enum):
    PLAYER_TURN = "player-turn"
    OPPONENT_TURN = "opponent-turn"
    VICTORY = "victory"
    DEFEAT = "defeat"

    @property
    def is_terminal(self) -> bool:
        return self in (BattlePhase.VICTORY, BattlePhase.DEFEAT)


class TurnOwner(Enum):
    PLAYER = "player"
    OPPONENT = "opponent"


@dataclass(frozen=True)
class Coordinate:
    latitude: float
    longitude: float

    def offset(self, d_lat: float, d_lng: float) -> "Coordinate":
        return Coordinate(self.latitude + d_lat, self.longitude + d_lng)

    def __str__(self) -> str:
        return f"({self.latitude:.5f}, {self.longitude:.5f})"


@dataclass(frozen=True)
class BaseStat:
    name: str
    value: int


@dataclass(frozen=True)
class CreatureRecord:
    catalog_id: int
    name: str
    image_ref: str | None
    elemental_types: tuple[str, ...]
    base_stats: tuple[BaseStat, ...]
    position: Coordinate
    distance_meters: int

    def __str__(self) -> str:
        return f"{self.name} (#{self.catalog_id}) - {self.distance_meters}m"


@dataclass(frozen=True)
class TrainerRecord:
    id: int
    name: str
    level: int
    reward_amount: int
    position: Coordinate
    distance_meters: int

    def __str__(self) -> str:
        return f"{self.name} (Lv {self.level}) - {self.distance_meters}m"


@dataclass
class PlayerState:
    currency: int
    inventory: dict[ItemKind, int]
    location: Coordinate
    collected_creatures: list[CreatureRecord] = field(default_factory=list)

    @classmethod
    def starting(cls, config: "GameConfig") -> Self:
        inventory = {kind: config.starting_inventory.get(kind, 0) for kind in ItemKind}
        return cls(config.starting_currency, inventory, config.default_location)


@dataclass(eq=False)
class BattleSession:
    opponent: TrainerRecord
    opponent_health: int = HEALTH_MAX
    player_health: int = HEALTH_MAX
    phase: BattlePhase = BattlePhase.PLAYER_TURN
    last_player_damage: int | None = None
    last_opponent_damage: int | None = None

    @property
    def turn_owner(self) -> TurnOwner | None:
        if self.phase == BattlePhase.PLAYER_TURN:
            return TurnOwner.PLAYER
        if self.phase == BattlePhase.OPPONENT_TURN:
            return TurnOwner.OPPONENT
        return None


@dataclass(eq=False)
class CaptureSession:
    target: CreatureRecord
    attempts: int = 0


@dataclass(frozen=True)
class CaptureOutcome:
    success: bool
    item_kind: ItemKind
    target: CreatureRecord
    roll: float
