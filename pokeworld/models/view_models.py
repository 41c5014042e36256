from dataclasses import dataclass, field
from typing import Self

from pokeworld.constants import (
    BUTTON_ATTACK,
    ITEM_DISPLAY_NAMES,
    LABEL_OPPONENT_TURN,
    LABEL_WILD_APPEARED,
)
from pokeworld.models.models import (
    HEALTH_MAX,
    BattlePhase,
    BattleSession,
    CaptureSession,
    CreatureRecord,
    ItemKind,
    PlayerState,
    TrainerRecord,
)


@dataclass
class PlayerViewModel:
    currency: int
    inventory: dict[ItemKind, int]
    collected_count: int

    @classmethod
    def create_from_state(cls, player_state: PlayerState) -> Self:
        return cls(player_state.currency, dict(player_state.inventory), len(player_state.collected_creatures))

    @property
    def currency_text(self) -> str:
        return f"${self.currency}"

    @property
    def inventory_text(self) -> str:
        return "  ".join(f"{ITEM_DISPLAY_NAMES[kind]}: {self.inventory.get(kind, 0)}" for kind in ItemKind)


@dataclass
class CreatureViewModel:
    catalog_id: int
    name: str
    distance_meters: int
    types: list[str]
    image_ref: str | None = None

    @classmethod
    def create_from_record(cls, creature: CreatureRecord) -> Self:
        return cls(
            creature.catalog_id,
            creature.name,
            creature.distance_meters,
            list(creature.elemental_types),
            creature.image_ref,
        )

    @property
    def display_name(self) -> str:
        return self.name.capitalize()

    @property
    def display_text(self) -> str:
        return f"{self.display_name} - {self.distance_meters}m"

    @property
    def types_text(self) -> str:
        return " / ".join(self.types)


@dataclass
class TrainerViewModel:
    trainer_id: int
    name: str
    level: int
    reward_amount: int
    distance_meters: int

    @classmethod
    def create_from_record(cls, trainer: TrainerRecord) -> Self:
        return cls(trainer.id, trainer.name, trainer.level, trainer.reward_amount, trainer.distance_meters)

    @property
    def display_text(self) -> str:
        return f"{self.name} (Lv. {self.level}) - {self.distance_meters}m - reward ${self.reward_amount}"


@dataclass
class CaptureViewModel:
    creature: CreatureViewModel
    item_counts: dict[ItemKind, int] = field(default_factory=dict)

    @classmethod
    def create_from_session(cls, capture_session: CaptureSession, player_state: PlayerState) -> Self:
        return cls(CreatureViewModel.create_from_record(capture_session.target), dict(player_state.inventory))

    @property
    def title(self) -> str:
        return LABEL_WILD_APPEARED.format(name=self.creature.display_name)

    def button_text(self, item_kind: ItemKind) -> str:
        return f"{ITEM_DISPLAY_NAMES[item_kind]}\n{self.item_counts.get(item_kind, 0)}"

    def can_throw(self, item_kind: ItemKind) -> bool:
        return self.item_counts.get(item_kind, 0) >= 1


@dataclass
class BattleViewModel:
    opponent_name: str
    opponent_level: int
    opponent_health: int
    player_health: int
    phase: BattlePhase

    @classmethod
    def create_from_session(cls, battle_session: BattleSession) -> Self:
        return cls(
            battle_session.opponent.name,
            battle_session.opponent.level,
            battle_session.opponent_health,
            battle_session.player_health,
            battle_session.phase,
        )

    @property
    def attack_enabled(self) -> bool:
        return self.phase == BattlePhase.PLAYER_TURN

    @property
    def attack_text(self) -> str:
        return BUTTON_ATTACK if self.phase != BattlePhase.OPPONENT_TURN else LABEL_OPPONENT_TURN

    @property
    def health_max(self) -> int:
        return HEALTH_MAX

    @property
    def opponent_title(self) -> str:
        return f"Trainer {self.opponent_name} (Lv. {self.opponent_level})"
