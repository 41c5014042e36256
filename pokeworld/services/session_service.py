import logging
from typing import TYPE_CHECKING

from pokeworld.constants import (
    ITEM_DISPLAY_NAMES,
    MSG_BATTLE_DEFEAT,
    MSG_BATTLE_VICTORY,
    MSG_CAPTURE_FAILURE,
    MSG_CAPTURE_SUCCESS,
    MSG_INSUFFICIENT_FUNDS,
    MSG_NO_ACTIVE_BATTLE,
    MSG_NO_ACTIVE_CAPTURE,
    MSG_OUT_OF_STOCK,
    MSG_PURCHASE_SUCCESS,
)
from pokeworld.exceptions import InsufficientFundsError, NoActiveBattleError, NoActiveCaptureError, OutOfStockError
from pokeworld.models.models import (
    BattlePhase,
    BattleSession,
    CaptureOutcome,
    CaptureSession,
    Coordinate,
    CreatureRecord,
    EventType,
    ItemKind,
    PlayerState,
    TrainerRecord,
)
from pokeworld.services.battle_service import BattleService
from pokeworld.services.capture_service import CaptureService
from pokeworld.services.entity_service import EntityService
from pokeworld.services.ledger_service import LedgerService
from pokeworld.services.location_service import LocationProvider, LocationService
from pokeworld.services.notification_service import NotificationService

if TYPE_CHECKING:
    from pokeworld.container import Container

LOGGER = logging.getLogger(__name__)


class SessionService:
    """Routes player intents to the engine services.

    Holds the nearby creatures and trainers of the current generation cycle
    and the single active capture or battle session. Recoverable errors from
    the services end up as notifications and never change state.
    """

    def __init__(self, container: "Container") -> None:
        self._container = container
        self._active_session: CaptureSession | BattleSession | None = None
        self._config = self._container.config()
        self._event_manager = self._container.event_manager()
        self._ledger_service = LedgerService(container)
        self._battle_service = BattleService(container, self._ledger_service)
        self._capture_service = CaptureService(container, self._ledger_service)
        self._entity_service = EntityService(container)
        self._location_service = LocationService(container)
        self._nearby_creatures: list[CreatureRecord] = []
        self._nearby_trainers: list[TrainerRecord] = []
        self._notification_service = NotificationService(container)
        self._player_state = self._container.player_state()
        self._scheduler = self._container.scheduler()

    @property
    def active_session(self) -> CaptureSession | BattleSession | None:
        return self._active_session

    @property
    def battle_session(self) -> BattleSession | None:
        return self._active_session if isinstance(self._active_session, BattleSession) else None

    @property
    def capture_session(self) -> CaptureSession | None:
        return self._active_session if isinstance(self._active_session, CaptureSession) else None

    @property
    def nearby_creatures(self) -> tuple[CreatureRecord, ...]:
        return tuple(self._nearby_creatures)

    @property
    def nearby_trainers(self) -> tuple[TrainerRecord, ...]:
        return tuple(self._nearby_trainers)

    @property
    def notification(self) -> str | None:
        return self._notification_service.current

    @property
    def player_state(self) -> PlayerState:
        return self._player_state

    @property
    def shop_prices(self) -> dict[ItemKind, int]:
        return dict(self._config.shop_prices)

    def _end_battle(self, battle_session: BattleSession, reason: str) -> None:
        if self._active_session is not battle_session:
            LOGGER.debug("Battle against %s already closed", battle_session.opponent.name)
            return
        self._active_session = None
        self._event_manager.publish(EventType.BATTLE_ENDED, {"session": battle_session, "reason": reason})

    def _end_capture(self, capture_session: CaptureSession, captured: bool) -> None:
        self._active_session = None
        self._event_manager.publish(EventType.CAPTURE_ENDED, {"session": capture_session, "captured": captured})

    def _finish_victory(self, battle_session: BattleSession) -> None:
        opponent = battle_session.opponent
        self._nearby_trainers = [t for t in self._nearby_trainers if t is not opponent]
        self._end_battle(battle_session, BattlePhase.VICTORY.value)
        self._event_manager.publish(EventType.NEARBY_UPDATED)
        self._notification_service.show(MSG_BATTLE_VICTORY.format(reward=opponent.reward_amount))

    def _resolve_counter_attack(self, battle_session: BattleSession) -> None:
        if self._active_session is not battle_session:
            LOGGER.debug("Dropping counter-attack for a battle that is no longer active")
            return
        phase = self._battle_service.counter_attack(battle_session)
        if phase == BattlePhase.DEFEAT:
            self._notification_service.show(MSG_BATTLE_DEFEAT)
            self._scheduler.call_later(
                self._config.defeat_teardown_delay,
                lambda: self._end_battle(battle_session, BattlePhase.DEFEAT.value),
            )

    def abandon_session(self) -> None:
        session = self._active_session
        if isinstance(session, CaptureSession):
            self._end_capture(session, captured=False)
        elif isinstance(session, BattleSession):
            LOGGER.info("Left the battle against %s", session.opponent.name)
            self._end_battle(session, "abandoned")

    def attack(self) -> BattlePhase | None:
        battle_session = self.battle_session
        try:
            phase = self._battle_service.attack(battle_session)
        except NoActiveBattleError:
            self._notification_service.show(MSG_NO_ACTIVE_BATTLE)
            return None
        if phase == BattlePhase.VICTORY:
            self._finish_victory(battle_session)
        elif phase == BattlePhase.OPPONENT_TURN:
            self._scheduler.call_later(
                self._config.counter_attack_delay,
                lambda: self._resolve_counter_attack(battle_session),
            )
        return phase

    def attempt_capture(self, item_kind: ItemKind) -> CaptureOutcome | None:
        capture_session = self.capture_session
        try:
            outcome = self._capture_service.attempt_capture(capture_session, item_kind)
        except NoActiveCaptureError:
            self._notification_service.show(MSG_NO_ACTIVE_CAPTURE)
            return None
        except OutOfStockError:
            self._notification_service.show(MSG_OUT_OF_STOCK.format(item=ITEM_DISPLAY_NAMES[item_kind]))
            return None
        target = outcome.target
        if outcome.success:
            self._nearby_creatures = [c for c in self._nearby_creatures if c is not target]
            self._end_capture(capture_session, captured=True)
            self._event_manager.publish(EventType.NEARBY_UPDATED)
            self._notification_service.show(MSG_CAPTURE_SUCCESS.format(name=target.name))
        else:
            self._notification_service.show(MSG_CAPTURE_FAILURE.format(name=target.name))
        return outcome

    def flee(self) -> None:
        capture_session = self.capture_session
        if capture_session is None:
            LOGGER.debug("Nothing to flee from")
            return
        LOGGER.info("Ran away from %s", capture_session.target.name)
        self._end_capture(capture_session, captured=False)

    def purchase(self, item_kind: ItemKind) -> bool:
        cost = self._config.shop_prices[item_kind]
        try:
            self._ledger_service.purchase(item_kind, cost)
        except InsufficientFundsError:
            self._notification_service.show(MSG_INSUFFICIENT_FUNDS)
            return False
        self._notification_service.show(MSG_PURCHASE_SUCCESS.format(item=ITEM_DISPLAY_NAMES[item_kind]))
        return True

    def recenter(self) -> None:
        self._event_manager.publish(EventType.RECENTER_REQUESTED, {"location": self._player_state.location})

    def acquire_location(self, location_provider: LocationProvider | None = None) -> Coordinate:
        return self._location_service.acquire(location_provider)

    def apply_nearby(
        self,
        center: Coordinate,
        creatures: list[CreatureRecord],
        trainers: list[TrainerRecord],
    ) -> None:
        if center != self._player_state.location:
            self._player_state.location = center
            self._event_manager.publish(EventType.LOCATION_CHANGED, {"location": center})
        self._nearby_creatures = list(creatures)
        self._nearby_trainers = list(trainers)
        self._event_manager.publish(EventType.NEARBY_UPDATED)

    def generate_nearby(self, center: Coordinate) -> tuple[list[CreatureRecord], list[TrainerRecord]]:
        """Build a new generation cycle around ``center`` without touching state.

        Blocks while catalog lookups settle, so shells may call it off their
        event thread and hand the result to ``apply_nearby``.
        """
        creatures = self._entity_service.generate_creatures(center, self._config.creature_count)
        trainers = self._entity_service.generate_trainers(
            center,
            self._config.trainer_count,
            self._config.trainer_names,
        )
        return creatures, trainers

    def refresh_nearby(self) -> None:
        center = self._player_state.location
        self.apply_nearby(center, *self.generate_nearby(center))

    def select_creature(self, catalog_id: int) -> CaptureSession | None:
        if self.battle_session is not None:
            LOGGER.debug("Ignoring creature selection during a battle")
            return None
        target = next((c for c in self._nearby_creatures if c.catalog_id == catalog_id), None)
        if target is None:
            LOGGER.warning("Creature %s is not nearby", catalog_id)
            return None
        capture_session = CaptureSession(target)
        self._active_session = capture_session
        LOGGER.info("Encountered a wild %s", target.name)
        self._event_manager.publish(EventType.CAPTURE_STARTED, {"session": capture_session})
        return capture_session

    def select_trainer(self, trainer_id: int) -> BattleSession | None:
        if self._active_session is not None:
            LOGGER.debug("Ignoring trainer selection while another session is active")
            return None
        opponent = next((t for t in self._nearby_trainers if t.id == trainer_id), None)
        if opponent is None:
            LOGGER.warning("Trainer %s is not nearby", trainer_id)
            return None
        battle_session = self._battle_service.start(opponent)
        self._active_session = battle_session
        self._event_manager.publish(EventType.BATTLE_STARTED, {"session": battle_session})
        return battle_session

    def set_location(self, location: Coordinate) -> None:
        self.apply_nearby(location, *self.generate_nearby(location))

    def start(self, location_provider: LocationProvider | None = None) -> None:
        self.set_location(self.acquire_location(location_provider))
