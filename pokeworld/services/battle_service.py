import logging
from typing import TYPE_CHECKING

from pokeworld.constants import OPPONENT_DAMAGE_MAX, OPPONENT_DAMAGE_MIN, PLAYER_DAMAGE_MAX, PLAYER_DAMAGE_MIN
from pokeworld.exceptions import NoActiveBattleError
from pokeworld.models.models import BattlePhase, BattleSession, EventType, TrainerRecord

if TYPE_CHECKING:
    from pokeworld.container import Container
    from pokeworld.services.ledger_service import LedgerService

LOGGER = logging.getLogger(__name__)


class BattleService:
    """Turn-based fight between the player and one trainer.

    ``attack`` and ``counter_attack`` are separate steps so the opponent turn
    is observable between them. Both ignore calls made in the wrong phase,
    which also covers the terminal phases.
    """

    def __init__(self, container: "Container", ledger_service: "LedgerService") -> None:
        self._container = container
        self._event_manager = self._container.event_manager()
        self._ledger_service = ledger_service
        self._rng = self._container.rng()

    def _publish_update(self, battle_session: BattleSession) -> None:
        self._event_manager.publish(EventType.BATTLE_UPDATED, {"session": battle_session})

    @staticmethod
    def start(opponent: TrainerRecord) -> BattleSession:
        LOGGER.info("Battle started against %s", opponent)
        return BattleSession(opponent)

    def attack(self, battle_session: BattleSession | None) -> BattlePhase | None:
        if battle_session is None:
            err_msg = "No battle in progress"
            raise NoActiveBattleError(err_msg)
        if battle_session.phase != BattlePhase.PLAYER_TURN:
            LOGGER.debug("Ignoring attack during %s", battle_session.phase.value)
            return None
        damage = self._rng.randint(PLAYER_DAMAGE_MIN, PLAYER_DAMAGE_MAX)
        battle_session.last_player_damage = damage
        battle_session.opponent_health = max(0, battle_session.opponent_health - damage)
        LOGGER.info(
            "Player hit %s for %d (%d HP left)",
            battle_session.opponent.name,
            damage,
            battle_session.opponent_health,
        )
        if battle_session.opponent_health == 0:
            battle_session.phase = BattlePhase.VICTORY
            self._ledger_service.credit(battle_session.opponent.reward_amount)
            LOGGER.info("Defeated %s, earned %d", battle_session.opponent.name, battle_session.opponent.reward_amount)
        else:
            battle_session.phase = BattlePhase.OPPONENT_TURN
        self._publish_update(battle_session)
        return battle_session.phase

    def counter_attack(self, battle_session: BattleSession) -> BattlePhase | None:
        if battle_session.phase != BattlePhase.OPPONENT_TURN:
            LOGGER.debug("Ignoring counter-attack during %s", battle_session.phase.value)
            return None
        damage = self._rng.randint(OPPONENT_DAMAGE_MIN, OPPONENT_DAMAGE_MAX)
        battle_session.last_opponent_damage = damage
        battle_session.player_health = max(0, battle_session.player_health - damage)
        LOGGER.info(
            "%s hit back for %d (%d HP left)",
            battle_session.opponent.name,
            damage,
            battle_session.player_health,
        )
        if battle_session.player_health == 0:
            battle_session.phase = BattlePhase.DEFEAT
            LOGGER.info("Lost the battle against %s", battle_session.opponent.name)
        else:
            battle_session.phase = BattlePhase.PLAYER_TURN
        self._publish_update(battle_session)
        return battle_session.phase
