import logging
from typing import TYPE_CHECKING

from pokeworld.constants import CAPTURE_RATES
from pokeworld.exceptions import NoActiveCaptureError
from pokeworld.models.models import CaptureOutcome, CaptureSession, EventType, ItemKind

if TYPE_CHECKING:
    from pokeworld.container import Container
    from pokeworld.services.ledger_service import LedgerService

LOGGER = logging.getLogger(__name__)


class CaptureService:
    def __init__(self, container: "Container", ledger_service: "LedgerService") -> None:
        self._container = container
        self._event_manager = self._container.event_manager()
        self._ledger_service = ledger_service
        self._player_state = self._container.player_state()
        self._rng = self._container.rng()

    @staticmethod
    def capture_rate(item_kind: ItemKind) -> float:
        return CAPTURE_RATES[item_kind]

    def attempt_capture(self, capture_session: CaptureSession | None, item_kind: ItemKind) -> CaptureOutcome:
        """Throw one item at the session's target.

        The item is spent whether or not the throw works; ``OutOfStockError``
        leaves everything untouched. On success the target joins the player's
        collection. Ending the session and updating the nearby set is left to
        the caller, which owns both.
        """
        if capture_session is None:
            err_msg = "No capture in progress"
            raise NoActiveCaptureError(err_msg)
        self._ledger_service.consume_item(item_kind)
        capture_session.attempts += 1
        target = capture_session.target
        roll = self._rng.random()
        success = roll < self.capture_rate(item_kind)
        if success:
            self._player_state.collected_creatures.append(target)
            self._event_manager.publish(EventType.COLLECTION_CHANGED, {"creature": target})
        LOGGER.info(
            "Threw %s at %s: roll %.3f, %s",
            item_kind.value,
            target.name,
            roll,
            "caught" if success else "escaped",
        )
        return CaptureOutcome(success, item_kind, target, roll)
