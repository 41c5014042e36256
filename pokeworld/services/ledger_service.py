import logging
from typing import TYPE_CHECKING

from pokeworld.exceptions import InsufficientFundsError, OutOfStockError
from pokeworld.models.models import EventType, ItemKind

if TYPE_CHECKING:
    from pokeworld.container import Container

LOGGER = logging.getLogger(__name__)


class LedgerService:
    def __init__(self, container: "Container") -> None:
        self._container = container
        self._event_manager = self._container.event_manager()
        self._player_state = self._container.player_state()

    @property
    def currency(self) -> int:
        return self._player_state.currency

    def _publish_change(self) -> None:
        self._event_manager.publish(
            EventType.LEDGER_CHANGED,
            {"currency": self._player_state.currency, "inventory": dict(self._player_state.inventory)},
        )

    def can_afford(self, cost: int) -> bool:
        return self._player_state.currency >= cost

    def consume_item(self, item_kind: ItemKind) -> None:
        if not self.has_item(item_kind):
            raise OutOfStockError(item_kind)
        self._player_state.inventory[item_kind] -= 1
        LOGGER.info("Used 1 %s (%d left)", item_kind.value, self._player_state.inventory[item_kind])
        self._publish_change()

    def count(self, item_kind: ItemKind) -> int:
        return self._player_state.inventory.get(item_kind, 0)

    def credit(self, amount: int) -> None:
        if amount < 0:
            err_msg = f"Cannot credit a negative amount: {amount}"
            raise ValueError(err_msg)
        self._player_state.currency += amount
        LOGGER.info("Credited %d (balance: %d)", amount, self._player_state.currency)
        self._publish_change()

    def has_item(self, item_kind: ItemKind) -> bool:
        return self.count(item_kind) >= 1

    def purchase(self, item_kind: ItemKind, cost: int) -> None:
        if cost < 0:
            err_msg = f"Item cost cannot be negative: {cost}"
            raise ValueError(err_msg)
        if not self.can_afford(cost):
            raise InsufficientFundsError(cost, self._player_state.currency)
        self._player_state.currency -= cost
        self._player_state.inventory[item_kind] = self.count(item_kind) + 1
        LOGGER.info("Bought 1 %s for %d (balance: %d)", item_kind.value, cost, self._player_state.currency)
        self._publish_change()
