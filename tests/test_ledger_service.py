import pytest

from pokeworld.exceptions import InsufficientFundsError, OutOfStockError
from pokeworld.models.models import EventType, ItemKind
from pokeworld.services.ledger_service import LedgerService


@pytest.fixture
def ledger(container) -> LedgerService:
    return LedgerService(container)


def test_starting_balance_and_inventory(ledger, player_state) -> None:
    assert ledger.currency == 1000
    assert player_state.inventory == {ItemKind.BASIC: 5, ItemKind.GREAT: 0, ItemKind.ULTRA: 0}


def test_can_afford_is_inclusive(ledger, player_state) -> None:
    player_state.currency = 300
    assert ledger.can_afford(300)
    assert not ledger.can_afford(301)


def test_purchase_moves_exact_cost_into_one_item(ledger, player_state) -> None:
    ledger.purchase(ItemKind.GREAT, 300)
    assert player_state.currency == 700
    assert player_state.inventory[ItemKind.GREAT] == 1
    assert player_state.inventory[ItemKind.BASIC] == 5


def test_purchase_insufficient_funds_changes_nothing(ledger, player_state) -> None:
    player_state.currency = 200
    with pytest.raises(InsufficientFundsError) as exc_info:
        ledger.purchase(ItemKind.GREAT, 300)
    assert exc_info.value.cost == 300
    assert exc_info.value.balance == 200
    assert player_state.currency == 200
    assert player_state.inventory[ItemKind.GREAT] == 0


def test_purchase_rejects_negative_cost(ledger) -> None:
    with pytest.raises(ValueError):
        ledger.purchase(ItemKind.BASIC, -1)


def test_consume_item_until_empty(ledger, player_state) -> None:
    for _ in range(5):
        ledger.consume_item(ItemKind.BASIC)
    assert player_state.inventory[ItemKind.BASIC] == 0
    assert not ledger.has_item(ItemKind.BASIC)
    with pytest.raises(OutOfStockError):
        ledger.consume_item(ItemKind.BASIC)
    assert player_state.inventory[ItemKind.BASIC] == 0
    assert player_state.currency == 1000


def test_consume_missing_kind_is_out_of_stock(ledger, player_state) -> None:
    with pytest.raises(OutOfStockError) as exc_info:
        ledger.consume_item(ItemKind.ULTRA)
    assert exc_info.value.item_kind is ItemKind.ULTRA
    assert player_state.inventory[ItemKind.ULTRA] == 0


def test_credit_has_no_upper_bound(ledger, player_state) -> None:
    ledger.credit(10**9)
    assert player_state.currency == 1000 + 10**9
    with pytest.raises(ValueError):
        ledger.credit(-5)


def test_mutations_publish_ledger_changes(container, ledger) -> None:
    received = []
    container.event_manager().subscribe(EventType.LEDGER_CHANGED, received.append)
    ledger.purchase(ItemKind.BASIC, 100)
    ledger.consume_item(ItemKind.BASIC)
    ledger.credit(50)
    assert [event["currency"] for event in received] == [900, 900, 950]
    assert received[0]["inventory"][ItemKind.BASIC] == 6
