import random

import pytest
from conftest import StubRandom, make_creature
from dependency_injector import providers

from pokeworld.exceptions import NoActiveCaptureError, OutOfStockError
from pokeworld.models.models import CaptureSession, ItemKind
from pokeworld.services.capture_service import CaptureService
from pokeworld.services.ledger_service import LedgerService


def _capture_service(container, rng) -> CaptureService:
    container.rng.override(providers.Object(rng))
    return CaptureService(container, LedgerService(container))


def test_capture_rates_table() -> None:
    assert CaptureService.capture_rate(ItemKind.BASIC) == 0.40
    assert CaptureService.capture_rate(ItemKind.GREAT) == 0.60
    assert CaptureService.capture_rate(ItemKind.ULTRA) == 0.80


def test_roll_below_rate_catches(container, player_state) -> None:
    service = _capture_service(container, StubRandom(rolls=[0.35]))
    target = make_creature()
    outcome = service.attempt_capture(CaptureSession(target), ItemKind.BASIC)
    assert outcome.success
    assert outcome.roll == 0.35
    assert player_state.inventory[ItemKind.BASIC] == 4
    assert player_state.collected_creatures == [target]


def test_roll_at_rate_escapes(container, player_state) -> None:
    service = _capture_service(container, StubRandom(rolls=[0.40]))
    session = CaptureSession(make_creature())
    outcome = service.attempt_capture(session, ItemKind.BASIC)
    assert not outcome.success
    assert player_state.inventory[ItemKind.BASIC] == 4
    assert player_state.collected_creatures == []
    assert session.attempts == 1


def test_out_of_stock_spends_nothing_and_skips_roll(container, player_state) -> None:
    stub = StubRandom(rolls=[0.0])
    service = _capture_service(container, stub)
    session = CaptureSession(make_creature())
    with pytest.raises(OutOfStockError):
        service.attempt_capture(session, ItemKind.ULTRA)
    assert stub.rolls == [0.0]
    assert session.attempts == 0
    assert player_state.collected_creatures == []
    assert player_state.inventory == {ItemKind.BASIC: 5, ItemKind.GREAT: 0, ItemKind.ULTRA: 0}


def test_missing_session_is_rejected(container, player_state) -> None:
    service = _capture_service(container, StubRandom(rolls=[0.0]))
    with pytest.raises(NoActiveCaptureError):
        service.attempt_capture(None, ItemKind.BASIC)
    assert player_state.inventory[ItemKind.BASIC] == 5


@pytest.mark.parametrize(
    ("item_kind", "expected"),
    [(ItemKind.BASIC, 0.40), (ItemKind.GREAT, 0.60), (ItemKind.ULTRA, 0.80)],
)
def test_success_rate_converges(container, player_state, item_kind, expected) -> None:
    trials = 10_000
    service = _capture_service(container, random.Random(2024))
    player_state.inventory[item_kind] = trials
    session = CaptureSession(make_creature())
    successes = sum(service.attempt_capture(session, item_kind).success for _ in range(trials))
    assert successes / trials == pytest.approx(expected, abs=0.02)
    assert player_state.inventory[item_kind] == 0
    assert len(player_state.collected_creatures) == successes
