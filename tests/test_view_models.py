from conftest import make_creature, make_trainer

from pokeworld.models.models import BattlePhase, BattleSession, CaptureSession, ItemKind
from pokeworld.models.view_models import (
    BattleViewModel,
    CaptureViewModel,
    CreatureViewModel,
    PlayerViewModel,
    TrainerViewModel,
)


def test_player_view_model(player_state) -> None:
    view_model = PlayerViewModel.create_from_state(player_state)
    assert view_model.currency_text == "$1000"
    assert view_model.inventory_text == "Poké Ball: 5  Great Ball: 0  Ultra Ball: 0"
    assert view_model.collected_count == 0


def test_creature_and_trainer_text() -> None:
    creature = CreatureViewModel.create_from_record(make_creature(name="pikachu", distance=120))
    assert creature.display_text == "Pikachu - 120m"
    assert creature.types_text == "electric"
    trainer = TrainerViewModel.create_from_record(make_trainer(name="Misty", reward=450))
    assert trainer.display_text == "Misty (Lv. 20) - 222m - reward $450"


def test_capture_view_model_disables_empty_items(player_state) -> None:
    view_model = CaptureViewModel.create_from_session(CaptureSession(make_creature(name="eevee")), player_state)
    assert view_model.title == "A wild Eevee appeared!"
    assert view_model.can_throw(ItemKind.BASIC)
    assert not view_model.can_throw(ItemKind.ULTRA)
    assert view_model.button_text(ItemKind.BASIC) == "Poké Ball\n5"


def test_battle_view_model_follows_turns() -> None:
    session = BattleSession(make_trainer(name="Brock"))
    view_model = BattleViewModel.create_from_session(session)
    assert view_model.attack_enabled
    assert view_model.attack_text == "Attack"
    assert view_model.opponent_title == "Trainer Brock (Lv. 20)"
    session.phase = BattlePhase.OPPONENT_TURN
    view_model = BattleViewModel.create_from_session(session)
    assert not view_model.attack_enabled
    assert view_model.attack_text == "Opponent's turn..."
    session.phase = BattlePhase.DEFEAT
    assert not BattleViewModel.create_from_session(session).attack_enabled
