import logging

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtWidgets import (
    QGridLayout,
    QHBoxLayout,
    QLabel,
    QListWidget,
    QListWidgetItem,
    QProgressBar,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from pokeworld.constants import (
    BUTTON_FLEE,
    BUTTON_RECENTER,
    BUTTON_REFRESH,
    ITEM_DISPLAY_NAMES,
    LABEL_COLLECTION_EMPTY,
    LABEL_LOCATION,
    LABEL_NEARBY_CREATURES,
    LABEL_NEARBY_TRAINERS,
    LABEL_PLAYER,
    LABEL_SHOP_TITLE,
    SPACING,
)
from pokeworld.models.models import ItemKind
from pokeworld.models.view_models import BattleViewModel, CaptureViewModel, CreatureViewModel, TrainerViewModel
from pokeworld.services.session_service import SessionService

ALIGN_CENTER = Qt.AlignmentFlag.AlignCenter
ITEM_DATA_ROLE = Qt.ItemDataRole.UserRole
LOGGER = logging.getLogger(__name__)


class MapPanel(QWidget):
    refresh_requested = pyqtSignal()

    def __init__(self, session_service: SessionService, parent: QWidget) -> None:
        super().__init__(parent)
        self._session_service = session_service
        self._init_ui()

    def _init_ui(self) -> None:
        layout = QVBoxLayout(self)
        top_row = QHBoxLayout()
        self._location_label = QLabel(self)
        top_row.addWidget(self._location_label)
        top_row.addStretch()
        recenter_button = QPushButton(BUTTON_RECENTER, self)
        recenter_button.clicked.connect(self._session_service.recenter)
        top_row.addWidget(recenter_button)
        self._refresh_button = QPushButton(BUTTON_REFRESH, self)
        self._refresh_button.clicked.connect(lambda: self.refresh_requested.emit())
        top_row.addWidget(self._refresh_button)
        layout.addLayout(top_row)
        layout.addWidget(QLabel(LABEL_NEARBY_CREATURES, self))
        self._creature_list = QListWidget(self)
        self._creature_list.itemActivated.connect(self._on_creature_activated)
        layout.addWidget(self._creature_list)
        layout.addWidget(QLabel(LABEL_NEARBY_TRAINERS, self))
        self._trainer_list = QListWidget(self)
        self._trainer_list.itemActivated.connect(self._on_trainer_activated)
        layout.addWidget(self._trainer_list)

    def _on_creature_activated(self, item: QListWidgetItem) -> None:
        self._session_service.select_creature(item.data(ITEM_DATA_ROLE))

    def _on_trainer_activated(self, item: QListWidgetItem) -> None:
        self._session_service.select_trainer(item.data(ITEM_DATA_ROLE))

    def set_refresh_enabled(self, enabled: bool) -> None:
        self._refresh_button.setEnabled(enabled)

    def scroll_to_top(self) -> None:
        self._creature_list.scrollToTop()
        self._trainer_list.scrollToTop()

    def update_nearby(self) -> None:
        self._location_label.setText(LABEL_LOCATION.format(location=self._session_service.player_state.location))
        self._creature_list.clear()
        for creature in self._session_service.nearby_creatures:
            view_model = CreatureViewModel.create_from_record(creature)
            item = QListWidgetItem(view_model.display_text)
            item.setData(ITEM_DATA_ROLE, view_model.catalog_id)
            item.setToolTip(view_model.types_text)
            self._creature_list.addItem(item)
        self._trainer_list.clear()
        for trainer in self._session_service.nearby_trainers:
            view_model = TrainerViewModel.create_from_record(trainer)
            item = QListWidgetItem(view_model.display_text)
            item.setData(ITEM_DATA_ROLE, view_model.trainer_id)
            self._trainer_list.addItem(item)


class CapturePanel(QWidget):
    def __init__(self, session_service: SessionService, parent: QWidget) -> None:
        super().__init__(parent)
        self._item_buttons: dict[ItemKind, QPushButton] = {}
        self._session_service = session_service
        self._init_ui()

    def _init_ui(self) -> None:
        layout = QVBoxLayout(self)
        self._title_label = QLabel(self)
        self._title_label.setAlignment(ALIGN_CENTER)
        layout.addWidget(self._title_label)
        self._types_label = QLabel(self)
        self._types_label.setAlignment(ALIGN_CENTER)
        layout.addWidget(self._types_label)
        button_row = QHBoxLayout()
        for item_kind in ItemKind:
            button = QPushButton(ITEM_DISPLAY_NAMES[item_kind], self)
            button.clicked.connect(lambda _, kind=item_kind: self._session_service.attempt_capture(kind))
            button_row.addWidget(button)
            self._item_buttons[item_kind] = button
        layout.addLayout(button_row)
        flee_button = QPushButton(BUTTON_FLEE, self)
        flee_button.clicked.connect(self._session_service.flee)
        layout.addWidget(flee_button)
        layout.addStretch()

    def update_capture(self) -> None:
        capture_session = self._session_service.capture_session
        if capture_session is None:
            return
        view_model = CaptureViewModel.create_from_session(capture_session, self._session_service.player_state)
        self._title_label.setText(view_model.title)
        self._types_label.setText(view_model.creature.types_text)
        for item_kind, button in self._item_buttons.items():
            button.setText(view_model.button_text(item_kind))
            button.setEnabled(view_model.can_throw(item_kind))


class BattlePanel(QWidget):
    def __init__(self, session_service: SessionService, parent: QWidget) -> None:
        super().__init__(parent)
        self._session_service = session_service
        self._init_ui()

    def _init_ui(self) -> None:
        layout = QVBoxLayout(self)
        self._opponent_label = QLabel(self)
        layout.addWidget(self._opponent_label)
        self._opponent_health = QProgressBar(self)
        layout.addWidget(self._opponent_health)
        layout.addStretch()
        layout.addWidget(QLabel(LABEL_PLAYER, self))
        self._player_health = QProgressBar(self)
        layout.addWidget(self._player_health)
        self._attack_button = QPushButton(self)
        self._attack_button.clicked.connect(self._session_service.attack)
        layout.addWidget(self._attack_button)

    def update_battle(self) -> None:
        battle_session = self._session_service.battle_session
        if battle_session is None:
            return
        view_model = BattleViewModel.create_from_session(battle_session)
        self._opponent_label.setText(view_model.opponent_title)
        self._opponent_health.setRange(0, view_model.health_max)
        self._opponent_health.setValue(view_model.opponent_health)
        self._player_health.setRange(0, view_model.health_max)
        self._player_health.setValue(view_model.player_health)
        self._attack_button.setText(view_model.attack_text)
        self._attack_button.setEnabled(view_model.attack_enabled)


class ShopPanel(QWidget):
    def __init__(self, session_service: SessionService, parent: QWidget) -> None:
        super().__init__(parent)
        self._session_service = session_service
        self._init_ui()

    def _init_ui(self) -> None:
        layout = QGridLayout(self)
        layout.setSpacing(SPACING)
        layout.addWidget(QLabel(LABEL_SHOP_TITLE, self), 0, 0)
        prices = self._session_service.shop_prices
        for row, item_kind in enumerate(ItemKind, start=1):
            layout.addWidget(QLabel(ITEM_DISPLAY_NAMES[item_kind], self), row, 0)
            button = QPushButton(f"${prices[item_kind]}", self)
            button.clicked.connect(lambda _, kind=item_kind: self._session_service.purchase(kind))
            layout.addWidget(button, row, 1)
        layout.setRowStretch(len(ItemKind) + 1, 1)


class CollectionPanel(QWidget):
    def __init__(self, session_service: SessionService, parent: QWidget) -> None:
        super().__init__(parent)
        self._session_service = session_service
        layout = QVBoxLayout(self)
        self._collection_list = QListWidget(self)
        layout.addWidget(self._collection_list)

    def update_collection(self) -> None:
        self._collection_list.clear()
        creatures = self._session_service.player_state.collected_creatures
        if not creatures:
            self._collection_list.addItem(LABEL_COLLECTION_EMPTY)
            return
        for creature in creatures:
            view_model = CreatureViewModel.create_from_record(creature)
            self._collection_list.addItem(f"{view_model.display_name} ({view_model.types_text})")
