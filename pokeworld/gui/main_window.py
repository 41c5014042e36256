import logging
from typing import Any

from PyQt6.QtWidgets import QHBoxLayout, QLabel, QMainWindow, QPushButton, QStackedWidget, QVBoxLayout, QWidget

from pokeworld.constants import (
    BUTTON_COLLECTION,
    BUTTON_MAP,
    BUTTON_SHOP,
    MAIN_WINDOW_TITLE,
    OBJECT_NAME_NOTIFICATION,
    STYLE_SHEET_NOTIFICATION,
)
from pokeworld.container import Container
from pokeworld.gui.nearby_worker import NearbyWorker
from pokeworld.gui.panels import BattlePanel, CapturePanel, CollectionPanel, MapPanel, ShopPanel
from pokeworld.models.models import Coordinate, CreatureRecord, EventType, TrainerRecord
from pokeworld.models.view_models import PlayerViewModel
from pokeworld.services.location_service import LocationProvider
from pokeworld.services.session_service import SessionService

LOGGER = logging.getLogger(__name__)


class PokeWorldMainWindow(QMainWindow):
    def __init__(self, container: Container, session_service: SessionService) -> None:
        super().__init__()
        self.setWindowTitle(MAIN_WINDOW_TITLE)
        self._container = container
        self._event_manager = self._container.event_manager()
        self._event_manager.subscribe(EventType.BATTLE_ENDED, self._on_session_ended)
        self._event_manager.subscribe(EventType.BATTLE_STARTED, self._on_battle_changed)
        self._event_manager.subscribe(EventType.BATTLE_UPDATED, self._on_battle_changed)
        self._event_manager.subscribe(EventType.CAPTURE_ENDED, self._on_session_ended)
        self._event_manager.subscribe(EventType.CAPTURE_STARTED, self._on_capture_changed)
        self._event_manager.subscribe(EventType.COLLECTION_CHANGED, self._on_collection_changed)
        self._event_manager.subscribe(EventType.LEDGER_CHANGED, self._on_ledger_changed)
        self._event_manager.subscribe(EventType.LOCATION_CHANGED, self._on_nearby_changed)
        self._event_manager.subscribe(EventType.NEARBY_UPDATED, self._on_nearby_changed)
        self._event_manager.subscribe(EventType.NOTIFICATION_CHANGED, self._on_notification_changed)
        self._event_manager.subscribe(EventType.RECENTER_REQUESTED, self._on_recenter_requested)
        self._nearby_worker: NearbyWorker | None = None
        self._session_service = session_service
        self._init_ui()
        self._refresh_header()
        self._collection_panel.update_collection()
        self._map_panel.update_nearby()

    def _create_header(self) -> QWidget:
        header = QWidget(self)
        layout = QHBoxLayout(header)
        layout.addWidget(QLabel(MAIN_WINDOW_TITLE, header))
        layout.addStretch()
        self._currency_label = QLabel(header)
        layout.addWidget(self._currency_label)
        self._inventory_label = QLabel(header)
        layout.addWidget(self._inventory_label)
        return header

    def _create_navigation(self) -> QWidget:
        navigation = QWidget(self)
        layout = QHBoxLayout(navigation)
        for text, page in (
            (BUTTON_MAP, self._map_panel),
            (BUTTON_SHOP, self._shop_panel),
            (BUTTON_COLLECTION, self._collection_panel),
        ):
            button = QPushButton(text, navigation)
            button.clicked.connect(lambda _, target=page: self._navigate(target))
            layout.addWidget(button)
        return navigation

    def _init_ui(self) -> None:
        central_widget = QWidget(self)
        layout = QVBoxLayout(central_widget)
        layout.addWidget(self._create_header())
        self._notification_label = QLabel(central_widget)
        self._notification_label.setObjectName(OBJECT_NAME_NOTIFICATION)
        self._notification_label.setStyleSheet(STYLE_SHEET_NOTIFICATION)
        self._notification_label.hide()
        layout.addWidget(self._notification_label)
        self._pages = QStackedWidget(central_widget)
        self._map_panel = MapPanel(self._session_service, self._pages)
        self._map_panel.refresh_requested.connect(self.start_refresh)
        self._capture_panel = CapturePanel(self._session_service, self._pages)
        self._battle_panel = BattlePanel(self._session_service, self._pages)
        self._shop_panel = ShopPanel(self._session_service, self._pages)
        self._collection_panel = CollectionPanel(self._session_service, self._pages)
        for page in (
            self._map_panel,
            self._capture_panel,
            self._battle_panel,
            self._shop_panel,
            self._collection_panel,
        ):
            self._pages.addWidget(page)
        layout.addWidget(self._pages, stretch=1)
        layout.addWidget(self._create_navigation())
        self.setCentralWidget(central_widget)

    def _navigate(self, page: QWidget) -> None:
        if self._session_service.active_session is not None:
            self._session_service.abandon_session()
        self._pages.setCurrentWidget(page)

    def _on_battle_changed(self, _: dict[str, Any]) -> None:
        self._battle_panel.update_battle()
        self._pages.setCurrentWidget(self._battle_panel)

    def _on_capture_changed(self, _: dict[str, Any]) -> None:
        self._capture_panel.update_capture()
        self._pages.setCurrentWidget(self._capture_panel)

    def _on_collection_changed(self, _: dict[str, Any]) -> None:
        self._collection_panel.update_collection()

    def _on_ledger_changed(self, _: dict[str, Any]) -> None:
        self._refresh_header()
        self._capture_panel.update_capture()

    def _on_nearby_changed(self, _: dict[str, Any]) -> None:
        self._map_panel.update_nearby()

    def _on_nearby_generated(
        self,
        center: Coordinate,
        creatures: list[CreatureRecord],
        trainers: list[TrainerRecord],
    ) -> None:
        self._session_service.apply_nearby(center, creatures, trainers)

    def _on_notification_changed(self, data: dict[str, Any]) -> None:
        message = data.get("message")
        self._notification_label.setText(message or "")
        self._notification_label.setVisible(bool(message))

    def _on_recenter_requested(self, data: dict[str, Any]) -> None:
        LOGGER.info("Recentering on %s", data["location"])
        self._map_panel.scroll_to_top()
        self._pages.setCurrentWidget(self._map_panel)

    def _on_refresh_finished(self) -> None:
        if self._nearby_worker is not None:
            self._nearby_worker.deleteLater()
            self._nearby_worker = None
        self._map_panel.set_refresh_enabled(True)

    def _on_session_ended(self, _: dict[str, Any]) -> None:
        self._pages.setCurrentWidget(self._map_panel)

    def _refresh_header(self) -> None:
        view_model = PlayerViewModel.create_from_state(self._session_service.player_state)
        self._currency_label.setText(view_model.currency_text)
        self._inventory_label.setText(view_model.inventory_text)

    def start_refresh(self, location_provider: LocationProvider | None = None) -> None:
        if self._nearby_worker is not None:
            LOGGER.debug("Nearby generation already running")
            return
        self._map_panel.set_refresh_enabled(False)
        self._nearby_worker = NearbyWorker(self._session_service, self, location_provider)
        self._nearby_worker.generated.connect(self._on_nearby_generated)
        self._nearby_worker.finished.connect(self._on_refresh_finished)
        self._nearby_worker.start()
