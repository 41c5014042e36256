import logging
import sys
from platform import python_version

from dependency_injector import providers
from PyQt6.QtWidgets import QApplication

from pokeworld import __version__
from pokeworld.container import Container
from pokeworld.gui.main_window import PokeWorldMainWindow
from pokeworld.gui.qt_scheduler import QtScheduler
from pokeworld.services.location_service import IpLocationProvider
from pokeworld.services.session_service import SessionService
from pokeworld.utils.logs import setup_logging

LOGGER = logging.getLogger(__name__)


def main() -> None:
    setup_logging(logging.WARNING)
    LOGGER.info("Python v%s", python_version())
    LOGGER.info("PokeWorld v%s", __version__)
    container = Container()
    container.scheduler.override(providers.Singleton(QtScheduler))
    app = QApplication(sys.argv)
    config = container.config()
    session_service = SessionService(container)
    window = PokeWorldMainWindow(container, session_service)
    window.show()
    window.start_refresh(IpLocationProvider(config.location_url, config.location_timeout))
    app.exec()


if __name__ == "__main__":
    main()
