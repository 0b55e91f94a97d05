from __future__ import annotations

import logging
from collections.abc import Sequence

from PyQt6.QtWidgets import QApplication

from fedit.di.container import Container
from fedit.services.config.app_config import build_app_config
from fedit.utils.constants import APP_NAME, APP_ORG
from fedit.utils.logging_setup import configure_logging

logger = logging.getLogger(__name__)


def run_app(argv: Sequence[str]) -> int:
    """
    Bootstraps Qt, composes the application via the DI container,
    and launches the main window.
    """
    config = build_app_config()
    configure_logging(config.log_level)
    if config.loaded_from:
        logger.info("Configuration loaded from %s", config.loaded_from)

    QApplication.setOrganizationName(APP_ORG)
    QApplication.setApplicationName(APP_NAME)
    app = QApplication(list(argv))

    container = Container(config=config)
    win = container.build_main_window(app_title=APP_NAME)
    win.show()

    return app.exec()
