from __future__ import annotations

import logging
from typing import Any

from PyQt6.QtWidgets import QMessageBox

from fedit.domain.interfaces import INotificationSink
from fedit.utils.constants import NOTIFICATION_TITLE

logger = logging.getLogger(__name__)


class QtNotificationSink(INotificationSink):
    """Show each notification in an information box; the parent can be bound after the window exists."""

    def __init__(self, parent: Any | None = None, title: str = NOTIFICATION_TITLE) -> None:
        self.parent = parent
        self.title = title

    def notify(self, message: str) -> None:
        logger.info("Notification: %s", message)
        QMessageBox.information(self.parent, self.title, message)
