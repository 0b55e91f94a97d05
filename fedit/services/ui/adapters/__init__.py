from __future__ import annotations

from .qt_dialogs import QtFileDialogService
from .qt_messages import QtMessageService
from .qt_notifications import QtNotificationSink

__all__ = [
    "QtFileDialogService",
    "QtMessageService",
    "QtNotificationSink",
]
