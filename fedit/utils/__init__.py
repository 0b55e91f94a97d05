"""App constants and utilities."""

from .constants import (
    APP_NAME,
    APP_ORG,
    CONFIG_APP_DIR,
    HTML_DOCUMENT,
    NOTIFICATION_TITLE,
)
from .logging_setup import configure_logging

__all__ = [
    "APP_ORG",
    "APP_NAME",
    "CONFIG_APP_DIR",
    "HTML_DOCUMENT",
    "NOTIFICATION_TITLE",
    "configure_logging",
]
