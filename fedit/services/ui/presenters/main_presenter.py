from __future__ import annotations

import logging
from pathlib import Path
from typing import Protocol, runtime_checkable

from fedit.domain.errors import FormatError, UnsupportedFormatError
from fedit.domain.models import FileFormat
from fedit.services.codecs.base import FormatResolver
from fedit.services.editor_session import EditorSessionService
from fedit.services.ui.ports.dialogs import IFileDialogService
from fedit.services.ui.ports.messages import IMessageService
from fedit.utils.constants import (
    MSG_CONFIRM_SAVE,
    MSG_LOAD_ERROR,
    MSG_OPEN_FIRST,
    MSG_SAVE_ERROR,
    MSG_SAVED,
    MSG_UNSUPPORTED,
)

logger = logging.getLogger(__name__)


@runtime_checkable
class IMainView(Protocol):
    """Very small surface for a passive view (implemented by the Qt MainWindow)."""

    def get_editor_text(self) -> str: ...

    def set_editor_text(self, text: str) -> None:
        """Replace the buffer without firing the change hook."""
        ...

    def set_title(self, title: str) -> None: ...
    def show_status(self, text: str, msec: int = 3000) -> None: ...


class MainPresenter:
    """
    Drives the editor session from user actions. Every failure stops here:
    explicit open/save errors become blocking messages, never exceptions.
    """

    def __init__(
        self,
        view: IMainView,
        session: EditorSessionService,
        resolver: FormatResolver,
        messages: IMessageService,
        dialogs: IFileDialogService,
        *,
        app_title: str = "Format Editor",
    ) -> None:
        self.view = view
        self.session = session
        self.resolver = resolver
        self.messages = messages
        self.dialogs = dialogs
        self.app_title = app_title

    # ---------- open ----------

    def open_via_dialog(self) -> bool:
        path = self.dialogs.get_open_file(self.view, "Open", None, self.resolver.file_filter())
        if path is None:
            return False
        return self.open_path(path)

    def open_path(self, path: Path) -> bool:
        try:
            text = self.session.open(path)
        except UnsupportedFormatError as e:
            logger.warning("Open rejected: %s", e)
            self.messages.warning(self.view, "Open", MSG_UNSUPPORTED)
            return False
        except (OSError, UnicodeError) as e:
            logger.error("Failed to load %s: %s", path, e)
            self.messages.error(self.view, "Open Error", MSG_LOAD_ERROR.format(error=e))
            return False

        self.view.set_editor_text(text)
        self.refresh_title()
        self.view.show_status(f"Opened: {path}")
        return True

    # ---------- save ----------

    def save_via_dialog(self) -> bool:
        s = self.session.session
        if not s.can_save:
            self.messages.warning(self.view, "Save", MSG_OPEN_FIRST)
            return False

        start = str(s.path) if s.path else None
        path = self.dialogs.get_save_file(self.view, "Save", start, self.resolver.file_filter())
        if path is None:
            return False

        if not self.messages.ask(self.view, "Confirm Save", MSG_CONFIRM_SAVE.format(name=path.name)):
            return False

        # The view is the source of truth for the buffer at save time.
        s.buffer = self.view.get_editor_text()
        try:
            self.session.save(path)
        except (OSError, UnicodeError, FormatError) as e:
            logger.error("Failed to save %s: %s", path, e)
            self.messages.error(self.view, "Save Error", MSG_SAVE_ERROR.format(error=e))
            return False

        self.refresh_title()
        self.messages.info(self.view, "Save", MSG_SAVED)
        return True

    # ---------- format / edits ----------

    def choose_format(self, fmt: FileFormat) -> None:
        self.session.choose_format(fmt)
        self.refresh_title()

    def on_text_changed(self) -> None:
        self.session.on_buffer_changed(self.view.get_editor_text())

    def refresh_title(self) -> None:
        s = self.session.session
        name = s.path.name if s.path else "Untitled"
        fmt = self.session.active_format
        tag = f" [{fmt.value}]" if fmt else ""
        self.view.set_title(f"{name}{tag} — {self.app_title}")
