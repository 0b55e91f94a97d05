from __future__ import annotations

from fedit.domain.interfaces import IAppConfig, IFileService, INotificationSink
from fedit.services.change_tracker import ChangeTracker
from fedit.services.codecs.base import FormatResolver, default_resolver
from fedit.services.config.app_config import build_app_config
from fedit.services.editor_session import EditorSessionService
from fedit.services.file_service import FileService
from fedit.services.ui.adapters import QtFileDialogService, QtMessageService, QtNotificationSink
from fedit.services.ui.main_window import MainWindow
from fedit.services.ui.ports.dialogs import IFileDialogService
from fedit.services.ui.ports.messages import IMessageService
from fedit.services.ui.presenters.main_presenter import MainPresenter
from fedit.utils.constants import APP_NAME


class Container:
    """
    Lightweight DI container:
      - wires default services from config when not provided
      - builds one editor session per window
      - attaches the presenter to the window it builds
    """

    def __init__(
        self,
        config: IAppConfig | None = None,
        files: IFileService | None = None,
        resolver: FormatResolver | None = None,
        dialogs: IFileDialogService | None = None,
        messages: IMessageService | None = None,
        notifications: INotificationSink | None = None,
    ) -> None:
        self.config: IAppConfig = config or build_app_config()
        self.file_service: IFileService = files or FileService(encoding=self.config.encoding)
        self.resolver: FormatResolver = resolver or default_resolver(self.file_service)

        self.dialogs: IFileDialogService = dialogs or QtFileDialogService()
        self.messages: IMessageService = messages or QtMessageService()
        self.notifications: INotificationSink = notifications or QtNotificationSink(
            title=self.config.notification_title
        )

    @staticmethod
    def default() -> Container:
        return Container()

    # ---------- factories ----------

    def build_session(self) -> EditorSessionService:
        tracker = ChangeTracker(
            self.notifications, threshold=self.config.removed_words_threshold
        )
        return EditorSessionService(
            self.resolver,
            self.notifications,
            tracker=tracker,
            autosave=self.config.autosave_enabled,
        )

    def build_main_window(self, *, app_title: str = APP_NAME) -> MainWindow:
        window = MainWindow(app_title=app_title)
        if isinstance(self.notifications, QtNotificationSink) and self.notifications.parent is None:
            self.notifications.parent = window

        presenter = MainPresenter(
            view=window,
            session=self.build_session(),
            resolver=self.resolver,
            messages=self.messages,
            dialogs=self.dialogs,
            app_title=app_title,
        )
        window.attach_presenter(presenter)
        return window
