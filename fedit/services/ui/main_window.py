from __future__ import annotations

from PyQt6.QtGui import QAction, QActionGroup, QKeySequence
from PyQt6.QtWidgets import QMainWindow, QStatusBar, QTextEdit, QToolBar

from fedit.domain.models import FileFormat
from fedit.services.ui.presenters.main_presenter import MainPresenter

_FORMAT_LABELS = {
    FileFormat.TEXT: "Plain text",
    FileFormat.HTML: "HTML",
    FileFormat.BINARY: "Binary (base64)",
}


class MainWindow(QMainWindow):
    """Thin PyQt window; all decisions are delegated to the attached presenter."""

    def __init__(self, *, app_title: str = "Format Editor") -> None:
        super().__init__()
        self.setWindowTitle(app_title)
        self.resize(900, 600)

        self._presenter: MainPresenter | None = None

        self.editor = QTextEdit(self)
        self.editor.setAcceptRichText(False)
        self.setCentralWidget(self.editor)

        self.editor.textChanged.connect(self._on_text_changed)

        self._build_actions()
        self._build_toolbar()
        self._build_menu()
        self.setStatusBar(QStatusBar(self))

    def attach_presenter(self, presenter: MainPresenter) -> None:
        self._presenter = presenter
        presenter.refresh_title()

    # ---------- UI creation ----------
    def _build_actions(self):
        self.act_open = QAction(
            "Open…", self, shortcut=QKeySequence.StandardKey.Open, triggered=self._open
        )
        self.act_save = QAction(
            "Save…", self, shortcut=QKeySequence.StandardKey.Save, triggered=self._save
        )
        self.act_quit = QAction(
            "Quit", self, shortcut=QKeySequence.StandardKey.Quit, triggered=self.close
        )

        self.format_group = QActionGroup(self)
        self.format_group.setExclusive(True)
        self.format_actions: dict[FileFormat, QAction] = {}
        for fmt, label in _FORMAT_LABELS.items():
            act = QAction(
                label,
                self,
                checkable=True,
                triggered=lambda chk=False, f=fmt: self._choose_format(f),
            )
            self.format_group.addAction(act)
            self.format_actions[fmt] = act

    def _build_toolbar(self):
        tb = QToolBar("Main", self)
        tb.setMovable(False)
        tb.addAction(self.act_open)
        tb.addAction(self.act_save)
        self.addToolBar(tb)

    def _build_menu(self):
        m = self.menuBar()
        filem = m.addMenu("&File")
        filem.addAction(self.act_open)
        filem.addAction(self.act_save)
        filem.addSeparator()
        filem.addAction(self.act_quit)

        formatm = m.addMenu("F&ormat")
        for act in self.format_actions.values():
            formatm.addAction(act)

    # ---------- IMainView ----------
    def get_editor_text(self) -> str:
        return self.editor.toPlainText()

    def set_editor_text(self, text: str) -> None:
        self.editor.blockSignals(True)
        try:
            self.editor.setPlainText(text)
        finally:
            self.editor.blockSignals(False)

    def set_title(self, title: str) -> None:
        self.setWindowTitle(title)

    def show_status(self, text: str, msec: int = 3000) -> None:
        self.statusBar().showMessage(text, msec)

    # ---------- Actions ----------
    def _open(self):
        if self._presenter and self._presenter.open_via_dialog():
            self._sync_format_actions()

    def _save(self):
        if self._presenter:
            self._presenter.save_via_dialog()

    def _choose_format(self, fmt: FileFormat):
        if self._presenter:
            self._presenter.choose_format(fmt)

    def _on_text_changed(self):
        if self._presenter:
            self._presenter.on_text_changed()

    def _sync_format_actions(self):
        fmt = self._presenter.session.active_format if self._presenter else None
        for f, act in self.format_actions.items():
            act.setChecked(f is fmt)
