from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PyQt6.QtWidgets import QApplication  # noqa: E402

from fedit.services.codecs.base import FormatResolver, default_resolver  # noqa: E402
from fedit.services.config.app_config import AppConfig, build_app_config  # noqa: E402
from fedit.services.file_service import FileService  # noqa: E402
from fedit.services.ui.ports.messages import Question  # noqa: E402


# --- QApplication fixture (works without pytest-qt) ---
@pytest.fixture(scope="session")
def qapp():
    """Provide a QApplication for tests that need Qt.
    Creates one if not present; reuses existing otherwise.
    """
    app = QApplication.instance()
    created = False
    if app is None:
        app = QApplication([])
        created = True
    try:
        yield app
    finally:
        if created:
            app.quit()


# --- Fakes for the UI ports ---


class RecordingSink:
    """Notification sink that remembers every message."""

    def __init__(self) -> None:
        self.messages: list[str] = []

    def notify(self, message: str) -> None:
        self.messages.append(message)


class FakeDialogs:
    def __init__(self) -> None:
        self.open_result: Path | None = None
        self.save_result: Path | None = None
        self.calls: list[tuple[str, str]] = []

    def get_open_file(self, parent: Any, caption: str, start_dir: str | None, filter_str: str):
        self.calls.append(("open", filter_str))
        return self.open_result

    def get_save_file(self, parent: Any, caption: str, start_path: str | None, filter_str: str):
        self.calls.append(("save", filter_str))
        return self.save_result


class FakeMessages:
    def __init__(self, answer: bool = True) -> None:
        self.answer = answer
        self.shown: list[tuple[str, str, str]] = []
        self.asked: list[tuple[str, str]] = []

    def info(self, parent: Any, title: str, text: str) -> None:
        self.shown.append(("info", title, text))

    def warning(self, parent: Any, title: str, text: str) -> None:
        self.shown.append(("warning", title, text))

    def error(self, parent: Any, title: str, text: str) -> None:
        self.shown.append(("error", title, text))

    def ask(self, parent: Any, title: str, text: str, kind: Question = Question.YES_NO) -> bool:
        self.asked.append((title, text))
        return self.answer


class FakeView:
    def __init__(self) -> None:
        self.text = ""
        self.title = ""
        self.status: list[str] = []

    def get_editor_text(self) -> str:
        return self.text

    def set_editor_text(self, text: str) -> None:
        self.text = text

    def set_title(self, title: str) -> None:
        self.title = title

    def show_status(self, text: str, msec: int = 3000) -> None:
        self.status.append(text)


# --- Common fixtures ---


@pytest.fixture()
def isolated_config_dirs(monkeypatch, tmp_path: Path) -> Path:
    """Keep IniConfigService away from the real user config directory."""
    monkeypatch.setattr(
        "fedit.services.config.ini_config_service.user_config_dir", None, raising=False
    )
    monkeypatch.setenv("HOME", str(tmp_path))
    return tmp_path


@pytest.fixture()
def app_config(isolated_config_dirs: Path) -> AppConfig:
    return build_app_config(project_root=isolated_config_dirs / "repo")


@pytest.fixture()
def file_service() -> FileService:
    return FileService()


@pytest.fixture()
def resolver(file_service: FileService) -> FormatResolver:
    return default_resolver(file_service)


@pytest.fixture()
def sink() -> RecordingSink:
    return RecordingSink()


@pytest.fixture()
def dialogs() -> FakeDialogs:
    return FakeDialogs()


@pytest.fixture()
def messages() -> FakeMessages:
    return FakeMessages()


@pytest.fixture()
def view() -> FakeView:
    return FakeView()
