from __future__ import annotations

import sys
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from fedit.domain.interfaces import IAppConfig
from fedit.services.config.ini_config_service import IniConfigService
from fedit.utils.constants import NOTIFICATION_TITLE


def _project_root_fallback() -> Path:
    """
    Project root for the optional <root>/config/config.ini:
      - PyInstaller bundles expose sys._MEIPASS
      - dev mode walks up from this file (fedit/services/config/app_config.py)
    """
    meipass = getattr(sys, "_MEIPASS", None)  # type: ignore[attr-defined]
    if meipass:
        return Path(meipass)
    return Path(__file__).resolve().parents[3]


@dataclass(frozen=True)
class AppConfig(IAppConfig):
    """
    Typed editor settings over IniConfigService.

      [files]   encoding = utf-8
      [editor]  autosave = true, removed_words_threshold = 1
      [ui]      notification_title = Text Editor Notification
      [logging] level = INFO
    """

    ini: IniConfigService

    @property
    def encoding(self) -> str:
        return (self.ini.get("files", "encoding") or "utf-8").strip() or "utf-8"

    @property
    def autosave_enabled(self) -> bool:
        return bool(self.ini.get_bool("editor", "autosave", True))

    @property
    def removed_words_threshold(self) -> int:
        v = self.ini.get_int("editor", "removed_words_threshold", 1)
        return v if v is not None and v >= 0 else 1

    @property
    def notification_title(self) -> str:
        return self.ini.get("ui", "notification_title") or NOTIFICATION_TITLE

    @property
    def log_level(self) -> str:
        return (self.ini.get("logging", "level") or "INFO").strip().upper()

    def as_dict(self) -> Mapping[str, Mapping[str, str]]:
        return self.ini.as_dict()

    @property
    def loaded_from(self) -> Path | None:
        return self.ini.loaded_from


def build_app_config(
    *, explicit_ini: Path | None = None, project_root: Path | None = None
) -> AppConfig:
    root = project_root or _project_root_fallback()
    return AppConfig(ini=IniConfigService(explicit_path=explicit_ini, project_root=root))
