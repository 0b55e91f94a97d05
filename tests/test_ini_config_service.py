# tests/test_ini_config_service.py
from __future__ import annotations

from pathlib import Path

import pytest

from fedit.services.config.ini_config_service import IniConfigService


def write_ini(p: Path, text: str) -> None:
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(text, encoding="utf-8")


def _home_ini(home: Path) -> Path:
    return home / ".config" / IniConfigService.DEFAULT_APP_DIR / IniConfigService.DEFAULT_FILE


def test_defaults_when_no_config_files(isolated_config_dirs):
    cfg = IniConfigService()
    assert cfg.loaded_from is None
    assert cfg.get("missing", "key", "x") == "x"
    assert cfg.get_int("editor", "nonint", 42) == 42
    assert cfg.get_bool("editor", "nope", False) is False
    assert cfg.as_dict() == {}


def test_project_root_config_is_used_when_present(isolated_config_dirs):
    proj_root = isolated_config_dirs / "repo"
    ini = proj_root / "config" / "config.ini"
    write_ini(ini, "[files]\nencoding = latin-1\n[editor]\nautosave = off\n")

    cfg = IniConfigService(project_root=proj_root)
    assert cfg.get("files", "encoding") == "latin-1"
    assert cfg.get_bool("editor", "autosave", None) is False
    assert cfg.loaded_from == ini


def test_platformdirs_preferred_over_project_root(monkeypatch, tmp_path):
    def fake_user_config_dir(appname: str) -> str:
        return str(tmp_path / "usercfg" / appname)

    monkeypatch.setattr(
        "fedit.services.config.ini_config_service.user_config_dir",
        fake_user_config_dir,
        raising=False,
    )

    plat_path = Path(fake_user_config_dir("FormatEditor")) / "config.ini"
    proj_root = tmp_path / "repo"
    write_ini(plat_path, "[files]\nencoding = utf-16\n")
    write_ini(proj_root / "config" / "config.ini", "[files]\nencoding = ascii\n")

    cfg = IniConfigService(project_root=proj_root)
    assert cfg.get("files", "encoding") == "utf-16"
    assert cfg.loaded_from == plat_path


def test_explicit_path_overrides_everything(isolated_config_dirs):
    home = isolated_config_dirs
    write_ini(_home_ini(home), "[ui]\nnotification_title = home\n")
    explicit = home / "explicit.ini"
    write_ini(explicit, "[ui]\nnotification_title = explicit\n")

    cfg = IniConfigService(explicit_path=explicit, project_root=home / "repo")
    assert cfg.get("ui", "notification_title") == "explicit"
    assert cfg.loaded_from == explicit


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("42", 42),
        ("  7  ", 7),
        ("notanint", None),
        ("", None),
    ],
)
def test_get_int_parsing(isolated_config_dirs, raw, expected):
    write_ini(_home_ini(isolated_config_dirs), f"[editor]\nremoved_words_threshold = {raw}\n")
    cfg = IniConfigService()
    assert cfg.get_int("editor", "removed_words_threshold", None) == expected


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("true", True),
        (" True ", True),
        ("yes", True),
        ("on", True),
        ("false", False),
        ("no", False),
        ("off", False),
        ("0", False),
        ("maybe", None),
        ("", None),
    ],
)
def test_get_bool_parsing(isolated_config_dirs, raw, expected):
    write_ini(_home_ini(isolated_config_dirs), f"[editor]\nautosave = {raw}\n")
    cfg = IniConfigService()
    assert cfg.get_bool("editor", "autosave", None) is expected


def test_as_dict_snapshot(isolated_config_dirs):
    write_ini(
        _home_ini(isolated_config_dirs),
        "[files]\nencoding = utf-8\n\n[logging]\nlevel = debug\n",
    )
    snap = IniConfigService().as_dict()
    assert snap == {"files": {"encoding": "utf-8"}, "logging": {"level": "debug"}}


def test_malformed_config_falls_through_to_next_candidate(isolated_config_dirs):
    home = isolated_config_dirs
    bad = _home_ini(home)
    bad.parent.mkdir(parents=True, exist_ok=True)
    bad.write_text("this is not INI at all", encoding="utf-8")
    good = home / "repo" / "config" / "config.ini"
    write_ini(good, "[files]\nencoding = ascii\n")

    cfg = IniConfigService(project_root=home / "repo")
    assert cfg.loaded_from == good
    assert cfg.get("files", "encoding") == "ascii"


def test_malformed_only_config_uses_defaults(isolated_config_dirs):
    bad = _home_ini(isolated_config_dirs)
    bad.parent.mkdir(parents=True, exist_ok=True)
    bad.write_text("[broken\n", encoding="utf-8")

    cfg = IniConfigService()
    assert cfg.loaded_from is None
    assert cfg.get("files", "encoding", "utf-8") == "utf-8"
