from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Protocol, runtime_checkable


class IFileService(Protocol):
    """Read/write files. Writes should be atomic when possible."""

    def read_text(self, path: Path) -> str: ...
    def write_text_atomic(self, path: Path, text: str) -> None: ...
    def read_bytes(self, path: Path) -> bytes: ...
    def write_bytes_atomic(self, path: Path, data: bytes) -> None: ...


@runtime_checkable
class INotificationSink(Protocol):
    """Consumes one-line notification messages (dialog, log, test recorder)."""

    def notify(self, message: str) -> None: ...


class IConfigService(Protocol):
    """Read-only access to INI style configuration."""

    def get(self, section: str, key: str, default: str | None = None) -> str | None: ...
    def get_int(self, section: str, key: str, default: int | None = None) -> int | None: ...
    def get_bool(self, section: str, key: str, default: bool | None = None) -> bool | None: ...
    def as_dict(self) -> Mapping[str, Mapping[str, str]]: ...


class IAppConfig(Protocol):
    """Typed editor settings on top of IConfigService."""

    @property
    def encoding(self) -> str: ...

    @property
    def autosave_enabled(self) -> bool: ...

    @property
    def removed_words_threshold(self) -> int: ...

    @property
    def notification_title(self) -> str: ...

    @property
    def log_level(self) -> str: ...
