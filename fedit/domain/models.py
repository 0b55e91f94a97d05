from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class FileFormat(Enum):
    TEXT = "text"
    HTML = "html"
    BINARY = "binary"


@dataclass(frozen=True)
class Codec:
    """Load/save pair for one file format. Stateless per call."""

    fmt: FileFormat
    load: Callable[[Path], str]
    save: Callable[[Path, str], None]


@dataclass
class EditorSession:
    path: Path | None = None
    codec: Codec | None = None
    buffer: str = ""
    previous_paragraph_count: int = 0

    @property
    def can_save(self) -> bool:
        return self.codec is not None
