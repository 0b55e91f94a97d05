from __future__ import annotations

import logging
from pathlib import Path

from PyQt6.QtCore import QIODevice, QSaveFile

from fedit.domain.interfaces import IFileService

logger = logging.getLogger(__name__)


class FileService(IFileService):
    """Blocking reads and atomic (QSaveFile) writes for text and raw bytes."""

    def __init__(self, encoding: str = "utf-8") -> None:
        self.encoding = encoding

    def read_text(self, path: Path) -> str:
        # newline="" keeps \r\n and lone \r exactly as stored.
        with path.open("r", encoding=self.encoding, newline="") as fh:
            return fh.read()

    def write_text_atomic(self, path: Path, text: str) -> None:
        self.write_bytes_atomic(path, text.encode(self.encoding))

    def read_bytes(self, path: Path) -> bytes:
        return path.read_bytes()

    def write_bytes_atomic(self, path: Path, data: bytes) -> None:
        sf = QSaveFile(str(path))
        if not sf.open(QIODevice.OpenModeFlag.WriteOnly):
            raise OSError(f"Cannot open for write: {path}")
        sf.write(data)
        if not sf.commit():
            raise OSError(f"Commit failed for: {path}")
        logger.debug("Wrote %d bytes to %s", len(data), path)
