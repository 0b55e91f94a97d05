from __future__ import annotations

import base64
import binascii
import re
from pathlib import Path

from fedit.domain.errors import CodecDecodeError
from fedit.domain.interfaces import IFileService
from fedit.domain.models import Codec, FileFormat

_WHITESPACE_RE = re.compile(r"\s+")


def bytes_to_text(data: bytes) -> str:
    return base64.b64encode(data).decode("ascii")


def text_to_bytes(text: str) -> bytes:
    """Decode standard base64; whitespace anywhere in the buffer is ignored."""
    compact = _WHITESPACE_RE.sub("", text)
    try:
        return base64.b64decode(compact.encode("ascii"), validate=True)
    except (binascii.Error, UnicodeEncodeError) as e:
        raise CodecDecodeError(f"Buffer is not valid base64: {e}") from e


def binary_codec(files: IFileService) -> Codec:
    def load(path: Path) -> str:
        return bytes_to_text(files.read_bytes(path))

    def save(path: Path, text: str) -> None:
        # Decode first: an invalid buffer leaves the file untouched.
        files.write_bytes_atomic(path, text_to_bytes(text))

    return Codec(fmt=FileFormat.BINARY, load=load, save=save)
