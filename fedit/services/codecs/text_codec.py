from __future__ import annotations

from fedit.domain.interfaces import IFileService
from fedit.domain.models import Codec, FileFormat


def text_codec(files: IFileService) -> Codec:
    """Plain text: read and write the buffer verbatim."""
    return Codec(fmt=FileFormat.TEXT, load=files.read_text, save=files.write_text_atomic)
