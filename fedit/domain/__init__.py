"""Domain layer: interfaces, errors and simple models (dataclasses)."""

from .errors import CodecDecodeError, FormatError, NoActiveFormatError, UnsupportedFormatError
from .interfaces import IAppConfig, IConfigService, IFileService, INotificationSink
from .models import Codec, EditorSession, FileFormat

__all__ = [
    "IFileService",
    "INotificationSink",
    "IConfigService",
    "IAppConfig",
    "Codec",
    "EditorSession",
    "FileFormat",
    "FormatError",
    "UnsupportedFormatError",
    "CodecDecodeError",
    "NoActiveFormatError",
]
