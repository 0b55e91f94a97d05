from __future__ import annotations


class FormatError(Exception):
    """Base class for file-format problems reported to the user."""


class UnsupportedFormatError(FormatError):
    def __init__(self, extension: str) -> None:
        super().__init__(f"Unsupported file format: {extension or '(none)'}")
        self.extension = extension


class CodecDecodeError(FormatError, ValueError):
    """Buffer content cannot be turned back into the file's bytes."""


class NoActiveFormatError(FormatError):
    def __init__(self) -> None:
        super().__init__("No file format selected; open a file first.")
