from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from fedit.domain.errors import UnsupportedFormatError
from fedit.domain.interfaces import IFileService
from fedit.domain.models import Codec, FileFormat

from .binary_codec import binary_codec
from .html_codec import html_codec
from .text_codec import text_codec

_LABELS: dict[FileFormat, str] = {
    FileFormat.TEXT: "Text",
    FileFormat.HTML: "HTML",
    FileFormat.BINARY: "Binary",
}


@dataclass
class FormatResolver:
    """
    Instance-based extension -> codec lookup (no globals, no side-effects).
    Extensions are stored lowercase and include the leading dot.
    """

    _by_ext: dict[str, Codec] = field(default_factory=dict)

    def register(self, extension: str, codec: Codec) -> None:
        self._by_ext[extension.lower()] = codec

    def resolve(self, extension: str) -> Codec:
        try:
            return self._by_ext[extension.lower()]
        except KeyError:
            raise UnsupportedFormatError(extension) from None

    def resolve_path(self, path: Path) -> Codec:
        return self.resolve(path.suffix)

    def for_format(self, fmt: FileFormat) -> Codec:
        for codec in self._by_ext.values():
            if codec.fmt is fmt:
                return codec
        raise UnsupportedFormatError(fmt.value)

    def extensions(self) -> list[str]:
        return list(self._by_ext)

    def file_filter(self) -> str:
        """Qt file dialog filter: all supported first, then one entry per format."""
        patterns = " ".join(f"*{ext}" for ext in self._by_ext)
        parts = [f"Supported files ({patterns})"]
        for ext, codec in self._by_ext.items():
            parts.append(f"{_LABELS.get(codec.fmt, codec.fmt.value)} (*{ext})")
        parts.append("All files (*)")
        return ";;".join(parts)


def default_resolver(files: IFileService) -> FormatResolver:
    resolver = FormatResolver()
    resolver.register(".html", html_codec(files))
    resolver.register(".txt", text_codec(files))
    resolver.register(".bin", binary_codec(files))
    return resolver
