from __future__ import annotations

import re
from pathlib import Path

from fedit.domain.interfaces import IFileService
from fedit.domain.models import Codec, FileFormat
from fedit.utils.constants import HTML_DOCUMENT

_TAG_RE = re.compile(r"<[^>]+>")
_BREAKING_TAGS = ("<p", "<br")


def _replace_tag(match: re.Match[str]) -> str:
    tag = match.group(0).lower()
    return "\n" if any(t in tag for t in _BREAKING_TAGS) else ""


def html_to_text(markup: str) -> str:
    """
    Strip tags by pattern, not by parsing. Paragraph and line-break tags become
    newlines, everything else is dropped; entities are left untouched.
    """
    return _TAG_RE.sub(_replace_tag, markup).strip()


def text_to_html(text: str) -> str:
    # No escaping: literal '<', '>' and '&' pass through as-is.
    return HTML_DOCUMENT.format(body=text.replace("\n", "</p>\n<p>"))


def html_codec(files: IFileService) -> Codec:
    def load(path: Path) -> str:
        return html_to_text(files.read_text(path))

    def save(path: Path, text: str) -> None:
        files.write_text_atomic(path, text_to_html(text))

    return Codec(fmt=FileFormat.HTML, load=load, save=save)
