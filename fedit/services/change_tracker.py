from __future__ import annotations

import re

from fedit.domain.interfaces import INotificationSink
from fedit.utils.constants import MSG_REMOVED_WORDS

_WORD_SPLIT_RE = re.compile(r"\s+")


def count_words(text: str) -> int:
    """Number of segments between whitespace runs (leading/trailing runs count too)."""
    return len(_WORD_SPLIT_RE.split(text))


class ChangeTracker:
    """Compare each buffer change with the previous one and report removed words."""

    def __init__(self, sink: INotificationSink, *, threshold: int = 1) -> None:
        self._sink = sink
        self._threshold = threshold
        self._baseline = ""

    @property
    def baseline(self) -> str:
        return self._baseline

    def reset(self, text: str = "") -> None:
        self._baseline = text

    def check(self, text: str) -> int:
        """Record `text` as the new baseline; return the words removed since the last one."""
        deleted = 0
        if self._baseline:
            deleted = count_words(self._baseline) - count_words(text)
            if deleted > self._threshold:
                self._sink.notify(MSG_REMOVED_WORDS.format(count=deleted))
        self._baseline = text
        return deleted
