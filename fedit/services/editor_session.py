from __future__ import annotations

import logging
from pathlib import Path

from fedit.domain.errors import NoActiveFormatError
from fedit.domain.interfaces import INotificationSink
from fedit.domain.models import Codec, EditorSession, FileFormat
from fedit.services.change_tracker import ChangeTracker
from fedit.services.codecs.base import FormatResolver
from fedit.utils.constants import MSG_AUTOSAVE_ERROR, MSG_AUTOSAVED

logger = logging.getLogger(__name__)


def paragraph_count(text: str) -> int:
    return len(text.split("\n"))


class EditorSessionService:
    """
    Owns the editor session state and runs the three core operations:
    open, save and on_buffer_changed (word tracking + paragraph autosave).

    Open/save errors propagate to the caller; autosave errors are reported
    through the notification sink and swallowed.
    """

    def __init__(
        self,
        resolver: FormatResolver,
        sink: INotificationSink,
        *,
        tracker: ChangeTracker | None = None,
        autosave: bool = True,
    ) -> None:
        self._resolver = resolver
        self._sink = sink
        self._tracker = tracker or ChangeTracker(sink)
        self._autosave = autosave
        self.session = EditorSession()

    @property
    def tracker(self) -> ChangeTracker:
        return self._tracker

    @property
    def active_format(self) -> FileFormat | None:
        codec = self.session.codec
        return codec.fmt if codec else None

    # ---------- operations ----------

    def open(self, path: Path) -> str:
        codec = self._resolver.resolve_path(path)
        text = codec.load(path)

        s = self.session
        s.path = path
        s.codec = codec
        s.buffer = text
        s.previous_paragraph_count = paragraph_count(text)
        self._tracker.reset(text)
        logger.info("Opened %s as %s", path, codec.fmt.value)
        return text

    def save(self, path: Path) -> None:
        codec = self._require_codec()
        codec.save(path, self.session.buffer)
        self.session.path = path
        logger.info("Saved %s as %s", path, codec.fmt.value)

    def choose_format(self, fmt: FileFormat) -> Codec:
        codec = self._resolver.for_format(fmt)
        s = self.session
        if s.path is not None and self.active_format is not fmt:
            # The open file was written in another format; autosave waits for an explicit save.
            logger.info("Format changed; detaching %s until next save", s.path)
            s.path = None
        s.codec = codec
        logger.info("Format set to %s", fmt.value)
        return codec

    def on_buffer_changed(self, text: str) -> None:
        s = self.session
        s.buffer = text
        self._tracker.check(text)

        count = paragraph_count(text)
        if (
            self._autosave
            and count > s.previous_paragraph_count
            and s.codec is not None
            and s.path is not None
        ):
            self._autosave_now(s.codec, s.path, text)
        s.previous_paragraph_count = count

    # ---------- helpers ----------

    def _require_codec(self) -> Codec:
        if self.session.codec is None:
            raise NoActiveFormatError()
        return self.session.codec

    def _autosave_now(self, codec: Codec, path: Path, text: str) -> None:
        try:
            codec.save(path, text)
        except Exception as e:
            logger.warning("Autosave to %s failed: %s", path, e)
            self._sink.notify(MSG_AUTOSAVE_ERROR.format(error=e))
            return
        logger.info("Autosaved %s", path)
        self._sink.notify(MSG_AUTOSAVED)
