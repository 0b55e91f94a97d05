import dataclasses

import pytest

from fedit.domain.errors import CodecDecodeError, FormatError, NoActiveFormatError, UnsupportedFormatError
from fedit.domain.models import Codec, EditorSession, FileFormat


def test_session_defaults():
    s = EditorSession()
    assert s.path is None
    assert s.codec is None
    assert s.buffer == ""
    assert s.previous_paragraph_count == 0
    assert s.can_save is False


def test_session_can_save_once_a_codec_is_set():
    codec = Codec(fmt=FileFormat.TEXT, load=lambda p: "", save=lambda p, t: None)
    s = EditorSession(codec=codec)
    assert s.can_save is True


def test_codec_is_frozen():
    codec = Codec(fmt=FileFormat.TEXT, load=lambda p: "", save=lambda p, t: None)
    with pytest.raises(dataclasses.FrozenInstanceError):
        codec.fmt = FileFormat.HTML  # type: ignore[misc]


def test_error_hierarchy():
    assert issubclass(UnsupportedFormatError, FormatError)
    assert issubclass(NoActiveFormatError, FormatError)
    assert issubclass(CodecDecodeError, ValueError)
    assert str(UnsupportedFormatError(".md")) == "Unsupported file format: .md"
    assert str(UnsupportedFormatError("")) == "Unsupported file format: (none)"
