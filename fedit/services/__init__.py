"""Concrete services: file access, codecs, change tracking and the editor session."""

from .change_tracker import ChangeTracker
from .editor_session import EditorSessionService
from .file_service import FileService

__all__ = ["ChangeTracker", "EditorSessionService", "FileService"]
