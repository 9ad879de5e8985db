"""Editor state machine, message log and file collaborator."""

from .files import (
    EditorError,
    FileOperationError,
    FileSystem,
    LocalFileSystem,
    NoFileSpecified,
)
from .messages import MessageLog
from .state import EditorState, EditorView

__all__ = [
    "EditorError",
    "EditorState",
    "EditorView",
    "FileOperationError",
    "FileSystem",
    "LocalFileSystem",
    "MessageLog",
    "NoFileSpecified",
]
