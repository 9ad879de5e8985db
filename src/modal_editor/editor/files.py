"""Filesystem collaborator and the recoverable editor errors."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol


class EditorError(RuntimeError):
    """Base class for failures the editor turns into status messages."""


class NoFileSpecified(EditorError):
    """Raised when a prompt is confirmed with an empty path."""

    def __init__(self) -> None:
        super().__init__("No file specified")


class FileOperationError(EditorError):
    """Wraps the I/O failure behind a read or write."""

    def __init__(self, path: str, cause: Exception) -> None:
        super().__init__(f"IO error: {cause}")
        self.path = path
        self.cause = cause

    @property
    def not_found(self) -> bool:
        return isinstance(self.cause, FileNotFoundError)


class FileSystem(Protocol):
    """The two filesystem operations the editor depends on."""

    def read_file(self, path: str) -> str:
        """Return the whole file as text or raise ``FileOperationError``."""
        ...

    def write_file(self, path: str, contents: str) -> None:
        """Replace the file with ``contents`` or raise ``FileOperationError``."""
        ...


class LocalFileSystem:
    """UTF-8 whole-file reads and writes against the local disk.

    Both directions go through bytes so line endings are never translated.
    """

    encoding = "utf-8"

    def read_file(self, path: str) -> str:
        try:
            return Path(path).read_bytes().decode(self.encoding)
        except (OSError, UnicodeDecodeError) as exc:
            raise FileOperationError(path, exc) from exc

    def write_file(self, path: str, contents: str) -> None:
        try:
            Path(path).write_bytes(contents.encode(self.encoding))
        except OSError as exc:
            raise FileOperationError(path, exc) from exc


__all__ = [
    "EditorError",
    "FileOperationError",
    "FileSystem",
    "LocalFileSystem",
    "NoFileSpecified",
]
