"""Validation helpers shared by buffer edits."""

from __future__ import annotations

from .document import TextDocument


class BufferValidationError(RuntimeError):
    """Raised when an edit targets an offset outside the document."""

    def __init__(self, message: str, *, offset: int | None = None) -> None:
        super().__init__(message)
        self.offset = offset


def ensure_offset(document: TextDocument, offset: int) -> int:
    if offset < 0 or offset > len(document):
        raise BufferValidationError(
            f"Offset {offset} outside document of length {len(document)}",
            offset=offset,
        )
    return offset
