"""Document storage and offset validation."""

from .document import TextDocument
from .validation import BufferValidationError, ensure_offset

__all__ = [
    "TextDocument",
    "BufferValidationError",
    "ensure_offset",
]
