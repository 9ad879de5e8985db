"""Character-offset text storage for the editor buffer."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class TextDocument:
    """Immutable text snapshot addressed by code-point offsets.

    Every edit returns a new document with ``version`` bumped and ``dirty``
    set; ``from_text`` produces a clean document at version 0.
    """

    text: str = ""
    version: int = 0
    dirty: bool = False

    @classmethod
    def from_text(cls, text: str) -> "TextDocument":
        return cls(text=text, version=0, dirty=False)

    def __len__(self) -> int:
        return len(self.text)

    def insert(self, offset: int, text: str) -> "TextDocument":
        """Return a document with ``text`` inserted before ``offset``."""

        updated = self.text[:offset] + text + self.text[offset:]
        return TextDocument(text=updated, version=self.version + 1, dirty=True)

    def delete(self, start: int, end: int) -> "TextDocument":
        """Return a document with ``[start:end]`` removed."""

        updated = self.text[:start] + self.text[end:]
        return TextDocument(text=updated, version=self.version + 1, dirty=True)

    def mark_clean(self) -> "TextDocument":
        return TextDocument(text=self.text, version=self.version, dirty=False)
