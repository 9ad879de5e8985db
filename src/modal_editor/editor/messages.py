"""Append-only status message log with a visibility toggle."""

from __future__ import annotations

from typing import List, Optional


class MessageLog:
    """Keeps every message for the session; only the newest may be shown."""

    def __init__(self) -> None:
        self._entries: List[str] = []
        self._visible = False

    def add(self, text: str) -> None:
        self._entries.append(text)
        self._visible = True

    def dismiss(self) -> None:
        self._visible = False

    @property
    def visible(self) -> bool:
        return self._visible

    @property
    def history(self) -> tuple[str, ...]:
        return tuple(self._entries)

    def latest(self) -> Optional[str]:
        if not self._visible or not self._entries:
            return None
        return self._entries[-1]

    def __len__(self) -> int:
        return len(self._entries)


__all__ = ["MessageLog"]
