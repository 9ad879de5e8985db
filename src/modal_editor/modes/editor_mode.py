"""Interaction modes governing how input is interpreted."""

from __future__ import annotations

from enum import Enum


class EditorMode(str, Enum):
    EDITING = "editing"
    PROMPT_OPEN = "prompt_open"
    PROMPT_SAVE = "prompt_save"

    @property
    def is_prompt(self) -> bool:
        return self is not EditorMode.EDITING


__all__ = ["EditorMode"]
