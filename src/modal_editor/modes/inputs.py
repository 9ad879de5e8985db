"""Abstract user intents consumed by ``EditorState.apply``."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Optional


class InputKind(str, Enum):
    """Closed set of intents a front end may produce."""

    NONE = "none"
    INSERT_CHAR = "insert_char"
    BACKSPACE = "backspace"
    ENTER = "enter"
    CANCEL = "cancel"
    MOVE_CURSOR_LEFT = "move_cursor_left"
    MOVE_CURSOR_RIGHT = "move_cursor_right"
    BEGIN_SAVE = "begin_save"
    BEGIN_OPEN = "begin_open"
    BEGIN_NEW_FILE = "begin_new_file"
    DISMISS_MESSAGE = "dismiss_message"


@dataclass(frozen=True, slots=True)
class Input:
    """Single user intent, decoupled from any keyboard encoding.

    Only ``INSERT_CHAR`` carries a payload, and it must be exactly one
    character. The argument-free intents are available as class constants,
    e.g. ``Input.BACKSPACE``.
    """

    kind: InputKind
    char: Optional[str] = None

    NONE: ClassVar["Input"]
    BACKSPACE: ClassVar["Input"]
    ENTER: ClassVar["Input"]
    CANCEL: ClassVar["Input"]
    MOVE_CURSOR_LEFT: ClassVar["Input"]
    MOVE_CURSOR_RIGHT: ClassVar["Input"]
    BEGIN_SAVE: ClassVar["Input"]
    BEGIN_OPEN: ClassVar["Input"]
    BEGIN_NEW_FILE: ClassVar["Input"]
    DISMISS_MESSAGE: ClassVar["Input"]

    def __post_init__(self) -> None:
        if self.kind is InputKind.INSERT_CHAR:
            if self.char is None or len(self.char) != 1:
                raise ValueError(
                    f"INSERT_CHAR needs exactly one character, got {self.char!r}"
                )
        elif self.char is not None:
            raise ValueError(f"{self.kind.name} does not carry a character")

    @classmethod
    def insert_char(cls, char: str) -> "Input":
        return cls(InputKind.INSERT_CHAR, char)

    @classmethod
    def type_text(cls, text: str) -> tuple["Input", ...]:
        """One ``INSERT_CHAR`` per character of ``text``."""

        return tuple(cls.insert_char(char) for char in text)


for _kind in InputKind:
    if _kind is not InputKind.INSERT_CHAR:
        setattr(Input, _kind.name, Input(_kind))
del _kind


__all__ = ["Input", "InputKind"]
