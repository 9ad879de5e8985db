"""Translate Textual key names into editor intents."""

from __future__ import annotations

from typing import Mapping, Optional

from modal_editor.modes import Input
from modal_editor.ui import UnrecognizedInput

KEY_BINDINGS: Mapping[str, Input] = {
    "ctrl+c": Input.CANCEL,
    "ctrl+o": Input.BEGIN_OPEN,
    "ctrl+s": Input.BEGIN_SAVE,
    "ctrl+n": Input.BEGIN_NEW_FILE,
    "ctrl+x": Input.DISMISS_MESSAGE,
    "backspace": Input.BACKSPACE,
    "enter": Input.ENTER,
    "return": Input.ENTER,
    "left": Input.MOVE_CURSOR_LEFT,
    "right": Input.MOVE_CURSOR_RIGHT,
}


def decode_key(key: str, character: Optional[str] = None) -> Input:
    """Map a Textual ``Key`` event's ``key``/``character`` pair to an ``Input``.

    Named bindings win over the character, so ``enter`` is never inserted as
    a raw ``"\\r"``. Any printable single character becomes ``INSERT_CHAR``.
    """

    bound = KEY_BINDINGS.get(key)
    if bound is not None:
        return bound
    if character is not None and len(character) == 1 and character.isprintable():
        return Input.insert_char(character)
    raise UnrecognizedInput(key)


__all__ = ["KEY_BINDINGS", "decode_key"]
