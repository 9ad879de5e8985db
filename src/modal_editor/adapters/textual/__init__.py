"""Textual front end; the app itself lives in ``.app`` and imports textual."""

from .controller import KeyPress, TextualUIHooks, TextualUi
from .keys import KEY_BINDINGS, decode_key

__all__ = [
    "KEY_BINDINGS",
    "KeyPress",
    "TextualUIHooks",
    "TextualUi",
    "decode_key",
]
