"""Editor modes and the input intents routed through them."""

from .editor_mode import EditorMode
from .inputs import Input, InputKind

__all__ = [
    "EditorMode",
    "Input",
    "InputKind",
]
