"""Rich renderables for the pieces of an ``EditorView``."""

from __future__ import annotations

from typing import Optional

from rich.text import Text

from modal_editor.config import MODE_CONFIGS, NEW_FILE_TITLE
from modal_editor.editor import EditorView

CURSOR_STYLE = "reverse"


def with_cursor(text: str, cursor: int) -> Text:
    """Return ``text`` with the character at ``cursor`` highlighted.

    At the end of the text or on a newline a highlighted blank is inserted so
    the cursor stays visible.
    """

    rendered = Text(text[:cursor])
    under = text[cursor : cursor + 1]
    if under in ("", "\n"):
        rendered.append(" ", style=CURSOR_STYLE)
        rendered.append(text[cursor:])
    else:
        rendered.append(under, style=CURSOR_STYLE)
        rendered.append(text[cursor + 1 :])
    return rendered


def document_title(view: EditorView) -> str:
    name = view.current_file_path or NEW_FILE_TITLE
    return f"{name} *" if view.modified else name


def prompt_title(view: EditorView) -> Optional[str]:
    return MODE_CONFIGS[view.mode].title


def prompt_body(view: EditorView) -> Optional[Text]:
    if not view.mode.is_prompt:
        return None
    pending = view.pending_path or ""
    return with_cursor(pending, len(pending))


def document_body(view: EditorView) -> Text:
    if view.mode.is_prompt:
        return Text(view.document)
    return with_cursor(view.document, view.cursor)


__all__ = [
    "CURSOR_STYLE",
    "document_body",
    "document_title",
    "prompt_body",
    "prompt_title",
    "with_cursor",
]
