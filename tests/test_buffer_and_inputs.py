from __future__ import annotations

import pytest

from modal_editor.buffer import BufferValidationError, TextDocument, ensure_offset
from modal_editor.editor import EditorState, MessageLog
from modal_editor.modes import EditorMode, Input, InputKind


def test_document_edits_bump_version_and_mark_dirty() -> None:
    document = TextDocument.from_text("ac")

    inserted = document.insert(1, "b")
    deleted = inserted.delete(0, 1)

    assert document.text == "ac" and document.version == 0
    assert inserted.text == "abc" and inserted.version == 1 and inserted.dirty
    assert deleted.text == "bc" and deleted.version == 2
    assert deleted.mark_clean().dirty is False
    assert len(deleted) == 2


def test_ensure_offset_rejects_out_of_range() -> None:
    document = TextDocument.from_text("abc")

    assert ensure_offset(document, 0) == 0
    assert ensure_offset(document, 3) == 3
    with pytest.raises(BufferValidationError) as excinfo:
        ensure_offset(document, 4)
    assert excinfo.value.offset == 4
    with pytest.raises(BufferValidationError):
        ensure_offset(document, -1)


def test_state_rejects_invalid_cursor_assignment() -> None:
    state = EditorState()

    with pytest.raises(BufferValidationError):
        state.cursor = 1


def test_insert_char_requires_single_character() -> None:
    assert Input.insert_char("x") == Input(InputKind.INSERT_CHAR, "x")
    with pytest.raises(ValueError):
        Input.insert_char("xy")
    with pytest.raises(ValueError):
        Input.insert_char("")
    with pytest.raises(ValueError):
        Input(InputKind.BACKSPACE, "x")


def test_argument_free_inputs_are_constants() -> None:
    assert Input.BACKSPACE.kind is InputKind.BACKSPACE
    assert Input.NONE.char is None
    assert Input.type_text("ok") == (Input.insert_char("o"), Input.insert_char("k"))


def test_prompt_modes() -> None:
    assert EditorMode.EDITING.is_prompt is False
    assert EditorMode.PROMPT_OPEN.is_prompt is True
    assert EditorMode.PROMPT_SAVE.is_prompt is True


def test_message_log_visibility() -> None:
    log = MessageLog()
    assert log.latest() is None

    log.add("one")
    log.add("two")
    assert log.latest() == "two"
    assert log.visible is True

    log.dismiss()
    assert log.latest() is None
    assert log.history == ("one", "two")
    assert len(log) == 2
