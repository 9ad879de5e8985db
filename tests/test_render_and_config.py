from __future__ import annotations

import pytest

from modal_editor.adapters.textual.render import (
    CURSOR_STYLE,
    document_body,
    document_title,
    prompt_body,
    prompt_title,
    with_cursor,
)
from modal_editor.config import DEFAULT_POLL_INTERVAL_MS, EditorConfig
from modal_editor.editor import EditorState
from modal_editor.modes import Input


def styled_spans(text) -> list[tuple[str, str]]:
    return [
        (text.plain[span.start : span.end], str(span.style)) for span in text.spans
    ]


def test_cursor_highlights_character_under_it() -> None:
    rendered = with_cursor("abc", 1)

    assert rendered.plain == "abc"
    assert styled_spans(rendered) == [("b", CURSOR_STYLE)]


@pytest.mark.parametrize(("text", "cursor"), [("abc", 3), ("a\nb", 1), ("", 0)])
def test_cursor_on_line_end_gets_a_blank_cell(text: str, cursor: int) -> None:
    rendered = with_cursor(text, cursor)

    assert rendered.plain == text[:cursor] + " " + text[cursor:]
    assert styled_spans(rendered) == [(" ", CURSOR_STYLE)]


def test_titles_follow_file_and_modification() -> None:
    state = EditorState()
    assert document_title(state.snapshot()) == "New file"

    state.apply(Input.insert_char("x"))
    assert document_title(state.snapshot()) == "New file *"

    state.current_file_path = "notes.txt"
    assert document_title(state.snapshot()) == "notes.txt *"


def test_prompt_rendering_only_in_prompt_modes() -> None:
    state = EditorState()
    assert prompt_body(state.snapshot()) is None
    assert prompt_title(state.snapshot()) is None

    state.apply(Input.BEGIN_OPEN)
    for event in Input.type_text("a.t"):
        state.apply(event)
    view = state.snapshot()

    assert prompt_title(view) == "Open file..."
    body = prompt_body(view)
    assert body is not None and body.plain == "a.t "
    assert document_body(view).spans == []

    save_state = EditorState()
    save_state.apply(Input.BEGIN_SAVE)
    assert prompt_title(save_state.snapshot()) == "Save as..."


def test_config_defaults() -> None:
    config = EditorConfig()

    assert config.poll_interval_ms == DEFAULT_POLL_INTERVAL_MS
    assert config.poll_interval == pytest.approx(0.25)
    assert config.log_preset is None


def test_config_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MODAL_EDITOR_POLL_MS", "100")
    monkeypatch.setenv("MODAL_EDITOR_LOG_PRESET", "development")
    monkeypatch.delenv("MODAL_EDITOR_LOG_FILE", raising=False)

    config = EditorConfig.from_env()

    assert config.poll_interval_ms == 100
    assert config.log_preset == "development"
    assert config.log_file is None


def test_config_from_env_ignores_garbage(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MODAL_EDITOR_POLL_MS", "soon")

    assert EditorConfig.from_env().poll_interval_ms == DEFAULT_POLL_INTERVAL_MS


def test_config_overrides_skip_none() -> None:
    config = EditorConfig(poll_interval_ms=50).with_overrides(
        poll_interval_ms=None, log_file="editor.log"
    )

    assert config.poll_interval_ms == 50
    assert config.log_file == "editor.log"
    with pytest.raises(ValueError):
        config.with_overrides(poll_interval_ms=0)


@pytest.mark.parametrize("raw", ["0", "-5"])
def test_config_from_env_ignores_non_positive_poll(
    monkeypatch: pytest.MonkeyPatch, raw: str
) -> None:
    monkeypatch.setenv("MODAL_EDITOR_POLL_MS", raw)

    assert EditorConfig.from_env().poll_interval_ms == DEFAULT_POLL_INTERVAL_MS


def test_config_from_env_ignores_unknown_preset(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.setenv("MODAL_EDITOR_LOG_PRESET", "verbose")

    assert EditorConfig.from_env().log_preset is None
