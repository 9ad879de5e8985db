"""The editor state machine: document, cursor, mode and message log."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Mapping, Optional

from modal_editor.buffer import TextDocument, ensure_offset
from modal_editor.modes import EditorMode, Input, InputKind
from modal_editor.runtime import telemetry

from .files import (
    EditorError,
    FileOperationError,
    FileSystem,
    LocalFileSystem,
    NoFileSpecified,
)
from .messages import MessageLog


@dataclass(frozen=True, slots=True)
class EditorView:
    """Read-only projection of ``EditorState`` handed to front ends."""

    document: str
    cursor: int
    mode: EditorMode
    current_file_path: Optional[str]
    pending_path: Optional[str]
    latest_message: Optional[str]
    modified: bool
    exited: bool


class EditorState:
    """Owns all application data and decides how each ``Input`` mutates it.

    ``apply`` is the only entry point a driver loop needs. File failures
    during open/save are converted into status messages and the state always
    lands back in ``EditorMode.EDITING``.
    """

    def __init__(self, *, files: Optional[FileSystem] = None) -> None:
        self.files: FileSystem = files or LocalFileSystem()
        self._document = TextDocument()
        self._cursor = 0
        self._messages = MessageLog()
        self.mode = EditorMode.EDITING
        self.current_file_path: Optional[str] = None
        self.pending_path: Optional[str] = None
        self.exited = False

    @classmethod
    def from_path(
        cls, path: str, *, files: Optional[FileSystem] = None
    ) -> "EditorState":
        """Start with ``path`` loaded, or as a new file bound to it if missing."""

        state = cls(files=files)
        try:
            state.open_file(path)
        except FileOperationError as exc:
            if exc.not_found:
                state.current_file_path = path
            else:
                state._record_failure(exc)
        return state

    @property
    def document(self) -> str:
        return self._document.text

    @property
    def cursor(self) -> int:
        return self._cursor

    @cursor.setter
    def cursor(self, value: int) -> None:
        self._cursor = ensure_offset(self._document, value)

    @property
    def modified(self) -> bool:
        return self._document.dirty

    @property
    def messages(self) -> tuple[str, ...]:
        return self._messages.history

    @property
    def message_visible(self) -> bool:
        return self._messages.visible

    def latest_message(self) -> Optional[str]:
        return self._messages.latest()

    def snapshot(self) -> EditorView:
        return EditorView(
            document=self.document,
            cursor=self._cursor,
            mode=self.mode,
            current_file_path=self.current_file_path,
            pending_path=self.pending_path,
            latest_message=self.latest_message(),
            modified=self.modified,
            exited=self.exited,
        )

    def apply(self, event: Input) -> None:
        if event.kind is InputKind.NONE:
            return
        handler = _GLOBAL_HANDLERS.get(event.kind)
        if handler is None:
            handler = _MODE_HANDLERS[self.mode].get(event.kind)
        if handler is None:
            return
        with telemetry.span(
            "editor::apply",
            component="editor",
            metadata={"input": event.kind.value, "mode": self.mode.value},
        ):
            handler(self, event)

    def add_message(self, text: str) -> None:
        self._messages.add(text)

    def open_file(self, path: str) -> None:
        if not path:
            raise NoFileSpecified()
        contents = self.files.read_file(path)
        self._document = TextDocument.from_text(contents)
        self._cursor = 0
        self.current_file_path = path
        telemetry.record_event(
            "file.open", data={"path": path, "chars": len(contents)}
        )

    def save_file(self, path: str) -> None:
        if not path:
            raise NoFileSpecified()
        self.files.write_file(path, self.document)
        self._document = self._document.mark_clean()
        self.current_file_path = path
        telemetry.record_event(
            "file.save", data={"path": path, "chars": len(self._document)}
        )

    def _cancel(self, event: Input) -> None:
        del event
        self.exited = True
        telemetry.record_event("editor.exit", data={"mode": self.mode.value})

    def _dismiss_message(self, event: Input) -> None:
        del event
        self._messages.dismiss()

    def _insert_char(self, event: Input) -> None:
        self._insert(event.char or "")

    def _insert_newline(self, event: Input) -> None:
        del event
        self._insert("\n")

    def _insert(self, char: str) -> None:
        self._document = self._document.insert(self._cursor, char)
        self.cursor = self._cursor + 1

    def _backspace(self, event: Input) -> None:
        del event
        if self._cursor == 0:
            return
        self._document = self._document.delete(self._cursor - 1, self._cursor)
        self.cursor = self._cursor - 1

    def _move_left(self, event: Input) -> None:
        del event
        self.cursor = max(0, self._cursor - 1)

    def _move_right(self, event: Input) -> None:
        del event
        self.cursor = min(len(self._document), self._cursor + 1)

    def _begin_save(self, event: Input) -> None:
        del event
        self._enter_prompt(EditorMode.PROMPT_SAVE, self.current_file_path or "")

    def _begin_open(self, event: Input) -> None:
        del event
        self._enter_prompt(EditorMode.PROMPT_OPEN, "")

    def _begin_new_file(self, event: Input) -> None:
        del event
        self._document = TextDocument()
        self._cursor = 0
        self.current_file_path = None
        telemetry.record_event("file.new")

    def _append_pending(self, event: Input) -> None:
        self.pending_path = (self.pending_path or "") + (event.char or "")

    def _pop_pending(self, event: Input) -> None:
        del event
        if self.pending_path:
            self.pending_path = self.pending_path[:-1]

    def _confirm_save(self, event: Input) -> None:
        del event
        path = self._leave_prompt()
        try:
            self.save_file(path)
        except EditorError as exc:
            self._record_failure(exc)

    def _confirm_open(self, event: Input) -> None:
        del event
        path = self._leave_prompt()
        try:
            self.open_file(path)
        except EditorError as exc:
            self._record_failure(exc)

    def _enter_prompt(self, mode: EditorMode, initial: str) -> None:
        self._switch_mode(mode)
        self.pending_path = initial

    def _leave_prompt(self) -> str:
        path = self.pending_path or ""
        self.pending_path = None
        self._switch_mode(EditorMode.EDITING)
        return path

    def _switch_mode(self, mode: EditorMode) -> None:
        previous = self.mode
        self.mode = mode
        self._messages.dismiss()
        telemetry.record_event(
            "mode.switch", data={"from": previous.value, "to": mode.value}
        )

    def _record_failure(self, exc: EditorError) -> None:
        telemetry.record_event(
            "file.error", level="warning", data={"error": str(exc)}
        )
        self.add_message(str(exc))


Handler = Callable[[EditorState, Input], None]

_GLOBAL_HANDLERS: Dict[InputKind, Handler] = {
    InputKind.CANCEL: EditorState._cancel,
    InputKind.DISMISS_MESSAGE: EditorState._dismiss_message,
}

_PROMPT_HANDLERS: Dict[InputKind, Handler] = {
    InputKind.INSERT_CHAR: EditorState._append_pending,
    InputKind.BACKSPACE: EditorState._pop_pending,
}

_MODE_HANDLERS: Mapping[EditorMode, Dict[InputKind, Handler]] = {
    EditorMode.EDITING: {
        InputKind.INSERT_CHAR: EditorState._insert_char,
        InputKind.BACKSPACE: EditorState._backspace,
        InputKind.ENTER: EditorState._insert_newline,
        InputKind.MOVE_CURSOR_LEFT: EditorState._move_left,
        InputKind.MOVE_CURSOR_RIGHT: EditorState._move_right,
        InputKind.BEGIN_SAVE: EditorState._begin_save,
        InputKind.BEGIN_OPEN: EditorState._begin_open,
        InputKind.BEGIN_NEW_FILE: EditorState._begin_new_file,
    },
    EditorMode.PROMPT_OPEN: {
        **_PROMPT_HANDLERS,
        InputKind.ENTER: EditorState._confirm_open,
    },
    EditorMode.PROMPT_SAVE: {
        **_PROMPT_HANDLERS,
        InputKind.ENTER: EditorState._confirm_save,
    },
}


__all__ = ["EditorState", "EditorView"]
