"""Scripted in-memory front end for tests and automation."""

from __future__ import annotations

from collections import deque
from typing import Deque, Iterable, List, Union

from modal_editor.editor import EditorView
from modal_editor.modes import Input

from .boundary import UiError

ScriptItem = Union[Input, Exception]


class HeadlessUi:
    """Replays a fixed script of inputs and records every rendered view.

    A script entry that is an exception is raised from ``get_input`` instead
    of being returned. Once the script runs out ``get_input`` returns
    ``Input.CANCEL`` so a driver loop always terminates.
    """

    def __init__(self, script: Iterable[ScriptItem] = ()) -> None:
        self._script: Deque[ScriptItem] = deque(script)
        self.frames: List[EditorView] = []
        self.active = False
        self.setup_calls = 0
        self.finish_calls = 0
        self.panics = 0

    def feed(self, *items: ScriptItem) -> None:
        self._script.extend(items)

    def setup(self) -> None:
        self.setup_calls += 1
        if self.active:
            raise UiError("HeadlessUi is already set up")
        self.active = True

    def on_panic(self) -> None:
        self.panics += 1
        self.active = False

    def render(self, view: EditorView) -> None:
        if not self.active:
            raise UiError("render called before setup")
        self.frames.append(view)

    def get_input(self) -> Input:
        if not self._script:
            return Input.CANCEL
        item = self._script.popleft()
        if isinstance(item, Exception):
            raise item
        return item

    def finish(self) -> None:
        self.finish_calls += 1
        self.active = False

    @property
    def last_frame(self) -> EditorView:
        if not self.frames:
            raise UiError("nothing has been rendered")
        return self.frames[-1]


__all__ = ["HeadlessUi"]
