"""Contract every front end must satisfy to host the editor."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from modal_editor.editor import EditorView
from modal_editor.modes import Input


class UiError(RuntimeError):
    """Fatal front-end failure during setup, rendering, input or teardown."""


class UnrecognizedInput(UiError):
    """Raised when a front end cannot classify a raw input event."""

    def __init__(self, event: object) -> None:
        super().__init__(f"Unrecognized input event: {event!r}")
        self.event = event


@runtime_checkable
class UiBoundary(Protocol):
    """Front end driven by ``run_editor``.

    ``setup`` acquires whatever exclusive display resource the front end
    needs and ``finish`` releases it; ``finish`` must tolerate being called
    after a failed ``setup`` and more than once. ``on_panic`` runs from the
    process-wide exception hook and must restore the display without relying
    on normal control flow.
    """

    def setup(self) -> None:
        ...

    def on_panic(self) -> None:
        ...

    def render(self, view: EditorView) -> None:
        ...

    def get_input(self) -> Input:
        """Block up to the poll timeout; ``Input.NONE`` when nothing arrived."""
        ...

    def finish(self) -> None:
        ...


__all__ = ["UiBoundary", "UiError", "UnrecognizedInput"]
