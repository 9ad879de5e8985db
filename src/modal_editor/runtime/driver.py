"""Turn-based loop alternating render and input until the editor exits."""

from __future__ import annotations

from typing import Optional

from modal_editor.editor import EditorState
from modal_editor.ui import UiBoundary

from . import telemetry


def run_editor(ui: UiBoundary, state: Optional[EditorState] = None) -> EditorState:
    """Drive ``state`` with ``ui`` until ``state.exited`` is set.

    Each turn renders a snapshot, then blocks in ``ui.get_input`` and applies
    the result. ``ui.finish`` runs on every path out of the loop; if it fails
    while another error is already propagating, the original error wins.
    """

    if state is None:
        state = EditorState()
    telemetry.record_event("editor.start", level="debug")
    try:
        ui.setup()
        while not state.exited:
            ui.render(state.snapshot())
            state.apply(ui.get_input())
    except BaseException as exc:
        telemetry.record_event(
            "editor.abort", level="error", data={"error": repr(exc)}
        )
        _finish_quietly(ui)
        raise
    ui.finish()
    telemetry.record_event("editor.stop", level="debug")
    return state


def _finish_quietly(ui: UiBoundary) -> None:
    try:
        ui.finish()
    except Exception as exc:
        telemetry.record_event(
            "driver.finish_error", level="error", data={"error": repr(exc)}
        )


__all__ = ["run_editor"]
