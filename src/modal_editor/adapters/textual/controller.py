"""UiBoundary implementation that bridges the driver loop and a Textual app."""

from __future__ import annotations

import queue
from dataclasses import dataclass
from typing import Callable, Optional

from modal_editor.config import DEFAULT_POLL_INTERVAL_MS
from modal_editor.editor import EditorView
from modal_editor.modes import Input
from modal_editor.runtime import telemetry
from modal_editor.ui import UiError

from .keys import decode_key


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


@dataclass(slots=True)
class TextualUIHooks:
    """Callbacks the Textual app hands to ``TextualUi``.

    ``show_view`` and ``request_exit`` are called from the driver thread, so
    the app wraps them with ``call_from_thread``. ``request_exit`` receives the
    return code and an optional message to print once the app has closed.
    """

    show_view: Callable[[EditorView], None]
    request_exit: Callable[[int, Optional[str]], None] = _noop
    log: Callable[[str], None] = _noop


@dataclass(frozen=True, slots=True)
class KeyPress:
    key: str
    character: Optional[str] = None


class TextualUi:
    """Driver-side front end fed by key presses from the Textual thread.

    The Textual app owns the terminal, so ``setup`` and ``finish`` only track
    the session. The host is asked to exit at most once: with code 0 through
    ``close`` after a normal run, or with code 1 through ``on_panic`` after a
    failure. Once the host app has closed, ``get_input`` reports
    ``Input.CANCEL`` so the driver loop winds down.
    """

    def __init__(
        self,
        hooks: TextualUIHooks,
        *,
        poll_interval: float = DEFAULT_POLL_INTERVAL_MS / 1000.0,
    ) -> None:
        self.hooks = hooks
        self.poll_interval = poll_interval
        self._keys: "queue.Queue[KeyPress]" = queue.Queue()
        self._active = False
        self._host_closed = False
        self._exit_requested = False
        self._failure: Optional[str] = None

    def feed_key(self, key: str, character: Optional[str] = None) -> None:
        self._keys.put(KeyPress(key=key, character=character))

    def host_closed(self) -> None:
        self._host_closed = True

    @property
    def active(self) -> bool:
        return self._active

    @property
    def failure(self) -> Optional[str]:
        return self._failure

    def setup(self) -> None:
        if self._host_closed:
            raise UiError("Textual app closed before the editor started")
        self._active = True
        self.hooks.log("session started")

    def report_failure(self, exc: BaseException) -> None:
        """Remember why the driver stopped so ``on_panic`` can show it."""

        self._failure = f"{type(exc).__name__}: {exc}"
        telemetry.record_event(
            "ui.driver_error", level="error", data={"error": repr(exc)}
        )

    def on_panic(self) -> None:
        self._active = False
        telemetry.record_event("ui.panic_exit", level="error")
        self._request_exit(1, self._failure)

    def render(self, view: EditorView) -> None:
        if not self._active:
            raise UiError("render called outside an active session")
        if self._host_closed:
            return
        self.hooks.show_view(view)

    def get_input(self) -> Input:
        if self._host_closed:
            return Input.CANCEL
        try:
            press = self._keys.get(timeout=self.poll_interval)
        except queue.Empty:
            return Input.NONE
        self.hooks.log(f"key -> {press.key!r} char={press.character!r}")
        return decode_key(press.key, press.character)

    def finish(self) -> None:
        if not self._active:
            return
        self._active = False
        self.hooks.log("session finished")

    def close(self) -> None:
        """Ask the host to exit normally after the driver loop returned."""

        self._request_exit(0, None)

    def _request_exit(self, return_code: int, message: Optional[str]) -> None:
        if self._exit_requested or self._host_closed:
            return
        self._exit_requested = True
        self.hooks.request_exit(return_code, message)


__all__ = ["KeyPress", "TextualUIHooks", "TextualUi"]
