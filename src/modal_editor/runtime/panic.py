"""Process-wide hook that lets a front end restore the display on a crash."""

from __future__ import annotations

import sys
import threading
from typing import Callable

from modal_editor.ui import UiBoundary

from . import telemetry


def install_panic_hook(ui: UiBoundary) -> Callable[[], None]:
    """Chain ``ui.on_panic`` in front of the current exception hooks.

    Covers uncaught exceptions in the main thread (``sys.excepthook``) and in
    other threads (``threading.excepthook``). The previous hook always runs
    after ``on_panic``, even if ``on_panic`` itself fails. Returns a callable
    that reinstalls the previous hooks. Front ends normally leave the hooks
    installed until the process exits, since ``sys.excepthook`` only runs
    after the exception has unwound out of every frame.
    """

    previous_sys_hook = sys.excepthook
    previous_thread_hook = threading.excepthook

    def _sys_hook(exc_type, exc, tb) -> None:
        telemetry.record_event("ui.panic", level="error", data={"error": repr(exc)})
        try:
            ui.on_panic()
        finally:
            previous_sys_hook(exc_type, exc, tb)

    def _thread_hook(args: threading.ExceptHookArgs) -> None:
        if issubclass(args.exc_type, SystemExit):
            previous_thread_hook(args)
            return
        thread_name = getattr(args.thread, "name", "?")
        telemetry.record_event(
            "ui.panic",
            level="error",
            data={"error": repr(args.exc_value), "thread": thread_name},
        )
        try:
            ui.on_panic()
        finally:
            previous_thread_hook(args)

    sys.excepthook = _sys_hook
    threading.excepthook = _thread_hook

    def uninstall() -> None:
        if sys.excepthook is _sys_hook:
            sys.excepthook = previous_sys_hook
        if threading.excepthook is _thread_hook:
            threading.excepthook = previous_thread_hook

    return uninstall


__all__ = ["install_panic_hook"]
