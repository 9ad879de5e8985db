"""Executable Textual app that hosts the editor."""

from __future__ import annotations

import argparse
import threading
from typing import Optional, Sequence

try:  # pragma: no cover - imported only when the app is run
    from textual import events
    from textual.app import App, ComposeResult
    from textual.binding import Binding
    from textual.widgets import Static
except ModuleNotFoundError as exc:  # pragma: no cover - friendly error for missing dep
    raise RuntimeError(
        "Install the 'textual' package to use modal_editor.adapters.textual.app"
    ) from exc

from modal_editor.config import MESSAGE_TITLE, EditorConfig
from modal_editor.editor import EditorState, EditorView
from modal_editor.runtime import telemetry
from modal_editor.runtime.driver import run_editor
from modal_editor.runtime.panic import install_panic_hook

from .controller import TextualUIHooks, TextualUi
from .render import document_body, document_title, prompt_body, prompt_title


class EditorApp(App[None]):
    """Textual host running the editor's driver loop in a worker thread."""

    CSS = """
	Screen {
		layout: vertical;
	}

	#prompt-box, #message-box {
		height: 3;
		border: round $accent;
		padding: 0 1;
	}

	#message-box {
		border: round $error;
	}

	#document-view {
		height: 1fr;
		border: round $primary;
		padding: 0 1;
		content-align: left top;
		overflow: auto;
	}
	"""

    BINDINGS = [
        Binding("ctrl+c", "forward_cancel", "Quit", show=False, priority=True),
    ]

    ENABLE_COMMAND_PALETTE = False

    def __init__(
        self,
        state: Optional[EditorState] = None,
        *,
        config: Optional[EditorConfig] = None,
    ) -> None:
        super().__init__()
        self.state = state or EditorState()
        self.config = config or EditorConfig()
        self._host_thread = threading.get_ident()
        self._telemetry_logger = telemetry.get_logger(
            "modal_editor.adapters.textual"
        )
        self.ui = TextualUi(
            TextualUIHooks(
                show_view=self._show_view_from_driver,
                request_exit=self._request_exit,
                log=self._log_line,
            ),
            poll_interval=self.config.poll_interval,
        )
        self._prompt_widget: Static | None = None
        self._message_widget: Static | None = None
        self._document_widget: Static | None = None

    def compose(self) -> ComposeResult:
        self._prompt_widget = Static("", id="prompt-box")
        self._message_widget = Static("", id="message-box")
        self._document_widget = Static("", id="document-view")
        yield self._prompt_widget
        yield self._message_widget
        yield self._document_widget

    def on_mount(self) -> None:
        self.show_view(self.state.snapshot())
        self.run_worker(
            self._drive, name="editor-driver", thread=True, exit_on_error=True
        )

    def on_unmount(self) -> None:
        self.ui.host_closed()

    def on_key(self, event: events.Key) -> None:
        self.ui.feed_key(event.key, event.character)
        event.stop()
        event.prevent_default()

    def action_forward_cancel(self) -> None:
        self.ui.feed_key("ctrl+c")

    def show_view(self, view: EditorView) -> None:
        if self._document_widget is not None:
            self._document_widget.border_title = document_title(view)
            self._document_widget.update(document_body(view))
        if self._prompt_widget is not None:
            body = prompt_body(view)
            self._prompt_widget.display = body is not None
            if body is not None:
                self._prompt_widget.border_title = prompt_title(view)
                self._prompt_widget.update(body)
        if self._message_widget is not None:
            message = view.latest_message
            self._message_widget.display = message is not None
            if message is not None:
                self._message_widget.border_title = MESSAGE_TITLE
                self._message_widget.update(message)

    def _drive(self) -> None:
        try:
            run_editor(self.ui, self.state)
        except Exception as exc:
            self.ui.report_failure(exc)
            self.ui.on_panic()
            return
        self.ui.close()

    def _show_view_from_driver(self, view: EditorView) -> None:
        self.call_from_thread(self.show_view, view)

    def _request_exit(
        self, return_code: int, message: Optional[str] = None
    ) -> None:
        if not self.is_running:
            return
        if threading.get_ident() == self._host_thread:
            self.exit(return_code=return_code, message=message)
        else:
            self.call_from_thread(
                self.exit, return_code=return_code, message=message
            )

    def _log_line(self, line: str) -> None:
        self._telemetry_logger.debug(line)


def _positive_int(raw: str) -> int:
    value = int(raw)
    if value <= 0:
        raise argparse.ArgumentTypeError("must be a positive integer")
    return value


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the modal text editor.")
    parser.add_argument("path", nargs="?", help="File to open on startup")
    parser.add_argument(
        "--poll-ms",
        type=_positive_int,
        default=None,
        help="Input poll timeout in milliseconds (default: 250)",
    )
    parser.add_argument(
        "--log-preset",
        choices=telemetry.PRESETS,
        default=None,
        help="Telemetry preset to log with",
    )
    parser.add_argument(
        "--log-file",
        default=None,
        help="Write telemetry to this file",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _parse_args(argv)
    config = EditorConfig.from_env().with_overrides(
        poll_interval_ms=args.poll_ms,
        log_preset=args.log_preset,
        log_file=args.log_file,
    )
    if config.log_preset or config.log_file:
        telemetry.configure(preset=config.log_preset, log_file=config.log_file)

    state = EditorState.from_path(args.path) if args.path else EditorState()
    app = EditorApp(state, config=config)
    install_panic_hook(app.ui)
    app.run()
    return app.return_code or 0


if __name__ == "__main__":  # pragma: no cover - manual run
    raise SystemExit(main())
