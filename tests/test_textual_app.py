from __future__ import annotations

import asyncio
import time
from typing import Awaitable, Callable, List

import pytest
from textual.pilot import Pilot
from textual.widgets import Static

from modal_editor.adapters.textual import app as app_module
from modal_editor.adapters.textual.app import EditorApp
from modal_editor.adapters.textual.controller import TextualUi
from modal_editor.config import DEFAULT_POLL_INTERVAL_MS, EditorConfig
from modal_editor.editor import EditorState
from modal_editor.modes import EditorMode

Script = Callable[[EditorApp, Pilot], Awaitable[None]]


def make_app(state: EditorState | None = None) -> EditorApp:
    return EditorApp(state or EditorState(), config=EditorConfig(poll_interval_ms=10))


async def wait_for(predicate: Callable[[], bool], timeout: float = 5.0) -> None:
    deadline = time.monotonic() + timeout
    while not predicate():
        if time.monotonic() > deadline:
            raise AssertionError("editor did not reach the expected state")
        await asyncio.sleep(0.02)


def run_session(app: EditorApp, script: Script) -> None:
    async def scenario() -> None:
        async with app.run_test() as pilot:
            await script(app, pilot)

    asyncio.run(scenario())


async def quit_editor(app: EditorApp, pilot: Pilot) -> None:
    await pilot.press("ctrl+c")
    await wait_for(lambda: app.return_code is not None)


def test_typing_then_ctrl_c_exits_cleanly() -> None:
    app = make_app()

    async def script(app: EditorApp, pilot: Pilot) -> None:
        await pilot.press("h", "i", "left")
        await wait_for(lambda: app.state.cursor == 1)
        await quit_editor(app, pilot)

    run_session(app, script)

    assert app.state.document == "hi"
    assert app.state.exited is True
    assert app.return_code == 0


def test_unmapped_key_exits_with_failure() -> None:
    app = make_app()

    async def script(app: EditorApp, pilot: Pilot) -> None:
        await pilot.press("h", "i")
        await wait_for(lambda: app.state.document == "hi")
        await pilot.press("up")
        await wait_for(lambda: app.return_code is not None)

    run_session(app, script)

    assert app.return_code == 1
    assert app.state.exited is False
    assert app.ui.failure is not None
    assert app.ui.failure.startswith("UnrecognizedInput")
    assert "'up'" in app.ui.failure


def test_failed_open_hides_prompt_and_shows_error(
    tmp_path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.chdir(tmp_path)
    app = make_app()

    async def script(app: EditorApp, pilot: Pilot) -> None:
        prompt = app.query_one("#prompt-box", Static)
        message = app.query_one("#message-box", Static)
        await wait_for(lambda: not prompt.display and not message.display)

        await pilot.press("ctrl+o")
        await wait_for(lambda: prompt.display)
        assert app.state.mode is EditorMode.PROMPT_OPEN

        await pilot.press("n", "o", "p", "e", "enter")
        await wait_for(lambda: message.display)
        assert not prompt.display
        assert app.state.mode is EditorMode.EDITING
        assert (app.state.latest_message() or "").startswith("IO error:")

        await pilot.press("ctrl+x")
        await wait_for(lambda: not message.display)
        await quit_editor(app, pilot)

    run_session(app, script)

    assert app.return_code == 0


def test_saving_writes_the_typed_document(
    tmp_path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.chdir(tmp_path)
    app = make_app()

    async def script(app: EditorApp, pilot: Pilot) -> None:
        await pilot.press("o", "k", "ctrl+s", "o", "u", "t", "enter")
        await wait_for(lambda: app.state.current_file_path == "out")
        await quit_editor(app, pilot)

    run_session(app, script)

    assert (tmp_path / "out").read_bytes() == b"ok"
    assert app.state.modified is False


def test_main_keeps_panic_hook_installed(monkeypatch: pytest.MonkeyPatch) -> None:
    installed: List[TextualUi] = []
    uninstalled: List[bool] = []

    def fake_install(ui: TextualUi) -> Callable[[], None]:
        installed.append(ui)
        return lambda: uninstalled.append(True)

    def crash(self: EditorApp) -> None:
        raise RuntimeError("host died")

    monkeypatch.setattr(app_module, "install_panic_hook", fake_install)
    monkeypatch.setattr(EditorApp, "run", crash)

    with pytest.raises(RuntimeError, match="host died"):
        app_module.main([])

    assert len(installed) == 1
    assert isinstance(installed[0], TextualUi)
    assert uninstalled == []


def test_main_tolerates_bad_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    configs: List[EditorConfig] = []

    def record(self: EditorApp) -> None:
        configs.append(self.config)

    monkeypatch.setattr(app_module, "install_panic_hook", lambda ui: lambda: None)
    monkeypatch.setattr(EditorApp, "run", record)
    monkeypatch.setenv("MODAL_EDITOR_POLL_MS", "0")
    monkeypatch.setenv("MODAL_EDITOR_LOG_PRESET", "verbose")

    assert app_module.main([]) == 0
    assert configs[0].poll_interval_ms == DEFAULT_POLL_INTERVAL_MS
    assert configs[0].log_preset is None
