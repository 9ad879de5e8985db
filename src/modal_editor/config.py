"""Editor configuration and per-mode display constants."""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Mapping, Optional

from modal_editor.modes import EditorMode
from modal_editor.runtime import telemetry

ENV_PREFIX = "MODAL_EDITOR_"
DEFAULT_POLL_INTERVAL_MS = 250


@dataclass(frozen=True)
class ModeConfig:
    """Display settings for a mode's prompt box."""

    title: Optional[str]
    border_color: str


MODE_CONFIGS: Mapping[EditorMode, ModeConfig] = {
    EditorMode.EDITING: ModeConfig(None, "#98C379"),
    EditorMode.PROMPT_OPEN: ModeConfig("Open file...", "#6EACDA"),
    EditorMode.PROMPT_SAVE: ModeConfig("Save as...", "#E8B86D"),
}

NEW_FILE_TITLE = "New file"
MESSAGE_TITLE = "Error"


def _env_positive_int(key: str, fallback: int) -> int:
    value = os.environ.get(key)
    if value is None:
        return fallback
    try:
        parsed = int(value)
    except ValueError:
        parsed = 0
    if parsed <= 0:
        telemetry.record_event(
            "config.ignored", level="warning", data={"key": key, "value": value}
        )
        return fallback
    return parsed


def _env_preset(key: str) -> Optional[str]:
    value = os.environ.get(key) or None
    if value is not None and value.lower() not in telemetry.PRESETS:
        telemetry.record_event(
            "config.ignored", level="warning", data={"key": key, "value": value}
        )
        return None
    return value


@dataclass(frozen=True)
class EditorConfig:
    """Runtime settings for the front end and telemetry."""

    poll_interval_ms: int = DEFAULT_POLL_INTERVAL_MS
    log_preset: Optional[str] = None
    log_file: Optional[str] = None

    @property
    def poll_interval(self) -> float:
        return self.poll_interval_ms / 1000.0

    @classmethod
    def from_env(cls) -> "EditorConfig":
        """Read settings from the environment, ignoring values that don't parse."""

        return cls(
            poll_interval_ms=_env_positive_int(
                f"{ENV_PREFIX}POLL_MS", DEFAULT_POLL_INTERVAL_MS
            ),
            log_preset=_env_preset(f"{ENV_PREFIX}LOG_PRESET"),
            log_file=os.environ.get(f"{ENV_PREFIX}LOG_FILE") or None,
        )

    def with_overrides(self, **overrides: object) -> "EditorConfig":
        """Return a copy with every non-``None`` override applied."""

        changes = {key: value for key, value in overrides.items() if value is not None}
        config = replace(self, **changes)
        if config.poll_interval_ms <= 0:
            raise ValueError("poll_interval_ms must be positive")
        return config


__all__ = [
    "DEFAULT_POLL_INTERVAL_MS",
    "EditorConfig",
    "MESSAGE_TITLE",
    "MODE_CONFIGS",
    "ModeConfig",
    "NEW_FILE_TITLE",
]
