"""Settings storage for menu timing and layout."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any


SETTINGS_PATH = Path(
    os.environ.get(
        "TREEMENU_SETTINGS_PATH",
        Path.home() / ".config" / "treemenu" / "settings.json",
    )
)

# Default values - use these constants instead of hardcoding values elsewhere
DEFAULT_RESULT_POLL_INTERVAL = 1.0
DEFAULT_RESULT_ABORT_TIMEOUT = 5 * 60.0
DEFAULT_POST_ACTION_PAUSE = 0.5
DEFAULT_INDENT_WIDTH = 4

DEFAULT_SETTINGS: dict[str, Any] = {
    "result_poll_interval_seconds": DEFAULT_RESULT_POLL_INTERVAL,
    "result_abort_timeout_seconds": DEFAULT_RESULT_ABORT_TIMEOUT,
    "post_action_pause_seconds": DEFAULT_POST_ACTION_PAUSE,
    "indent_width": DEFAULT_INDENT_WIDTH,
    "wrap_text": True,
    "line_width": None,
}


@dataclass
class SettingsStore:
    values: dict[str, Any] = field(default_factory=dict)
    # File passed to load_settings(); saves go back to it.
    path: Path | None = None


settings_store = SettingsStore()


def load_settings(path: Path | None = None) -> None:
    settings_store.values = dict(DEFAULT_SETTINGS)
    settings_store.path = path
    path = path or SETTINGS_PATH
    if not path.exists():
        return
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError):
        return
    if isinstance(data, dict):
        settings_store.values.update(data)


def save_settings(path: Path | None = None) -> None:
    path = path or settings_store.path or SETTINGS_PATH
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(
        json.dumps(settings_store.values, indent=2, sort_keys=True),
        encoding="utf-8",
    )


def get_setting(key: str, default: Any | None = None) -> Any:
    return settings_store.values.get(key, default)


def set_setting(key: str, value: Any) -> None:
    settings_store.values[key] = value
    save_settings()


def get_bool(key: str, default: bool = False) -> bool:
    return bool(get_setting(key, default))


def get_float(key: str, default: float) -> float:
    value = get_setting(key, default)
    try:
        result = float(value)
    except (TypeError, ValueError):
        return default
    return result if result >= 0 else default


def get_int(key: str, default: int) -> int:
    value = get_setting(key, default)
    try:
        result = int(value)
    except (TypeError, ValueError):
        return default
    return result if result >= 0 else default


load_settings()
