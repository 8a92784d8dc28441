"""Persistent JSON config helpers.

Stores the entry capacity, pane split, theme, and debug-log location.
All access is defensive: malformed or missing config falls back safely.
"""

from __future__ import annotations

import json
from pathlib import Path

from platformdirs import user_config_dir

APP_NAME = "statpane"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}


def load_max_entries() -> int | None:
    """Return the configured entry capacity, or ``None`` unless a positive int."""
    value = load_config().get("max_entries")
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        return None
    return value


def load_left_pane_percent() -> float | None:
    """Read the left pane share constrained to the open interval (0, 100)."""
    value = load_config().get("left_pane_percent")
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    if value <= 0 or value >= 100:
        return None
    return float(value)


def load_theme_name() -> str | None:
    value = load_config().get("theme")
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped if stripped else None


def load_log_path() -> Path | None:
    value = load_config().get("log_file")
    if not isinstance(value, str) or not value.strip():
        return None
    return Path(value.strip()).expanduser()
