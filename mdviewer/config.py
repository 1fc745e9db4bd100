"""Persistent JSON config helpers.

Stores the default docs directory, extra source directories to register on
start-up, and the code-highlighting style. Malformed or missing config falls
back safely; registered sources themselves are never written here.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from platformdirs import user_config_dir

APP_NAME = "mdviewer"
CONFIG_FILENAME = "config.json"
DEFAULT_CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
CONFIG_PATH = DEFAULT_CONFIG_PATH

logger = logging.getLogger(__name__)


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return {}
    except (OSError, ValueError) as exc:
        logger.warning("Ignoring unreadable config %s: %s", CONFIG_PATH, exc)
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> None:
    """Persist config data as pretty-printed JSON.

    Write failures are logged and otherwise ignored.
    """
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except (OSError, TypeError, ValueError) as exc:
        logger.warning("Could not write config %s: %s", CONFIG_PATH, exc)


def _load_nonempty_string(key: str) -> str | None:
    value = load_config().get(key)
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped if stripped else None


def load_default_source_directory() -> str | None:
    """Return the configured default docs directory, if any."""
    return _load_nonempty_string("default_source_directory")


def load_extra_source_directories() -> list[str]:
    """Return directories to register at start-up.

    Non-string and blank entries are dropped; order is preserved.
    """
    value = load_config().get("source_directories")
    if not isinstance(value, list):
        return []
    directories: list[str] = []
    for raw in value:
        if not isinstance(raw, str):
            continue
        stripped = raw.strip()
        if stripped:
            directories.append(stripped)
    return directories


def load_code_style() -> str | None:
    """Load persisted Pygments style name, returning ``None`` when unset/invalid."""
    return _load_nonempty_string("code_style")


def save_code_style(style: str) -> None:
    """Persist selected Pygments style name."""
    stripped = str(style).strip()
    if not stripped:
        return
    config = load_config()
    config["code_style"] = stripped
    save_config(config)


__all__ = [
    "APP_NAME",
    "CONFIG_PATH",
    "load_config",
    "save_config",
    "load_default_source_directory",
    "load_extra_source_directories",
    "load_code_style",
    "save_code_style",
]
