"""Persistent JSON config helpers.

Stores the UI theme, a replacement agent list, and the last custom install
path. Malformed or missing config falls back to defaults.
"""

from __future__ import annotations

import json
from pathlib import Path

from loguru import logger
from platformdirs import user_config_dir

from .agents import DEFAULT_AGENT_OPTIONS, AgentOption, parse_agent_options

APP_NAME = "skill-installer"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME


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
        logger.warning("ignoring unreadable config {}: {}", CONFIG_PATH, exc)
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> None:
    """Persist config data as pretty-printed JSON.

    Write failures are logged and otherwise ignored; config is a convenience
    and never blocks an install.
    """
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except OSError as exc:
        logger.warning("could not write config {}: {}", CONFIG_PATH, exc)


def load_theme_name() -> str | None:
    """Load persisted UI theme name, returning ``None`` when unset/invalid."""
    value = load_config().get("theme")
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped if stripped else None


def load_agent_options() -> tuple[AgentOption, ...]:
    """Return configured agent options, or the built-in defaults."""
    configured = parse_agent_options(load_config().get("agents"))
    return configured if configured else DEFAULT_AGENT_OPTIONS


def load_last_custom_path() -> str | None:
    value = load_config().get("last_custom_path")
    if not isinstance(value, str) or not value.strip():
        return None
    return value.strip()


def save_last_custom_path(path: str) -> None:
    stripped = str(path).strip()
    if not stripped:
        return
    config = load_config()
    config["last_custom_path"] = stripped
    save_config(config)
