"""Static settings for minigrep.

Ambient settings (currently logging) live in an optional JSON file so they
can be tweaked without touching Python. The search itself is configured only
from the command line and the environment.
"""

from __future__ import annotations

import json
import os
from typing import Optional

from minigrep.core.config import ConfigurationError

# Overrides the settings file location.
SETTINGS_ENV = "MINIGREP_SETTINGS"

# Looked up in the working directory, like the .env file.
DEFAULT_SETTINGS_NAME = "minigrep.json"


def settings_path() -> str:
    return os.getenv(SETTINGS_ENV) or os.path.join(os.getcwd(), DEFAULT_SETTINGS_NAME)


def load_settings(path: Optional[str] = None) -> dict:
    """Load the settings file, returning an empty dict when there is none."""

    path = path or settings_path()
    if not os.path.exists(path):
        return {}

    try:
        with open(path, "r", encoding="utf-8") as handle:
            data = json.load(handle)
    except json.JSONDecodeError as exc:
        raise ConfigurationError(f"invalid settings file {path}: {exc}") from exc

    if not isinstance(data, dict):
        raise ConfigurationError(f"settings file {path} must hold a JSON object")
    return data


def logging_settings(settings: dict) -> dict:
    """Return the logging section with defaults filled in.

    Logging is off unless enabled, so stdout and stderr carry only the tool's
    own output by default.
    """

    raw = settings.get("logging", {}) or {}
    file_cfg = raw.get("file", {}) or {}
    return {
        "enabled": bool(raw.get("enabled", False)),
        "level": str(raw.get("level", "INFO")).upper(),
        "console": bool(raw.get("console", True)),
        "file": {
            "enabled": bool(file_cfg.get("enabled", False)),
            "path": file_cfg.get("path", "logs/minigrep.log"),
            "max_bytes": int(file_cfg.get("max_bytes", 5 * 1024 * 1024)),
            "backup_count": int(file_cfg.get("backup_count", 5)),
        },
    }
