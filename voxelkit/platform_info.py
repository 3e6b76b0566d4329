"""Platform-dependent file locations and locale detection."""

from __future__ import annotations

import locale
from pathlib import Path

SETTINGS_FILE = "settings.toml"
CONTROLS_FILE = "controls.json"


def settings_file() -> Path:
    """Return the path of the settings file."""
    return Path(SETTINGS_FILE)


def controls_file() -> Path:
    """Return the path of the controls file."""
    return Path(CONTROLS_FILE)


def detect_locale() -> str:
    """Return "ru_RU" if the current locale is Russian, else "en_US"."""
    name = locale.setlocale(locale.LC_ALL, None) or ""
    if "ru_RU" in name:
        return "ru_RU"
    return "en_US"