"""JSON-based settings persistence for the month-grid calendar."""

import json
import os
from datetime import date

SETTINGS_PATH = os.path.join(os.path.expanduser("~"), ".month-grid-calendar.json")

_DEFAULTS = {
    "first_day_of_week": 1,
    "last_day_of_week": None,
    "first_valid_day": None,
    "last_valid_day": None,
    "day_size": 48,
    "day_padding": 2,
    "categories": {},
    "disabled_days": [],
    "log_level": "INFO",
    "window_width": None,
}


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_iso_date(value) -> bool:
    if not isinstance(value, str):
        return False
    try:
        date.fromisoformat(value)
    except ValueError:
        return False
    return True


def load_settings(path: str = SETTINGS_PATH) -> dict:
    """Load settings from disk, returning defaults for missing keys."""
    settings = json.loads(json.dumps(_DEFAULTS))
    try:
        with open(path, "r", encoding="utf-8") as f:
            stored = json.load(f)
    except (FileNotFoundError, json.JSONDecodeError, OSError):
        return settings
    if not isinstance(stored, dict):
        return settings

    for key in ("first_day_of_week", "day_size", "day_padding"):
        if key in stored and _is_int(stored[key]):
            settings[key] = stored[key]
    if "last_day_of_week" in stored and (
            stored["last_day_of_week"] is None or _is_int(stored["last_day_of_week"])):
        settings["last_day_of_week"] = stored["last_day_of_week"]
    for key in ("first_valid_day", "last_valid_day"):
        if key in stored and (stored[key] is None or _is_iso_date(stored[key])):
            settings[key] = stored[key]
    if "categories" in stored and isinstance(stored["categories"], dict):
        settings["categories"] = {
            day: [c for c in colors if isinstance(c, str)]
            for day, colors in stored["categories"].items()
            if _is_iso_date(day) and isinstance(colors, list)
        }
    if "disabled_days" in stored and isinstance(stored["disabled_days"], list):
        settings["disabled_days"] = [d for d in stored["disabled_days"] if _is_iso_date(d)]
    if "log_level" in stored and isinstance(stored["log_level"], str):
        settings["log_level"] = stored["log_level"]
    if "window_width" in stored and _is_int(stored["window_width"]):
        settings["window_width"] = stored["window_width"]
    return settings


def save_settings(settings: dict, path: str = SETTINGS_PATH) -> None:
    """Persist settings to disk."""
    with open(path, "w", encoding="utf-8") as f:
        json.dump(settings, f, indent=2)


def parse_day(value: str | None) -> date | None:
    """Convert a stored ISO date string (or None) to a date."""
    return date.fromisoformat(value) if value else None
