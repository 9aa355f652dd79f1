"""JSON-based settings persistence for the date picker."""

import json
import os

from date_value import GREGORIAN, JALALI, DateValue
from errors import CalendarError
from iran_holidays import DEFAULT_KEYS
from logger import get_logger

logger = get_logger(__name__)

_SETTINGS_PATH = os.path.join(os.path.expanduser("~"), ".jalali-picker-settings.json")

_DEFAULTS = {
    "calendar_system": JALALI,
    "min_date": None,
    "max_date": None,
    "quick_dates": [1, 7, 30],
    "holidays": DEFAULT_KEYS,
    "holiday_color": "#E53935",
}


def load_settings(path: str | None = None) -> dict:
    """Load settings from disk, returning defaults for missing keys."""
    settings = dict(_DEFAULTS)
    settings["quick_dates"] = list(_DEFAULTS["quick_dates"])
    settings["holidays"] = list(_DEFAULTS["holidays"])
    try:
        with open(path or _SETTINGS_PATH, "r", encoding="utf-8") as f:
            stored = json.load(f)
    except FileNotFoundError:
        return settings
    except (json.JSONDecodeError, OSError) as exc:
        logger.warning("Ignoring unreadable settings file: %s", exc)
        return settings
    if not isinstance(stored, dict):
        logger.warning("Ignoring settings file without a JSON object")
        return settings

    if stored.get("calendar_system") in (JALALI, GREGORIAN):
        settings["calendar_system"] = stored["calendar_system"]
    for key in ("min_date", "max_date"):
        if isinstance(stored.get(key), str):
            settings[key] = stored[key]
    if isinstance(stored.get("quick_dates"), list):
        settings["quick_dates"] = [
            n for n in stored["quick_dates"]
            if isinstance(n, int) and not isinstance(n, bool) and n > 0
        ]
    if isinstance(stored.get("holidays"), list):
        settings["holidays"] = [k for k in stored["holidays"] if isinstance(k, str)]
    if isinstance(stored.get("holiday_color"), str):
        settings["holiday_color"] = stored["holiday_color"]
    return settings


def save_settings(settings: dict, path: str | None = None) -> None:
    """Persist settings to disk."""
    with open(path or _SETTINGS_PATH, "w", encoding="utf-8") as f:
        json.dump(settings, f, indent=2, ensure_ascii=False)


def bounds_from_settings(settings: dict) -> tuple[DateValue | None, DateValue | None]:
    """Parse the stored min/max bounds, dropping the ones that don't parse."""
    system = settings.get("calendar_system", JALALI)
    bounds = []
    for key in ("min_date", "max_date"):
        text = settings.get(key)
        value = None
        if text:
            try:
                value = DateValue.parse(system, text)
            except CalendarError as exc:
                logger.warning("Ignoring %s setting %r: %s", key, text, exc)
        bounds.append(value)
    lo, hi = bounds
    if lo is not None and hi is not None and lo.compare(hi) > 0:
        logger.warning("Ignoring bounds: min_date %s is after max_date %s", lo, hi)
        return None, None
    return lo, hi
