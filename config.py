"""
Project configuration and constants.
"""
from pathlib import Path
import json
import logging
from typing import Any, Dict, Optional, Union

logger = logging.getLogger("inventory_forecaster.config")

# Days of sales retained per product (ring capacity H)
HISTORY_DAYS = 30

# Default forecast parameters (can be overridden via settings.json)
DEFAULT_WINDOW_DAYS = 7
DEFAULT_HORIZON_DAYS = 14
DEFAULT_TOP_K = 5

# Moving-average windows shown in reports
FORECAST_WINDOWS = (7, 14, 30)

DEFAULT_SETTINGS: Dict[str, int] = {
    "history_days": HISTORY_DAYS,
    "window_days": DEFAULT_WINDOW_DAYS,
    "horizon_days": DEFAULT_HORIZON_DAYS,
    "top_k": DEFAULT_TOP_K,
}


# ============================================================
# Settings file
# ============================================================

def get_settings_file() -> Path:
    """Default location of settings.json (inside the data directory)."""
    from inventory_forecaster.utils.paths import get_settings_path  # noqa: PLC0415
    return get_settings_path()


def load_settings(path: Optional[Union[str, Path]] = None) -> Dict[str, int]:
    """
    Load settings from JSON, merged over DEFAULT_SETTINGS.

    A missing or unreadable file yields the defaults. Keys that are unknown
    are ignored; values that are not integers >= 1 are ignored with a warning.

    Args:
        path: settings.json location (default: data dir)

    Returns:
        Dict with history_days, window_days, horizon_days, top_k
    """
    settings = dict(DEFAULT_SETTINGS)
    settings_file = Path(path) if path is not None else get_settings_file()

    if not settings_file.exists():
        return settings

    try:
        with open(settings_file, 'r', encoding='utf-8') as f:
            raw: Any = json.load(f)
    except (json.JSONDecodeError, IOError) as e:
        logger.warning(f"Cannot read settings from {settings_file}: {e}; using defaults")
        return settings

    if not isinstance(raw, dict):
        logger.warning(f"Settings file {settings_file} is not a JSON object; using defaults")
        return settings

    for key in DEFAULT_SETTINGS:
        if key not in raw:
            continue
        value = raw[key]
        if isinstance(value, bool) or not isinstance(value, int) or value < 1:
            from inventory_forecaster.utils.error_formatting import ErrorFormatter  # noqa: PLC0415
            error_ctx = ErrorFormatter.format_validation_error(
                key, value, "positive integer", expected="a whole number >= 1"
            )
            logger.warning(f"Ignoring setting from {settings_file.name}: {error_ctx.format_for_log()}")
            continue
        settings[key] = value

    return settings


def save_settings(settings: Dict[str, int], path: Optional[Union[str, Path]] = None) -> bool:
    """
    Write settings to JSON, keeping unrelated keys already in the file.

    Returns:
        True if successful, False otherwise
    """
    settings_file = Path(path) if path is not None else get_settings_file()

    current: Dict[str, Any] = {}
    if settings_file.exists():
        try:
            with open(settings_file, 'r', encoding='utf-8') as f:
                current = json.load(f)
        except (json.JSONDecodeError, IOError):
            current = {}  # Start with empty settings
        if not isinstance(current, dict):
            current = {}

    current.update({k: v for k, v in settings.items() if k in DEFAULT_SETTINGS})

    try:
        settings_file.parent.mkdir(parents=True, exist_ok=True)
        with open(settings_file, 'w', encoding='utf-8') as f:
            json.dump(current, f, indent=2)
        return True
    except IOError as e:
        logger.warning(f"Cannot write settings to {settings_file}: {e}")
        return False
