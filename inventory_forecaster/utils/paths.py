"""
Path resolver for inventory-forecaster.

Rules
-----
* base_dir   → project root (two levels up from this file)
* data_dir   → base_dir/data  (portable first); fallback ~/InventoryForecaster/data
* logs_dir   → base_dir/logs  (portable first); fallback ~/InventoryForecaster/logs

An explicit INVENTORY_FORECASTER_HOME environment variable replaces base_dir.
"""

import os
from pathlib import Path

HOME_ENV_VAR = "INVENTORY_FORECASTER_HOME"

# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _get_base_dir() -> Path:
    """
    Return the application's root directory.

    inventory_forecaster/utils/paths.py → parent.parent.parent = project root
    """
    override = os.environ.get(HOME_ENV_VAR)
    if override:
        return Path(override).expanduser().resolve()
    return Path(__file__).resolve().parent.parent.parent


def _try_writable(path: Path) -> bool:
    """
    Return True if *path* can be created and used as a writable directory.

    Creates the directory if it does not exist and probes it with a canary file.
    """
    try:
        path.mkdir(parents=True, exist_ok=True)
        canary = path / ".write_probe"
        canary.touch()
        canary.unlink()
        return True
    except (OSError, PermissionError):
        return False


def _home_fallback_dir(sub: str) -> Path:
    """Return ~/InventoryForecaster/<sub>."""
    return Path.home() / "InventoryForecaster" / sub


def _resolve(sub: str) -> Path:
    primary = _get_base_dir() / sub
    if _try_writable(primary):
        return primary
    fallback = _home_fallback_dir(sub)
    fallback.mkdir(parents=True, exist_ok=True)
    return fallback


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def get_base_dir() -> Path:
    """Application root (project root, or $INVENTORY_FORECASTER_HOME)."""
    return _get_base_dir()


def get_data_dir() -> Path:
    """
    Data directory (settings.json, exported charts).

    Priority:
      1. <base_dir>/data
      2. ~/InventoryForecaster/data  ← fallback if base_dir is read-only
    """
    return _resolve("data")


def get_logs_dir() -> Path:
    """
    Logs directory.

    Priority:
      1. <base_dir>/logs
      2. ~/InventoryForecaster/logs
    """
    return _resolve("logs")


def get_settings_path() -> Path:
    """Full path to the JSON settings file (not created here)."""
    return get_data_dir() / "settings.json"
