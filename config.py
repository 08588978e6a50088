from __future__ import annotations

import os
import yaml
from pathlib import Path
from typing import Dict, Any

USER_CONFIG_PATH = Path.home() / ".checklist_config.yaml"

DEFAULTS: Dict[str, Any] = {
    "tick_rate": 1.0,
    "frame_rate": 30.0,
    "theme": "dark-olive",
    "log_file": str(Path.home() / ".checklist.log"),
    "log_level": "INFO",
    "status_ttl": 4.0,
}

_POSITIVE_FLOATS = ("tick_rate", "frame_rate", "status_ttl")
_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def config_path() -> Path:
    override = os.getenv("CHECKLIST_CONFIG", "").strip()
    return Path(override).expanduser() if override else USER_CONFIG_PATH


def _load_config() -> Dict[str, Any]:
    path = config_path()
    if not path.exists():
        return {}
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except Exception:
        return {}
    return data if isinstance(data, dict) else {}


def _positive_float(value: Any, default: float) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError):
        return default
    return number if number > 0 else default


def load_settings(overrides: Dict[str, Any] | None = None) -> Dict[str, Any]:
    """Defaults < config file < non-None ``overrides`` (CLI flags)."""
    settings = dict(DEFAULTS)
    settings.update({k: v for k, v in _load_config().items() if k in DEFAULTS})
    settings.update({k: v for k, v in (overrides or {}).items() if v is not None})
    for key in _POSITIVE_FLOATS:
        settings[key] = _positive_float(settings[key], DEFAULTS[key])
    settings["theme"] = str(settings["theme"] or DEFAULTS["theme"])
    level = str(settings["log_level"] or "").upper()
    settings["log_level"] = level if level in _LOG_LEVELS else DEFAULTS["log_level"]
    return settings
