"""Load and provide typed access to config.yaml."""

from pathlib import Path

import yaml

DEFAULTS = {
    "timezone": "America/Sao_Paulo",
    "time_sync": {
        "enabled": True,
        "url": "https://worldtimeapi.org/api/timezone/America/Sao_Paulo",
        "timeout_seconds": 5,
        "refresh_seconds": 300,
    },
    "theme": {"preference": "default"},
}


def load_config(path: Path | None = None) -> dict:
    """Load config.yaml and return as dict with defaults merged."""
    if path is None:
        path = python_root() / "config.yaml"
    with open(path) as f:
        cfg = yaml.safe_load(f) or {}

    # Merge one level of nested sections over defaults
    merged = {}
    for key, default in DEFAULTS.items():
        value = cfg.get(key)
        if isinstance(default, dict):
            merged[key] = {**default, **(value or {})}
        else:
            merged[key] = default if value is None else value
    for key, value in cfg.items():
        merged.setdefault(key, value)
    return merged


def python_root() -> Path:
    """Return the dataehora package directory."""
    return Path(__file__).parent.parent
