"""Get path to THS config file."""

from pathlib import Path

from ...utils.get_home_dir import get_home_dir


def get_config_path() -> Path:
    """Get path to THS config file."""
    return get_home_dir("config.json")
