"""Get THS home directory path or path under it."""

import os
from pathlib import Path

from ..constants import THS_HOME_EXT


def get_home_dir(*parts: str) -> Path:
    """Get THS home directory path or path under it.

    Checks THS_HOME environment variable first, defaults to ~/.ths if not set.

    Args:
        *parts: Optional path components to join (e.g., "config.json", "ths.log")

    Returns:
        Absolute path to THS home directory or subpath under it

    Examples:
        >>> get_home_dir()
        Path("/home/user/.ths")
        >>> get_home_dir("config.json")
        Path("/home/user/.ths/config.json")
    """
    ths_home_env = os.environ.get("THS_HOME")
    if ths_home_env:
        ths_home = Path(ths_home_env).expanduser().resolve()
    else:
        # Check HOME environment variable (for test isolation)
        home_env = os.environ.get("HOME")
        ths_home = Path(home_env) / THS_HOME_EXT if home_env else Path.home() / THS_HOME_EXT

    return ths_home / Path(*parts) if parts else ths_home
