"""Config API module."""

from .AppConfig import AppConfig
from .ConfigError import ConfigError

__all__ = ["AppConfig", "ConfigError"]
