"""Configuration loading error."""


class ConfigError(Exception):
    """Raised when the config file is missing, unreadable or invalid."""
