import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from .get_home_dir import get_home_dir

# Prevent multiple configurations
_CONFIGURED = False


def configure_logging(ths_home: Path | None = None, level: int = logging.INFO) -> None:
    """Configure unified THS logging.

    Args:
        ths_home: Path to THS home directory. If None, derived from environment.
        level: Level for the ``ths`` logger tree.
    """
    global _CONFIGURED
    if _CONFIGURED:
        return

    if ths_home is None:
        ths_home = get_home_dir()

    # Ensure directory exists
    ths_home.mkdir(parents=True, exist_ok=True)
    log_file = ths_home / "ths.log"

    root_logger = logging.getLogger("ths")
    root_logger.setLevel(level)

    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=5 * 1024 * 1024,
        backupCount=3,  # 5MB * 3
    )
    file_handler.setFormatter(formatter)
    root_logger.addHandler(file_handler)

    _CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for the given name.

    Logging is configured explicitly at CLI entry; library code only asks for loggers.
    """
    return logging.getLogger(f"ths.{name}")
