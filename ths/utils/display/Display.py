"""Display interface used by the command runner."""

from abc import ABC, abstractmethod
from typing import Any


class Display(ABC):
    """Where the four command stages are written.

    Status, progress and result messages are meant for a human; ``json_output``
    carries the validated command output and must stay machine-readable.
    """

    @abstractmethod
    def status(self, message: str, **kwargs) -> None:
        """Announce a command."""

    @abstractmethod
    def info(self, message: str, **kwargs) -> None:
        """Report progress."""

    @abstractmethod
    def success(self, message: str, **kwargs) -> None: ...

    @abstractmethod
    def error(self, message: str, **kwargs) -> None:
        """Report a failed command; ``details`` adds a dimmed second line."""

    @abstractmethod
    def warning(self, message: str, **kwargs) -> None:
        """Report a non-fatal problem listed in the output ``warnings``."""

    @abstractmethod
    def json_output(self, data: Any, **kwargs) -> None:
        """Write command output as ``format`` ("json" or "yaml", default yaml)."""
