"""Display factory for CLI output."""

from collections.abc import Callable
from typing import Literal

from .Display import Display

DisplayMode = Literal["cli"]


def _build_factories() -> dict[str, Callable[[], Display]]:
    from ths.cli.display import CLIDisplay

    return {"cli": CLIDisplay}


def get_display(mode: DisplayMode = "cli") -> Display:
    """Get display implementation for ``mode``.

    Raises:
        ValueError: If no display is registered for ``mode``
    """
    factories = _build_factories()
    factory = factories.get(mode)
    if factory is None:
        raise ValueError(f"Unsupported display mode: {mode} (supported: {sorted(factories)})")
    return factory()
