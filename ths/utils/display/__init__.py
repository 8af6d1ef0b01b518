"""Display abstractions."""

from .Display import Display
from .context import get_display

__all__ = ["Display", "get_display"]
