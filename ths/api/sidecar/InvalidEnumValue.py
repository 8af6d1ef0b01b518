"""Error raised when an enumerated sidecar field is outside its closed set."""

from collections.abc import Iterable
from typing import Any


class InvalidEnumValue(Exception):
    """An enumerated field holds a value outside its allowed set.

    Not a ValueError, so it propagates out of pydantic validation unwrapped.
    """

    def __init__(self, field: str, value: Any, allowed: Iterable[str]):
        self.field = field
        self.value = value
        self.allowed = tuple(allowed)
        super().__init__(f"Invalid value for {field}: {value!r} (allowed: {', '.join(self.allowed)})")
