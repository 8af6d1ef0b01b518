"""Resolve sidecar parameters against shared defaults."""

from typing import Any

from ..config.DefaultsConfig import DefaultsConfig
from .SidecarConfig import SidecarConfig


def resolve_sidecar_config(defaults: DefaultsConfig, overrides: dict[str, Any]) -> SidecarConfig:
    """Build a SidecarConfig from shared defaults and sidecar-specific values.

    Sidecar values win; unset defaults are ignored so SidecarConfig's own
    defaults apply.

    Raises:
        InvalidEnumValue: If an enumerated field is outside its allowed set
        pydantic.ValidationError: If any other field is invalid or unknown
    """
    inherited = defaults.model_dump(exclude_none=True)
    return SidecarConfig(**{**inherited, **overrides})
