"""Sidecar module - parameter normalization and service descriptor building."""

from .FlagMap import FLAG_FIELDS, build_flag_map
from .InvalidEnumValue import InvalidEnumValue
from .ServiceDescriptor import ServiceDescriptor
from .SidecarConfig import SidecarConfig
from .build_service_descriptor import build_service_descriptor
from .derive_run_state import derive_run_state
from .resolve_sidecar_config import resolve_sidecar_config

__all__ = [
    "FLAG_FIELDS",
    "InvalidEnumValue",
    "ServiceDescriptor",
    "SidecarConfig",
    "build_flag_map",
    "build_service_descriptor",
    "derive_run_state",
    "resolve_sidecar_config",
]
