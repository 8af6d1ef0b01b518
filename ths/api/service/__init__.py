"""Service module - service installation and management."""

from .DownstreamInstallationError import DownstreamInstallationError
from .ServiceConfig import ServiceConfig
from .ServiceStatus import ServiceStatus

__all__ = [
    "DownstreamInstallationError",
    "ServiceConfig",
    "ServiceStatus",
]
