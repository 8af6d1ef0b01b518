"""Hand the sidecar descriptor to the service installer."""

from typing import Any

from ...utils.logger import get_logger
from ..service.Service import Service
from ..service.ServiceConfig import ServiceConfig
from .SidecarConfig import SidecarConfig
from .build_service_descriptor import build_service_descriptor

logger = get_logger("sidecar")


def install_sidecar(config: SidecarConfig, service_config: ServiceConfig) -> dict[str, Any]:
    """Build the sidecar descriptor and apply it through the configured backend.

    Installer errors (DownstreamInstallationError) propagate unchanged.

    Returns:
        Backend apply result (success, type, unit_path, run_state, ...)
    """
    descriptor = build_service_descriptor(config)
    logger.info("Applying sidecar descriptor via %s backend (run_state=%s)", service_config.type, descriptor.run_state)
    with Service(service_config) as service:
        return service.apply(descriptor)
