"""Service public API - installs and manages Thanos components as system services."""

import importlib
import platform
from typing import TYPE_CHECKING, Any

from .ServiceConfig import ServiceConfig, _BACKEND_REGISTRY
from .ServiceStatus import ServiceStatus
from ._AbstractImpl import _AbstractImpl

if TYPE_CHECKING:
    from ..sidecar.ServiceDescriptor import ServiceDescriptor


class Service:
    """Public API for service operations."""

    def __init__(self, service_config: ServiceConfig):
        self.service_config = service_config
        self._impl: _AbstractImpl | None = None

    @staticmethod
    def detect_os() -> str:
        """Detect the current operating system and check if a backend is registered.

        Returns:
            OS identifier matching platform.system().lower() (e.g., "darwin", "linux")

        Raises:
            RuntimeError: If no backend exists for the OS
        """
        system = platform.system().lower()
        if system not in _BACKEND_REGISTRY:
            raise RuntimeError(f"Unsupported operating system: {system} (supported: {list(_BACKEND_REGISTRY.keys())})")
        return system

    def __enter__(self):
        backend_type = self.service_config.type
        if backend_type not in _BACKEND_REGISTRY:
            raise ValueError(f"Unsupported backend type: {backend_type!r} (supported: {list(_BACKEND_REGISTRY.keys())})")

        # Import implementation class directly from backend _Impl module
        module = importlib.import_module(f"ths.api.service._{backend_type}._Impl")
        self._impl = module._Impl(self.service_config)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        return False

    def _require_impl(self) -> _AbstractImpl:
        if not self._impl:
            raise RuntimeError("Service not initialized. Use as context manager first.")
        return self._impl

    def render_unit(self, descriptor: "ServiceDescriptor") -> str:
        """Render the unit file or plist for descriptor without touching the system."""
        return self._require_impl().render_unit(descriptor)

    def apply(self, descriptor: "ServiceDescriptor") -> dict[str, Any]:
        """Install descriptor and bring the service to its run-state.

        Raises:
            DownstreamInstallationError: If the service manager fails
        """
        return self._require_impl().apply(descriptor)

    def get_service_status(self, name: str) -> ServiceStatus:
        """Get service status."""
        return self._require_impl().get_service_status(name)

    def uninstall_service(self, name: str) -> dict[str, Any]:
        """Uninstall system service."""
        return self._require_impl().uninstall_service(name)

    def start_service(self, name: str) -> dict[str, Any]:
        """Start service via system service manager."""
        return self._require_impl().start_service(name)

    def stop_service(self, name: str) -> dict[str, Any]:
        """Stop service via system service manager."""
        return self._require_impl().stop_service(name)
