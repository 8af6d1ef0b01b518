"""Abstract base class for service implementations (system service installers)."""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

from .ServiceStatus import ServiceStatus

if TYPE_CHECKING:
    from ..sidecar.ServiceDescriptor import ServiceDescriptor


class _AbstractImpl(ABC):
    """Abstract base class for platform-specific service implementations.

    Backends render a unit for a ServiceDescriptor and drive the host service
    manager. Failures of the service manager raise DownstreamInstallationError.
    """

    @abstractmethod
    def render_unit(self, descriptor: "ServiceDescriptor") -> str:
        """Render the service definition (unit file or plist) for descriptor."""
        pass

    @abstractmethod
    def apply(self, descriptor: "ServiceDescriptor") -> dict[str, Any]:
        """Install the unit and bring the service to descriptor.run_state.

        Returns:
            Dictionary with apply result (success, type, unit_path, run_state, changed)
        """
        pass

    @abstractmethod
    def uninstall_service(self, name: str) -> dict[str, Any]:
        """Stop the service and remove its unit.

        Returns:
            Dictionary with uninstallation result
        """
        pass

    @abstractmethod
    def get_service_status(self, name: str) -> ServiceStatus:
        """Get service status."""
        pass

    @abstractmethod
    def start_service(self, name: str) -> dict[str, Any]:
        """Start service via system service manager.

        Returns:
            Dictionary with start result (success plus error on failure)
        """
        pass

    @abstractmethod
    def stop_service(self, name: str) -> dict[str, Any]:
        """Stop service via system service manager.

        Returns:
            Dictionary with stop result (success plus error on failure)
        """
        pass
