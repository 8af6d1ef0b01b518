"""Output schemas for service commands."""

from pydantic import Field

from ..schema_registry import schema_registry
from ._base import BaseOutputSchema


class ServiceStatusOutput(BaseOutputSchema):
    """Output schema for service status command."""
    installed: bool = Field(..., description="Whether the unit file exists")
    running: bool = Field(..., description="Whether the service is running")
    pid: int = Field(..., description="Process ID if running, -1 if not running")
    unit_path: str = Field(..., description="Path to the unit file")


class ServiceStartOutput(BaseOutputSchema):
    """Output schema for service start command."""
    message: str = Field(..., description="Human readable outcome")
    running: bool = Field(..., description="Whether the service is running after the call")


class ServiceStopOutput(BaseOutputSchema):
    """Output schema for service stop command."""
    message: str = Field(..., description="Human readable outcome")
    stopped: bool = Field(..., description="Whether the service is stopped after the call")


class ServiceUninstallOutput(BaseOutputSchema):
    """Output schema for service uninstall command."""
    message: str = Field(..., description="Human readable outcome")
    uninstalled: bool = Field(..., description="Whether the unit was removed")


schema_registry.register_output_schema("service", "status", ServiceStatusOutput)
schema_registry.register_output_schema("service", "start", ServiceStartOutput)
schema_registry.register_output_schema("service", "stop", ServiceStopOutput)
schema_registry.register_output_schema("service", "uninstall", ServiceUninstallOutput)
