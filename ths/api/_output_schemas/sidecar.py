"""Output schemas for sidecar commands."""

from typing import Any

from pydantic import Field

from ..schema_registry import schema_registry
from ._base import BaseOutputSchema


class SidecarRenderOutput(BaseOutputSchema):
    """Output schema for sidecar render command.

    All fields must always be present for consistency.
    """
    run_state: str = Field(..., description="Derived run-state ('running' or 'stopped'), empty string on error")
    flags: dict[str, Any] = Field(..., description="Merged flag map passed to the binary")
    command: list[str] = Field(..., description="Rendered command line, empty list on error")
    unit: str = Field(..., description="Rendered service unit content, empty string on error")


class SidecarApplyOutput(BaseOutputSchema):
    """Output schema for sidecar apply command."""
    type: str = Field(..., description="Service backend type (e.g., 'linux')")
    run_state: str = Field(..., description="Run-state requested from the service manager")
    unit_path: str = Field(..., description="Path to written unit file, empty string if not written")
    applied: bool = Field(..., description="Whether the descriptor was applied")


schema_registry.register_output_schema("sidecar", "render", SidecarRenderOutput)
schema_registry.register_output_schema("sidecar", "apply", SidecarApplyOutput)
