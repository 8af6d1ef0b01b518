"""Output schemas for config commands."""

from typing import Any

from pydantic import Field

from ..schema_registry import schema_registry
from ._base import BaseOutputSchema


class ConfigShowOutput(BaseOutputSchema):
    """Output schema for config show command."""
    section: str = Field(..., description="Section shown, empty string when listing sections")
    content: dict[str, Any] = Field(..., description="Section content or {'sections': [...]}")
    config_path: str = Field(..., description="Path to config file")


class ConfigVersionOutput(BaseOutputSchema):
    """Output schema for config version command."""
    version: str = Field(..., description="Installed package version")


schema_registry.register_output_schema("config", "show", ConfigShowOutput)
schema_registry.register_output_schema("config", "version", ConfigVersionOutput)
