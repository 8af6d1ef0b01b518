"""macOS (launchd) specific service configuration data."""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class _Data(BaseModel):
    """macOS launchd service configuration data."""

    model_config = ConfigDict(extra="forbid")

    label_prefix: str = Field("io.thanos", description="Reverse DNS prefix; the label is '<prefix>.<component>'")
    plist_dir: str = Field("/Library/LaunchDaemons", description="Directory plist files are written to")
    domain: str = Field("system", description="launchctl domain target (e.g., 'system' or 'gui/501')")
    keep_alive: bool = Field(True, description="Whether launchd should restart the process if it exits")

    @field_validator("label_prefix")
    @classmethod
    def validate_label_prefix(cls, v: str) -> str:
        if not v:
            raise ValueError("service.data.label_prefix is required when service.type is 'darwin'")
        parts = v.split(".")
        if len(parts) < 2 or not all(parts):
            raise ValueError(f"service.data.label_prefix must be in reverse DNS format (e.g., 'io.thanos'), got: {v!r}")
        return v
