"""Linux (systemd) specific service configuration data."""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class _Data(BaseModel):
    """Linux systemd service configuration data."""

    model_config = ConfigDict(extra="forbid")

    unit_dir: str = Field("/etc/systemd/system", description="Directory unit files are written to")
    enabled: bool = Field(True, description="Whether a running service should also start on boot")
    wanted_by: str = Field("multi-user.target", description="Target the unit is installed into")

    @field_validator("wanted_by")
    @classmethod
    def validate_wanted_by(cls, v: str) -> str:
        if not v.endswith(".target"):
            raise ValueError(f"service.data.wanted_by must be a systemd target (e.g., 'multi-user.target'), got: {v!r}")
        return v
