"""Shared defaults inherited by managed Thanos components."""

from pydantic import BaseModel, ConfigDict, Field


class DefaultsConfig(BaseModel):
    """Values shared across components; unset fields fall back to component defaults."""

    model_config = ConfigDict(extra="forbid")

    bin_path: str | None = Field(None, description="Path to the thanos binary")
    user: str | None = Field(None, description="User thanos processes run as")
    group: str | None = Field(None, description="Group thanos processes run as")
    max_open_files: int | None = Field(None, description="Maximum number of open file descriptors")
    log_level: str | None = Field(None, description="Thanos log level")
    log_format: str | None = Field(None, description="Thanos log format")
    tracing_config_file: str | None = Field(None, description="Path to tracing configuration")
    tsdb_path: str | None = Field(None, description="Prometheus TSDB data directory")
    objstore_config_file: str | None = Field(None, description="Path to object store configuration")
    env_vars: list[str] | None = Field(None, description="Environment assignments (KEY=VALUE)")
