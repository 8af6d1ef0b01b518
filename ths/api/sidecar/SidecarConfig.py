"""Typed parameter record for the Thanos sidecar service."""

from typing import Any, Literal, get_args

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

from .InvalidEnumValue import InvalidEnumValue

Ensure = Literal["present", "absent"]
LogLevel = Literal["debug", "info", "warn", "error", "fatal"]
LogFormat = Literal["logfmt", "json"]

_ENUM_FIELDS: dict[str, tuple[str, ...]] = {
    "ensure": get_args(Ensure),
    "log_level": get_args(LogLevel),
    "log_format": get_args(LogFormat),
}


class SidecarConfig(BaseModel):
    """Sidecar service parameters.

    Every optional field left as None is omitted from the flag map.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    ensure: Ensure = Field("present", description="Whether the sidecar should be present or absent")
    user: str = Field("thanos", description="User the process runs as")
    group: str = Field("thanos", description="Group the process runs as")
    bin_path: str = Field("/usr/local/bin/thanos", description="Path to the thanos binary")
    max_open_files: int | None = Field(None, description="Maximum number of open file descriptors")

    log_level: LogLevel = Field("info", description="Only log messages with the given severity or above")
    log_format: LogFormat = Field("logfmt", description="Output format of log messages")
    tracing_config_file: str | None = Field(None, description="Path to YAML file with tracing configuration")

    http_address: str = Field("0.0.0.0:10902", description="Listen host:port for HTTP endpoints")
    http_grace_period: str = Field("2m", description="Time to wait after an interrupt received for HTTP server")
    grpc_address: str = Field("0.0.0.0:10901", description="Listen ip:port address for gRPC endpoints")
    grpc_grace_period: str = Field("2m", description="Time to wait after an interrupt received for gRPC server")
    grpc_server_tls_cert: str | None = Field(None, description="TLS certificate for the gRPC server")
    grpc_server_tls_key: str | None = Field(None, description="TLS key for the gRPC server")
    grpc_server_tls_client_ca: str | None = Field(None, description="TLS CA to verify clients against")

    prometheus_url: str = Field("http://localhost:9090", description="URL at which to reach Prometheus's API")
    prometheus_ready_timeout: str = Field("10m", description="Maximum time to wait for the Prometheus instance")
    tsdb_path: str | None = Field(None, description="Data directory of the TSDB")

    reloader_config_file: str | None = Field(None, description="Config file watched by the reloader")
    reloader_config_envsubst_file: str | None = Field(None, description="Output file for environment substituted config")
    reloader_rule_dirs: list[str] = Field(default_factory=list, description="Rule directories for the reloader to watch")
    reloader_watch_interval: str = Field("3m", description="Controls how often reloader re-reads config and rules")
    reloader_retry_interval: str = Field("5s", description="Controls how often reloader retries config reload")

    objstore_config_file: str | None = Field(None, description="Path to YAML file that contains object store configuration")
    shipper_upload_compacted: bool = Field(False, description="Upload compacted blocks as well as fresh ones")
    min_time: str | None = Field(None, description="Start of time range limit to serve")

    extra_params: dict[str, Any] = Field(default_factory=dict, description="Unvalidated flags passed verbatim")
    env_vars: list[str] = Field(default_factory=list, description="Environment assignments (KEY=VALUE)")

    @field_validator("ensure", "log_level", "log_format", mode="before")
    @classmethod
    def validate_enum(cls, v: Any, info: ValidationInfo) -> Any:
        allowed = _ENUM_FIELDS[info.field_name]
        if v not in allowed:
            raise InvalidEnumValue(info.field_name, v, allowed)
        return v
