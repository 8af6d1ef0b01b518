"""Top-level THS configuration."""

import json
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ..service.ServiceConfig import ServiceConfig
from .ConfigError import ConfigError
from .DefaultsConfig import DefaultsConfig
from .LogConfig import LogConfig
from .get_config_path import get_config_path


class AppConfig(BaseModel):
    """Top-level configuration for THS."""

    model_config = ConfigDict(extra="forbid")

    defaults: DefaultsConfig = Field(default_factory=DefaultsConfig)
    sidecar: dict[str, Any] = Field(default_factory=dict, description="Sidecar parameters, resolved against defaults")
    service: ServiceConfig
    log: LogConfig = Field(default_factory=LogConfig)

    @classmethod
    def load(cls) -> "AppConfig":
        """Load and validate config from file.

        Only the service section is required. The sidecar section stays a raw
        mapping here; it is validated when resolved against defaults.

        Raises:
            ConfigError: If config file not found, invalid JSON, or validation error
        """
        path = get_config_path()

        if not path.exists():
            raise ConfigError(f"Configuration file not found at {path}")

        try:
            with path.open(encoding="utf-8") as fh:
                raw = json.load(fh)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON in config file {path}: {e}") from e
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigError(f"Cannot read config file {path}: {e}") from e

        try:
            return cls(**raw)
        except ValidationError as e:
            error_list = e.errors() or [{"msg": str(e), "loc": ()}]
            first = error_list[0]
            error_msg = first.get("msg", str(e))
            loc = first.get("loc", ())
            field = ".".join(str(x) for x in loc) if isinstance(loc, (list, tuple)) else ""
            detail = f"{field}: {error_msg}" if field else error_msg
            raise ConfigError(f"Configuration validation error: {detail}") from e
        except TypeError as e:
            raise ConfigError(f"Configuration validation error: {e}") from e

    def to_dict(self) -> dict[str, Any]:
        """Convert AppConfig instance to a dictionary for serialization."""
        return {
            "defaults": self.defaults.model_dump(exclude_none=True),
            "sidecar": dict(self.sidecar),
            "service": self.service.model_dump(),
            "log": self.log.model_dump(),
        }
