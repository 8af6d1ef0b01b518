"""Service descriptor DTO handed to the service installer."""

from dataclasses import asdict, dataclass, field
from typing import Any


@dataclass(frozen=True)
class ServiceDescriptor:
    """Everything a service backend needs to install and run one Thanos component."""

    name: str
    """Component name; used for the unit name and as the binary subcommand."""

    run_state: str
    """Desired run-state: 'running' or 'stopped'."""

    bin_path: str
    user: str
    group: str
    max_open_files: int | None = None

    flag_map: dict[str, Any] = field(default_factory=dict)
    """Typed flags in command-line order."""

    extra_params: dict[str, Any] = field(default_factory=dict)
    """Unvalidated flags; win over flag_map on collision."""

    env_vars: list[str] = field(default_factory=list)

    def merged_flags(self) -> dict[str, Any]:
        """Flags to render: flag_map overridden by extra_params.

        A colliding key keeps its flag_map position with the extra value;
        new keys follow in extra_params order.
        """
        return {**self.flag_map, **self.extra_params}

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
