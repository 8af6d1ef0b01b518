"""Linux service implementation - installs Thanos components as systemd services."""

import subprocess
from contextlib import suppress
from pathlib import Path
from typing import TYPE_CHECKING, Any

from ....constants import RUNNING, UNIT_PREFIX
from ....templating import render_template
from ....utils.logger import get_logger
from ..DownstreamInstallationError import DownstreamInstallationError
from .._AbstractImpl import _AbstractImpl
from ..ServiceConfig import ServiceConfig
from ..ServiceStatus import ServiceStatus
from ..render_command_line import render_command_line
from ._Data import _Data

if TYPE_CHECKING:
    from ...sidecar.ServiceDescriptor import ServiceDescriptor

logger = get_logger("service.linux")

_UNIT_TEMPLATE = """[Unit]
Description=Thanos {{ name }}
Wants=network-online.target
After=network-online.target

[Service]
Type=simple
User={{ user }}
Group={{ group }}
ExecStart={{ exec_start }}
{% for env in env_vars %}
Environment={{ env }}
{% endfor %}
{% if max_open_files is not none %}
LimitNOFILE={{ max_open_files }}
{% endif %}
Restart=always
RestartSec=10

[Install]
WantedBy={{ wanted_by }}
"""

# Characters that force an ExecStart/Environment argument into double quotes
_NEEDS_QUOTING = set(" \t\n\r\"';\\")


def _systemd_quote(arg: str, expand_vars: bool = True) -> str:
    """Quote one argument for ExecStart/Environment.

    ``%`` is always doubled so systemd does not expand specifiers. ``$`` is
    only doubled where systemd expands environment variables (ExecStart=);
    pass ``expand_vars=False`` for Environment= assignments. Newlines are
    written as C escapes inside quotes so a value cannot end the line.
    """
    arg = arg.replace("%", "%%")
    if expand_vars:
        arg = arg.replace("$", "$$")
    if not arg or any(ch in _NEEDS_QUOTING for ch in arg):
        escaped = arg.replace("\\", "\\\\").replace('"', '\\"').replace("\n", "\\n").replace("\r", "\\r")
        return f'"{escaped}"'
    return arg


class _Impl(_AbstractImpl):
    """Linux-specific service implementation using systemd system services."""

    @staticmethod
    def _get_unit_name(name: str) -> str:
        """Get the systemd unit name for a component (thanos-sidecar.service)."""
        return f"{UNIT_PREFIX}-{name}.service"

    def _get_unit_path(self, name: str) -> Path:
        """Get the systemd unit file path for a component."""
        return Path(self._data.unit_dir) / self._get_unit_name(name)

    @staticmethod
    def _systemctl(*args: str) -> subprocess.CompletedProcess:
        """Run systemctl, raising DownstreamInstallationError on failure."""
        command = ["systemctl", *args]
        logger.info("Running %s", " ".join(command))
        try:
            return subprocess.run(command, check=True, capture_output=True, text=True)
        except subprocess.CalledProcessError as e:
            stderr = e.stderr.strip() if e.stderr else ""
            raise DownstreamInstallationError(
                f"systemctl {' '.join(args)} failed: {stderr}" if stderr else f"systemctl {' '.join(args)} failed"
            ) from e
        except FileNotFoundError as e:
            raise DownstreamInstallationError(f"systemctl not found: {e}") from e

    def __init__(self, service_config: ServiceConfig):
        """Initialize Linux service implementation.

        Args:
            service_config: Service configuration with linux backend data.
        """
        if not isinstance(service_config.data, _Data):
            raise ValueError("Linux service config data is required")
        self.config = service_config
        self._data: _Data = service_config.data

    def render_unit(self, descriptor: "ServiceDescriptor") -> str:
        """Create systemd unit file content for descriptor."""
        exec_start = " ".join(_systemd_quote(arg) for arg in render_command_line(descriptor))
        return render_template(
            _UNIT_TEMPLATE,
            {
                "name": descriptor.name,
                "user": descriptor.user,
                "group": descriptor.group,
                "exec_start": exec_start,
                "env_vars": [_systemd_quote(env, expand_vars=False) for env in descriptor.env_vars],
                "max_open_files": descriptor.max_open_files,
                "wanted_by": self._data.wanted_by,
            },
        )

    def apply(self, descriptor: "ServiceDescriptor") -> dict[str, Any]:
        """Write the unit file, reload systemd and start or stop the service.

        A changed unit is restarted rather than started so new flags take effect.
        """
        unit_name = self._get_unit_name(descriptor.name)
        unit_path = self._get_unit_path(descriptor.name)
        unit_content = self.render_unit(descriptor)

        try:
            changed = not unit_path.exists() or unit_path.read_text(encoding="utf-8") != unit_content
            if changed:
                unit_path.parent.mkdir(parents=True, exist_ok=True)
                unit_path.write_text(unit_content, encoding="utf-8")
                logger.info("Wrote unit file %s", unit_path)
        except OSError as e:
            raise DownstreamInstallationError(f"Failed to write unit file {unit_path}: {e}") from e

        self._systemctl("daemon-reload")

        if descriptor.run_state == RUNNING:
            self._systemctl("enable" if self._data.enabled else "disable", unit_name)
            self._systemctl("restart" if changed else "start", unit_name)
        else:
            self._systemctl("stop", unit_name)
            self._systemctl("disable", unit_name)

        return {
            "success": True,
            "type": "linux",
            "unit_name": unit_name,
            "unit_path": str(unit_path),
            "run_state": descriptor.run_state,
            "changed": changed,
        }

    def uninstall_service(self, name: str) -> dict[str, Any]:
        """Stop, disable and remove a systemd service."""
        unit_name = self._get_unit_name(name)
        unit_path = self._get_unit_path(name)

        # Stop and disable are best effort; the unit may never have been loaded
        for action in ("stop", "disable"):
            with suppress(DownstreamInstallationError):
                self._systemctl(action, unit_name)

        if unit_path.exists():
            unit_path.unlink()
            logger.info("Removed unit file %s", unit_path)

        self._systemctl("daemon-reload")

        return {
            "success": True,
            "type": "linux",
            "unit_name": unit_name,
        }

    def get_service_status(self, name: str) -> ServiceStatus:
        """Get systemd service status."""
        unit_name = self._get_unit_name(name)
        unit_path = self._get_unit_path(name)
        status = ServiceStatus(installed=unit_path.exists(), unit_path=str(unit_path))
        if not status.installed:
            return status

        result = subprocess.run(
            ["systemctl", "is-active", unit_name],
            capture_output=True,
            text=True,
            check=False,
        )
        status.running = result.returncode == 0

        if status.running:
            pid_result = subprocess.run(
                ["systemctl", "show", unit_name, "--property=MainPID", "--value"],
                capture_output=True,
                text=True,
                check=False,
            )
            if pid_result.returncode == 0:
                pid_str = pid_result.stdout.strip()
                if pid_str and pid_str != "0":
                    with suppress(ValueError):
                        status.pid = int(pid_str)

        return status

    def start_service(self, name: str) -> dict[str, Any]:
        """Start service via systemctl."""
        unit_path = self._get_unit_path(name)
        if not unit_path.exists():
            return {
                "success": False,
                "error": f"Service unit file not found at {unit_path}. Apply the sidecar first.",
            }

        try:
            self._systemctl("start", self._get_unit_name(name))
        except DownstreamInstallationError as e:
            return {"success": False, "error": str(e)}

        return {
            "success": True,
            "type": "linux",
            "unit_name": self._get_unit_name(name),
        }

    def stop_service(self, name: str) -> dict[str, Any]:
        """Stop service via systemctl."""
        unit_name = self._get_unit_name(name)
        try:
            self._systemctl("stop", unit_name)
        except DownstreamInstallationError as e:
            error_msg = str(e)
            # Stopping a unit that is not loaded is already the desired state
            if "not loaded" in error_msg.lower() or "not found" in error_msg.lower():
                return {
                    "success": True,
                    "type": "linux",
                    "unit_name": unit_name,
                    "note": "Service was not running (already stopped).",
                }
            return {"success": False, "error": error_msg}

        return {
            "success": True,
            "type": "linux",
            "unit_name": unit_name,
        }
