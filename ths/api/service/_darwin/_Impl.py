"""macOS service implementation - installs Thanos components as launchd services."""

import subprocess
from contextlib import suppress
from pathlib import Path
from typing import TYPE_CHECKING, Any

from ....constants import RUNNING
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

logger = get_logger("service.darwin")

_PLIST_TEMPLATE = """<?xml version="1.0" encoding="UTF-8"?>
<!DOCTYPE plist PUBLIC "-//Apple//DTD PLIST 1.0//EN" "http://www.apple.com/DTDs/PropertyList-1.0.dtd">
<plist version="1.0">
<dict>
  <key>Label</key>
  <string>{{ label|e }}</string>
  <key>ProgramArguments</key>
  <array>
{% for arg in program_args %}
    <string>{{ arg|e }}</string>
{% endfor %}
  </array>
  <key>UserName</key>
  <string>{{ user|e }}</string>
  <key>GroupName</key>
  <string>{{ group|e }}</string>
{% if environment %}
  <key>EnvironmentVariables</key>
  <dict>
{% for key, value in environment.items() %}
    <key>{{ key|e }}</key>
    <string>{{ value|e }}</string>
{% endfor %}
  </dict>
{% endif %}
{% if max_open_files is not none %}
  <key>SoftResourceLimits</key>
  <dict>
    <key>NumberOfFiles</key>
    <integer>{{ max_open_files }}</integer>
  </dict>
  <key>HardResourceLimits</key>
  <dict>
    <key>NumberOfFiles</key>
    <integer>{{ max_open_files }}</integer>
  </dict>
{% endif %}
{% if disabled %}
  <key>Disabled</key>
  <true/>
{% endif %}
  <key>RunAtLoad</key>
  <{{ 'true' if run_at_load else 'false' }}/>
  <key>KeepAlive</key>
  <{{ 'true' if keep_alive else 'false' }}/>
</dict>
</plist>
"""


def _parse_env_vars(env_vars: list[str]) -> dict[str, str]:
    """Split KEY=VALUE assignments; an entry without '=' maps to an empty value."""
    environment: dict[str, str] = {}
    for assignment in env_vars:
        key, _, value = assignment.partition("=")
        environment[key] = value
    return environment


class _Impl(_AbstractImpl):
    """macOS-specific service implementation."""

    def _get_label(self, name: str) -> str:
        """Get the launchd label for a component (io.thanos.sidecar)."""
        return f"{self._data.label_prefix}.{name}"

    def _get_plist_path(self, name: str) -> Path:
        """Get the plist file path for a component."""
        return Path(self._data.plist_dir) / f"{self._get_label(name)}.plist"

    @staticmethod
    def _launchctl(*args: str) -> subprocess.CompletedProcess:
        """Run launchctl, raising DownstreamInstallationError on failure."""
        command = ["launchctl", *args]
        logger.info("Running %s", " ".join(command))
        try:
            return subprocess.run(command, check=True, capture_output=True, text=True)
        except subprocess.CalledProcessError as e:
            stderr = e.stderr.strip() if e.stderr else ""
            raise DownstreamInstallationError(
                f"launchctl {' '.join(args)} failed: {stderr}" if stderr else f"launchctl {' '.join(args)} failed"
            ) from e
        except FileNotFoundError as e:
            raise DownstreamInstallationError(f"launchctl not found: {e}") from e

    def _is_loaded(self, label: str) -> bool:
        result = subprocess.run(
            ["launchctl", "print", f"{self._data.domain}/{label}"],
            capture_output=True,
            text=True,
            check=False,
        )
        return result.returncode == 0

    def __init__(self, service_config: ServiceConfig):
        """Initialize macOS service implementation.

        Args:
            service_config: Service configuration with darwin backend data.
        """
        if not isinstance(service_config.data, _Data):
            raise ValueError("macOS service config data is required")
        self.config = service_config
        self._data: _Data = service_config.data

    def render_unit(self, descriptor: "ServiceDescriptor") -> str:
        """Create launchd plist XML content for descriptor.

        A stopped service is written disabled without KeepAlive so launchd does
        not start it again when the plist is next loaded.
        """
        running = descriptor.run_state == RUNNING
        return render_template(
            _PLIST_TEMPLATE,
            {
                "label": self._get_label(descriptor.name),
                "program_args": render_command_line(descriptor),
                "user": descriptor.user,
                "group": descriptor.group,
                "environment": _parse_env_vars(descriptor.env_vars),
                "max_open_files": descriptor.max_open_files,
                "run_at_load": running,
                "keep_alive": self._data.keep_alive and running,
                "disabled": not running,
            },
        )

    def apply(self, descriptor: "ServiceDescriptor") -> dict[str, Any]:
        """Write the plist and bootstrap (running) or boot out (stopped) the service.

        launchd has no reload; a loaded service is booted out before bootstrapping
        the new plist.
        """
        label = self._get_label(descriptor.name)
        plist_path = self._get_plist_path(descriptor.name)
        plist_content = self.render_unit(descriptor)

        try:
            changed = not plist_path.exists() or plist_path.read_text(encoding="utf-8") != plist_content
            if changed:
                plist_path.parent.mkdir(parents=True, exist_ok=True)
                plist_path.write_text(plist_content, encoding="utf-8")
                logger.info("Wrote plist %s", plist_path)
        except OSError as e:
            raise DownstreamInstallationError(f"Failed to write plist {plist_path}: {e}") from e

        loaded = self._is_loaded(label)
        if descriptor.run_state == RUNNING:
            if loaded and changed:
                self._launchctl("bootout", f"{self._data.domain}/{label}")
                loaded = False
            if not loaded:
                self._launchctl("bootstrap", self._data.domain, str(plist_path))
        elif loaded:
            self._launchctl("bootout", f"{self._data.domain}/{label}")

        return {
            "success": True,
            "type": "darwin",
            "label": label,
            "unit_path": str(plist_path),
            "run_state": descriptor.run_state,
            "changed": changed,
        }

    def uninstall_service(self, name: str) -> dict[str, Any]:
        """Boot out the service and remove its plist."""
        label = self._get_label(name)
        plist_path = self._get_plist_path(name)

        # Unloading is best effort; the service may never have been bootstrapped
        with suppress(DownstreamInstallationError):
            self._launchctl("bootout", f"{self._data.domain}/{label}")

        if plist_path.exists():
            plist_path.unlink()
            logger.info("Removed plist %s", plist_path)

        return {
            "success": True,
            "type": "darwin",
            "label": label,
        }

    def get_service_status(self, name: str) -> ServiceStatus:
        """Get launchd service status."""
        label = self._get_label(name)
        plist_path = self._get_plist_path(name)
        status = ServiceStatus(installed=plist_path.exists(), unit_path=str(plist_path))
        if not status.installed:
            return status

        result = subprocess.run(
            ["launchctl", "print", f"{self._data.domain}/{label}"],
            capture_output=True,
            text=True,
            check=False,
        )
        if result.returncode == 0:
            for line in result.stdout.splitlines():
                if line.strip().startswith("pid ="):
                    with suppress(ValueError, IndexError):
                        status.pid = int(line.split("=", 1)[1].strip())
        status.running = status.pid is not None
        return status

    def start_service(self, name: str) -> dict[str, Any]:
        """Start service via launchctl (bootstrap if not loaded, kickstart otherwise)."""
        label = self._get_label(name)
        plist_path = self._get_plist_path(name)

        if not plist_path.exists():
            return {
                "success": False,
                "error": f"Service plist not found at {plist_path}. Apply the sidecar first.",
            }

        try:
            if self._is_loaded(label):
                self._launchctl("kickstart", f"{self._data.domain}/{label}")
                action = "kickstarted"
            else:
                self._launchctl("bootstrap", self._data.domain, str(plist_path))
                action = "bootstrapped"
        except DownstreamInstallationError as e:
            return {"success": False, "error": str(e)}

        return {
            "success": True,
            "type": "darwin",
            "label": label,
            "action": action,
        }

    def stop_service(self, name: str) -> dict[str, Any]:
        """Stop service via launchctl bootout."""
        label = self._get_label(name)
        try:
            self._launchctl("bootout", f"{self._data.domain}/{label}")
        except DownstreamInstallationError as e:
            error_msg = str(e)
            if "No such process" in error_msg or "Could not find service" in error_msg:
                return {
                    "success": True,
                    "type": "darwin",
                    "label": label,
                    "note": "Service was not running (already stopped).",
                }
            return {"success": False, "error": error_msg}

        return {
            "success": True,
            "type": "darwin",
            "label": label,
        }
