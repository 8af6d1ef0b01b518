"""Shared pytest configuration and fixtures for all tests."""

import json
import subprocess
from pathlib import Path

import pytest


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast unit tests")
    config.addinivalue_line("markers", "sidecar: sidecar descriptor tests")
    config.addinivalue_line("markers", "service: service backend tests")
    config.addinivalue_line("markers", "config: configuration tests")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        if "/unit/" in str(item.fspath):
            item.add_marker(pytest.mark.unit)


# =============================================================================
# Configuration Helpers
# =============================================================================


def minimal_config_dict(unit_dir: str = "/etc/systemd/system") -> dict:
    """Minimal valid THS configuration dict using the linux backend."""
    return {
        "service": {
            "type": "linux",
            "data": {
                "unit_dir": unit_dir,
                "enabled": True,
            },
        },
    }


@pytest.fixture(name="minimal_config_dict")
def minimal_config_dict_fixture(tmp_path: Path) -> dict:
    """Minimal config dict writing units under tmp_path/units."""
    return minimal_config_dict(unit_dir=str(tmp_path / "units"))


@pytest.fixture
def ths_home(tmp_path: Path, monkeypatch, minimal_config_dict: dict) -> Path:
    """Set up THS_HOME with a minimal config file.

    Returns:
        Path to the THS home directory
    """
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("THS_HOME", str(home))
    (home / "config.json").write_text(json.dumps(minimal_config_dict))
    return home


@pytest.fixture
def write_config(ths_home: Path):
    """Return a function that overwrites config.json in THS_HOME."""

    def _write(config: dict) -> Path:
        path = ths_home / "config.json"
        path.write_text(json.dumps(config))
        return path

    return _write


def run_cmd(cmd_func, *args, **kwargs):
    """Execute a cmd function and return the result with progress_callback executed."""
    result = cmd_func(*args, **kwargs)
    list(result.progress_callback(result))
    return result


@pytest.fixture(name="run_cmd")
def run_cmd_fixture():
    return run_cmd


# =============================================================================
# subprocess Helpers
# =============================================================================


class FakeRun:
    """Stand-in for subprocess.run that records commands.

    ``failures`` maps a command prefix tuple (e.g. ("systemctl", "start")) to
    the stderr of a CalledProcessError raised when check=True, or to a
    non-zero return code otherwise. ``stdout`` maps prefixes to stdout text.
    """

    def __init__(self):
        self.calls: list[list[str]] = []
        self.failures: dict[tuple[str, ...], str] = {}
        self.stdout: dict[tuple[str, ...], str] = {}

    def _match(self, table: dict, cmd: list[str]):
        for prefix, value in table.items():
            if tuple(cmd[: len(prefix)]) == prefix:
                return value
        return None

    def __call__(self, cmd, check=False, capture_output=False, text=False, **kwargs):  # noqa: ARG002
        self.calls.append(list(cmd))
        stderr = self._match(self.failures, cmd)
        stdout = self._match(self.stdout, cmd) or ""
        if stderr is not None:
            if check:
                raise subprocess.CalledProcessError(1, cmd, output=stdout, stderr=stderr)
            return subprocess.CompletedProcess(cmd, 1, stdout=stdout, stderr=stderr)
        return subprocess.CompletedProcess(cmd, 0, stdout=stdout, stderr="")

    def commands(self, tool: str) -> list[list[str]]:
        return [call[1:] for call in self.calls if call[0] == tool]


@pytest.fixture
def fake_run(monkeypatch) -> FakeRun:
    """Patch subprocess.run with a recording FakeRun."""
    fake = FakeRun()
    monkeypatch.setattr(subprocess, "run", fake)
    return fake
