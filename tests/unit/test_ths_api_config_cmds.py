"""Unit tests for ths.api.config cmd_show / cmd_version."""

import pytest

from ths.api.config.cmd_show import cmd_show
from ths.api.config.cmd_version import cmd_version

pytestmark = pytest.mark.config


def test_show_lists_sections(ths_home, run_cmd):
    result = run_cmd(cmd_show)

    assert result.success is True
    assert result.output["section"] == ""
    assert result.output["content"] == {"sections": ["defaults", "sidecar", "service", "log"]}
    assert result.output["config_path"] == str(ths_home / "config.json")


def test_show_section(ths_home, run_cmd):
    result = run_cmd(cmd_show, "service")

    assert result.success is True
    assert result.output["content"]["type"] == "linux"


def test_show_unknown_section(ths_home, run_cmd):
    result = run_cmd(cmd_show, "query")

    assert result.success is False
    assert result.output["errors"] == ["Unknown section: query"]


def test_show_config_error(tmp_path, monkeypatch, run_cmd):
    monkeypatch.setenv("THS_HOME", str(tmp_path))
    result = run_cmd(cmd_show, "service")

    assert result.success is False
    assert result.output["content"] == {}


def test_version(run_cmd):
    result = run_cmd(cmd_version)

    assert result.success is True
    assert result.output["version"]
    assert result.result == f"ths {result.output['version']}"
