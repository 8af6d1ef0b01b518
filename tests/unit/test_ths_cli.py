"""Unit tests for the thsc CLI entry point."""

import json

import pytest
import yaml

from ths.cli import main


def test_no_command_prints_help(capsys):
    assert main([]) == 0
    assert "sidecar" in capsys.readouterr().out


def test_invalid_display_format(capsys, ths_home):
    assert main(["-d", "xml", "config", "version"]) == 1
    assert "--display must be 'json' or 'yaml'" in capsys.readouterr().err


def test_unknown_command():
    assert main(["query"]) == 1


def test_config_version_json(capsys, ths_home):
    assert main(["-d", "json", "config", "version"]) == 0
    output = json.loads(capsys.readouterr().out)
    assert output["errors"] == []
    assert output["version"]


def test_config_show_yaml(capsys, ths_home):
    assert main(["config", "show", "service"]) == 0
    output = yaml.safe_load(capsys.readouterr().out)
    assert output["section"] == "service"
    assert output["content"]["type"] == "linux"


def test_sidecar_render_json(capsys, write_config, minimal_config_dict):
    write_config({**minimal_config_dict, "sidecar": {"tsdb_path": "/var/lib/prometheus"}})

    assert main(["-d", "json", "sidecar", "render"]) == 0
    output = json.loads(capsys.readouterr().out)
    assert output["run_state"] == "running"
    assert output["flags"]["tsdb.path"] == "/var/lib/prometheus"
    assert output["command"][:2] == ["/usr/local/bin/thanos", "sidecar"]
    assert "ExecStart=/usr/local/bin/thanos sidecar" in output["unit"]


def test_sidecar_render_invalid_enum_exits_nonzero(capsys, write_config, minimal_config_dict):
    write_config({**minimal_config_dict, "sidecar": {"log_level": "verbose"}})

    assert main(["-d", "json", "sidecar", "render"]) == 1
    output = json.loads(capsys.readouterr().out)
    assert "log_level" in output["errors"][0]


@pytest.mark.service
def test_service_status_json(capsys, ths_home, fake_run):
    assert main(["-d", "json", "service", "status"]) == 0
    output = json.loads(capsys.readouterr().out)
    assert output["installed"] is False
    assert fake_run.calls == []


def test_sidecar_render_reports_override_warning(capsys, write_config, minimal_config_dict):
    write_config({**minimal_config_dict, "sidecar": {"extra_params": {"log.level": "debug"}}})

    assert main(["-d", "json", "sidecar", "render"]) == 0
    captured = capsys.readouterr()
    output = json.loads(captured.out)
    assert output["flags"]["log.level"] == "debug"
    assert "extra_params overrides typed flag 'log.level'" in captured.err


def test_undecodable_config_is_reported_by_command(capsys, ths_home):
    (ths_home / "config.json").write_bytes(b"\xff\xfe{}")

    assert main(["-d", "json", "config", "show", "service"]) == 1
    output = json.loads(capsys.readouterr().out)
    assert "Cannot read config file" in output["errors"][0]
