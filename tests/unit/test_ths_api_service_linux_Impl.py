"""Unit tests for the linux (systemd) service backend.

There is no good way to test driving systemd without replacing subprocess.run,
so every test here uses the fake_run fixture.
"""

from pathlib import Path

import pytest

from ths.api.service.DownstreamInstallationError import DownstreamInstallationError
from ths.api.service.ServiceConfig import ServiceConfig
from ths.api.service._linux._Impl import _Impl, _systemd_quote
from ths.api.sidecar.SidecarConfig import SidecarConfig
from ths.api.sidecar.build_service_descriptor import build_service_descriptor

pytestmark = pytest.mark.service


@pytest.fixture
def impl(tmp_path: Path) -> _Impl:
    return _Impl(ServiceConfig(type="linux", data={"unit_dir": str(tmp_path / "units")}))


def test_requires_linux_data():
    config = ServiceConfig(type="darwin", data={})
    with pytest.raises(ValueError, match="Linux service config data is required"):
        _Impl(config)


def test_render_unit_defaults(impl):
    unit = impl.render_unit(build_service_descriptor(SidecarConfig()))

    assert "Description=Thanos sidecar" in unit
    assert "User=thanos\nGroup=thanos\n" in unit
    assert (
        "ExecStart=/usr/local/bin/thanos sidecar --log.level=info --log.format=logfmt "
        "--http-address=0.0.0.0:10902 --http-grace-period=2m --grpc-address=0.0.0.0:10901 "
        "--grpc-grace-period=2m --prometheus.url=http://localhost:9090 --prometheus.ready_timeout=10m "
        "--reloader.watch-interval=3m --reloader.retry-interval=5s --shipper.upload-compacted=false\n"
    ) in unit
    assert "LimitNOFILE" not in unit
    assert "Environment=" not in unit
    assert "WantedBy=multi-user.target" in unit


def test_render_unit_limits_and_environment(impl):
    descriptor = build_service_descriptor(
        SidecarConfig(max_open_files=65536, env_vars=["GOMAXPROCS=2", "GREETING=hello world"])
    )
    unit = impl.render_unit(descriptor)

    assert "LimitNOFILE=65536\n" in unit
    assert "Environment=GOMAXPROCS=2\n" in unit
    assert 'Environment="GREETING=hello world"\n' in unit


def test_render_unit_repeats_rule_dir(impl):
    unit = impl.render_unit(build_service_descriptor(SidecarConfig(reloader_rule_dirs=["/r/a", "/r/b"])))
    assert "--reloader.rule-dir=/r/a --reloader.rule-dir=/r/b" in unit


def test_systemd_quote():
    assert _systemd_quote("--min-time=-2w") == "--min-time=-2w"
    assert _systemd_quote("--x=50%") == "--x=50%%"
    assert _systemd_quote("--x=$HOME") == "--x=$$HOME"
    assert _systemd_quote('--label=a "b"') == '"--label=a \\"b\\""'
    assert _systemd_quote("") == '""'


def test_systemd_quote_escapes_newlines():
    assert _systemd_quote("--label=a\nExecStartPre=/bin/true") == '"--label=a\\nExecStartPre=/bin/true"'
    assert _systemd_quote("X=a\r\nb", expand_vars=False) == '"X=a\\r\\nb"'


def test_render_unit_environment_keeps_dollar(impl):
    descriptor = build_service_descriptor(SidecarConfig(env_vars=["SECRET=a$b", "RATIO=50%"]))
    unit = impl.render_unit(descriptor)

    assert "Environment=SECRET=a$b\n" in unit
    assert "Environment=RATIO=50%%\n" in unit


def test_render_unit_newline_cannot_inject_directives(impl):
    descriptor = build_service_descriptor(
        SidecarConfig(extra_params={"label": "x\nExecStartPre=/bin/sh"}, env_vars=["A=1\nUser=root"])
    )
    unit = impl.render_unit(descriptor)

    assert "\nExecStartPre=" not in unit
    assert "\nUser=root" not in unit
    assert '"--label=x\\nExecStartPre=/bin/sh"' in unit
    assert 'Environment="A=1\\nUser=root"\n' in unit


def test_apply_running_new_unit(impl, fake_run, tmp_path):
    result = impl.apply(build_service_descriptor(SidecarConfig()))

    unit_path = tmp_path / "units" / "thanos-sidecar.service"
    assert unit_path.exists()
    assert result == {
        "success": True,
        "type": "linux",
        "unit_name": "thanos-sidecar.service",
        "unit_path": str(unit_path),
        "run_state": "running",
        "changed": True,
    }
    assert fake_run.commands("systemctl") == [
        ["daemon-reload"],
        ["enable", "thanos-sidecar.service"],
        ["restart", "thanos-sidecar.service"],
    ]


def test_apply_unchanged_unit_starts(impl, fake_run):
    descriptor = build_service_descriptor(SidecarConfig())
    impl.apply(descriptor)
    fake_run.calls.clear()

    result = impl.apply(descriptor)

    assert result["changed"] is False
    assert fake_run.commands("systemctl")[-1] == ["start", "thanos-sidecar.service"]


def test_apply_not_enabled_disables_unit(tmp_path, fake_run):
    impl = _Impl(ServiceConfig(type="linux", data={"unit_dir": str(tmp_path), "enabled": False}))
    impl.apply(build_service_descriptor(SidecarConfig()))
    assert fake_run.commands("systemctl") == [
        ["daemon-reload"],
        ["disable", "thanos-sidecar.service"],
        ["restart", "thanos-sidecar.service"],
    ]


def test_apply_stopped(impl, fake_run):
    result = impl.apply(build_service_descriptor(SidecarConfig(ensure="absent")))

    assert result["run_state"] == "stopped"
    assert fake_run.commands("systemctl") == [
        ["daemon-reload"],
        ["stop", "thanos-sidecar.service"],
        ["disable", "thanos-sidecar.service"],
    ]


def test_apply_failure_raises_with_stderr(impl, fake_run):
    fake_run.failures[("systemctl", "restart")] = "Job for thanos-sidecar.service failed."

    with pytest.raises(DownstreamInstallationError) as exc_info:
        impl.apply(build_service_descriptor(SidecarConfig()))
    assert str(exc_info.value) == "systemctl restart thanos-sidecar.service failed: Job for thanos-sidecar.service failed."


def test_apply_missing_systemctl(impl, monkeypatch):
    import subprocess

    def _missing(*args, **kwargs):
        raise FileNotFoundError("systemctl")

    monkeypatch.setattr(subprocess, "run", _missing)
    with pytest.raises(DownstreamInstallationError, match="systemctl not found"):
        impl.apply(build_service_descriptor(SidecarConfig()))


def test_status_not_installed(impl, fake_run):
    status = impl.get_service_status("sidecar")
    assert status.installed is False
    assert status.running is False
    assert fake_run.calls == []


def test_status_running_with_pid(impl, fake_run):
    impl.apply(build_service_descriptor(SidecarConfig()))
    fake_run.stdout[("systemctl", "show")] = "4242\n"

    status = impl.get_service_status("sidecar")
    assert status.installed is True
    assert status.running is True
    assert status.pid == 4242


def test_status_inactive(impl, fake_run):
    impl.apply(build_service_descriptor(SidecarConfig()))
    fake_run.failures[("systemctl", "is-active")] = ""

    status = impl.get_service_status("sidecar")
    assert status.installed is True
    assert status.running is False
    assert status.pid is None


def test_start_requires_unit(impl, fake_run):
    result = impl.start_service("sidecar")
    assert result["success"] is False
    assert "not found" in result["error"]


def test_start_and_stop(impl, fake_run):
    impl.apply(build_service_descriptor(SidecarConfig()))
    assert impl.start_service("sidecar")["success"] is True
    assert impl.stop_service("sidecar")["success"] is True


def test_stop_not_loaded_is_success(impl, fake_run):
    fake_run.failures[("systemctl", "stop")] = "Failed to stop thanos-sidecar.service: Unit thanos-sidecar.service not loaded."
    result = impl.stop_service("sidecar")
    assert result["success"] is True
    assert "note" in result


def test_stop_failure(impl, fake_run):
    fake_run.failures[("systemctl", "stop")] = "Access denied"
    result = impl.stop_service("sidecar")
    assert result["success"] is False
    assert result["error"] == "systemctl stop thanos-sidecar.service failed: Access denied"


def test_uninstall_removes_unit(impl, fake_run, tmp_path):
    impl.apply(build_service_descriptor(SidecarConfig()))
    fake_run.failures[("systemctl", "disable")] = "not enabled"

    result = impl.uninstall_service("sidecar")

    assert result["success"] is True
    assert not (tmp_path / "units" / "thanos-sidecar.service").exists()
    assert fake_run.commands("systemctl")[-1] == ["daemon-reload"]
