"""Unit tests for ths.api.sidecar.build_service_descriptor."""

from dataclasses import FrozenInstanceError

import pytest

from ths.api.sidecar.InvalidEnumValue import InvalidEnumValue
from ths.api.sidecar.SidecarConfig import SidecarConfig
from ths.api.sidecar.build_service_descriptor import build_service_descriptor

pytestmark = pytest.mark.sidecar


def test_absent_with_defaults():
    descriptor = build_service_descriptor(SidecarConfig(ensure="absent"))
    assert descriptor.run_state == "stopped"
    assert descriptor.name == "sidecar"
    assert descriptor.flag_map == {
        "log.level": "info",
        "log.format": "logfmt",
        "http-address": "0.0.0.0:10902",
        "http-grace-period": "2m",
        "grpc-address": "0.0.0.0:10901",
        "grpc-grace-period": "2m",
        "prometheus.url": "http://localhost:9090",
        "prometheus.ready_timeout": "10m",
        "reloader.watch-interval": "3m",
        "reloader.retry-interval": "5s",
        "shipper.upload-compacted": False,
    }
    assert not any(key.startswith(("grpc-server-tls", "tracing", "reloader.config")) for key in descriptor.flag_map)


def test_identity_and_limits_forwarded():
    config = SidecarConfig(
        user="prometheus",
        group="monitoring",
        bin_path="/opt/thanos/bin/thanos",
        max_open_files=65536,
        env_vars=["GOMAXPROCS=2", "HTTP_PROXY=http://proxy:3128"],
    )
    descriptor = build_service_descriptor(config)
    assert descriptor.run_state == "running"
    assert descriptor.user == "prometheus"
    assert descriptor.group == "monitoring"
    assert descriptor.bin_path == "/opt/thanos/bin/thanos"
    assert descriptor.max_open_files == 65536
    assert descriptor.env_vars == ["GOMAXPROCS=2", "HTTP_PROXY=http://proxy:3128"]


def test_building_twice_is_identical():
    config = SidecarConfig(
        tsdb_path="/var/lib/prometheus",
        reloader_rule_dirs=["/rules/a", "/rules/b"],
        extra_params={"shipper.upload-compacted": True},
    )
    assert build_service_descriptor(config) == build_service_descriptor(config)


def test_extra_params_win_on_collision():
    config = SidecarConfig(extra_params={"log.level": "debug", "shipper.allow-out-of-order-upload": True})
    descriptor = build_service_descriptor(config)

    assert descriptor.flag_map["log.level"] == "info"
    merged = descriptor.merged_flags()
    assert merged["log.level"] == "debug"
    # Colliding key keeps its typed position, new keys are appended
    assert list(merged)[0] == "log.level"
    assert list(merged)[-1] == "shipper.allow-out-of-order-upload"


def test_extra_params_carried_verbatim():
    extra = {"custom": {"nested": [1, 2]}, "flag-without-value": None}
    descriptor = build_service_descriptor(SidecarConfig(extra_params=extra))
    assert descriptor.extra_params == extra


def test_descriptor_is_immutable():
    descriptor = build_service_descriptor(SidecarConfig())
    with pytest.raises(FrozenInstanceError):
        descriptor.run_state = "stopped"  # type: ignore[misc]


def test_invalid_enum_produces_no_descriptor():
    with pytest.raises(InvalidEnumValue):
        build_service_descriptor(SidecarConfig(log_level="verbose"))


def test_to_dict_round_trips_fields():
    descriptor = build_service_descriptor(SidecarConfig(max_open_files=1024))
    data = descriptor.to_dict()
    assert data["max_open_files"] == 1024
    assert data["run_state"] == "running"
    assert data["flag_map"] == descriptor.flag_map
