"""Unit tests for ths.api.sidecar.SidecarConfig."""

import pytest
from pydantic import ValidationError

from ths.api.sidecar.InvalidEnumValue import InvalidEnumValue
from ths.api.sidecar.SidecarConfig import SidecarConfig

pytestmark = pytest.mark.sidecar


def test_defaults():
    config = SidecarConfig()
    assert config.ensure == "present"
    assert config.user == "thanos"
    assert config.group == "thanos"
    assert config.bin_path == "/usr/local/bin/thanos"
    assert config.max_open_files is None
    assert config.reloader_rule_dirs == []
    assert config.extra_params == {}
    assert config.env_vars == []


def test_invalid_log_level_names_field_and_value():
    with pytest.raises(InvalidEnumValue) as exc_info:
        SidecarConfig(log_level="verbose")
    assert exc_info.value.field == "log_level"
    assert exc_info.value.value == "verbose"
    assert "log_level" in str(exc_info.value)
    assert "'verbose'" in str(exc_info.value)


@pytest.mark.parametrize(
    ("field", "value"),
    [
        ("ensure", "running"),
        ("log_format", "text"),
        ("log_level", "INFO"),
    ],
)
def test_invalid_enum_values_rejected(field, value):
    with pytest.raises(InvalidEnumValue) as exc_info:
        SidecarConfig(**{field: value})
    assert exc_info.value.field == field
    assert exc_info.value.value == value


def test_invalid_enum_is_not_wrapped_in_validation_error():
    with pytest.raises(InvalidEnumValue):
        SidecarConfig(ensure="maybe")
    assert not issubclass(InvalidEnumValue, ValueError)


@pytest.mark.parametrize("level", ["debug", "info", "warn", "error", "fatal"])
def test_all_log_levels_accepted(level):
    assert SidecarConfig(log_level=level).log_level == level


def test_unknown_field_rejected():
    with pytest.raises(ValidationError):
        SidecarConfig(not_a_field="x")


def test_config_is_frozen():
    config = SidecarConfig()
    with pytest.raises(ValidationError):
        config.log_level = "debug"  # type: ignore[misc]


def test_invalid_enum_value_allowed_listed():
    err = InvalidEnumValue("log_format", "xml", ("logfmt", "json"))
    assert err.allowed == ("logfmt", "json")
    assert str(err) == "Invalid value for log_format: 'xml' (allowed: logfmt, json)"
