"""Unit tests for ths.api.sidecar.derive_run_state."""

import pytest

from ths.api.sidecar.derive_run_state import derive_run_state

pytestmark = pytest.mark.sidecar


def test_present_is_running():
    assert derive_run_state("present") == "running"


def test_absent_is_stopped():
    assert derive_run_state("absent") == "stopped"


@pytest.mark.parametrize("ensure", ["", "PRESENT", "running", "unknown"])
def test_anything_else_is_stopped(ensure):
    assert derive_run_state(ensure) == "stopped"
