"""Map the presence state to a service run-state."""

from ...constants import RUNNING, STOPPED


def derive_run_state(ensure: str) -> str:
    """Return ``running`` for ``present`` and ``stopped`` for anything else."""
    return RUNNING if ensure == "present" else STOPPED
