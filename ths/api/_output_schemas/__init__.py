"""Output schemas for all API commands (importing registers them)."""

from . import config, service, sidecar  # noqa: F401
