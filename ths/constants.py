"""Shared constants for THS home directory and service defaults."""

THS_HOME_EXT = ".ths"  # user-level state/config directory suffix

# Prefix shared by every managed Thanos unit (thanos-sidecar.service)
UNIT_PREFIX = "thanos"

# Name of the managed Thanos component; also the binary subcommand
SIDECAR_NAME = "sidecar"

# Run-states handed to the service manager
RUNNING = "running"
STOPPED = "stopped"
