"""Thanos sidecar service manager."""
