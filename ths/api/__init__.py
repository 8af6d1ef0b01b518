"""API module for THS.

Command functions (``cmd_*``) defined here return a StageResult and are the
single source of truth for the ``thsc`` CLI.
"""

__all__ = []
