# workspace_config_tool/adapters/cli/logging_setup.py

"""Logging setup as used by the CLI.

This module re-exports from the infrastructure location.
"""

# Local imports
from workspace_config_tool.infrastructure.logging import resolve_log_level
from workspace_config_tool.infrastructure.logging import setup_logging as set_up_logging

__all__ = ["set_up_logging", "resolve_log_level"]
