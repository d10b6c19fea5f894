# workspace_config_tool/infrastructure/logging/__init__.py

"""Logging infrastructure for the workspace config tool.

This module provides centralized logging configuration and setup.
"""

# Local imports
from workspace_config_tool.infrastructure.logging._setup import resolve_log_level
from workspace_config_tool.infrastructure.logging._setup import set_up_logging as setup_logging

__all__ = ["setup_logging", "resolve_log_level"]
