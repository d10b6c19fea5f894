# workspace_config_tool/infrastructure/config/__init__.py

"""Settings infrastructure for the workspace config tool.

This module manages settings loading, validation, and models.
"""

# Local imports
from workspace_config_tool.infrastructure.config._loader import ConfigLoader
from workspace_config_tool.infrastructure.config._loader import GLOBAL_DIR_ENV_VAR
from workspace_config_tool.infrastructure.config._loader import get_config
from workspace_config_tool.infrastructure.config._loader import reset_config
from workspace_config_tool.infrastructure.config._models import LoggingSettings
from workspace_config_tool.infrastructure.config._models import OutputSettings
from workspace_config_tool.infrastructure.config._models import ToolConfig
from workspace_config_tool.infrastructure.config._models import WorkspaceSettings

__all__ = [
    "ConfigLoader",
    "GLOBAL_DIR_ENV_VAR",
    "LoggingSettings",
    "OutputSettings",
    "ToolConfig",
    "WorkspaceSettings",
    "get_config",
    "reset_config",
]
