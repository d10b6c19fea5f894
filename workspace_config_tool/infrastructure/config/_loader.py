# workspace_config_tool/infrastructure/config/_loader.py

"""Access to the tool settings"""

# Standard library imports
from logging import getLogger
from os import environ
from pathlib import Path

# Local imports
from workspace_config_tool.infrastructure.config._models import LoggingSettings
from workspace_config_tool.infrastructure.config._models import OutputSettings
from workspace_config_tool.infrastructure.config._models import ToolConfig
from workspace_config_tool.infrastructure.config._models import WorkspaceSettings

logger = getLogger(__name__)

# Overrides the directory of the global workspace document
GLOBAL_DIR_ENV_VAR = "WORKSPACE_CONFIG_HOME"


class ConfigLoader:
    """Settings loader exposing each settings section"""

    __slots__ = ("config_path", "_tool_config")

    def __init__(self, config_path: str | None = None):
        """Initialize settings loader

        Args:
            config_path: Path to JSON settings file, None for auto-detection
        """
        self.config_path = config_path
        self._tool_config = ToolConfig.load(config_path)

    @property
    def settings(self) -> ToolConfig:
        """Full validated settings model"""
        return self._tool_config

    @property
    def workspace(self) -> WorkspaceSettings:
        """Workspace discovery settings"""
        return self._tool_config.workspace

    @property
    def output(self) -> OutputSettings:
        """Output settings"""
        return self._tool_config.output

    @property
    def logging(self) -> LoggingSettings:
        """Logging settings"""
        return self._tool_config.logging

    @property
    def global_dir(self) -> Path:
        """Directory holding the global document

        The environment variable wins over the settings file, which wins
        over the home directory.
        """
        override = environ.get(GLOBAL_DIR_ENV_VAR)
        if override:
            return Path(override).expanduser()
        if self.workspace.global_dir:
            return Path(self.workspace.global_dir).expanduser()
        return Path.home()


# Global default instance
_default_config: ConfigLoader | None = None


def get_config(config_path: str | None = None) -> ConfigLoader:
    """Get settings loader instance

    Args:
        config_path: Path to settings file, None for default

    Returns:
        ConfigLoader instance
    """
    global _default_config

    if config_path:
        return ConfigLoader(config_path)

    if _default_config is None:
        _default_config = ConfigLoader(None)

    return _default_config


def reset_config() -> None:
    """Forget the cached default instance"""
    global _default_config
    _default_config = None
