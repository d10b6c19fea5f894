# workspace_config_tool/infrastructure/config/_models.py

"""Pydantic models for tool settings with validation"""

# Standard library imports
from logging import getLogger
from pathlib import Path

# Third party imports
from pydantic import BaseModel
from pydantic import Field
from pydantic import ValidationError
from pydantic import field_validator

# Local imports
from workspace_config_tool.core.types.json import JSONDict

logger = getLogger(__name__)

DEFAULT_SETTINGS_FILENAME = "workspace_config_tool.json"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class WorkspaceSettings(BaseModel):
    """Where workspace documents live"""

    local_filenames: list[str] = Field(
        default_factory=lambda: ["workspace.json", ".workspace.json"],
        min_length=1,
        description="File names searched for from the working directory upward",
    )
    global_filename: str = Field(".workspace-config.json", description="Global document name")
    legacy_global_filename: str = Field(
        ".workspace-cli.json", description="Pre-migration global document name"
    )
    global_dir: str | None = Field(
        None, description="Directory holding the global document, None for the home directory"
    )

    @field_validator("local_filenames")
    @classmethod
    def validate_filenames(cls, v: list[str]) -> list[str]:
        """Ensure names are bare file names"""
        for name in v:
            if not name or "/" in name or "\\" in name:
                raise ValueError(f"Invalid workspace file name: {name!r}")
        return v


class OutputSettings(BaseModel):
    """How workspace documents are written"""

    indent: int = Field(2, ge=1, le=8, description="JSON indentation width")


class LoggingSettings(BaseModel):
    """Logging configuration"""

    log_level: str = Field("WARNING", description="Console log level")
    log_file: str | None = Field(None, description="Log file path")

    @field_validator("log_level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Accept level names in any case"""
        level = v.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"Unknown log level {v!r}, expected one of {', '.join(_LOG_LEVELS)}")
        return level


class ToolConfig(BaseModel):
    """Root settings model"""

    workspace: WorkspaceSettings = Field(default_factory=WorkspaceSettings)
    output: OutputSettings = Field(default_factory=OutputSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    @classmethod
    def load(cls, config_path: Path | str | None = None) -> "ToolConfig":
        """Load settings from a JSON file with defaults

        Args:
            config_path: Path to the settings file, None to look for
                workspace_config_tool.json in the current directory

        Returns:
            Validated ToolConfig instance
        """
        path = Path(config_path or DEFAULT_SETTINGS_FILENAME)
        if not path.is_file():
            if config_path is not None:
                logger.debug(f"Settings file {path} not found, using defaults")
            return cls()

        try:
            return cls.model_validate_json(path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, ValidationError) as e:
            logger.warning(f"Failed to load settings from {path}: {e}. Using defaults.")
            return cls()

    def to_dict(self) -> JSONDict:
        """Convert to dictionary"""
        return self.model_dump()
