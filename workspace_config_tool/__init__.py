# workspace_config_tool/__init__.py

"""Workspace Config Tool Package

A library and command for reading and writing values deep inside JSON
workspace configuration files using dotted/bracketed path expressions.
"""

# Local imports
# Path expressions and document access
from workspace_config_tool.application.processing import format_path
from workspace_config_tool.application.processing import get_at_path
from workspace_config_tool.application.processing import normalize_value
from workspace_config_tool.application.processing import parse_loose_json
from workspace_config_tool.application.processing import parse_path
from workspace_config_tool.application.processing import set_at_path

# Command workflow
from workspace_config_tool.application.services import ConfigService

# Data models and errors
from workspace_config_tool.core.domain import ConfigNotFoundError
from workspace_config_tool.core.domain import ConfigScope
from workspace_config_tool.core.domain import IndexStep
from workspace_config_tool.core.domain import InvalidJsonCharacterError
from workspace_config_tool.core.domain import InvalidPathError
from workspace_config_tool.core.domain import InvalidTypeError
from workspace_config_tool.core.domain import JsonSyntaxError
from workspace_config_tool.core.domain import KeyStep
from workspace_config_tool.core.domain import NOT_FOUND
from workspace_config_tool.core.domain import NotFound
from workspace_config_tool.core.domain import PathSyntaxError
from workspace_config_tool.core.domain import SchemaValidationError
from workspace_config_tool.core.domain import TYPED_CLI_PATHS
from workspace_config_tool.core.domain import UnexpectedEndOfInputError
from workspace_config_tool.core.domain import ValueKind
from workspace_config_tool.core.domain import ValueNotFoundError
from workspace_config_tool.core.domain import WorkspaceConfigError
from workspace_config_tool.core.domain import WorkspaceIOError

# For users who want lower-level control
from workspace_config_tool.infrastructure import ConfigLoader
from workspace_config_tool.infrastructure import WorkspaceStore
from workspace_config_tool.infrastructure import validate_workspace

# Version info
__version__ = "0.1.0"

__all__: list[str] = [
    # Core operations
    "parse_path",
    "format_path",
    "get_at_path",
    "set_at_path",
    "normalize_value",
    "parse_loose_json",
    "NOT_FOUND",
    "NotFound",
    # Data models
    "KeyStep",
    "IndexStep",
    "ValueKind",
    "ConfigScope",
    "TYPED_CLI_PATHS",
    # Errors
    "WorkspaceConfigError",
    "PathSyntaxError",
    "InvalidPathError",
    "InvalidTypeError",
    "JsonSyntaxError",
    "InvalidJsonCharacterError",
    "UnexpectedEndOfInputError",
    "ConfigNotFoundError",
    "ValueNotFoundError",
    "SchemaValidationError",
    "WorkspaceIOError",
    # Command workflow
    "ConfigService",
    # Advanced usage - infrastructure
    "ConfigLoader",
    "WorkspaceStore",
    "validate_workspace",
    # Version
    "__version__",
]
