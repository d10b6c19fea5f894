# workspace_config_tool/core/domain/__init__.py

"""Core domain models and business rules"""

# Local imports
from workspace_config_tool.core.domain.enums import ConfigScope
from workspace_config_tool.core.domain.enums import NOT_FOUND
from workspace_config_tool.core.domain.enums import NotFound
from workspace_config_tool.core.domain.enums import ValueKind
from workspace_config_tool.core.domain.errors import ConfigNotFoundError
from workspace_config_tool.core.domain.errors import InvalidJsonCharacterError
from workspace_config_tool.core.domain.errors import InvalidPathError
from workspace_config_tool.core.domain.errors import InvalidTypeError
from workspace_config_tool.core.domain.errors import JsonSyntaxError
from workspace_config_tool.core.domain.errors import PathSyntaxError
from workspace_config_tool.core.domain.errors import SchemaValidationError
from workspace_config_tool.core.domain.errors import UnexpectedEndOfInputError
from workspace_config_tool.core.domain.errors import ValueNotFoundError
from workspace_config_tool.core.domain.errors import WorkspaceConfigError
from workspace_config_tool.core.domain.errors import WorkspaceIOError
from workspace_config_tool.core.domain.path_step import IndexStep
from workspace_config_tool.core.domain.path_step import JSONPath
from workspace_config_tool.core.domain.path_step import KeyStep
from workspace_config_tool.core.domain.path_step import PathStep
from workspace_config_tool.core.domain.typed_paths import TYPED_CLI_PATHS
from workspace_config_tool.core.domain.typed_paths import is_global_path

__all__ = [
    "ConfigNotFoundError",
    "ConfigScope",
    "IndexStep",
    "InvalidJsonCharacterError",
    "InvalidPathError",
    "InvalidTypeError",
    "JSONPath",
    "JsonSyntaxError",
    "KeyStep",
    "NOT_FOUND",
    "NotFound",
    "PathStep",
    "PathSyntaxError",
    "SchemaValidationError",
    "TYPED_CLI_PATHS",
    "UnexpectedEndOfInputError",
    "ValueKind",
    "ValueNotFoundError",
    "WorkspaceConfigError",
    "WorkspaceIOError",
    "is_global_path",
]
