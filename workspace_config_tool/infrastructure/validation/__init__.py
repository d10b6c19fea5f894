# workspace_config_tool/infrastructure/validation/__init__.py

"""Schema validation for workspace documents"""

# Local imports
from workspace_config_tool.infrastructure.validation._schema import CliOptions
from workspace_config_tool.infrastructure.validation._schema import CliWarnings
from workspace_config_tool.infrastructure.validation._schema import ProjectOptions
from workspace_config_tool.infrastructure.validation._schema import WorkspaceDocument
from workspace_config_tool.infrastructure.validation._schema import validate_workspace

__all__ = [
    "CliOptions",
    "CliWarnings",
    "ProjectOptions",
    "WorkspaceDocument",
    "validate_workspace",
]
