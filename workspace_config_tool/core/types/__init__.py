# workspace_config_tool/core/types/__init__.py

"""Type definitions for the workspace config tool

Pure type aliases with no implementation logic.
"""

# Local imports
from workspace_config_tool.core.types.json import JSONContainer
from workspace_config_tool.core.types.json import JSONDict
from workspace_config_tool.core.types.json import JSONList
from workspace_config_tool.core.types.json import JSONPrimitive
from workspace_config_tool.core.types.json import JSONType

__all__ = ["JSONContainer", "JSONDict", "JSONList", "JSONPrimitive", "JSONType"]
