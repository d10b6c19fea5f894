# workspace_config_tool/infrastructure/__init__.py

"""System infrastructure components for settings, persistence and validation.

This module provides infrastructure services including tool settings,
workspace file discovery and persistence, and schema validation.
"""

# Local imports
from workspace_config_tool.infrastructure.config import ConfigLoader
from workspace_config_tool.infrastructure.persistence import LoadedDocument
from workspace_config_tool.infrastructure.persistence import WorkspaceStore
from workspace_config_tool.infrastructure.validation import validate_workspace

__all__ = ["ConfigLoader", "LoadedDocument", "WorkspaceStore", "validate_workspace"]
