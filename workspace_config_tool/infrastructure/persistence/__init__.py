# workspace_config_tool/infrastructure/persistence/__init__.py

"""Workspace document persistence"""

# Local imports
from workspace_config_tool.infrastructure.persistence._workspace_store import LoadedDocument
from workspace_config_tool.infrastructure.persistence._workspace_store import WorkspaceStore

__all__ = ["LoadedDocument", "WorkspaceStore"]
