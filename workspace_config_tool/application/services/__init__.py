# workspace_config_tool/application/services/__init__.py

"""Application services orchestrating the config command"""

# Local imports
from workspace_config_tool.application.services._config_service import ConfigService
from workspace_config_tool.application.services._migration import build_migrated_document
from workspace_config_tool.application.services._migration import (
    migrate_legacy_global_config,
)

__all__ = ["ConfigService", "build_migrated_document", "migrate_legacy_global_config"]
