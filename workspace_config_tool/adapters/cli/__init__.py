# workspace_config_tool/adapters/cli/__init__.py

"""CLI adapter for the workspace config tool"""

# Local imports
from workspace_config_tool.adapters.cli.logging_setup import set_up_logging
from workspace_config_tool.adapters.cli.main import main
from workspace_config_tool.adapters.cli.parser import create_argument_parser

__all__ = ["create_argument_parser", "set_up_logging", "main"]
