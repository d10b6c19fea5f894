# workspace_config_tool/application/processing/__init__.py

"""Path parsing, path access and value normalization"""

# Local imports
from workspace_config_tool.application.processing.loose_json import parse_loose_json
from workspace_config_tool.application.processing.path_accessor import get_at_path
from workspace_config_tool.application.processing.path_accessor import set_at_path
from workspace_config_tool.application.processing.path_parser import format_path
from workspace_config_tool.application.processing.path_parser import parse_path
from workspace_config_tool.application.processing.value_normalizer import normalize_value

__all__ = [
    "format_path",
    "get_at_path",
    "normalize_value",
    "parse_loose_json",
    "parse_path",
    "set_at_path",
]
