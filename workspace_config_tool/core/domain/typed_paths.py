# workspace_config_tool/core/domain/typed_paths.py

"""Registry of configuration keys that must hold a specific primitive kind

Only exact full-path matches are consulted; the registry is never applied
per step.
"""

# Standard library imports
from types import MappingProxyType
from typing import Final
from typing import Mapping

# Local imports
from workspace_config_tool.core.domain.enums import ValueKind

TYPED_CLI_PATHS: Final[Mapping[str, ValueKind]] = MappingProxyType(
    {
        "cli.warnings.versionMismatch": ValueKind.BOOLEAN,
        "cli.warnings.typescriptMismatch": ValueKind.BOOLEAN,
        "cli.defaultCollection": ValueKind.STRING,
        "cli.packageManager": ValueKind.STRING,
    }
)

# Prefix of free-form settings that may also be written to the global document
GLOBAL_SCHEMATICS_PREFIX: Final = "schematics."


def is_global_path(path: str) -> bool:
    """Check whether a path may be written in the global scope"""
    return path.startswith(GLOBAL_SCHEMATICS_PREFIX) or path in TYPED_CLI_PATHS
