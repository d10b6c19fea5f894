# workspace_config_tool/core/domain/enums.py

"""Domain enumerations for the workspace config tool"""

# Standard library imports
from enum import Enum


class ValueKind(Enum):
    """Primitive kind a strongly-typed configuration key must hold"""

    BOOLEAN = "boolean"
    NUMBER = "number"
    STRING = "string"


class ConfigScope(Enum):
    """Which workspace document a command operates on"""

    LOCAL = "local"  # Nearest workspace file at or above the working directory
    GLOBAL = "global"  # Per-user file in the home (or overridden) directory


class NotFound(Enum):
    """Result of a path lookup that does not resolve against a document

    A single-member enum so that it stays distinct from every JSON value,
    including ``None`` (JSON ``null``).
    """

    NOT_FOUND = "not_found"

    def __repr__(self) -> str:
        return "NOT_FOUND"


NOT_FOUND = NotFound.NOT_FOUND
