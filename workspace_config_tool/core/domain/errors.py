# workspace_config_tool/core/domain/errors.py

"""Exception hierarchy for the workspace config tool

Lookups that simply do not resolve are not errors; they return
``NOT_FOUND``. Everything here signals malformed input or a failed
workflow stage.
"""

# Local imports
from workspace_config_tool.core.domain.enums import ValueKind


class WorkspaceConfigError(Exception):
    """Base class for all errors reported to the user by this tool"""


class PathSyntaxError(WorkspaceConfigError, ValueError):
    """Path expression does not follow the dotted/bracketed grammar"""

    def __init__(self, message: str, path: str = "") -> None:
        super().__init__(message)
        self.path = path


class InvalidPathError(WorkspaceConfigError):
    """Path is well formed but cannot be used for the requested operation"""


class InvalidTypeError(WorkspaceConfigError, TypeError):
    """Value cannot be coerced to the kind a typed key requires"""

    def __init__(self, expected: ValueKind, path: str = "") -> None:
        super().__init__(f"Invalid value type; expected a {expected.value}.")
        self.expected = expected
        self.path = path


class JsonSyntaxError(WorkspaceConfigError, ValueError):
    """Lenient JSON parsing failed"""

    def __init__(self, message: str, offset: int = 0, line: int = 0, column: int = 0) -> None:
        super().__init__(message)
        self.offset = offset
        self.line = line
        self.column = column


class InvalidJsonCharacterError(JsonSyntaxError):
    """An unexpected character was found while parsing"""

    def __init__(self, character: str, offset: int, line: int, column: int) -> None:
        super().__init__(
            f"Invalid JSON character: {character!r} at {line}:{column}.", offset, line, column
        )
        self.character = character


class UnexpectedEndOfInputError(JsonSyntaxError):
    """The text ended before a complete value was read"""

    def __init__(self, offset: int, line: int, column: int) -> None:
        super().__init__("Unexpected end of file.", offset, line, column)


class ConfigNotFoundError(WorkspaceConfigError):
    """No workspace document exists for the requested scope"""


class ValueNotFoundError(WorkspaceConfigError):
    """Path does not resolve against the workspace document"""


class SchemaValidationError(WorkspaceConfigError):
    """Workspace document does not satisfy the workspace schema"""

    def __init__(self, message: str, problems: list[str] | None = None) -> None:
        super().__init__(message)
        self.problems = problems or []


class WorkspaceIOError(WorkspaceConfigError):
    """Workspace file could not be read, decoded or written"""
