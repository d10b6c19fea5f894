# workspace_config_tool/infrastructure/validation/_schema.py

"""Workspace document schema expressed as strict Pydantic models"""

# Standard library imports
from logging import getLogger
from math import isfinite
from typing import Literal

# Third party imports
from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field
from pydantic import ValidationError

# Local imports
from workspace_config_tool.core.domain.errors import SchemaValidationError
from workspace_config_tool.core.types.json import JSONType

logger = getLogger(__name__)


class CliWarnings(BaseModel):
    """Toggles for the tool's startup warnings"""

    model_config = ConfigDict(strict=True, extra="forbid")

    versionMismatch: bool | None = None
    typescriptMismatch: bool | None = None


class CliOptions(BaseModel):
    """Settings that change how the CLI itself behaves"""

    model_config = ConfigDict(strict=True, extra="forbid")

    defaultCollection: str | None = Field(None, description="Default schematics collection")
    packageManager: Literal["npm", "cnpm", "yarn", "pnpm"] | None = Field(
        None, description="Package manager used to install dependencies"
    )
    warnings: CliWarnings | None = None


class ProjectOptions(BaseModel):
    """One project entry of a workspace"""

    model_config = ConfigDict(strict=True, extra="allow")

    root: str
    sourceRoot: str | None = None
    projectType: Literal["application", "library"] | None = None
    prefix: str | None = None
    schematics: dict[str, object] | None = None
    architect: dict[str, object] | None = None


class WorkspaceDocument(BaseModel):
    """Root of a local or global workspace document"""

    model_config = ConfigDict(strict=True, extra="allow")

    version: int | None = Field(None, ge=1)
    newProjectRoot: str | None = None
    defaultProject: str | None = None
    cli: CliOptions | None = None
    schematics: dict[str, object] | None = None
    projects: dict[str, ProjectOptions] | None = None


def _format_location(location: tuple[int | str, ...]) -> str:
    parts: list[str] = []
    for item in location:
        if isinstance(item, int):
            parts.append(f"[{item}]")
        else:
            parts.append(f".{item}" if parts else item)
    return "".join(parts) or "(root)"


def _non_finite_locations(value: JSONType, location: tuple[int | str, ...] = ()) -> list[str]:
    """Locations of NaN/Infinity numbers, which strict JSON cannot store"""
    match value:
        case dict():
            return [
                found
                for key, child in value.items()
                for found in _non_finite_locations(child, (*location, key))
            ]
        case list():
            return [
                found
                for index, child in enumerate(value)
                for found in _non_finite_locations(child, (*location, index))
            ]
        case float() if not isfinite(value):
            return [_format_location(location)]
        case _:
            return []


def validate_workspace(document: JSONType) -> None:
    """Check a document against the workspace schema

    Args:
        document: The complete document about to be written

    Raises:
        SchemaValidationError: Listing every failing location
    """
    problems = [
        f"{location}: Non-finite numbers cannot be stored in JSON"
        for location in _non_finite_locations(document)
    ]

    try:
        WorkspaceDocument.model_validate(document)
    except ValidationError as e:
        problems.extend(
            f"{_format_location(error['loc'])}: {error['msg']}" for error in e.errors()
        )

    if problems:
        logger.debug(f"Workspace document failed validation with {len(problems)} problems")
        message = "Workspace document is invalid:\n" + "\n".join(
            f"  {problem}" for problem in problems
        )
        raise SchemaValidationError(message, problems)
