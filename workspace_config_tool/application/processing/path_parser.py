# workspace_config_tool/application/processing/path_parser.py

"""Parsing and formatting of dotted/bracketed path expressions

A path such as ``a[3].foo.bar[2]`` is split on dots into segments; each
segment is an optional key name followed by zero or more bracketed,
non-negative integer indices.
"""

# Standard library imports
from logging import getLogger
from re import compile

# Local imports
from workspace_config_tool.core.domain.errors import PathSyntaxError
from workspace_config_tool.core.domain.path_step import IndexStep
from workspace_config_tool.core.domain.path_step import JSONPath
from workspace_config_tool.core.domain.path_step import KeyStep
from workspace_config_tool.core.domain.path_step import PathStep

logger = getLogger(__name__)

_SEGMENT_PATTERN = compile(r"(?P<name>[^\[\]]*)(?P<indices>(?:\[[^\[\]]*\])*)")
_INDEX_GROUP_PATTERN = compile(r"\[([^\[\]]*)\]")
_DIGITS_PATTERN = compile(r"[0-9]+")


def _parse_segment(segment: str, path: str) -> list[PathStep]:
    """Parse one dot-free segment into its key step and index steps"""
    match = _SEGMENT_PATTERN.fullmatch(segment)
    if match is None:
        raise PathSyntaxError(f"Invalid JSON path segment {segment!r} in {path!r}.", path)

    steps: list[PathStep] = []
    name = match.group("name")
    if name:
        steps.append(KeyStep(name))

    for content in _INDEX_GROUP_PATTERN.findall(match.group("indices")):
        if not _DIGITS_PATTERN.fullmatch(content):
            raise PathSyntaxError(f"Invalid index [{content}] in JSON path {path!r}.", path)
        steps.append(IndexStep(int(content)))

    return steps


def parse_path(path: str) -> JSONPath:
    """Split a path expression into steps

    For example, ``"a[3].foo.bar[2]"`` gives
    ``[KeyStep("a"), IndexStep(3), KeyStep("foo"), KeyStep("bar"), IndexStep(2)]``.
    Empty segments (leading, trailing or doubled dots) produce no steps.

    Args:
        path: The path expression to parse

    Returns:
        Ordered list of steps; empty for an empty path

    Raises:
        PathSyntaxError: If brackets are unbalanced or an index is not a
            non-negative integer
    """
    steps: JSONPath = []
    if not path:
        return steps

    for segment in path.split("."):
        steps.extend(_parse_segment(segment, path))

    logger.debug(f"Parsed path {path!r} into {len(steps)} steps")
    return steps


def format_path(steps: JSONPath) -> str:
    """Serialize steps back into their canonical path expression

    Raises:
        PathSyntaxError: If a key cannot be expressed in the path grammar
    """
    parts: list[str] = []
    for step in steps:
        match step:
            case KeyStep(key=key):
                if not key or any(char in key for char in ".[]"):
                    raise PathSyntaxError(f"Key {key!r} cannot be expressed in a JSON path.")
                if parts:
                    parts.append(".")
                parts.append(key)
            case IndexStep(index=index):
                parts.append(f"[{index}]")
    return "".join(parts)
