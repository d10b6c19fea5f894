# workspace_config_tool/application/processing/path_accessor.py

"""Reading and writing values at a path inside a JSON document

Both operations share one traversal. A key step only applies to a mapping
and an index step only to a sequence; any other pairing means the path does
not resolve and ``NOT_FOUND`` is returned.
"""

# Standard library imports
from logging import getLogger
from typing import Callable

# Local imports
from workspace_config_tool.application.processing.path_parser import parse_path
from workspace_config_tool.core.domain.enums import NOT_FOUND
from workspace_config_tool.core.domain.enums import NotFound
from workspace_config_tool.core.domain.errors import InvalidPathError
from workspace_config_tool.core.domain.path_step import IndexStep
from workspace_config_tool.core.domain.path_step import JSONPath
from workspace_config_tool.core.domain.path_step import KeyStep
from workspace_config_tool.core.domain.path_step import PathStep
from workspace_config_tool.core.types.json import JSONContainer
from workspace_config_tool.core.types.json import JSONType

logger = getLogger(__name__)

# Most nulls a single assignment may insert to reach an index past the end
MAX_LIST_PADDING = 1000

type Terminal = Callable[[JSONType, PathStep], JSONType | NotFound]


def _padding_needed(container: list, index: int) -> int:
    return max(0, index - len(container))


def _accepts(container: JSONType, step: PathStep, create: bool = False) -> bool:
    """Check that the step kind matches the container kind

    When writing, a sequence also has to be close enough to the index that
    growing it stays within MAX_LIST_PADDING.
    """
    match (container, step):
        case (dict(), KeyStep()):
            return True
        case (list(), IndexStep(index=index)):
            return not create or _padding_needed(container, index) <= MAX_LIST_PADDING
        case _:
            return False


def _lookup(container: JSONType, step: PathStep) -> JSONType | NotFound:
    """Read the child addressed by a step from a matching container"""
    match (container, step):
        case (dict(), KeyStep(key=key)):
            return container[key] if key in container else NOT_FOUND
        case (list(), IndexStep(index=index)):
            return container[index] if index < len(container) else NOT_FOUND
        case _:
            return NOT_FOUND


def _store(container: JSONType, step: PathStep, value: JSONType) -> None:
    """Assign into a matching container, growing a sequence with nulls if needed"""
    match (container, step):
        case (dict(), KeyStep(key=key)):
            container[key] = value
        case (list(), IndexStep(index=index)):
            if index >= len(container):
                container.extend([None] * (index + 1 - len(container)))
            container[index] = value


def _empty_container_for(step: PathStep) -> JSONContainer:
    """Container kind the given step expects to descend into"""
    return [] if isinstance(step, IndexStep) else {}


def _fits_empty(steps: JSONPath) -> bool:
    """Check that the steps can be built from scratch without excess padding"""
    return all(
        _padding_needed([], step.index) <= MAX_LIST_PADDING
        for step in steps
        if isinstance(step, IndexStep)
    )


def _walk(
    root: JSONType, steps: JSONPath, terminal: Terminal, create: bool
) -> JSONType | NotFound:
    """Follow the steps from the root and apply the terminal action at the last one

    Args:
        root: Document to traverse
        steps: Parsed path; empty returns the root unchanged
        terminal: Action applied to the last container and last step
        create: Materialize missing intermediate containers instead of failing

    Returns:
        Result of the terminal action, or NOT_FOUND
    """
    current = root
    last = len(steps) - 1

    for position, step in enumerate(steps):
        if not _accepts(current, step, create):
            return NOT_FOUND
        if position == last:
            return terminal(current, step)

        child = _lookup(current, step)
        if child is NOT_FOUND or child is None:
            if not create:
                return NOT_FOUND
            # Everything below here is new and empty, so check the remaining
            # indices before the first container is created
            if not _fits_empty(steps[position + 1 :]):
                return NOT_FOUND
            # The next step decides whether we need a mapping or a sequence
            child = _empty_container_for(steps[position + 1])
            _store(current, step, child)
        current = child

    return current


def _as_steps(path: JSONPath | str) -> JSONPath:
    return parse_path(path) if isinstance(path, str) else path


def get_at_path(root: JSONType, path: JSONPath | str) -> JSONType | NotFound:
    """Resolve the value addressed by a path

    Args:
        root: Document to read from
        path: Parsed steps or a path expression

    Returns:
        The addressed value (``None`` for an explicit null), or NOT_FOUND
        when any step does not resolve
    """
    return _walk(root, _as_steps(path), _lookup, create=False)


def set_at_path(root: JSONType, path: JSONPath | str, value: JSONType) -> JSONType | NotFound:
    """Assign a value at a path, creating intermediate containers as needed

    Missing intermediate entries become an empty list when the following
    step is an index and an empty mapping when it is a key. An existing
    scalar in the way is never replaced; the call returns NOT_FOUND and the
    document is left untouched.

    Args:
        root: Document to modify in place
        path: Parsed steps or a path expression; must not be empty
        value: Value to store

    Returns:
        The root on success, NOT_FOUND otherwise

    Raises:
        InvalidPathError: If the path is empty
    """
    steps = _as_steps(path)
    if not steps:
        raise InvalidPathError("Invalid Path.")

    def assign(container: JSONType, step: PathStep) -> JSONType:
        _store(container, step, value)
        return root

    result = _walk(root, steps, assign, create=True)
    if result is NOT_FOUND:
        logger.debug(f"Path {path!r} cannot be assigned in the document")
    return result
