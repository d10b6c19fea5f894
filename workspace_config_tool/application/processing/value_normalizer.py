# workspace_config_tool/application/processing/value_normalizer.py

"""Conversion of raw command-line values into typed JSON values"""

# Standard library imports
from logging import getLogger
from math import isfinite

# Local imports
from workspace_config_tool.application.processing.loose_json import parse_loose_json
from workspace_config_tool.core.domain.enums import ValueKind
from workspace_config_tool.core.domain.errors import InvalidJsonCharacterError
from workspace_config_tool.core.domain.errors import InvalidTypeError
from workspace_config_tool.core.domain.typed_paths import TYPED_CLI_PATHS
from workspace_config_tool.core.types.json import JSONType

logger = getLogger(__name__)

# Text starting with one of these was meant as structured JSON, so a parse
# failure is reported instead of storing the text as a plain string
STRUCTURAL_OPENERS = ("{", "[")


def _to_boolean(raw: JSONType, path: str) -> bool:
    if isinstance(raw, bool):
        return raw
    text = str(raw).strip()
    if text == "true":
        return True
    if text == "false":
        return False
    raise InvalidTypeError(ValueKind.BOOLEAN, path)


def _to_number(raw: JSONType, path: str) -> int | float:
    if isinstance(raw, (int, float)) and not isinstance(raw, bool):
        if isfinite(raw):
            return raw
        raise InvalidTypeError(ValueKind.NUMBER, path)

    text = str(raw).strip()
    try:
        return int(text)
    except ValueError:
        pass
    try:
        number = float(text)
    except ValueError:
        raise InvalidTypeError(ValueKind.NUMBER, path) from None
    if not isfinite(number):
        raise InvalidTypeError(ValueKind.NUMBER, path)
    return number


def _parse_free_form(raw: str) -> JSONType:
    try:
        return parse_loose_json(raw)
    except InvalidJsonCharacterError:
        if raw.lstrip().startswith(STRUCTURAL_OPENERS):
            raise
        logger.debug(f"Treating {raw!r} as a plain string")
        return raw


def normalize_value(raw: JSONType, path: str) -> JSONType:
    """Convert a raw value into the JSON value to store at a path

    Keys listed in ``TYPED_CLI_PATHS`` are coerced strictly to their kind.
    Any other textual value is parsed as lenient JSON, so ``42``, ``true``
    and ``[1, 2]`` become typed values while text that is not JSON at all
    (``foo``) is kept as a string.

    Args:
        raw: Value as given by the user, usually a string
        path: Full, unparsed path the value will be written to

    Returns:
        The normalized value

    Raises:
        InvalidTypeError: If a typed key receives a value of the wrong kind
        JsonSyntaxError: If free-form text looks like JSON but is malformed
    """
    kind = TYPED_CLI_PATHS.get(path)
    match kind:
        case ValueKind.BOOLEAN:
            return _to_boolean(raw, path)
        case ValueKind.NUMBER:
            return _to_number(raw, path)
        case ValueKind.STRING:
            return raw
        case None:
            pass

    if isinstance(raw, str):
        return _parse_free_form(raw)
    return raw
