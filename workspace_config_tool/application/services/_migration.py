# workspace_config_tool/application/services/_migration.py

"""Migration of the legacy global settings file to the current format"""

# Standard library imports
from logging import getLogger

# Local imports
from workspace_config_tool.application.processing.loose_json import parse_loose_json
from workspace_config_tool.application.processing.path_accessor import get_at_path
from workspace_config_tool.application.processing.path_accessor import set_at_path
from workspace_config_tool.core.domain.enums import NOT_FOUND
from workspace_config_tool.core.domain.errors import WorkspaceIOError
from workspace_config_tool.core.types.json import JSONDict
from workspace_config_tool.infrastructure.persistence import WorkspaceStore

logger = getLogger(__name__)

# (legacy path, current path, required type)
LEGACY_GLOBAL_KEYS: tuple[tuple[str, str, type], ...] = (
    ("packageManager", "cli.packageManager", str),
    ("defaults.schematics.collection", "cli.defaultCollection", str),
    ("warnings.versionMismatch", "cli.warnings.versionMismatch", bool),
    ("warnings.typescriptMismatch", "cli.warnings.typescriptMismatch", bool),
)


def build_migrated_document(legacy: JSONDict) -> JSONDict | None:
    """Translate a legacy global document, or None if nothing carries over"""
    document: JSONDict = {"version": 1}
    migrated = 0

    for legacy_path, path, required in LEGACY_GLOBAL_KEYS:
        value = get_at_path(legacy, legacy_path)
        if value is NOT_FOUND or not isinstance(value, required):
            continue
        # "default" meant "let the tool decide", which is the same as unset
        if path == "cli.packageManager" and value in ("", "default"):
            continue
        set_at_path(document, path, value)
        migrated += 1

    return document if migrated else None


def migrate_legacy_global_config(store: WorkspaceStore) -> bool:
    """Create the global document from the legacy one if only the latter exists

    Args:
        store: Store that knows both global file locations

    Returns:
        True if a new global document was written

    Raises:
        WorkspaceIOError: If the legacy file cannot be read or the new one written
        JsonSyntaxError: If the legacy file is not valid (lenient) JSON
    """
    if store.global_path.is_file() or not store.legacy_global_path.is_file():
        return False

    try:
        text = store.legacy_global_path.read_text(encoding="utf-8")
    except OSError as e:
        raise WorkspaceIOError(f"Cannot read {store.legacy_global_path}: {e}") from e

    legacy = parse_loose_json(text)
    if not isinstance(legacy, dict):
        logger.debug(f"Legacy global file {store.legacy_global_path} is not an object")
        return False

    document = build_migrated_document(legacy)
    if document is None:
        logger.debug("Legacy global file has no settings to migrate")
        return False

    store.save(store.global_path, document)
    return True
