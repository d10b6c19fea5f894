# workspace_config_tool/application/services/_config_service.py

"""Config service for reading and writing workspace settings by path.

This service coordinates the complete workflow: locating the document for
a scope, resolving or assigning the addressed value, validating the result
and persisting it.
"""

# Standard library imports
from copy import deepcopy
from json import dumps
from logging import getLogger
from pathlib import Path

# Local imports
from workspace_config_tool.application.processing.path_accessor import get_at_path
from workspace_config_tool.application.processing.path_accessor import set_at_path
from workspace_config_tool.application.processing.path_parser import parse_path
from workspace_config_tool.application.processing.value_normalizer import normalize_value
from workspace_config_tool.application.services._migration import migrate_legacy_global_config
from workspace_config_tool.core.domain.enums import ConfigScope
from workspace_config_tool.core.domain.enums import NOT_FOUND
from workspace_config_tool.core.domain.errors import ConfigNotFoundError
from workspace_config_tool.core.domain.errors import InvalidPathError
from workspace_config_tool.core.domain.errors import ValueNotFoundError
from workspace_config_tool.core.domain.errors import WorkspaceConfigError
from workspace_config_tool.core.domain.typed_paths import is_global_path
from workspace_config_tool.core.types.json import JSONType
from workspace_config_tool.infrastructure.config import ConfigLoader
from workspace_config_tool.infrastructure.config import get_config
from workspace_config_tool.infrastructure.persistence import LoadedDocument
from workspace_config_tool.infrastructure.persistence import WorkspaceStore
from workspace_config_tool.infrastructure.validation import validate_workspace

logger = getLogger(__name__)


class ConfigService:
    """Application service behind the ``config`` command.

    Reads never modify anything. Writes run normalize, assign, validate and
    persist in that order, and any stage aborts without touching the file.
    """

    __slots__ = ("_config", "_store")

    def __init__(
        self, config: ConfigLoader | None = None, store: WorkspaceStore | None = None
    ) -> None:
        """Initialize the config service.

        Args:
            config: Settings loader, uses default if None
            store: Workspace store, built from the settings if None
        """
        self._config = config or get_config()
        self._store = store or WorkspaceStore(self._config)

    @property
    def store(self) -> WorkspaceStore:
        return self._store

    def _migrate_if_needed(self, scope: ConfigScope) -> None:
        if scope is not ConfigScope.GLOBAL:
            return
        try:
            if migrate_legacy_global_config(self._store):
                logger.info(
                    "Found a legacy global configuration. It has been automatically migrated."
                )
        except WorkspaceConfigError as e:
            logger.warning(f"Legacy global configuration could not be migrated: {e}")

    def _load(self, scope: ConfigScope) -> LoadedDocument | None:
        self._migrate_if_needed(scope)
        return self._store.load(scope)

    def get(self, json_path: str | None = None, scope: ConfigScope = ConfigScope.LOCAL) -> JSONType:
        """Read the value at a path

        Args:
            json_path: Path expression; empty or None returns the whole document
            scope: Which document to read

        Returns:
            The addressed value

        Raises:
            ConfigNotFoundError: If no document exists for the scope
            PathSyntaxError: If the path is malformed
            ValueNotFoundError: If the path does not resolve
        """
        loaded = self._load(scope)
        if loaded is None:
            raise ConfigNotFoundError("No config found.")

        if not json_path:
            return loaded.document

        value = get_at_path(loaded.document, parse_path(json_path))
        if value is NOT_FOUND:
            raise ValueNotFoundError("Value cannot be found.")

        logger.debug(f"Read {json_path!r} from {loaded.path}")
        return value

    def set(
        self, json_path: str, raw_value: JSONType, scope: ConfigScope = ConfigScope.LOCAL
    ) -> Path:
        """Write a value at a path and persist the document

        Args:
            json_path: Path expression, must not be blank
            raw_value: Value as given by the user; normalized before writing
            scope: Which document to modify

        Returns:
            Path of the file that was written

        Raises:
            InvalidPathError: If the path is blank or not allowed in the scope
            PathSyntaxError: If the path is malformed
            ConfigNotFoundError: If no document exists for the scope
            InvalidTypeError: If a typed key receives the wrong kind of value
            JsonSyntaxError: If a free-form value is malformed JSON
            ValueNotFoundError: If the path cannot be assigned
            SchemaValidationError: If the result fails the workspace schema
            WorkspaceIOError: If the file cannot be written
        """
        if not json_path or not json_path.strip():
            raise InvalidPathError("Invalid Path.")
        if scope is ConfigScope.GLOBAL and not is_global_path(json_path):
            raise InvalidPathError("Invalid Path.")

        steps = parse_path(json_path)

        loaded = self._load(scope)
        if loaded is None:
            raise ConfigNotFoundError("Configuration file cannot be found.")

        # Work on a copy so a failed stage leaves nothing half-applied
        document = deepcopy(loaded.document)
        value = normalize_value(raw_value, json_path)

        if set_at_path(document, steps, value) is NOT_FOUND:
            raise ValueNotFoundError("Value cannot be found.")

        validate_workspace(document)
        self._store.save(loaded.path, document)

        logger.info(f"Set {json_path!r} in {loaded.path}")
        return loaded.path

    def format_value(self, value: JSONType) -> str:
        """Render a value the way the command prints it"""
        if isinstance(value, str):
            return value
        if isinstance(value, (dict, list)):
            return dumps(value, indent=self._config.output.indent, ensure_ascii=False)
        return dumps(value)
