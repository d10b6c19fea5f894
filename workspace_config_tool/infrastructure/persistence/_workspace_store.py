# workspace_config_tool/infrastructure/persistence/_workspace_store.py

"""Locating, reading and writing workspace documents"""

# Standard library imports
from json import JSONDecodeError
from json import dumps
from json import loads
from logging import getLogger
from pathlib import Path
from shutil import copymode
from tempfile import NamedTemporaryFile
from typing import NamedTuple

# Local imports
from workspace_config_tool.core.domain.enums import ConfigScope
from workspace_config_tool.core.domain.errors import WorkspaceIOError
from workspace_config_tool.core.types.json import JSONDict
from workspace_config_tool.infrastructure.config import ConfigLoader
from workspace_config_tool.infrastructure.config import get_config

logger = getLogger(__name__)


class LoadedDocument(NamedTuple):
    """A workspace document together with the file it came from"""

    document: JSONDict
    path: Path


class WorkspaceStore:
    """Finds workspace files for a scope and reads/writes them as strict JSON"""

    __slots__ = ("_config", "_start_dir")

    def __init__(self, config: ConfigLoader | None = None, start_dir: Path | str | None = None):
        """Initialize the store

        Args:
            config: Settings loader, uses the default if None
            start_dir: Directory the local search starts from, cwd if None
        """
        self._config = config or get_config()
        self._start_dir = Path(start_dir) if start_dir is not None else None

    @property
    def global_path(self) -> Path:
        """Location of the global document, whether or not it exists"""
        return self._config.global_dir / self._config.workspace.global_filename

    @property
    def legacy_global_path(self) -> Path:
        """Location of the pre-migration global document"""
        return self._config.global_dir / self._config.workspace.legacy_global_filename

    def find_local(self) -> Path | None:
        """Search from the start directory upward for a local workspace file"""
        start = (self._start_dir or Path.cwd()).resolve()
        for directory in (start, *start.parents):
            for name in self._config.workspace.local_filenames:
                candidate = directory / name
                if candidate.is_file():
                    logger.debug(f"Found local workspace file: {candidate}")
                    return candidate
        return None

    def find(self, scope: ConfigScope) -> Path | None:
        """Existing document path for a scope, or None"""
        match scope:
            case ConfigScope.LOCAL:
                return self.find_local()
            case ConfigScope.GLOBAL:
                return self.global_path if self.global_path.is_file() else None

    def load(self, scope: ConfigScope) -> LoadedDocument | None:
        """Load the document for a scope

        Returns:
            The document and its path, or None when no file exists

        Raises:
            WorkspaceIOError: If the file cannot be read or is not a JSON object
        """
        path = self.find(scope)
        if path is None:
            logger.debug(f"No {scope.value} workspace file found")
            return None
        return LoadedDocument(self.read(path), path)

    def read(self, path: Path) -> JSONDict:
        """Read a strict JSON object from a file"""
        try:
            text = path.read_text(encoding="utf-8")
        except OSError as e:
            raise WorkspaceIOError(f"Cannot read {path}: {e}") from e

        try:
            document = loads(text)
        except JSONDecodeError as e:
            raise WorkspaceIOError(f"Invalid JSON in {path}: {e}") from e

        if not isinstance(document, dict):
            raise WorkspaceIOError(f"Invalid workspace file {path}: expected a JSON object")
        return document

    def save(self, path: Path, document: JSONDict) -> None:
        """Write a document as indented strict JSON, replacing the whole file

        The new content goes to a temporary file next to the target, which
        then replaces it. The existing file is untouched unless the write
        completes.

        Raises:
            WorkspaceIOError: If the document cannot be serialized or written
        """
        try:
            output = dumps(
                document, indent=self._config.output.indent, ensure_ascii=False, allow_nan=False
            )
            # Lone surrogates survive dumps() but cannot be encoded
            data = (output + "\n").encode("utf-8")
        except (TypeError, ValueError) as e:
            raise WorkspaceIOError(f"Cannot serialize workspace document: {e}") from e

        temp_path: Path | None = None
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with NamedTemporaryFile(
                mode="wb", dir=path.parent, prefix=f"{path.name}.", suffix=".tmp", delete=False
            ) as tmp:
                temp_path = Path(tmp.name)
                tmp.write(data)
            if path.exists():
                copymode(path, temp_path)
            temp_path.replace(path)
        except OSError as e:
            if temp_path is not None:
                temp_path.unlink(missing_ok=True)
            raise WorkspaceIOError(f"Cannot write {path}: {e}") from e

        logger.info(f"Wrote workspace file: {path}")
