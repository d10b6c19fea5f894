# tests/conftest.py

"""Pytest configuration and fixtures for test suite"""

# Standard library imports
from logging import WARNING
from logging import getLogger
from pathlib import Path

# Third party imports
import pytest

# Local imports
from tests.fixtures.workspaces import SAMPLE_WORKSPACE
from tests.fixtures.workspaces import write_json
from workspace_config_tool.application.services import ConfigService
from workspace_config_tool.infrastructure.config import ConfigLoader
from workspace_config_tool.infrastructure.config import GLOBAL_DIR_ENV_VAR
from workspace_config_tool.infrastructure.config import reset_config
from workspace_config_tool.infrastructure.persistence import WorkspaceStore


@pytest.fixture(autouse=True)
def basic_isolation(monkeypatch):
    """Start every test with bare logging, no cached settings and no global dir override"""
    root_logger = getLogger()
    while root_logger.handlers:
        handler = root_logger.handlers[0]
        root_logger.removeHandler(handler)
        handler.close()
    root_logger.setLevel(WARNING)

    monkeypatch.delenv(GLOBAL_DIR_ENV_VAR, raising=False)
    reset_config()

    yield

    reset_config()


@pytest.fixture
def global_dir(tmp_path, monkeypatch) -> Path:
    """Empty directory standing in for the user's home"""
    directory = tmp_path / "home"
    directory.mkdir()
    monkeypatch.setenv(GLOBAL_DIR_ENV_VAR, str(directory))
    return directory


@pytest.fixture
def workspace_dir(tmp_path) -> Path:
    """Project directory containing a sample workspace.json"""
    directory = tmp_path / "project"
    write_json(directory / "workspace.json", SAMPLE_WORKSPACE)
    return directory


@pytest.fixture
def config(tmp_path) -> ConfigLoader:
    """Settings loader that never picks up a settings file from the cwd"""
    return ConfigLoader(str(tmp_path / "missing_settings.json"))


@pytest.fixture
def store(config, workspace_dir, global_dir) -> WorkspaceStore:
    """Store rooted at the sample workspace with an isolated global dir"""
    return WorkspaceStore(config, start_dir=workspace_dir)


@pytest.fixture
def service(config, store) -> ConfigService:
    """Config service wired to the isolated store"""
    return ConfigService(config, store)
