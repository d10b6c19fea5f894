# tests/unit/application/services/test_migration.py

"""Tests for migrating the legacy global settings file"""

# Third party imports
import pytest

# Local imports
from tests.fixtures.workspaces import read_json
from tests.fixtures.workspaces import write_json
from workspace_config_tool.application.services import build_migrated_document
from workspace_config_tool.application.services import migrate_legacy_global_config
from workspace_config_tool.core.domain.errors import JsonSyntaxError


class TestBuildMigratedDocument:
    """Test translating legacy keys"""

    def test_all_keys(self):
        legacy = {
            "packageManager": "yarn",
            "defaults": {"schematics": {"collection": "@company/schematics"}},
            "warnings": {"versionMismatch": False, "typescriptMismatch": True},
        }
        assert build_migrated_document(legacy) == {
            "version": 1,
            "cli": {
                "packageManager": "yarn",
                "defaultCollection": "@company/schematics",
                "warnings": {"versionMismatch": False, "typescriptMismatch": True},
            },
        }

    def test_partial(self):
        assert build_migrated_document({"warnings": {"versionMismatch": False}}) == {
            "version": 1,
            "cli": {"warnings": {"versionMismatch": False}},
        }

    @pytest.mark.parametrize("manager", ["default", ""])
    def test_default_package_manager_is_dropped(self, manager):
        assert build_migrated_document({"packageManager": manager}) is None

    def test_wrong_types_are_skipped(self):
        legacy = {"packageManager": 3, "warnings": {"versionMismatch": "no"}}
        assert build_migrated_document(legacy) is None

    def test_unknown_keys_ignored(self):
        assert build_migrated_document({"apps": [], "project": {"name": "x"}}) is None

    def test_legacy_not_modified(self):
        legacy = {"packageManager": "npm"}
        build_migrated_document(legacy)
        assert legacy == {"packageManager": "npm"}


class TestMigrateLegacyGlobalConfig:
    """Test the file level migration"""

    @pytest.fixture
    def legacy_file(self, global_dir):
        return global_dir / ".workspace-cli.json"

    def test_writes_new_document(self, store, legacy_file):
        legacy_file.write_text(
            "/* legacy */ {packageManager: 'pnpm', warnings: {versionMismatch: false,},}",
            encoding="utf-8",
        )
        assert migrate_legacy_global_config(store) is True
        assert read_json(store.global_path) == {
            "version": 1,
            "cli": {"packageManager": "pnpm", "warnings": {"versionMismatch": False}},
        }

    def test_legacy_file_kept(self, store, legacy_file):
        write_json(legacy_file, {"packageManager": "yarn"})
        migrate_legacy_global_config(store)
        assert legacy_file.is_file()

    def test_existing_global_wins(self, store, legacy_file):
        write_json(legacy_file, {"packageManager": "yarn"})
        write_json(store.global_path, {"version": 1})
        assert migrate_legacy_global_config(store) is False
        assert read_json(store.global_path) == {"version": 1}

    def test_no_legacy_file(self, store):
        assert migrate_legacy_global_config(store) is False
        assert not store.global_path.exists()

    def test_nothing_to_migrate(self, store, legacy_file):
        write_json(legacy_file, {"packageManager": "default"})
        assert migrate_legacy_global_config(store) is False
        assert not store.global_path.exists()

    def test_legacy_not_an_object(self, store, legacy_file):
        legacy_file.write_text("[1, 2]", encoding="utf-8")
        assert migrate_legacy_global_config(store) is False

    def test_malformed_legacy_file(self, store, legacy_file):
        legacy_file.write_text("{packageManager: yarn}", encoding="utf-8")
        with pytest.raises(JsonSyntaxError):
            migrate_legacy_global_config(store)
        assert not store.global_path.exists()
