# tests/adapters/cli/test_cli_main.py

"""Tests for the main() function and CLI execution"""

# Standard library imports
from json import loads
from runpy import run_module
from unittest.mock import patch

# Third party imports
import pytest

# Local imports
from tests.fixtures.workspaces import SAMPLE_WORKSPACE
from tests.fixtures.workspaces import read_json
from tests.fixtures.workspaces import write_json
from workspace_config_tool.adapters.cli import main


@pytest.fixture
def in_workspace(workspace_dir, global_dir, monkeypatch):
    """Run from inside the sample workspace with an isolated global dir"""
    monkeypatch.chdir(workspace_dir)
    return workspace_dir


class TestGetCommand:
    """Test reading values from the command line"""

    def test_string_printed_raw(self, in_workspace, capsys):
        assert main(["cli.packageManager"]) == 0
        assert capsys.readouterr().out == "npm\n"

    def test_boolean_printed_as_json(self, in_workspace, capsys):
        assert main(["cli.warnings.versionMismatch"]) == 0
        assert capsys.readouterr().out == "true\n"

    def test_container_printed_indented(self, in_workspace, capsys):
        assert main(["projects.app.architect.build.options.assets"]) == 0
        assert loads(capsys.readouterr().out) == ["src/favicon.ico", "src/assets"]

    def test_whole_document(self, in_workspace, capsys):
        assert main([]) == 0
        assert loads(capsys.readouterr().out) == SAMPLE_WORKSPACE

    def test_missing_value(self, in_workspace, capsys):
        assert main(["cli.defaultCollection"]) == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Value cannot be found." in captured.err

    def test_no_workspace(self, tmp_path, global_dir, monkeypatch, capsys):
        empty = tmp_path / "empty"
        empty.mkdir()
        monkeypatch.chdir(empty)
        assert main(["cli"]) == 1
        assert "No config found." in capsys.readouterr().err

    def test_malformed_path(self, in_workspace, capsys):
        assert main(["projects[x]"]) == 1
        assert "Invalid index" in capsys.readouterr().err

    @pytest.mark.parametrize("flag", ["--global", "-g"])
    def test_global(self, in_workspace, global_dir, capsys, flag):
        write_json(global_dir / ".workspace-config.json", {"cli": {"packageManager": "yarn"}})
        assert main([flag, "cli.packageManager"]) == 0
        assert capsys.readouterr().out == "yarn\n"


class TestSetCommand:
    """Test writing values from the command line"""

    def test_set_value(self, in_workspace, capsys):
        assert main(["cli.packageManager", "pnpm"]) == 0
        assert capsys.readouterr().out == ""
        assert read_json(in_workspace / "workspace.json")["cli"]["packageManager"] == "pnpm"

    def test_set_json_value(self, in_workspace):
        assert main(["schematics.@schematics/angular:component", "{style: 'sass'}"]) == 0
        document = read_json(in_workspace / "workspace.json")
        assert document["schematics"]["@schematics/angular:component"] == {"style": "sass"}

    def test_invalid_type(self, in_workspace, capsys):
        assert main(["cli.warnings.versionMismatch", "often"]) == 1
        assert "Invalid value type; expected a boolean." in capsys.readouterr().err

    def test_schema_failure_is_critical(self, in_workspace, capsys):
        assert main(["cli.packageManager", "bower"]) == 1
        err = capsys.readouterr().err
        assert "CRITICAL" in err
        assert "Workspace document is invalid" in err
        assert read_json(in_workspace / "workspace.json") == SAMPLE_WORKSPACE

    def test_global_path_restriction(self, in_workspace, global_dir, capsys):
        write_json(global_dir / ".workspace-config.json", {"version": 1})
        assert main(["-g", "projects.app.root", "src"]) == 1
        assert "Invalid Path." in capsys.readouterr().err

    def test_global_set(self, in_workspace, global_dir):
        write_json(global_dir / ".workspace-config.json", {"version": 1})
        assert main(["--global", "cli.warnings.versionMismatch", "false"]) == 0
        assert read_json(global_dir / ".workspace-config.json") == {
            "version": 1,
            "cli": {"warnings": {"versionMismatch": False}},
        }

    def test_empty_path_with_value(self, in_workspace, capsys):
        assert main(["", "x"]) == 1
        assert "Invalid Path." in capsys.readouterr().err


class TestLoggingOptions:
    """Test how logging options reach set_up_logging"""

    def test_defaults(self, in_workspace):
        with patch("workspace_config_tool.adapters.cli.main.set_up_logging") as mock_logging:
            main(["version"])
            mock_logging.assert_called_once_with(log_file=None, log_level=30, silent=False)

    def test_verbose(self, in_workspace):
        with patch("workspace_config_tool.adapters.cli.main.set_up_logging") as mock_logging:
            main(["-vv", "version"])
            assert mock_logging.call_args.kwargs["log_level"] == 10

    def test_log_level_from_settings(self, in_workspace):
        write_json(in_workspace / "workspace_config_tool.json", {"logging": {"log_level": "info"}})
        with patch("workspace_config_tool.adapters.cli.main.set_up_logging") as mock_logging:
            main(["version"])
            assert mock_logging.call_args.kwargs["log_level"] == 20

    def test_explicit_settings_file(self, in_workspace, tmp_path):
        settings = write_json(tmp_path / "custom.json", {"logging": {"log_level": "ERROR"}})
        with patch("workspace_config_tool.adapters.cli.main.set_up_logging") as mock_logging:
            main(["--tool-config", str(settings), "version"])
            assert mock_logging.call_args.kwargs["log_level"] == 40

    def test_silent(self, in_workspace, capsys):
        assert main(["--silent", "cli.defaultCollection"]) == 1
        assert capsys.readouterr().err == ""

    def test_log_file(self, in_workspace, tmp_path, capsys):
        log_file = tmp_path / "logs" / "config.log"
        assert main(["--silent", "--log-file", str(log_file), "cli.packageManager", "yarn"]) == 0
        assert "Set 'cli.packageManager'" in log_file.read_text(encoding="utf-8")


def test_module_entry_point():
    """python -m workspace_config_tool runs main()"""
    with patch("workspace_config_tool.adapters.cli.main.main", return_value=0) as mock_main:
        with pytest.raises(SystemExit) as exc_info:
            run_module("workspace_config_tool", run_name="__main__")
        assert exc_info.value.code == 0
        mock_main.assert_called_once_with()
