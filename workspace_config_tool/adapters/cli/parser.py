# workspace_config_tool/adapters/cli/parser.py

"""Command-line argument parser for workspace-config"""

# Standard library imports
from argparse import ArgumentParser

# Local imports
from workspace_config_tool.infrastructure.config import get_config

_LOG_LEVEL_CHOICES = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def create_argument_parser() -> ArgumentParser:
    """Build the parser; logging defaults come from the tool settings file"""
    logging_settings = get_config().logging

    parser = ArgumentParser(
        prog="workspace-config",
        description="Retrieve or set values in a workspace configuration file",
        epilog=(
            "Paths use dots for keys and brackets for list indices, "
            "e.g. projects.app.architect.build.options.assets[0]"
        ),
    )

    # With only a path the value is printed; with a value it is written
    parser.add_argument(
        "json_path",
        nargs="?",
        help="Path of the value to get or set; omit to print the whole document",
    )
    parser.add_argument("value", nargs="?", help="New value to store at the path")

    target = parser.add_argument_group("target document")
    target.add_argument(
        "-g",
        "--global",
        dest="global_scope",
        action="store_true",
        help="Use the per-user global configuration instead of the local workspace",
    )
    target.add_argument(
        "--tool-config",
        metavar="PATH",
        help="JSON settings file for this tool (default: ./workspace_config_tool.json)",
    )

    logging_group = parser.add_argument_group("logging")
    logging_group.add_argument(
        "--log-level",
        choices=_LOG_LEVEL_CHOICES,
        type=str.upper,
        help=f"Console log level (default: {logging_settings.log_level})",
    )
    logging_group.add_argument(
        "--log-file",
        metavar="PATH",
        default=logging_settings.log_file,
        help="Also write a debug log to this file",
    )
    logging_group.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="-v for INFO, -vv for DEBUG; ignored when --log-level is given",
    )
    logging_group.add_argument(
        "--silent", action="store_true", help="Write no log output to the console"
    )

    return parser
