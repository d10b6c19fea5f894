# workspace_config_tool/adapters/cli/main.py

"""
Workspace Config Tool - CLI Main Module

Command-line interface for reading and writing values in local or global
workspace configuration files by path.
"""

# Standard library imports
from logging import getLogger

# Local imports
from workspace_config_tool.adapters.cli.logging_setup import resolve_log_level
from workspace_config_tool.adapters.cli.logging_setup import set_up_logging
from workspace_config_tool.adapters.cli.parser import create_argument_parser
from workspace_config_tool.application.services import ConfigService
from workspace_config_tool.core.domain.enums import ConfigScope
from workspace_config_tool.core.domain.errors import SchemaValidationError
from workspace_config_tool.core.domain.errors import WorkspaceConfigError
from workspace_config_tool.infrastructure.config import get_config

logger = getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point

    Args:
        argv: Arguments without the program name, sys.argv if None

    Returns:
        Process exit status
    """
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    config = get_config(args.tool_config)

    if args.log_level or args.verbose:
        log_level = resolve_log_level(args.log_level, args.verbose)
    else:
        log_level = resolve_log_level(config.logging.log_level)
    set_up_logging(log_file=args.log_file, log_level=log_level, silent=args.silent)

    scope = ConfigScope.GLOBAL if args.global_scope else ConfigScope.LOCAL
    service = ConfigService(config)

    try:
        if args.value is None:
            value = service.get(args.json_path, scope)
            print(service.format_value(value))
        else:
            service.set(args.json_path or "", args.value, scope)
    except SchemaValidationError as e:
        logger.critical(str(e))
        return 1
    except WorkspaceConfigError as e:
        logger.error(str(e))
        return 1

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
