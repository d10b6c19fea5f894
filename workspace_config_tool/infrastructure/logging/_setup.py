# workspace_config_tool/infrastructure/logging/_setup.py

"""Console and file logging for the command line tool

Command output goes to stdout, so every log record is written to stderr or
to the optional log file.
"""

# Standard library imports
from logging import DEBUG
from logging import FileHandler
from logging import Formatter
from logging import Handler
from logging import INFO
from logging import StreamHandler
from logging import WARNING
from logging import getLevelName
from logging import getLogger
from pathlib import Path

CONSOLE_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"
FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def resolve_log_level(log_level: str | None = None, verbose: int = 0) -> int:
    """Turn a level name and a -v count into a logging level

    An explicit level name wins; otherwise -v gives INFO and -vv DEBUG.
    """
    if log_level:
        level = getLevelName(log_level.upper())
        if isinstance(level, int):
            return level
    if verbose >= 2:
        return DEBUG
    if verbose == 1:
        return INFO
    return WARNING


def _console_handler(level: int) -> Handler:
    # StreamHandler() looks up sys.stderr when called
    handler = StreamHandler()
    handler.setLevel(level)
    handler.setFormatter(Formatter(CONSOLE_FORMAT))
    return handler


def _file_handler(log_file: str) -> Handler:
    Path(log_file).parent.mkdir(parents=True, exist_ok=True)
    handler = FileHandler(log_file, encoding="utf-8")
    handler.setLevel(DEBUG)
    handler.setFormatter(Formatter(FILE_FORMAT))
    return handler


def set_up_logging(
    log_file: str | None = None,
    log_level: str | int = "WARNING",
    silent: bool = False,
) -> str | None:
    """Replace the root logger's handlers for one command run

    Args:
        log_file: Also write every record, down to DEBUG, to this file
        log_level: Console level as a name or a logging constant
        silent: Install no console handler at all

    Returns:
        The log file path when file logging is on, otherwise None
    """
    level = log_level if isinstance(log_level, int) else resolve_log_level(log_level)

    handlers: list[Handler] = []
    if not silent:
        handlers.append(_console_handler(level))
    if log_file:
        handlers.append(_file_handler(log_file))

    root_logger = getLogger()
    root_logger.handlers = handlers
    # The file handler needs DEBUG records even when the console is quieter
    root_logger.setLevel(DEBUG if log_file else level)

    if log_file:
        getLogger(__name__).info(f"Logging to file: {log_file}")
    return log_file or None
