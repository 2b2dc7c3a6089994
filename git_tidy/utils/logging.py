"""Logging configuration for git-tidy"""
import copy
import logging
import sys
from pathlib import Path
from typing import Union

from git_tidy.constants import CLEANUP_LOG_FILE, PACKAGE_LOGGER

# Between INFO and WARNING, used for the final outcome line
SUCCESS = 25
logging.addLevelName(SUCCESS, "SUCCESS")

LEVEL_FORMAT = "[%(levelname)s] %(message)s"
DEBUG_FORMAT = "%(asctime)s %(name)s [%(levelname)s] %(message)s"
DEBUG_DATE_FORMAT = "%H:%M:%S"

RESET = "\033[0m"
LEVEL_COLORS = {
    logging.DEBUG: "\033[2m",      # dim
    logging.INFO: "\033[34m",      # blue
    SUCCESS: "\033[32m",           # green
    logging.WARNING: "\033[33m",   # yellow
    logging.ERROR: "\033[31m",     # red
    logging.CRITICAL: "\033[1;31m",
}


class ColoredFormatter(logging.Formatter):
    """Colors the level name when the console is a terminal."""

    def format(self, record):
        color = LEVEL_COLORS.get(record.levelno)
        if color and sys.stderr.isatty():
            # The cleanup log handler formats the same record
            record = copy.copy(record)
            record.levelname = f"{color}{record.levelname}{RESET}"
        return super().format(record)


def setup_logging(verbose: bool = False, debug: bool = False) -> None:
    """
    Send log records to stderr, replacing any handler already on the root logger.

    Args:
        verbose: Include DEBUG records
        debug: Include DEBUG records, with time and logger name, and GitPython's own output
    """
    level = logging.DEBUG if (verbose or debug) else logging.INFO

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    if debug:
        handler.setFormatter(ColoredFormatter(fmt=DEBUG_FORMAT, datefmt=DEBUG_DATE_FORMAT))
    else:
        handler.setFormatter(ColoredFormatter(fmt=LEVEL_FORMAT))

    root = logging.getLogger()
    for existing in list(root.handlers):
        root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(level)

    # GitPython logs every command it runs at DEBUG
    if not debug:
        logging.getLogger("git").setLevel(logging.WARNING)


class CleanupLogHandler(logging.FileHandler):
    """Appends to a repository's cleanup log and remembers the package logger level it replaced."""

    def __init__(self, log_path: Path):
        super().__init__(log_path, mode='a', encoding='utf-8')
        self.setLevel(logging.INFO)
        self.setFormatter(logging.Formatter(fmt=LEVEL_FORMAT))
        self.previous_level = logging.NOTSET


def attach_cleanup_log(git_dir: Union[str, Path]) -> CleanupLogHandler:
    """
    Start appending package log records to the cleanup log of a repository.

    Args:
        git_dir: The repository's metadata directory (usually ``.git``)

    Returns:
        The attached handler, to be passed to detach_cleanup_log()
    """
    handler = CleanupLogHandler(Path(git_dir) / CLEANUP_LOG_FILE)

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    handler.previous_level = package_logger.level
    if package_logger.getEffectiveLevel() > logging.INFO:
        package_logger.setLevel(logging.INFO)
    package_logger.addHandler(handler)
    return handler


def detach_cleanup_log(handler: CleanupLogHandler) -> None:
    """Stop writing to the cleanup log, close the file and restore the package logger level."""
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.removeHandler(handler)
    package_logger.setLevel(handler.previous_level)
    handler.close()


def log_success(logger: logging.Logger, message: str) -> None:
    """Log a message at the SUCCESS level."""
    logger.log(SUCCESS, message)


def get_logger(name: str) -> logging.Logger:
    """Module logger; names under git_tidy also reach the cleanup log."""
    return logging.getLogger(name)
