"""Utility functions for git-tidy.

This package provides utility modules:
- logging: Console logging, the cleanup log file and the SUCCESS level
- timestamps: Timestamp and stash name generation
"""

from .logging import (
    SUCCESS,
    CleanupLogHandler,
    ColoredFormatter,
    attach_cleanup_log,
    detach_cleanup_log,
    get_logger,
    log_success,
    setup_logging,
)
from .timestamps import generate_timestamp, make_stash_name

__all__ = [
    # Logging
    "SUCCESS",
    "CleanupLogHandler",
    "ColoredFormatter",
    "attach_cleanup_log",
    "detach_cleanup_log",
    "get_logger",
    "log_success",
    "setup_logging",
    # Timestamps
    "generate_timestamp",
    "make_stash_name",
]
