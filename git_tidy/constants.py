"""Shared constants for git-tidy."""

from typing import List

# Files written inside the repository's metadata directory
CLEANUP_LOG_FILE = "cleanup_log.txt"
BRANCH_BACKUP_FILE = "backup_branches.txt"

# Reachability probe
DEFAULT_PROBE_URL = "https://github.com"
DEFAULT_PROBE_TIMEOUT = 10.0

DEFAULT_REMOTE = "origin"

# External executables that must be on PATH
REQUIRED_TOOLS: List[str] = ["git"]

# Timestamps look like 2024-05-01_13-45-09
TIMESTAMP_FORMAT = "%Y-%m-%d_%H-%M-%S"
TIMESTAMP_PATTERN = r"\d{4}-\d{2}-\d{2}_\d{2}-\d{2}-\d{2}"

STASH_NAME_TEMPLATE = "git-tidy backup - branch {branch} - {timestamp}"

# Logger that owns the cleanup log file handler
PACKAGE_LOGGER = "git_tidy"


SUMMARY_TEXT = """
[bold]☛ git-tidy will tidy up your local repository by:[/bold]
  • Stashing uncommitted changes under a timestamped name
  • Deleting the local branches you confirm (never the primary branch)
  • Fetching all remotes and pulling the primary branch with rebase
  • Reapplying or dropping the stash, as you choose
"""
