"""Command-line argument parsing for git-tidy."""

import argparse
from typing import List, Optional

from git_tidy.__version__ import __version__
from git_tidy.constants import DEFAULT_PROBE_TIMEOUT, DEFAULT_PROBE_URL, DEFAULT_REMOTE


def parse_args(argv: Optional[List[str]] = None):
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="git-tidy",
        description="Prune local branches and refresh the primary branch, keeping uncommitted work safe",
        epilog="Run inside a git working copy. Every branch deletion is confirmed individually.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Show verbose output")
    parser.add_argument("--version", action="version", version=f"git-tidy {__version__}")
    parser.add_argument(
        "--debug", action="store_true", help="Show debug information for troubleshooting"
    )
    parser.add_argument(
        "--remote", default=DEFAULT_REMOTE, help=f"Remote to pull from (default: {DEFAULT_REMOTE})"
    )
    parser.add_argument(
        "--no-network-check",
        action="store_true",
        help="Skip the network reachability check before starting",
    )
    parser.add_argument(
        "--probe-url",
        default=DEFAULT_PROBE_URL,
        help=f"URL used for the network reachability check (default: {DEFAULT_PROBE_URL})",
    )
    parser.add_argument(
        "--probe-timeout",
        type=float,
        default=DEFAULT_PROBE_TIMEOUT,
        metavar="SECONDS",
        help=f"Timeout of the network reachability check (default: {DEFAULT_PROBE_TIMEOUT:g})",
    )
    parser.add_argument(
        "--no-switch",
        action="store_true",
        help="Stay on the current branch instead of switching to the primary branch before deleting",
    )
    parser.add_argument(
        "--strict-primary",
        action="store_true",
        help="Reject a primary branch name that is neither a local nor a remote branch",
    )

    return parser.parse_args(argv)
