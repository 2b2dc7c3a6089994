"""Git-related services for git-tidy."""

from .operations import GitOperations, describe_git_error

__all__ = [
    "GitOperations",
    "describe_git_error",
]
