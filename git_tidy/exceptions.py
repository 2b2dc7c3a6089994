"""Custom exceptions for git-tidy"""

from typing import Optional


class GitTidyError(Exception):
    """Base exception for all git-tidy errors."""
    pass


class EnvironmentCheckError(GitTidyError):
    """Exception raised when the environment does not allow a cleanup to start."""
    pass


class MissingToolError(EnvironmentCheckError):
    """Exception raised when a required executable is not on PATH."""

    def __init__(self, tool: str):
        self.tool = tool
        super().__init__(f"Required tool '{tool}' is not installed or not on PATH.")


class NotARepositoryError(EnvironmentCheckError):
    """Exception raised when the target path is not inside a git working copy."""

    def __init__(self, path: str, message: Optional[str] = None):
        self.path = path
        error_msg = f"Not a git repository: {path}"
        if message:
            error_msg += f" ({message})"
        super().__init__(error_msg)


class NetworkUnavailableError(EnvironmentCheckError):
    """Exception raised when the reachability probe fails."""

    def __init__(self, url: str, message: Optional[str] = None):
        self.url = url
        error_msg = f"No network connection: could not reach {url}"
        if message:
            error_msg += f": {message}"
        super().__init__(error_msg)


class PlanError(GitTidyError):
    """Exception raised when the answers given cannot form a cleanup plan."""
    pass


class BackupError(GitTidyError):
    """Exception raised when the branch backup file cannot be written."""

    def __init__(self, path: str, message: Optional[str] = None):
        self.path = path
        error_msg = f"Could not write branch backup to {path}"
        if message:
            error_msg += f": {message}"
        super().__init__(error_msg)


class GitOperationError(GitTidyError):
    """Exception raised for errors in Git operations."""

    def __init__(self, operation: str, branch: Optional[str] = None, message: Optional[str] = None):
        self.operation = operation
        self.branch = branch
        self.message = message

        error_msg = f"Git operation '{operation}' failed"
        if branch:
            error_msg += f" for branch '{branch}'"
        if message:
            error_msg += f": {message}"

        super().__init__(error_msg)


class DetachedHeadError(GitOperationError):
    """Exception raised when repository is in detached HEAD state."""

    def __init__(self):
        super().__init__("check_state", message="Repository is in detached HEAD state")
