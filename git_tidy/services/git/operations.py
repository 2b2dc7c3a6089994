"""Git operations service"""

import git
from contextlib import contextmanager
from typing import Union, TYPE_CHECKING, List, Optional

from git_tidy.exceptions import DetachedHeadError, GitOperationError
from git_tidy.utils.logging import get_logger

if TYPE_CHECKING:
    from git_tidy.config import Config

logger = get_logger(__name__)


def describe_git_error(error: git.exc.GitCommandError) -> str:
    """Build a one-line description of a failed git command."""
    command = error.command if hasattr(error, "command") else "git"
    if isinstance(command, (list, tuple)):
        command = " ".join(str(part) for part in command)
    stderr = (error.stderr if hasattr(error, "stderr") and error.stderr else "").strip()
    # GitPython wraps the captured output as: stderr: '<text>'
    if stderr.startswith("stderr:"):
        stderr = stderr[len("stderr:"):].strip().strip("'").strip()
    status = error.status if hasattr(error, "status") else "unknown status"
    if isinstance(status, int):
        status = f"exit code({status})"

    if stderr:
        return f"'{command}' failed with {status}: {stderr}"
    return f"'{command}' failed with {status}"


class GitOperations:
    """Service for every git command git-tidy issues."""

    def __init__(self, repo_path: str, config: Union["Config", dict]):
        """Initialize the service.

        Args:
            repo_path: Path to the git working copy (string path, not repo object)
            config: Configuration dictionary or Config object
        """
        self.repo_path = repo_path
        self.config = config
        self.remote_name = config.get("remote_name", "origin")
        self.in_git_operation = False  # Track if a mutating command is running

        logger.debug("Git operations initialized")

    def _get_repo(self):
        """Open the working copy. Each call sees the state left by the previous command."""
        return git.Repo(self.repo_path)

    @contextmanager
    def _git_operation(self, operation: str, branch: Optional[str] = None):
        """Track a running git command and translate its failure."""
        self.in_git_operation = True
        try:
            yield
        except git.exc.GitCommandError as e:
            raise GitOperationError(operation, branch, describe_git_error(e)) from e
        finally:
            self.in_git_operation = False

    # Queries

    def current_branch(self) -> str:
        """Return the checked-out branch name.

        Raises:
            DetachedHeadError: If HEAD does not point at a branch
        """
        repo = self._get_repo()
        try:
            return repo.active_branch.name
        except TypeError:
            raise DetachedHeadError() from None

    def list_local_branches(self) -> List[str]:
        """List local branch names, without markers or duplicates."""
        repo = self._get_repo()
        names = [head.name.strip() for head in repo.heads]
        return list(dict.fromkeys(name for name in names if name))

    def branch_exists(self, branch_name: str) -> bool:
        """Check if a local branch exists."""
        return branch_name in self.list_local_branches()

    def has_remote_branch(self, branch_name: str) -> bool:
        """Check if the branch has a remote tracking branch."""
        try:
            repo = self._get_repo()
            remote = repo.remote(self.remote_name)
            remote_ref_name = f"{self.remote_name}/{branch_name}"
            return remote_ref_name in [ref.name for ref in remote.refs]
        except Exception as e:
            logger.debug(f"Error checking remote branch {branch_name}: {e}")
            return False

    def has_uncommitted_changes(self) -> bool:
        """Check the working tree against HEAD, untracked files included."""
        with self._git_operation("check_changes"):
            repo = self._get_repo()
            return repo.is_dirty(index=True, working_tree=True, untracked_files=True)

    # Stash

    def stash_push(self, stash_name: str) -> None:
        """Stash tracked and untracked changes under a message."""
        with self._git_operation("stash_push"):
            repo = self._get_repo()
            repo.git.stash("push", "--include-untracked", "-m", stash_name)
        logger.debug(f"Stashed changes as '{stash_name}'")

    def stash_list(self) -> List[str]:
        """Return the raw stash list, one entry per line."""
        with self._git_operation("stash_list"):
            repo = self._get_repo()
            output = repo.git.stash("list")
        return [line for line in output.splitlines() if line.strip()]

    def find_stash(self, stash_name: str) -> Optional[str]:
        """Find the stash@{n} reference of a stash by its message."""
        # Lines look like: stash@{0}: On main: <message>
        for line in self.stash_list():
            ref, _, description = line.partition(": ")
            if description == stash_name or description.endswith(f": {stash_name}"):
                return ref
        return None

    def stash_pop(self, stash_ref: str) -> None:
        """Apply a stash entry and remove it from the list."""
        with self._git_operation("stash_pop"):
            repo = self._get_repo()
            repo.git.stash("pop", stash_ref)

    def stash_drop(self, stash_ref: str) -> None:
        """Discard a stash entry."""
        with self._git_operation("stash_drop"):
            repo = self._get_repo()
            repo.git.stash("drop", stash_ref)

    # Branches

    def delete_branch(self, branch_name: str) -> None:
        """Force-delete a local branch, merged or not."""
        with self._git_operation("delete_branch", branch_name):
            repo = self._get_repo()
            repo.delete_head(branch_name, force=True)

    def checkout(self, branch_name: str) -> None:
        """Switch the working copy to an existing local branch."""
        with self._git_operation("checkout", branch_name):
            repo = self._get_repo()
            repo.git.checkout(branch_name)

    def checkout_from_remote(self, branch_name: str) -> None:
        """Create (or reset) a local branch from its remote counterpart and switch to it."""
        with self._git_operation("checkout", branch_name):
            repo = self._get_repo()
            repo.git.checkout("-B", branch_name, f"{self.remote_name}/{branch_name}")

    # Remote sync

    def fetch_all(self) -> None:
        """Fetch every remote, tags included, pruning deleted remote branches."""
        with self._git_operation("fetch"):
            repo = self._get_repo()
            repo.git.fetch("--all", "--tags", "--prune")

    def pull_rebase(self, branch_name: str) -> None:
        """Pull a branch from the configured remote with rebase."""
        with self._git_operation("pull", branch_name):
            repo = self._get_repo()
            repo.git.pull("--rebase", "--prune", "--tags", self.remote_name, branch_name)
