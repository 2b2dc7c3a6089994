"""Precondition checks run before a cleanup starts"""

import shutil
from typing import Iterable, Union, TYPE_CHECKING

import git
import httpx

from git_tidy.constants import DEFAULT_PROBE_TIMEOUT, DEFAULT_PROBE_URL, REQUIRED_TOOLS
from git_tidy.exceptions import MissingToolError, NetworkUnavailableError, NotARepositoryError
from git_tidy.models.plan import RepositoryHandle
from git_tidy.utils.logging import get_logger

if TYPE_CHECKING:
    from git_tidy.config import Config

logger = get_logger(__name__)


class EnvironmentService:
    """Service validating tools, repository and network before any mutation."""

    def __init__(self, config: Union["Config", dict]):
        self.config = config

    @staticmethod
    def check_tools(tools: Iterable[str]) -> None:
        """Ensure every tool is available on PATH.

        Raises:
            MissingToolError: For the first tool that cannot be found
        """
        for tool in tools:
            if shutil.which(tool) is None:
                raise MissingToolError(tool)
            logger.debug(f"Found required tool '{tool}'")

    @staticmethod
    def check_repository(path: str) -> RepositoryHandle:
        """Ensure path is inside a git working copy.

        Returns:
            RepositoryHandle for the enclosing working copy

        Raises:
            NotARepositoryError: If path is not inside a non-bare repository
        """
        try:
            repo = git.Repo(path, search_parent_directories=True)
        except (git.exc.InvalidGitRepositoryError, git.exc.NoSuchPathError):
            raise NotARepositoryError(path) from None

        try:
            if repo.bare or repo.working_tree_dir is None:
                raise NotARepositoryError(path, "repository has no working tree")
            return RepositoryHandle(working_dir=str(repo.working_tree_dir), git_dir=str(repo.git_dir))
        finally:
            repo.close()

    @staticmethod
    def check_network(url: str, timeout: float) -> None:
        """Send a HEAD request to url. Any HTTP response counts as reachable.

        Raises:
            NetworkUnavailableError: On connection errors and timeouts
        """
        try:
            response = httpx.head(url, timeout=timeout, follow_redirects=True)
        except httpx.HTTPError as e:
            raise NetworkUnavailableError(url, str(e) or type(e).__name__) from e
        logger.debug(f"Network probe {url} answered {response.status_code}")

    def check_preconditions(self) -> None:
        """Run the tool check, then the network check unless it is disabled.

        Raises:
            MissingToolError: If a required tool is missing
            NetworkUnavailableError: If the probe URL cannot be reached
        """
        self.check_tools(self.config.get("required_tools", REQUIRED_TOOLS))
        if self.config.get("check_network", True):
            self.check_network(
                self.config.get("probe_url", DEFAULT_PROBE_URL),
                self.config.get("probe_timeout", DEFAULT_PROBE_TIMEOUT),
            )
