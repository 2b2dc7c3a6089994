"""Input collection: turns the user's answers into a CleanupPlan"""

from typing import Iterable, List, Optional, Sequence, Union, TYPE_CHECKING

from git_tidy.exceptions import DetachedHeadError, PlanError
from git_tidy.models.plan import CleanupPlan
from git_tidy.utils.logging import get_logger

if TYPE_CHECKING:
    from git_tidy.config import Config
    from git_tidy.services.git import GitOperations
    from git_tidy.services.prompt_service import PromptService

logger = get_logger(__name__)


def deletion_candidates(branches: Iterable[str], primary_branch: str) -> List[str]:
    """Local branches that may be offered for deletion, in listing order.

    The primary branch is never a candidate, and neither are empty names or duplicates.
    """
    names = dict.fromkeys(name.strip() for name in branches)
    return [name for name in names if name and name != primary_branch]


class CleanupPlanner:
    """Asks every question of a cleanup run before anything is changed."""

    def __init__(
        self,
        git_ops: "GitOperations",
        prompts: "PromptService",
        config: Union["Config", dict],
    ):
        self.git_ops = git_ops
        self.prompts = prompts
        self.config = config

    def collect(self) -> CleanupPlan:
        """Build the plan from the repository state and the user's answers.

        Raises:
            PlanError: If the primary branch answer is unusable
        """
        local_branches = self.git_ops.list_local_branches()

        try:
            original_branch: Optional[str] = self.git_ops.current_branch()
        except DetachedHeadError:
            original_branch = None
            logger.warning("HEAD is detached; the primary branch has to be entered by name.")

        primary_branch = self.resolve_primary_branch(original_branch, local_branches)
        branches_to_delete = self.select_branches_to_delete(local_branches, primary_branch)
        reapply_stash = self.prompts.confirm(
            " > Do you want to reapply stashed changes after the cleanup?"
        )
        return_to_original = self._ask_return_to_original(
            original_branch, primary_branch, branches_to_delete
        )

        return CleanupPlan(
            primary_branch=primary_branch,
            original_branch=original_branch,
            local_branches=tuple(local_branches),
            branches_to_delete=tuple(branches_to_delete),
            reapply_stash=reapply_stash,
            return_to_original=return_to_original,
        )

    def resolve_primary_branch(
        self, current_branch: Optional[str], local_branches: Sequence[str]
    ) -> str:
        """Confirm the current branch as primary or ask for the primary branch name."""
        if current_branch and self.prompts.confirm(f" > Is '{current_branch}' your primary branch?"):
            return current_branch

        primary_branch = self.prompts.ask(" > Please enter the name of your primary branch:")
        if not primary_branch:
            raise PlanError("Primary branch name cannot be empty.")

        if primary_branch not in local_branches:
            remote_name = self.config.get("remote_name", "origin")
            if self.git_ops.has_remote_branch(primary_branch):
                logger.info(
                    f"Branch '{primary_branch}' only exists on '{remote_name}'; "
                    "it will be created locally from there."
                )
            elif self.config.get("strict_primary", False):
                raise PlanError(
                    f"Branch '{primary_branch}' is neither a local branch nor on '{remote_name}'."
                )
            else:
                logger.warning(
                    f"Branch '{primary_branch}' is not a known local or remote branch; "
                    "continuing with the name as entered."
                )

        return primary_branch

    def select_branches_to_delete(
        self, local_branches: Sequence[str], primary_branch: str
    ) -> List[str]:
        """Ask about every candidate branch, one at a time."""
        selected = []
        for branch in deletion_candidates(local_branches, primary_branch):
            if self.prompts.confirm(f"   > Are you sure you want to delete the branch '{branch}'?"):
                selected.append(branch)
        return selected

    def _ask_return_to_original(
        self,
        original_branch: Optional[str],
        primary_branch: str,
        branches_to_delete: Sequence[str],
    ) -> bool:
        """Offer to switch back when the run will leave the original branch."""
        if not self.config.get("switch_to_primary", True):
            return False
        if not original_branch or original_branch == primary_branch:
            return False
        if original_branch in branches_to_delete:
            return False
        return self.prompts.confirm(
            f" > Do you want to switch back to '{original_branch}' after the cleanup?"
        )
