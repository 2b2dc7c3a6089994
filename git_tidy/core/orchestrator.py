"""Core cleanup procedure for git-tidy"""

from typing import Optional, Union

from rich.console import Console

from git_tidy.config import Config
from git_tidy.constants import SUMMARY_TEXT
from git_tidy.core.planner import CleanupPlanner
from git_tidy.exceptions import DetachedHeadError, EnvironmentCheckError, GitOperationError, GitTidyError
from git_tidy.models.plan import (
    CleanupPlan,
    ExecutionReport,
    RepositoryHandle,
    RunOutcome,
    StashRecord,
    StashResolution,
)
from git_tidy.services.backup_service import BackupService
from git_tidy.services.environment_service import EnvironmentService
from git_tidy.services.git import GitOperations
from git_tidy.services.prompt_service import PromptService
from git_tidy.utils.logging import attach_cleanup_log, detach_cleanup_log, get_logger, log_success
from git_tidy.utils.timestamps import generate_timestamp, make_stash_name

console = Console()
logger = get_logger(__name__)


class CleanupOrchestrator:
    """Runs one cleanup: preconditions, confirmation, planning, execution."""

    def __init__(
        self,
        repo_path: str,
        config: Union[Config, dict],
        prompts: Optional[PromptService] = None,
    ):
        """Initialize the orchestrator.

        Args:
            repo_path: Directory inside the working copy to clean up
            config: Configuration dict or Config object
            prompts: Prompt service; defaults to terminal prompts
        """
        self.repo_path = repo_path
        # Convert dict to Config if needed
        if isinstance(config, dict):
            self.config = Config.from_dict(config)
        else:
            self.config = config
        self.prompts = prompts or PromptService()
        self.environment = EnvironmentService(self.config)

        self.repository: Optional[RepositoryHandle] = None
        self.git_service: Optional[GitOperations] = None
        self.report: Optional[ExecutionReport] = None

    def run(self) -> RunOutcome:
        """Run the whole procedure and return how it ended. Never raises GitTidyError."""
        try:
            self.repository = self.environment.check_repository(self.repo_path)
        except EnvironmentCheckError as e:
            logger.error(f"{e} Exiting.")
            return RunOutcome.FAILED

        log_handler = attach_cleanup_log(self.repository.git_dir)
        try:
            return self._run_in_repository(self.repository)
        except Exception as e:
            logger.error(f"Unexpected error: {e}")
            self._report_leftovers()
            raise
        finally:
            detach_cleanup_log(log_handler)

    def _run_in_repository(self, repository: RepositoryHandle) -> RunOutcome:
        # Runs after the cleanup log is attached so these failures reach the file
        try:
            self.environment.check_preconditions()
        except EnvironmentCheckError as e:
            logger.error(f"{e} Exiting.")
            return RunOutcome.FAILED

        if not self.confirm_intent():
            logger.warning("Cleanup aborted by the user. Exiting.")
            return RunOutcome.DECLINED

        self.git_service = GitOperations(repository.working_dir, self.config)
        try:
            plan = CleanupPlanner(self.git_service, self.prompts, self.config).collect()
            self.execute(plan)
        except GitTidyError as e:
            logger.error(str(e))
            self._report_leftovers()
            return RunOutcome.FAILED

        log_success(logger, f"Cleanup completed successfully at {generate_timestamp()}.")
        return RunOutcome.COMPLETED

    def confirm_intent(self) -> bool:
        """Show what the cleanup does and ask to proceed."""
        console.print(SUMMARY_TEXT)
        return self.prompts.confirm(" > Do you want to continue with the cleanup?")

    def execute(self, plan: CleanupPlan) -> ExecutionReport:
        """Apply a resolved plan. Stops at the first failure without undoing earlier steps.

        Raises:
            GitOperationError: If any git command fails
            BackupError: If the branch backup cannot be written
        """
        if self.repository is None:
            self.repository = self.environment.check_repository(self.repo_path)
        if self.git_service is None:
            self.git_service = GitOperations(self.repository.working_dir, self.config)
        git_ops = self.git_service

        report = ExecutionReport(plan=plan)
        self.report = report
        logger.info(f"Cleanup started at {generate_timestamp()}.")

        if git_ops.has_uncommitted_changes():
            stash_name = make_stash_name(plan.primary_branch)
            logger.info(f"Uncommitted changes detected. Stashing them as '{stash_name}'...")
            git_ops.stash_push(stash_name)
            report.stash = StashRecord(stash_name)
        else:
            logger.info("No uncommitted changes detected. No stash needed.")

        backup_path = BackupService(self.repository.git_dir).write(plan.local_branches)
        report.backup_path = str(backup_path)
        logger.info(f"Backed up {len(plan.local_branches)} local branch names to {backup_path}.")

        if self.config.switch_to_primary:
            report.switched_to_primary = self._switch_to_primary(plan.primary_branch)

        for branch in plan.branches_to_delete:
            logger.info(f"Deleting local branch '{branch}'...")
            git_ops.delete_branch(branch)
            report.deleted_branches.append(branch)
        if not plan.branches_to_delete:
            logger.info("No branches selected for deletion.")

        logger.info("Fetching updates from all remotes with tags...")
        git_ops.fetch_all()

        logger.info(
            f"Pulling the latest changes for '{plan.primary_branch}' "
            f"from '{git_ops.remote_name}' with rebase..."
        )
        git_ops.pull_rebase(plan.primary_branch)

        if plan.return_to_original:
            logger.info(f"Switching back to '{plan.original_branch}'...")
            git_ops.checkout(plan.original_branch)
            report.returned_to_original = True

        if report.stash is not None:
            self._resolve_stash(report.stash, plan.reapply_stash)

        return report

    def _switch_to_primary(self, primary_branch: str) -> bool:
        """Check out the primary branch so no branch slated for deletion is checked out.

        Returns:
            True if the working copy was switched, False if it already was on the branch
        """
        git_ops = self.git_service
        try:
            if git_ops.current_branch() == primary_branch:
                return False
        except DetachedHeadError:
            pass

        logger.info(f"Switching to primary branch '{primary_branch}'...")
        if git_ops.branch_exists(primary_branch):
            git_ops.checkout(primary_branch)
        elif git_ops.has_remote_branch(primary_branch):
            git_ops.checkout_from_remote(primary_branch)
        else:
            raise GitOperationError(
                "checkout",
                primary_branch,
                f"branch exists neither locally nor on '{git_ops.remote_name}'",
            )
        return True

    def _resolve_stash(self, stash: StashRecord, reapply: bool) -> None:
        """Pop or drop the stash this run created."""
        git_ops = self.git_service
        stash_ref = git_ops.find_stash(stash.name)
        if stash_ref is None:
            logger.warning(f"Stash '{stash.name}' is no longer in the stash list; nothing to resolve.")
            stash.resolve(StashResolution.MISSING)
            return

        if reapply:
            logger.info(f"Reapplying the stashed changes named '{stash.name}'...")
            git_ops.stash_pop(stash_ref)
            stash.resolve(StashResolution.POPPED)
        else:
            logger.info(f"Dropping the stashed changes named '{stash.name}'...")
            git_ops.stash_drop(stash_ref)
            stash.resolve(StashResolution.DROPPED)

    def _report_leftovers(self) -> None:
        """Point at what a failed run left behind for manual recovery."""
        if self.report is None:
            return
        if self.report.stash is not None and not self.report.stash.resolved:
            logger.warning(
                f"Your uncommitted changes are still stashed as '{self.report.stash.name}'. "
                "Use 'git stash list' to recover them."
            )
        if self.report.backup_path:
            logger.warning(f"Branch names from before the cleanup are listed in {self.report.backup_path}.")
