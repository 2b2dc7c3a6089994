"""Cleanup plan, stash record and run outcome models"""
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple


class RunOutcome(Enum):
    """How a cleanup run ended."""
    COMPLETED = "completed"
    DECLINED = "declined"  # User answered no at the confirmation gate
    FAILED = "failed"

    @property
    def exit_code(self) -> int:
        """Process exit code for this outcome."""
        return 1 if self is RunOutcome.FAILED else 0


class StashResolution(Enum):
    """What happened to a stash created by the run."""
    POPPED = "popped"
    DROPPED = "dropped"
    MISSING = "missing"  # No longer in the stash list when the run tried to resolve it


@dataclass(frozen=True)
class RepositoryHandle:
    """A validated git working copy."""
    working_dir: str
    git_dir: str


@dataclass(frozen=True)
class CleanupPlan:
    """Every decision the execution phase needs, collected up front."""
    primary_branch: str
    original_branch: Optional[str]  # None when HEAD was detached
    local_branches: Tuple[str, ...]  # Snapshot taken when the plan was built
    branches_to_delete: Tuple[str, ...] = ()
    reapply_stash: bool = False
    return_to_original: bool = False

    def __post_init__(self):
        if not self.primary_branch:
            raise ValueError("primary_branch cannot be empty")
        if self.primary_branch in self.branches_to_delete:
            raise ValueError(f"Primary branch '{self.primary_branch}' cannot be deleted")
        if self.return_to_original and (
            not self.original_branch or self.original_branch in self.branches_to_delete
        ):
            raise ValueError("Cannot return to a branch that is missing or scheduled for deletion")


@dataclass
class StashRecord:
    """A stash entry created by this run."""
    name: str
    resolution: Optional[StashResolution] = None

    @property
    def resolved(self) -> bool:
        return self.resolution is not None

    def resolve(self, resolution: StashResolution) -> None:
        """Record how the stash was consumed. A stash is resolved exactly once."""
        if self.resolved:
            raise RuntimeError(
                f"Stash '{self.name}' was already {self.resolution.value}"
            )
        self.resolution = resolution


@dataclass
class ExecutionReport:
    """What the execution phase did."""
    plan: CleanupPlan
    backup_path: Optional[str] = None
    stash: Optional[StashRecord] = None
    deleted_branches: List[str] = field(default_factory=list)
    switched_to_primary: bool = False
    returned_to_original: bool = False
