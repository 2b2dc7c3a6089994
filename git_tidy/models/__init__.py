"""Data models for git-tidy."""

from .plan import (
    CleanupPlan,
    ExecutionReport,
    RepositoryHandle,
    RunOutcome,
    StashRecord,
    StashResolution,
)

__all__ = [
    "CleanupPlan",
    "ExecutionReport",
    "RepositoryHandle",
    "RunOutcome",
    "StashRecord",
    "StashResolution",
]
