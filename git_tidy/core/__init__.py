"""Core cleanup logic for git-tidy."""

from .orchestrator import CleanupOrchestrator
from .planner import CleanupPlanner, deletion_candidates

__all__ = ["CleanupOrchestrator", "CleanupPlanner", "deletion_candidates"]
