"""Services used by the cleanup orchestrator."""

from .backup_service import BackupService
from .environment_service import EnvironmentService
from .git import GitOperations
from .prompt_service import PromptService

__all__ = [
    "BackupService",
    "EnvironmentService",
    "GitOperations",
    "PromptService",
]
