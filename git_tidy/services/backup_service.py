"""Branch backup file"""

from pathlib import Path
from typing import Iterable, Union

from git_tidy.constants import BRANCH_BACKUP_FILE
from git_tidy.exceptions import BackupError
from git_tidy.utils.logging import get_logger

logger = get_logger(__name__)


class BackupService:
    """Writes the local branch list to the metadata directory for manual recovery."""

    def __init__(self, git_dir: Union[str, Path]):
        self.backup_path = Path(git_dir) / BRANCH_BACKUP_FILE

    def write(self, branches: Iterable[str]) -> Path:
        """Overwrite the backup file with one branch name per line."""
        names = list(dict.fromkeys(name.strip() for name in branches if name.strip()))
        content = "".join(f"{name}\n" for name in names)
        try:
            self.backup_path.write_text(content, encoding="utf-8")
        except OSError as e:
            raise BackupError(str(self.backup_path), str(e)) from e
        logger.debug(f"Wrote {len(names)} branch names to {self.backup_path}")
        return self.backup_path
