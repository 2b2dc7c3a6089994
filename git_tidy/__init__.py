"""
git-tidy - Prune local branches and refresh a repository without losing work
"""

import os

# Let the precondition check report a missing git binary instead of GitPython's import error
os.environ.setdefault("GIT_PYTHON_REFRESH", "quiet")

from .__version__ import __version__  # noqa: E402
from .config import Config  # noqa: E402
from .core import CleanupOrchestrator, CleanupPlanner  # noqa: E402

__all__ = ["CleanupOrchestrator", "CleanupPlanner", "Config", "__version__"]
