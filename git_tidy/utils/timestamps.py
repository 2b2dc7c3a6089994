"""Timestamp helpers."""

from datetime import datetime
from typing import Optional

from git_tidy.constants import STASH_NAME_TEMPLATE, TIMESTAMP_FORMAT


def generate_timestamp(now: Optional[datetime] = None) -> str:
    """Return local time formatted as YYYY-MM-DD_HH-MM-SS."""
    return (now or datetime.now()).strftime(TIMESTAMP_FORMAT)


def make_stash_name(branch: str, now: Optional[datetime] = None) -> str:
    """Build the stash message embedding the branch and a timestamp."""
    return STASH_NAME_TEMPLATE.format(branch=branch, timestamp=generate_timestamp(now))
