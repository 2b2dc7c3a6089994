"""Configuration handling for git-tidy"""

from dataclasses import dataclass, field, fields
from typing import List

from git_tidy.constants import (
    DEFAULT_PROBE_TIMEOUT,
    DEFAULT_PROBE_URL,
    DEFAULT_REMOTE,
    REQUIRED_TOOLS,
)


@dataclass
class Config:
    """Configuration for git-tidy with validation."""

    # Remote handling
    remote_name: str = DEFAULT_REMOTE

    # Preconditions
    required_tools: List[str] = field(default_factory=lambda: list(REQUIRED_TOOLS))
    check_network: bool = True
    probe_url: str = DEFAULT_PROBE_URL
    probe_timeout: float = DEFAULT_PROBE_TIMEOUT

    # Execution options
    switch_to_primary: bool = True  # Check out the primary branch before deleting branches
    strict_primary: bool = False  # Reject primary branch names git does not know

    # Output
    verbose: bool = False
    debug: bool = False

    def __post_init__(self):
        """Validate configuration after initialization."""
        self._validate_remote_name()
        self._validate_required_tools()
        self._validate_probe()

    def _validate_remote_name(self):
        """Validate remote_name is not empty."""
        if not self.remote_name or not self.remote_name.strip():
            raise ValueError("remote_name cannot be empty")
        self.remote_name = self.remote_name.strip()

    def _validate_required_tools(self):
        """Validate required_tools list."""
        if not isinstance(self.required_tools, list):
            raise ValueError("required_tools must be a list")
        if any(not tool or not str(tool).strip() for tool in self.required_tools):
            raise ValueError("required_tools cannot contain empty names")

    def _validate_probe(self):
        """Validate the reachability probe settings."""
        if self.probe_timeout <= 0:
            raise ValueError(f"probe_timeout must be positive, got {self.probe_timeout}")
        if self.check_network and not self.probe_url.startswith(("http://", "https://")):
            raise ValueError(f"probe_url must be an http(s) URL, got '{self.probe_url}'")

    def to_dict(self) -> dict:
        """Convert config to a plain dictionary."""
        return {f.name: getattr(self, f.name) for f in fields(self)}

    def get(self, key: str, default=None):
        """Get config value by key."""
        return getattr(self, key, default)

    @classmethod
    def from_dict(cls, config_dict: dict) -> "Config":
        """Create Config from dictionary, ignoring unknown keys."""
        known_fields = {f.name for f in fields(cls)}
        filtered = {k: v for k, v in config_dict.items() if k in known_fields}
        return cls(**filtered)
