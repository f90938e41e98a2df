"""Configuration handling for git-submodule-keeper"""

import os
from dataclasses import dataclass, field
from typing import Optional

from git_submodule_keeper.models.status import IgnorePolicy


@dataclass
class Config:
    """Configuration for git-submodule-keeper with validation."""

    # Working directory commands run in
    cwd: str = field(default_factory=os.getcwd)

    # Output modes
    verbose: bool = False
    debug: bool = False

    # Git integration
    git_executable: Optional[str] = None  # None = GIT_SUBMODULE_KEEPER_GIT or PATH lookup
    ignore: Optional[str] = None  # Overrides submodule.<name>.ignore when set

    def __post_init__(self):
        """Validate configuration after initialization."""
        self._validate_cwd()
        self._validate_ignore()

    def _validate_cwd(self):
        """Validate cwd is an existing directory."""
        if not self.cwd or not str(self.cwd).strip():
            raise ValueError("cwd cannot be empty")
        self.cwd = os.path.abspath(os.path.expanduser(str(self.cwd)))
        if not os.path.isdir(self.cwd):
            raise ValueError(f"cwd must be an existing directory, got '{self.cwd}'")

    def _validate_ignore(self):
        """Validate ignore is one of allowed values."""
        if self.ignore is None:
            return
        allowed = [policy.value for policy in IgnorePolicy]
        if self.ignore not in allowed:
            raise ValueError(f"ignore must be one of {allowed}, got '{self.ignore}'")

    @property
    def ignore_policy(self) -> Optional[IgnorePolicy]:
        """The ignore override as an enum, or None."""
        return IgnorePolicy(self.ignore) if self.ignore else None

    def to_dict(self) -> dict:
        """Convert config to dictionary."""
        return {
            "cwd": self.cwd,
            "verbose": self.verbose,
            "debug": self.debug,
            "git_executable": self.git_executable,
            "ignore": self.ignore,
        }

    def get(self, key: str, default=None):
        """Get config value by key."""
        return getattr(self, key, default)

    @classmethod
    def from_dict(cls, config_dict: dict) -> "Config":
        """Create Config from dictionary."""
        known_fields = {"cwd", "verbose", "debug", "git_executable", "ignore"}

        filtered = {k: v for k, v in config_dict.items() if k in known_fields and v is not None}
        return cls(**filtered)
