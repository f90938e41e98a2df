"""Submodule data models."""

from dataclasses import dataclass
from typing import Optional


@dataclass
class SubmoduleInfo:
    """Information about a submodule of the current repository."""

    name: str
    path: str  # Relative to the superproject root
    exists: bool  # Has the submodule repository been initialized locally?
    url: Optional[str] = None
    ignore: str = "none"  # submodule.<name>.ignore from .gitmodules

    def __str__(self) -> str:
        """String representation of submodule."""
        state = "initialized" if self.exists else "uninitialized"
        return f"{self.name} @ {self.path} [{state}]"
