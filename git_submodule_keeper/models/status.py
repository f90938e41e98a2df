"""Status report model and related enums"""
from enum import Enum
from dataclasses import dataclass, field
from typing import List, Optional

from git_submodule_keeper.models.submodule import SubmoduleInfo


class StatusKind(Enum):
    """Classification of a submodule's working tree."""
    DIRTY = "dirty"
    CLEAN = "clean"
    UNKNOWN = "unknown"
    UNINITIALIZED = "uninitialized"


class IgnorePolicy(Enum):
    """Values of submodule.<name>.ignore."""
    NONE = "none"
    UNTRACKED = "untracked"
    DIRTY = "dirty"
    ALL = "all"

    @classmethod
    def from_value(cls, value: Optional[str]) -> "IgnorePolicy":
        """Parse a config value, falling back to NONE when unset."""
        if not value:
            return cls.NONE
        return cls(str(value).strip().lower())


class ChangeKind(Enum):
    """Kind of a change entry."""
    MODIFICATION = "modification"
    UNTRACKED = "untracked"
    REWRITE = "rewrite"


@dataclass
class ChangeEntry:
    """A single change between the index and the working tree.

    For rewrites, ``path`` is the destination and ``source`` the original path.
    """
    kind: ChangeKind
    path: str
    conflict: bool = False
    intent_to_add: bool = False
    needs_update: bool = False  # Stat info stale, content unchanged
    source: Optional[str] = None
    copy: bool = False

    @classmethod
    def modification(cls, path: str, conflict: bool = False,
                     intent_to_add: bool = False, needs_update: bool = False) -> "ChangeEntry":
        return cls(ChangeKind.MODIFICATION, path, conflict=conflict,
                   intent_to_add=intent_to_add, needs_update=needs_update)

    @classmethod
    def untracked(cls, path: str) -> "ChangeEntry":
        return cls(ChangeKind.UNTRACKED, path)

    @classmethod
    def rewrite(cls, source: str, destination: str, copy: bool = False) -> "ChangeEntry":
        return cls(ChangeKind.REWRITE, destination, source=source, copy=copy)


@dataclass
class StatusReport:
    """Status of one submodule together with its changes."""
    submodule: SubmoduleInfo
    kind: StatusKind
    changes: List[ChangeEntry] = field(default_factory=list)
