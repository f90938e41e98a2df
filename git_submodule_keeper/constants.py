"""Shared constants for git-submodule-keeper."""

from git_submodule_keeper.models.status import StatusKind


# Separators accepted in submodule names
NAME_SEPARATORS = ("/", "\\")

# Output text
CHANGES_HEADER = "changes:"
CHANGE_INDENT = "    "
REWRITE_ARROW = " -> "
NO_SUBMODULES_MESSAGE = "No submodules found"

# Environment variable overriding the git executable
GIT_EXECUTABLE_ENV = "GIT_SUBMODULE_KEEPER_GIT"

# Hosts for which a clone directory can be inferred from the URL
CLONE_PATH_HOSTS = ("github.com",)


# Rich styles for submodule names
NAME_STYLE = "bold"
NAME_EXISTS_STYLE = "bold blue"
PATH_STYLE = "dim"
LABEL_STYLE = "bold"

# Rich styles for status classifications
STATUS_STYLES = {
    StatusKind.DIRTY: "bold yellow",
    StatusKind.CLEAN: "bold green",
    StatusKind.UNKNOWN: "bold magenta",
    StatusKind.UNINITIALIZED: "bold dim",
}


class ChangeStyleType:
    """Style types for change entries."""

    CONFLICT = "conflict"
    ADDED = "added"
    MODIFIED = "modified"
    UNTRACKED = "untracked"
    REWRITE = "rewrite"


CHANGE_STYLES = {
    ChangeStyleType.CONFLICT: "bold red",
    ChangeStyleType.ADDED: "green",
    ChangeStyleType.MODIFIED: "yellow",
    ChangeStyleType.UNTRACKED: "dim red",
    ChangeStyleType.REWRITE: "cyan",
}
