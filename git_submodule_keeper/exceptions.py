"""Custom exceptions for git-submodule-keeper"""

from typing import Optional


class GitSubmoduleKeeperError(Exception):
    """Base exception for all git-submodule-keeper errors."""
    pass


class GitNotFoundError(GitSubmoduleKeeperError):
    """Exception raised when no git executable can be located."""

    def __init__(self):
        super().__init__("git executable not found in PATH")


class GitCommandError(GitSubmoduleKeeperError):
    """Exception raised when a git subprocess exits unsuccessfully."""

    def __init__(self, operation: str, returncode: Optional[int] = None, message: Optional[str] = None):
        self.operation = operation
        self.returncode = returncode
        self.message = message

        error_msg = f"Git operation '{operation}' failed"
        if returncode is not None:
            error_msg += f" with exit code {returncode}"
        if message:
            error_msg += f": {message}"

        super().__init__(error_msg)


class CloneFailedError(GitCommandError):
    """Exception raised when `git clone` exits unsuccessfully."""

    def __init__(self, returncode: Optional[int] = None):
        super().__init__("clone", returncode)


class RepositoryNotFoundError(GitSubmoduleKeeperError):
    """Exception raised when no repository can be discovered at a path."""

    def __init__(self, path: str, message: Optional[str] = None):
        self.path = path
        error_msg = f"No git repository found at '{path}'"
        if message:
            error_msg += f": {message}"
        super().__init__(error_msg)


class SubmoduleNotFoundError(GitSubmoduleKeeperError):
    """Exception raised when a path does not name a submodule."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"No submodule found at '{path}'")


class InvalidURLError(GitSubmoduleKeeperError):
    """Exception raised for remote URLs that cannot be parsed."""

    def __init__(self, url: str, message: Optional[str] = None):
        self.url = url
        error_msg = f"Invalid repository URL '{url}'"
        if message:
            error_msg += f": {message}"
        super().__init__(error_msg)


class StatusParseError(GitSubmoduleKeeperError):
    """Exception raised when git status output cannot be parsed."""

    def __init__(self, record: str):
        self.record = record
        super().__init__(f"Unexpected git status record: {record!r}")
