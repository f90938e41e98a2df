"""Git binary operations service"""

import os
import shutil
import subprocess
from typing import List, Optional, Union, TYPE_CHECKING

from git_submodule_keeper.constants import GIT_EXECUTABLE_ENV
from git_submodule_keeper.exceptions import GitCommandError, GitNotFoundError
from git_submodule_keeper.utils.logging import get_logger

if TYPE_CHECKING:
    from git_submodule_keeper.config import Config

logger = get_logger(__name__)


class GitOperations:
    """Runs the git binary for operations that write to the working tree.

    Output is not captured so the user sees git's own progress and errors.
    """

    def __init__(self, config: Union["Config", dict]):
        """Initialize the service.

        Args:
            config: Configuration dictionary or Config object
        """
        self.config = config
        self._git_executable: Optional[str] = None

    @property
    def git_executable(self) -> str:
        """Resolve the git executable once per service."""
        if self._git_executable is None:
            executable = (
                self.config.get("git_executable")
                or os.environ.get(GIT_EXECUTABLE_ENV)
                or shutil.which("git")
            )
            if not executable:
                raise GitNotFoundError()
            self._git_executable = executable
            logger.debug(f"Using git executable {executable}")
        return self._git_executable

    def _run(self, args: List[str], cwd: str) -> int:
        """Run git with the given arguments and return its exit code."""
        command = [self.git_executable, *args]
        logger.info(f"Running {' '.join(command)} in {cwd}")
        try:
            completed = subprocess.run(command, cwd=cwd, check=False)
        except OSError as e:
            raise GitCommandError(args[0], message=str(e)) from e
        logger.debug(f"git {args[0]} exited with {completed.returncode}")
        return completed.returncode

    def _run_checked(self, operation: str, args: List[str], cwd: str) -> None:
        returncode = self._run(args, cwd)
        if returncode != 0:
            raise GitCommandError(operation, returncode)

    def clone(self, url: str, path: Optional[str], cwd: str) -> int:
        """Clone a repository with its submodules.

        Args:
            url: Repository URL
            path: Target directory, or None to let git choose
            cwd: Directory to clone into

        Returns:
            The exit code of `git clone`
        """
        args = ["clone", "--recursive", url]
        if path:
            args.append(path)
        return self._run(args, cwd)

    def init(self, cwd: str) -> None:
        """Initialize and check out all submodules recursively."""
        self._run_checked("submodule update", ["submodule", "update", "--init", "--recursive"], cwd)

    def remove(self, path: str, cwd: str) -> None:
        """Deinitialize a submodule and remove it from the index and working tree.

        Args:
            path: Submodule path relative to cwd
            cwd: Superproject working tree root
        """
        self._run_checked("submodule deinit", ["submodule", "deinit", "-f", "--", path], cwd)
        self._run_checked("rm", ["rm", "-f", "--", path], cwd)
