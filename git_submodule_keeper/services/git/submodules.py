"""Submodule query service backed by GitPython."""

import os
from typing import List, Optional

import git

from git_submodule_keeper.exceptions import (
    GitCommandError,
    RepositoryNotFoundError,
    SubmoduleNotFoundError,
)
from git_submodule_keeper.models.status import IgnorePolicy, StatusKind, StatusReport
from git_submodule_keeper.models.submodule import SubmoduleInfo
from git_submodule_keeper.services.git.status_parser import parse_name_list, parse_porcelain_v2
from git_submodule_keeper.utils.logging import get_logger

logger = get_logger(__name__)


class SubmoduleService:
    """Service for reading submodules of the repository containing a path.

    Use as a context manager, or call close(), to release the repository.
    """

    def __init__(self, repo_path: str):
        """Initialize the service.

        Args:
            repo_path: Path inside the superproject (parents are searched)
        """
        self.repo_path = repo_path
        self._repo: Optional[git.Repo] = None

    def __enter__(self) -> "SubmoduleService":
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()

    def close(self) -> None:
        """Close the discovered repository, if any."""
        if self._repo is not None:
            self._repo.close()
            self._repo = None

    def discover(self) -> git.Repo:
        """Open the repository containing repo_path.

        Raises:
            RepositoryNotFoundError: If repo_path is not inside a work tree
        """
        if self._repo is None:
            try:
                repo = git.Repo(self.repo_path, search_parent_directories=True)
            except (git.exc.InvalidGitRepositoryError, git.exc.NoSuchPathError) as e:
                raise RepositoryNotFoundError(self.repo_path) from e
            if repo.bare:
                repo.close()
                raise RepositoryNotFoundError(self.repo_path, "repository is bare")
            logger.debug(f"Discovered repository at {repo.working_tree_dir}")
            self._repo = repo
        return self._repo

    def _read_ignore(self, repo: git.Repo, submodule: git.Submodule) -> str:
        """Read submodule.<name>.ignore, preferring .git/config over .gitmodules.

        Unknown values are ignored with a warning, as git does.
        """
        section = f'submodule "{submodule.name}"'
        value = repo.config_reader().get_value(section, "ignore", "")
        if not value:
            value = submodule.config_reader().get_value("ignore", "none")
        try:
            return IgnorePolicy.from_value(str(value)).value
        except ValueError:
            logger.warning(f"Invalid ignore value '{value}' for submodule {submodule.name}, using 'none'")
            return IgnorePolicy.NONE.value

    def list_submodules(self) -> List[SubmoduleInfo]:
        """List submodules sorted by name."""
        repo = self.discover()
        submodules = sorted(repo.submodules, key=lambda sm: sm.name)
        logger.debug(f"Found {len(submodules)} submodule(s)")
        return [
            SubmoduleInfo(
                name=sm.name,
                path=sm.path,
                exists=sm.module_exists(),
                url=sm.url,
                ignore=self._read_ignore(repo, sm),
            )
            for sm in submodules
        ]

    def find_by_path(self, path: str, cwd: str) -> SubmoduleInfo:
        """Find the submodule at a user supplied path.

        Args:
            path: Path to the submodule, relative to cwd
            cwd: Directory the path is relative to

        Raises:
            SubmoduleNotFoundError: If no submodule lives at the path
        """
        repo = self.discover()
        root = os.path.realpath(repo.working_tree_dir)
        target = os.path.realpath(os.path.join(cwd, path))
        relative = os.path.relpath(target, root).replace(os.sep, "/")

        for info in self.list_submodules():
            if info.path == relative:
                return info
        raise SubmoduleNotFoundError(path)

    def module_git_dir(self, info: SubmoduleInfo) -> str:
        """Path of the submodule's git directory inside the superproject."""
        return os.path.join(self.discover().git_dir, "modules", info.name)

    def get_status(self, info: SubmoduleInfo, ignore: Optional[IgnorePolicy] = None) -> StatusReport:
        """Compute the status of a submodule's working tree.

        Args:
            info: Submodule to inspect
            ignore: Ignore policy overriding the submodule's own setting

        Returns:
            StatusReport; uninitialized submodules and those ignoring dirty
            state are reported without changes.

        Raises:
            GitCommandError: If git fails inside the submodule
        """
        policy = ignore or IgnorePolicy.from_value(info.ignore)
        if not info.exists:
            return StatusReport(info, StatusKind.UNINITIALIZED)
        if policy in (IgnorePolicy.DIRTY, IgnorePolicy.ALL):
            logger.debug(f"Skipping status of {info.name} (ignore={policy.value})")
            return StatusReport(info, StatusKind.UNKNOWN)

        module_path = os.path.join(self.discover().working_tree_dir, info.path)
        untracked = "no" if policy == IgnorePolicy.UNTRACKED else "all"
        try:
            module = git.Repo(module_path)
        except (git.exc.InvalidGitRepositoryError, git.exc.NoSuchPathError) as e:
            raise RepositoryNotFoundError(module_path) from e

        try:
            # diff-files must run first: status refreshes the stat data it reports
            stale = parse_name_list(module.git.diff_files("--name-only", "-z"))
            output = module.git.status("--porcelain=v2", "-z", f"--untracked-files={untracked}")
        except git.exc.GitCommandError as e:
            stderr = (e.stderr or "").strip()
            raise GitCommandError("status", e.status, f"{info.path}: {stderr}" if stderr else info.path) from e
        finally:
            module.close()

        changes = parse_porcelain_v2(output, stale)
        dirty = any(not change.needs_update for change in changes)
        return StatusReport(info, StatusKind.DIRTY if dirty else StatusKind.CLEAN, changes)
