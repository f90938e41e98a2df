"""Core functionality for git-submodule-keeper"""

import os
import shutil
from typing import Optional, Union

from git_submodule_keeper.config import Config
from git_submodule_keeper.exceptions import CloneFailedError
from git_submodule_keeper.services.display_service import DisplayService
from git_submodule_keeper.services.git import (
    GitOperations,
    SubmoduleService,
    infer_clone_path,
    parse_remote_url,
)
from git_submodule_keeper.utils.logging import get_logger

logger = get_logger(__name__)


class SubmoduleKeeper:
    """Main class for managing Git submodules."""

    def __init__(self, config: Union[Config, dict]):
        """Initialize SubmoduleKeeper.

        Args:
            config: Configuration dict or Config object
        """
        if isinstance(config, dict):
            self.config = Config.from_dict(config)
        else:
            self.config = config
        self.cwd = self.config.cwd
        self.verbose = self.config.verbose
        self.debug_mode = self.config.debug

        self.git_operations = GitOperations(self.config)
        self.display_service = DisplayService(verbose=self.verbose, debug=self.debug_mode)

    def _submodule_service(self, path: Optional[str] = None) -> SubmoduleService:
        return SubmoduleService(path or self.cwd)

    def clone(self, url: str, path: Optional[str] = None) -> None:
        """Clone a repository recursively and list the submodules it brought in.

        Raises:
            CloneFailedError: If git clone exits unsuccessfully
            InvalidURLError: If the URL cannot be parsed after cloning
        """
        returncode = self.git_operations.clone(url, path, self.cwd)
        if returncode != 0:
            # Negative codes mean git was killed by a signal
            raise CloneFailedError(returncode if returncode > 0 else 1)

        parse_remote_url(url)
        repo_path = path or infer_clone_path(url)
        if not repo_path:
            logger.debug(f"cannot determine path from url {url}")
            return

        with self._submodule_service(os.path.join(self.cwd, repo_path)) as service:
            self.display_service.display_initialized(service.list_submodules())

    def init(self) -> None:
        """Initialize all submodules recursively and list them."""
        with self._submodule_service() as service:
            repo = service.discover()
            self.git_operations.init(repo.working_tree_dir)
            self.display_service.display_initialized(service.list_submodules())

    def remove(self, path: str) -> None:
        """Remove a submodule, including its git directory under .git/modules."""
        with self._submodule_service() as service:
            submodule = service.find_by_path(path, self.cwd)
            repo = service.discover()

            self.git_operations.remove(submodule.path, repo.working_tree_dir)

            git_dir = service.module_git_dir(submodule)
            if os.path.isdir(git_dir):
                logger.info(f"Removing {git_dir}")
                shutil.rmtree(git_dir)

        self.display_service.display_removed(submodule)

    def list_submodules(self) -> None:
        """Print the submodules of the current repository."""
        with self._submodule_service() as service:
            self.display_service.display_submodule_list(service.list_submodules())

    def status(self) -> None:
        """Print the status of every submodule of the current repository."""
        ignore = self.config.ignore_policy
        with self._submodule_service() as service:
            reports = [service.get_status(submodule, ignore) for submodule in service.list_submodules()]
        self.display_service.display_status(reports)
