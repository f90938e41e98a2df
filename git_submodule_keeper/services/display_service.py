"""Display service for submodule information"""
from typing import List

from rich.console import Console

from git_submodule_keeper.constants import NO_SUBMODULES_MESSAGE
from git_submodule_keeper.formatters import (
    format_changes,
    format_initialized_line,
    format_list_line,
    format_removed_line,
    format_status_line,
)
from git_submodule_keeper.models.status import StatusReport
from git_submodule_keeper.models.submodule import SubmoduleInfo
from git_submodule_keeper.utils.logging import get_logger

console = Console()
logger = get_logger(__name__)


class DisplayService:
    def __init__(self, verbose: bool = False, debug: bool = False):
        self.verbose = verbose
        self.debug_mode = debug

    def _print(self, line) -> None:
        # Paths must stay on one line
        console.print(line, soft_wrap=True)

    def display_no_submodules(self) -> None:
        self._print(NO_SUBMODULES_MESSAGE)

    def display_submodule_list(self, submodules: List[SubmoduleInfo]) -> None:
        """Print one "<name> <path>" line per submodule."""
        if not submodules:
            self.display_no_submodules()
            return
        for submodule in submodules:
            self._print(format_list_line(submodule.name, submodule.path, submodule.exists))

    def display_initialized(self, submodules: List[SubmoduleInfo]) -> None:
        """Print one "initialized <name> at <path>" line per submodule."""
        for submodule in submodules:
            self._print(format_initialized_line(submodule.name, submodule.path, submodule.exists))

    def display_removed(self, submodule: SubmoduleInfo) -> None:
        self._print(format_removed_line(submodule.name, submodule.path))

    def display_status(self, reports: List[StatusReport]) -> None:
        """Print the status line and change report of each submodule."""
        if not reports:
            self.display_no_submodules()
            return
        for report in reports:
            submodule = report.submodule
            self._print(format_status_line(submodule.name, submodule.path, submodule.exists, report.kind))
            for line in format_changes(report.changes):
                self._print(line)
            if self.verbose and report.changes:
                hidden = sum(1 for change in report.changes if change.needs_update)
                if hidden:
                    logger.info(f"{submodule.name}: {hidden} entries only needed an index refresh")
