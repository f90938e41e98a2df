"""Command-line argument parsing for git-submodule-keeper."""

import argparse
from typing import List, Optional

from git_submodule_keeper.__version__ import __version__
from git_submodule_keeper.models.status import IgnorePolicy


def _cwd_parent() -> argparse.ArgumentParser:
    """Options shared by every subcommand."""
    parent = argparse.ArgumentParser(add_help=False)
    # SUPPRESS keeps a --cwd given before the subcommand
    parent.add_argument(
        "--cwd", default=argparse.SUPPRESS, metavar="DIR", help="Run as if started in DIR"
    )
    return parent


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="git-submodule-keeper",
        description="Clone, initialize, remove, list and inspect Git submodules",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Show verbose output")
    parser.add_argument("--version", action="version", version=f"git-submodule-keeper {__version__}")
    parser.add_argument(
        "--debug", action="store_true", help="Show debug information for troubleshooting"
    )
    parser.add_argument("--cwd", default=None, metavar="DIR", help="Run as if started in DIR")

    common = [_cwd_parent()]
    subparsers = parser.add_subparsers(dest="command", metavar="command", required=True)

    clone = subparsers.add_parser(
        "clone", parents=common, help="Clone a repository with its submodules"
    )
    clone.add_argument("url", help="Repository URL")
    clone.add_argument("path", nargs="?", default=None, help="Target directory")

    rm = subparsers.add_parser("rm", parents=common, help="Remove a submodule")
    rm.add_argument("path", help="Path of the submodule")

    subparsers.add_parser("init", parents=common, help="Initialize all submodules recursively")
    subparsers.add_parser("ls", parents=common, help="List submodules")

    status = subparsers.add_parser("status", parents=common, help="Show submodule status")
    status.add_argument(
        "--ignore",
        choices=[policy.value for policy in IgnorePolicy],
        default=None,
        help="Override submodule.<name>.ignore for this run",
    )

    return parser.parse_args(argv)
