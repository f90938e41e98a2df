"""Entry point for git-submodule-keeper"""

import os
import sys
from typing import List, Optional

from rich.console import Console
from rich.text import Text

from git_submodule_keeper.cli.args import parse_args
from git_submodule_keeper.config import Config
from git_submodule_keeper.core import SubmoduleKeeper
from git_submodule_keeper.exceptions import CloneFailedError
from git_submodule_keeper.utils.logging import get_logger, setup_logging

console = Console(stderr=True)
logger = get_logger(__name__)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the application."""
    parsed_args = None
    try:
        parsed_args = parse_args(argv)

        setup_logging(verbose=parsed_args.verbose, debug=parsed_args.debug)

        config = Config(
            cwd=parsed_args.cwd or os.getcwd(),
            verbose=parsed_args.verbose,
            debug=parsed_args.debug,
            ignore=getattr(parsed_args, "ignore", None),
        )

        if parsed_args.debug:
            console.print("[yellow]Configuration:[/yellow]")
            for key, value in config.to_dict().items():
                console.print(f"  {key}: {value}", markup=False)

        keeper = SubmoduleKeeper(config)

        if parsed_args.command == "clone":
            keeper.clone(parsed_args.url, parsed_args.path)
        elif parsed_args.command == "rm":
            keeper.remove(parsed_args.path)
        elif parsed_args.command == "init":
            keeper.init()
        elif parsed_args.command == "ls":
            keeper.list_submodules()
        elif parsed_args.command == "status":
            keeper.status()

        return 0
    except CloneFailedError as e:
        # git already reported the failure
        logger.debug(str(e))
        return e.returncode
    except KeyboardInterrupt:
        console.print("\n[yellow]Operation cancelled by user[/yellow]")
        return 1
    except Exception as e:
        console.print(Text(f"Error: {e}", style="red"))
        if parsed_args is not None and parsed_args.debug:
            console.print_exception()
        return 1


if __name__ == "__main__":
    sys.exit(main())
