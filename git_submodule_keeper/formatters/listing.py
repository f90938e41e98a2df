"""Submodule listing formatting utilities."""

from rich.text import Text

from git_submodule_keeper.constants import LABEL_STYLE, PATH_STYLE
from git_submodule_keeper.formatters.status import format_submodule_name


def format_list_line(name: str, path: str, exists: bool) -> Text:
    """Format a submodule as "<display-name> <path>"."""
    return Text.assemble(format_submodule_name(name, exists), " ", (path, PATH_STYLE))


def format_initialized_line(name: str, path: str, exists: bool) -> Text:
    """Format a submodule as "initialized <display-name> at <path>"."""
    return Text.assemble(
        ("initialized", LABEL_STYLE),
        " ",
        format_submodule_name(name, exists),
        " ",
        ("at", LABEL_STYLE),
        " ",
        (path, f"{PATH_STYLE} bold"),
    )


def format_removed_line(name: str, path: str) -> Text:
    """Format a removed submodule as "removed <display-name> from <path>"."""
    return Text.assemble(
        ("removed", LABEL_STYLE),
        " ",
        format_submodule_name(name, False),
        " ",
        ("from", LABEL_STYLE),
        " ",
        (path, PATH_STYLE),
    )
