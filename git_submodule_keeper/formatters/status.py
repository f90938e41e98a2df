"""Status report formatting utilities."""

from typing import List, Optional

from rich.text import Text

from git_submodule_keeper.constants import (
    CHANGE_INDENT,
    CHANGE_STYLES,
    CHANGES_HEADER,
    LABEL_STYLE,
    NAME_EXISTS_STYLE,
    NAME_STYLE,
    PATH_STYLE,
    REWRITE_ARROW,
    STATUS_STYLES,
    ChangeStyleType,
)
from git_submodule_keeper.formatters.name import format_name
from git_submodule_keeper.models.status import ChangeEntry, ChangeKind, StatusKind


def format_submodule_name(name: str, exists: bool) -> Text:
    """
    Format the display name of a submodule.

    Args:
        name: Full submodule name
        exists: Whether the submodule repository exists locally

    Returns:
        Bold display name, highlighted when the repository exists
    """
    return Text(format_name(name), style=NAME_EXISTS_STYLE if exists else NAME_STYLE)


def format_status_kind(kind: StatusKind) -> Text:
    """Format a status classification word in its category style."""
    return Text(kind.value, style=STATUS_STYLES[kind])


def format_status_line(name: str, path: str, exists: bool, kind: StatusKind) -> Text:
    """
    Format the summary line of a submodule status report.

    Returns:
        "<display-name> <path> <classification>"
    """
    return Text.assemble(
        format_submodule_name(name, exists),
        " ",
        (path, PATH_STYLE),
        " ",
        format_status_kind(kind),
    )


def get_change_style_type(entry: ChangeEntry) -> str:
    """
    Determine the style type for a change entry.

    Args:
        entry: Change entry

    Returns:
        ChangeStyleType constant
    """
    if entry.kind == ChangeKind.UNTRACKED:
        return ChangeStyleType.UNTRACKED
    if entry.kind == ChangeKind.REWRITE:
        return ChangeStyleType.REWRITE
    if entry.conflict:
        return ChangeStyleType.CONFLICT
    if entry.intent_to_add:
        return ChangeStyleType.ADDED
    return ChangeStyleType.MODIFIED


def format_change(entry: ChangeEntry) -> Optional[Text]:
    """
    Format a single change entry as an indented line.

    Args:
        entry: Change entry

    Returns:
        The formatted line, or None for entries that only need an index update
    """
    if entry.kind == ChangeKind.MODIFICATION and entry.needs_update:
        return None

    style = CHANGE_STYLES[get_change_style_type(entry)]
    line = Text(CHANGE_INDENT)
    if entry.kind == ChangeKind.REWRITE:
        line.append(entry.source or "", style=style)
        line.append(REWRITE_ARROW)
        line.append(entry.path, style=style)
    else:
        line.append(entry.path, style=style)
    return line


def format_changes(entries: List[ChangeEntry]) -> List[Text]:
    """
    Format the change section of a status report.

    Args:
        entries: Change entries in display order

    Returns:
        A header line followed by one line per displayed change,
        or an empty list when there are no entries
    """
    if not entries:
        return []

    lines = [Text(CHANGES_HEADER, style=LABEL_STYLE)]
    for entry in entries:
        line = format_change(entry)
        if line is not None:
            lines.append(line)
    return lines
