"""Submodule name formatting utilities."""

from git_submodule_keeper.constants import NAME_SEPARATORS


def format_name(name: str) -> str:
    """
    Shorten a submodule name to its last path component.

    Args:
        name: Full submodule name, delimited by "/" or "\\"

    Returns:
        The text after the last separator, or the name unchanged if it has none.
        A name ending in a separator yields an empty string.

    Example:
        "libs/foo" -> "foo", "vendor" -> "vendor", "a/b/" -> ""
    """
    # Whichever separator comes last wins: a/b\c gives c, not b\c
    index = max(name.rfind(sep) for sep in NAME_SEPARATORS)
    if index < 0:
        return name
    return name[index + 1:]
