"""Formatting utilities for git-submodule-keeper.

This package provides formatting functions for displaying submodule information,
organized into logical modules:
- name: Submodule display name derivation
- status: Status line and change report formatting
- listing: ls/clone/init/rm output lines
"""

# Name formatters
from .name import format_name

# Status formatters
from .status import (
    format_submodule_name,
    format_status_kind,
    format_status_line,
    format_change,
    format_changes,
    get_change_style_type,
)

# Listing formatters
from .listing import (
    format_list_line,
    format_initialized_line,
    format_removed_line,
)

__all__ = [
    # Name
    "format_name",
    # Status
    "format_submodule_name",
    "format_status_kind",
    "format_status_line",
    "format_change",
    "format_changes",
    "get_change_style_type",
    # Listing
    "format_list_line",
    "format_initialized_line",
    "format_removed_line",
]
