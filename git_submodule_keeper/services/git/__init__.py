"""Git-related services for git-submodule-keeper."""

from .operations import GitOperations
from .submodules import SubmoduleService
from .status_parser import parse_porcelain_v2, parse_name_list
from .urls import parse_remote_url, infer_clone_path

__all__ = [
    "GitOperations",
    "SubmoduleService",
    "parse_porcelain_v2",
    "parse_name_list",
    "parse_remote_url",
    "infer_clone_path",
]
