"""
git-submodule-keeper - Friendly Git submodule management
"""

from .__version__ import __version__
from .core import SubmoduleKeeper
from .cli.main import main

__all__ = ["SubmoduleKeeper", "main", "__version__"]
