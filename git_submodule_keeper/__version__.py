"""Version information for git-submodule-keeper."""

try:
    from git_submodule_keeper._version import __version__
except ImportError:
    # Fallback when running from source without a build
    __version__ = "0.0.0+unknown"
