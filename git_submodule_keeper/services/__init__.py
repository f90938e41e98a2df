"""Services for git-submodule-keeper."""
