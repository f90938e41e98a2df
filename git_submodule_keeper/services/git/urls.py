"""Remote URL parsing for clone path inference"""

import re
from typing import Optional, Tuple
from urllib.parse import urlparse

from git_submodule_keeper.constants import CLONE_PATH_HOSTS
from git_submodule_keeper.exceptions import InvalidURLError

# [user@]host:path, as accepted by git for ssh remotes
_SCP_LIKE_URL = re.compile(r"^(?:[^@/:]+@)?(?P<host>[^@/:]+):(?P<path>.*)$")


def parse_remote_url(url: str) -> Tuple[Optional[str], str]:
    """Split a remote URL into host and path.

    Handles URL style remotes (https://github.com/org/repo.git), scp-like
    ssh remotes (git@github.com:org/repo.git) and local paths, which have
    no host.

    Raises:
        InvalidURLError: If the URL is empty, contains whitespace, or is
            URL style without a host.
    """
    if not url or any(c.isspace() for c in url):
        raise InvalidURLError(url, "URL must be non-empty and contain no whitespace")

    if "://" in url:
        parsed = urlparse(url)
        if parsed.scheme == "file":
            return None, parsed.path
        try:
            host = parsed.hostname
        except ValueError as e:
            raise InvalidURLError(url, str(e)) from e
        if not host:
            raise InvalidURLError(url, "missing host")
        return host, parsed.path

    match = _SCP_LIKE_URL.match(url)
    # A single letter before the colon is a Windows drive, not a host
    if match and len(match.group("host")) > 1:
        return match.group("host").lower(), match.group("path")

    return None, url


def infer_clone_path(url: str) -> Optional[str]:
    """Infer the directory `git clone` creates for a URL.

    Only done for hosts with a known owner/repo layout; returns None when
    the directory cannot be determined.
    """
    host, path = parse_remote_url(url)
    if host not in CLONE_PATH_HOSTS:
        return None

    path = path.rstrip("/")
    if "/" not in path:
        return None

    name = path.rsplit("/", 1)[1]
    while name.endswith(".git"):
        name = name[:-4]
    return name or None
