"""Pytest fixtures for git-submodule-keeper tests"""
import io
import tempfile
from pathlib import Path

import git
import pytest
from rich.console import Console

from git_submodule_keeper.constants import GIT_EXECUTABLE_ENV


@pytest.fixture(autouse=True)
def git_environment(monkeypatch):
    """Give git an identity and allow local file submodule URLs."""
    monkeypatch.setenv("GIT_AUTHOR_NAME", "Test User")
    monkeypatch.setenv("GIT_AUTHOR_EMAIL", "test@example.com")
    monkeypatch.setenv("GIT_COMMITTER_NAME", "Test User")
    monkeypatch.setenv("GIT_COMMITTER_EMAIL", "test@example.com")
    # Submodules cloned from local paths need protocol.file.allow since git 2.38.1
    monkeypatch.setenv("GIT_CONFIG_COUNT", "1")
    monkeypatch.setenv("GIT_CONFIG_KEY_0", "protocol.file.allow")
    monkeypatch.setenv("GIT_CONFIG_VALUE_0", "always")
    monkeypatch.delenv(GIT_EXECUTABLE_ENV, raising=False)


@pytest.fixture
def temp_dir():
    """Create a temporary directory for testing."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir).resolve()


@pytest.fixture
def mock_config(temp_dir):
    """Create a mock configuration dictionary."""
    return {
        'cwd': str(temp_dir),
        'verbose': False,
        'debug': False,
        'git_executable': None,
        'ignore': None,
    }


@pytest.fixture
def output():
    """Replace the display console with one writing plain text to a buffer."""
    from git_submodule_keeper.services import display_service

    buffer = io.StringIO()
    original = display_service.console
    display_service.console = Console(file=buffer, width=200, color_system=None)
    yield buffer
    display_service.console = original


def make_repo(path: Path, files: dict) -> git.Repo:
    """Create a repository at path with one commit containing files."""
    path.mkdir(parents=True)
    repo = git.Repo.init(path)
    repo.config_writer().set_value("user", "name", "Test User").release()
    repo.config_writer().set_value("user", "email", "test@example.com").release()

    for name, content in files.items():
        (path / name).write_text(content)
    repo.index.add(list(files))
    repo.index.commit("Initial commit")
    return repo


@pytest.fixture
def git_repo(temp_dir):
    """Create a repository without submodules."""
    repo = make_repo(temp_dir / "plain", {"README.md": "# Plain\n"})
    yield repo
    repo.close()


@pytest.fixture
def superproject(temp_dir):
    """Create a repository with submodules "libs/foo" and "vendor"."""
    foo = make_repo(temp_dir / "sources" / "foo", {"foo.txt": "foo\n", "other.txt": "other\n"})
    vendor = make_repo(temp_dir / "sources" / "vendor", {"vendor.txt": "vendor\n"})
    repo = make_repo(temp_dir / "super", {"README.md": "# Super\n"})

    repo.git.submodule("add", foo.working_dir, "libs/foo")
    repo.git.submodule("add", vendor.working_dir, "vendor")
    repo.git.commit("-m", "Add submodules")

    foo.close()
    vendor.close()
    yield repo
    repo.close()


@pytest.fixture
def uninitialized_clone(superproject, temp_dir):
    """Clone the superproject without initializing its submodules."""
    repo = git.Repo.clone_from(superproject.working_dir, temp_dir / "clone")
    yield repo
    repo.close()


@pytest.fixture
def foo_module(superproject):
    """The checked out "libs/foo" submodule repository."""
    repo = git.Repo(Path(superproject.working_dir) / "libs" / "foo")
    yield repo
    repo.close()
