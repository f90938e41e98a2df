"""Tests for Config validation"""
import os

import pytest

from git_submodule_keeper.config import Config
from git_submodule_keeper.models.status import IgnorePolicy


class TestConfig:
    def test_defaults(self):
        config = Config()
        assert config.cwd == os.path.abspath(os.getcwd())
        assert config.verbose is False
        assert config.debug is False
        assert config.git_executable is None
        assert config.ignore_policy is None

    def test_cwd_must_exist(self, temp_dir):
        with pytest.raises(ValueError, match="existing directory"):
            Config(cwd=str(temp_dir / "missing"))

    def test_cwd_cannot_be_empty(self):
        with pytest.raises(ValueError, match="cwd cannot be empty"):
            Config(cwd="  ")

    def test_cwd_is_made_absolute(self, temp_dir, monkeypatch):
        (temp_dir / "sub").mkdir()
        monkeypatch.chdir(temp_dir)
        assert Config(cwd="sub").cwd == str(temp_dir / "sub")

    def test_ignore_validation(self, temp_dir):
        with pytest.raises(ValueError, match="ignore must be one of"):
            Config(cwd=str(temp_dir), ignore="sometimes")

    def test_ignore_policy(self, temp_dir):
        assert Config(cwd=str(temp_dir), ignore="untracked").ignore_policy == IgnorePolicy.UNTRACKED

    def test_from_dict_drops_unknown_and_none(self, mock_config):
        config = Config.from_dict({**mock_config, "unknown": 1})
        assert config.to_dict() == {**mock_config}

    def test_get(self, mock_config):
        config = Config.from_dict(mock_config)
        assert config.get("verbose") is False
        assert config.get("missing", "default") == "default"


class TestIgnorePolicy:
    @pytest.mark.parametrize("value,expected", [
        (None, IgnorePolicy.NONE),
        ("", IgnorePolicy.NONE),
        ("all", IgnorePolicy.ALL),
        (" Dirty ", IgnorePolicy.DIRTY),
    ])
    def test_from_value(self, value, expected):
        assert IgnorePolicy.from_value(value) == expected

    def test_unknown_value(self):
        with pytest.raises(ValueError):
            IgnorePolicy.from_value("sometimes")
