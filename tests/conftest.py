"""Fixtures shared by every test directory."""

import pytest


@pytest.fixture
def git_identity(monkeypatch, tmp_path_factory):
    """Give git a committer identity and ignore the user's global config."""
    empty_config = tmp_path_factory.mktemp("git") / "gitconfig"
    empty_config.write_text("")
    monkeypatch.setenv("GIT_CONFIG_GLOBAL", str(empty_config))
    monkeypatch.setenv("GIT_CONFIG_NOSYSTEM", "1")
    monkeypatch.setenv("GIT_AUTHOR_NAME", "Test")
    monkeypatch.setenv("GIT_AUTHOR_EMAIL", "test@test.com")
    monkeypatch.setenv("GIT_COMMITTER_NAME", "Test")
    monkeypatch.setenv("GIT_COMMITTER_EMAIL", "test@test.com")
