"""Shared fixtures and captured git output samples."""

from __future__ import annotations

import os

import pytest
import structlog

from gitscribe.core.config import GitscribeConfig


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch):
    """Prevent .env file and shell env from leaking into tests."""
    monkeypatch.setitem(GitscribeConfig.model_config, "env_file", None)
    for key in list(os.environ):
        if key.startswith("GITSCRIBE_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture(autouse=True)
def _reset_structlog():
    yield
    structlog.reset_defaults()


@pytest.fixture
def status_output():
    return "?? new.txt\nA  staged.txt\n M mod.txt\nAM both.txt\nD  gone.txt\n"


@pytest.fixture
def commit_output():
    return (
        "[main abc1234] Add foo\n"
        " 2 files changed, 5 insertions(+), 1 deletion(-)\n"
        " create mode 100644 foo.txt\n"
        " delete mode 100644 bar.txt\n"
    )


@pytest.fixture
def branch_output():
    return "  develop\n* main\n  feature/login\n"


@pytest.fixture
def remotes_output():
    return (
        "origin\tgit@github.com:acme/widgets.git (fetch)\n"
        "origin\tgit@github.com:acme/widgets.git (push)\n"
        "upstream\thttps://github.com/upstream/widgets.git (fetch)\n"
        "upstream\thttps://github.com/upstream/widgets.git (push)\n"
    )
