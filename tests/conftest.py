"""Pytest configuration and fixtures."""

from collections.abc import Callable
from pathlib import Path

import pytest
import structlog

from branch_ticket.core.models.repository import Branch, Remote, Repository

SAMPLE_CONFIG = """\
[core]
\trepositoryformatversion = 0
\tfilemode = true
\tbare = false
[remote "origin"]
\turl = ssh://git@git.acronis.com/team/repo.git
\tfetch = +refs/heads/*:refs/remotes/origin/*
[remote "github"]
\turl = git@github.com:acme/repo.git
[branch "main"]
\tremote = origin
\tmerge = refs/heads/main
[branch "ABR-123456-fix-thing"]
\tremote = origin
\tmerge = refs/heads/ABR-123456-fix-thing
"""


@pytest.fixture(autouse=True)
def reset_structlog():
    """Keep logging configuration from leaking between tests."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def make_git_repo(tmp_path: Path) -> Callable[..., Path]:
    """Create a fake repository with a ``.git`` directory.

    Returns the repository root. Branch refs are written as files under
    ``.git/refs/heads``.
    """

    def _make(
        config: str | None = SAMPLE_CONFIG,
        heads: tuple[str, ...] = ("main",),
        head: str = "ref: refs/heads/main\n",
    ) -> Path:
        repo_path = tmp_path / "repo"
        git_dir = repo_path / ".git"
        refs = git_dir / "refs" / "heads"
        refs.mkdir(parents=True)
        if config is not None:
            (git_dir / "config").write_text(config)
        for name in heads:
            ref = refs / name
            ref.parent.mkdir(parents=True, exist_ok=True)
            ref.write_text("0" * 40 + "\n")
        (git_dir / "HEAD").write_text(head)
        return repo_path

    return _make


@pytest.fixture
def git_repo(make_git_repo: Callable[..., Path]) -> Path:
    """A repository using SAMPLE_CONFIG with a few refs on disk."""
    return make_git_repo(heads=("main", "ABR-123456-fix-thing", "hotfix"))


@pytest.fixture
def sample_repository() -> Repository:
    """A repository with one remote per provider category."""
    return Repository(
        remotes={
            "origin": Remote(
                name="origin",
                url="ssh://git@git.acronis.com/team/repo.git",
                fetch="+refs/heads/*:refs/remotes/origin/*",
            ),
            "github": Remote(name="github", url="https://github.com/acme/repo.git"),
            "gitlab": Remote(name="gitlab", url="git@gitlab.example.com:acme/repo.git"),
            "broken": Remote(name="broken", url="https://git.acronis.com:notaport/x"),
        },
        branches={
            "ABR-123456-fix-thing": Branch(name="ABR-123456-fix-thing", remote="origin"),
            "feature/x": Branch(name="feature/x", remote="github"),
            "hotfix": Branch(name="hotfix"),
            "ABR-654321-elsewhere": Branch(name="ABR-654321-elsewhere", remote="gitlab"),
        },
    )


@pytest.fixture
def sample_config() -> str:
    """Git config text with two remotes and two tracked branches."""
    return SAMPLE_CONFIG
