"""Fixtures for integration tests."""

import subprocess
from pathlib import Path
from typing import Protocol

import pytest


class CommitFn(Protocol):
    """Protocol for git commit function."""

    def __call__(self, message: str) -> str:
        """Create a commit and return its SHA."""


@pytest.fixture
def git_repo(tmp_path: Path) -> Path:
    """Create an initialized git repository."""
    subprocess.run(
        ["git", "init"],
        cwd=tmp_path,
        check=True,
        capture_output=True,
    )
    subprocess.run(
        ["git", "config", "user.email", "test@example.com"],
        cwd=tmp_path,
        check=True,
        capture_output=True,
    )
    subprocess.run(
        ["git", "config", "user.name", "Test"],
        cwd=tmp_path,
        check=True,
        capture_output=True,
    )
    return tmp_path


@pytest.fixture
def git_commit(git_repo: Path) -> CommitFn:
    """Return a function to create commits in the test repo."""

    def _commit(message: str) -> str:
        subprocess.run(
            ["git", "add", "-A"],
            cwd=git_repo,
            check=True,
            capture_output=True,
        )
        subprocess.run(
            ["git", "commit", "--allow-empty", "-m", message],
            cwd=git_repo,
            check=True,
            capture_output=True,
        )
        result = subprocess.run(
            ["git", "rev-parse", "HEAD"],
            cwd=git_repo,
            check=True,
            capture_output=True,
            text=True,
        )
        return result.stdout.strip()

    return _commit

