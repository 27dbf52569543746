"""Shared fixtures for unit and integration tests."""

from collections.abc import Sequence
from pathlib import Path
from typing import Protocol

import pytest

from artifact_check.models.config import RunConfig
from artifact_check.models.profile import Profile
from artifact_check.suites.base import CheckContext
from artifact_check.testing.artifacts import (
    DOC_FILES,
    ScriptedValidator,
    build_project,
)
from artifact_check.validators.base import SyntaxValidator


class ContextFactory(Protocol):
    """Protocol for check context creation function."""

    def __call__(
        self,
        html: str | None = None,
        *,
        profile: Profile | None = None,
        validator: SyntaxValidator | None = None,
        docs: Sequence[str] = DOC_FILES,
        html_only: bool = False,
    ) -> CheckContext:
        """Lay out a project and return a context pointing at it."""


@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    """Return the directory sample projects are written to."""
    return tmp_path / "project"


@pytest.fixture
def make_context(project_root: Path) -> ContextFactory:
    """Return a function building a project and its check context."""

    def _make(
        html: str | None = None,
        *,
        profile: Profile | None = None,
        validator: SyntaxValidator | None = None,
        docs: Sequence[str] = DOC_FILES,
        html_only: bool = False,
    ) -> CheckContext:
        build_project(project_root, html, docs=docs)
        return CheckContext(
            config=RunConfig(root=project_root, html_only=html_only),
            profile=profile or Profile(),
            validator=validator or ScriptedValidator(),
        )

    return _make
