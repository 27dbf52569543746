"""Environment suite: the project layout the other suites rely on."""

from collections.abc import Sequence

from artifact_check.errors import ArtifactMissingError, RootMissingError
from artifact_check.models.result import Result
from artifact_check.suites.base import Check, CheckContext, Suite


def check_project_root(context: CheckContext) -> Sequence[Result]:
    """Abort the run when the project root is missing."""
    root = context.config.root
    if not root.is_dir():
        raise RootMissingError(root)
    return [Result.passed("project-root", f"Project root found: {root}")]


def check_artifact(context: CheckContext) -> Sequence[Result]:
    """Abort the run when the artifact under review is missing."""
    path = context.config.target_path
    if not path.is_file():
        raise ArtifactMissingError(path)
    return [Result.passed("artifact", f"{context.config.target} found")]


def check_docs_dir(context: CheckContext) -> Sequence[Result]:
    docs_dir = context.profile.docs_dir
    if context.path(docs_dir).is_dir():
        return [Result.passed("docs-dir", f"{docs_dir}/ directory found")]
    return [Result.failed("docs-dir", f"{docs_dir}/ directory not found")]


environment_suite = Suite(
    key="environment",
    title="Environment Check",
    checks=(
        Check(name="project-root", evaluate=check_project_root),
        Check(name="artifact", evaluate=check_artifact),
        Check(name="docs-dir", evaluate=check_docs_dir),
    ),
)
