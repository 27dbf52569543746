"""Documentation suite: the files and directories a project must ship."""

from collections.abc import Sequence

from artifact_check import vcs
from artifact_check.models.profile import DocItem
from artifact_check.models.result import Result
from artifact_check.suites.base import Check, CheckContext, Suite


def _missing(item: DocItem, message: str) -> Result:
    name = f"doc:{item.path}"
    if item.optional:
        return Result.warning(name, message)
    return Result.failed(name, message)


def evaluate_doc_file(context: CheckContext, item: DocItem) -> Result:
    """Look for a file on disk, then at the fallback git ref if any."""
    name = f"doc:{item.path}"
    if context.path(item.path).is_file():
        return Result.passed(name, f"{item.path} found")

    if item.fallback_ref is not None:
        if vcs.file_exists_at_ref(context.config.root, item.fallback_ref, item.path):
            return Result.passed(name, f"{item.path} found at {item.fallback_ref}")
        return _missing(
            item, f"{item.path} not found (should be in {item.fallback_ref})"
        )

    return _missing(item, f"{item.path} not found")


def evaluate_doc_dir(context: CheckContext, item: DocItem) -> Result:
    """Look for a directory, counting its entries when a pattern is set."""
    directory = context.path(item.path)
    if not directory.is_dir():
        return _missing(item, f"{item.path}/ directory not found")

    if item.count_pattern is None:
        return Result.passed(f"doc:{item.path}", f"{item.path}/ found")

    count = sum(1 for entry in directory.rglob(item.count_pattern) if entry.is_file())
    return Result.passed(
        f"doc:{item.path}", f"{item.path}/ found with {count} entries"
    )


def check_documentation(context: CheckContext) -> Sequence[Result]:
    """Emit one result per configured documentation item."""
    return [
        evaluate_doc_dir(context, item)
        if item.kind == "dir"
        else evaluate_doc_file(context, item)
        for item in context.profile.docs
    ]


documentation_suite = Suite(
    key="documentation",
    title="Documentation Check",
    checks=(Check(name="documentation-items", evaluate=check_documentation),),
)
