"""Dependencies suite: external libraries the artifact must load."""

from collections.abc import Sequence

from artifact_check.models.result import Result
from artifact_check.suites.base import Check, CheckContext, Suite


def check_libraries(context: CheckContext) -> Sequence[Result]:
    """Emit one result per configured library."""
    text = context.artifact_text
    results: list[Result] = []
    for library in context.profile.libraries:
        name = f"library:{library.marker}"
        if library.marker in text:
            results.append(Result.passed(name, f"{library.name} is included"))
        elif library.optional:
            results.append(
                Result.warning(name, f"{library.name} not found (optional)")
            )
        else:
            results.append(Result.failed(name, f"{library.name} not found"))
    return results


dependencies_suite = Suite(
    key="dependencies",
    title="Dependencies Check",
    checks=(Check(name="external-libraries", evaluate=check_libraries),),
)
