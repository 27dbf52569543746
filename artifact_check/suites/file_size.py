"""File size suite."""

from collections.abc import Sequence

from artifact_check.models.result import Result
from artifact_check.suites.base import Check, CheckContext, Suite


def check_artifact_size(context: CheckContext) -> Sequence[Result]:
    """Bucket the artifact size into tiers; never fails."""
    target = context.config.target
    size_kb = context.config.target_path.stat().st_size // 1024
    thresholds = context.profile.thresholds

    if size_kb < thresholds.size_good_kb:
        return [Result.passed("artifact-size", f"{target} size: {size_kb}KB (good)")]
    if size_kb < thresholds.size_acceptable_kb:
        return [
            Result.passed("artifact-size", f"{target} size: {size_kb}KB (acceptable)")
        ]
    return [
        Result.warning(
            "artifact-size", f"{target} size: {size_kb}KB (consider optimization)"
        )
    ]


file_size_suite = Suite(
    key="file-size",
    title="File Size Check",
    checks=(Check(name="artifact-size", evaluate=check_artifact_size),),
)
