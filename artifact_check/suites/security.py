"""Security suite: dynamic evaluation, DOM injection and plain-HTTP links."""

from collections.abc import Sequence

from artifact_check.models.result import Result
from artifact_check.suites.base import (
    Check,
    CheckContext,
    Suite,
    find_lines,
    format_lines,
)


def check_dynamic_evaluation(context: CheckContext) -> Sequence[Result]:
    marker = context.profile.dangerous_call
    lines = find_lines(context.artifact_text, marker)
    if lines:
        return [
            Result.failed(
                "dynamic-evaluation",
                f"Found {marker} usage (security risk)",
                detail=format_lines(lines),
            )
        ]
    return [Result.passed("dynamic-evaluation", f"No {marker} usage found")]


def check_dom_injection(context: CheckContext) -> Sequence[Result]:
    api = context.profile.dom_injection_api
    limit = context.profile.thresholds.dom_injection
    count = context.artifact_text.count(api)

    if count > limit:
        return [
            Result.warning(
                "dom-injection",
                f"High usage of {api} ({count} times) - review for XSS risks",
            )
        ]
    return [
        Result.passed("dom-injection", f"{api} usage is acceptable ({count} found)")
    ]


def check_insecure_links(context: CheckContext) -> Sequence[Result]:
    scheme = context.profile.insecure_scheme
    lines = find_lines(context.artifact_text, scheme)
    if lines:
        return [
            Result.warning(
                "insecure-links",
                f"Found {scheme} links (prefer https://)",
                detail=format_lines(lines),
            )
        ]
    return [
        Result.passed(
            "insecure-links", "All external resources use https:// or are local"
        )
    ]


security_suite = Suite(
    key="security",
    title="Security Check",
    checks=(
        Check(name="dynamic-evaluation", evaluate=check_dynamic_evaluation),
        Check(name="dom-injection", evaluate=check_dom_injection),
        Check(name="insecure-links", evaluate=check_insecure_links),
    ),
)
