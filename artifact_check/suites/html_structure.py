"""HTML structure suite: required tags, charset and tag balance."""

import re
from collections.abc import Sequence

from artifact_check.models.result import Result
from artifact_check.suites.base import Check, CheckContext, Suite

# (result name, label, marker)
REQUIRED_TAGS: Sequence[tuple[str, str, str]] = (
    ("doctype", "DOCTYPE declaration", "<!DOCTYPE html>"),
    ("html-tag", "<html> tag", "<html"),
    ("head-tag", "<head> tag", "<head>"),
    ("body-tag", "<body> tag", "<body>"),
)

CHARSET_PATTERN = re.compile(r"""charset\s*=\s*["']?utf-8\b""", re.IGNORECASE)


def check_required_tags(context: CheckContext) -> Sequence[Result]:
    """Emit one result per required tag."""
    text = context.artifact_text
    return [
        Result.passed(name, f"{label} present")
        if marker in text
        else Result.failed(name, f"Missing {label}")
        for name, label, marker in REQUIRED_TAGS
    ]


def check_charset(context: CheckContext) -> Sequence[Result]:
    if CHARSET_PATTERN.search(context.artifact_text):
        return [Result.passed("charset", "UTF-8 charset declared")]
    return [
        Result.warning("charset", "UTF-8 charset not found or incorrect format")
    ]


def check_tag_balance(context: CheckContext) -> Sequence[Result]:
    """Compare opening and closing counts of the tag most prone to drift."""
    tag = re.escape(context.profile.balanced_tag)
    text = context.artifact_text
    opened = len(re.findall(rf"<{tag}\b", text, re.IGNORECASE))
    closed = len(re.findall(rf"</{tag}\s*>", text, re.IGNORECASE))

    label = f"<{context.profile.balanced_tag}>"
    if opened != closed:
        return [
            Result.warning(
                "tag-balance",
                f"Possible unclosed {label} tags: {opened} open, {closed} closed",
            )
        ]
    return [Result.passed("tag-balance", f"{label} tags balanced ({opened} pairs)")]


html_structure_suite = Suite(
    key="html-structure",
    title="HTML Validation",
    checks=(
        Check(name="required-tags", evaluate=check_required_tags),
        Check(name="charset", evaluate=check_charset),
        Check(name="tag-balance", evaluate=check_tag_balance),
    ),
)
