"""JavaScript suite: inline script syntax and leftover debugging aids."""

import re
from collections.abc import Sequence
from dataclasses import dataclass

from artifact_check.models.result import Result
from artifact_check.suites.base import (
    Check,
    CheckContext,
    Suite,
    find_lines,
    format_lines,
)

SCRIPT_BLOCK = re.compile(
    r"<script\b(?P<attrs>[^>]*)>(?P<body>.*?)</script\s*>",
    re.IGNORECASE | re.DOTALL,
)
SRC_ATTR = re.compile(r"\bsrc\s*=", re.IGNORECASE)
TYPE_ATTR = re.compile(r"""\btype\s*=\s*["']?(?P<type>[^"'\s>]+)""", re.IGNORECASE)

CLASSIC_TYPES = frozenset(
    {
        "text/javascript",
        "application/javascript",
        "text/ecmascript",
        "application/ecmascript",
    }
)


@dataclass(frozen=True, kw_only=True)
class ScriptBlock:
    """Inline script found in the artifact."""

    source: str
    line: int
    module: bool = False


def extract_inline_scripts(html: str) -> Sequence[ScriptBlock]:
    """Extract inline JavaScript blocks.

    External scripts (``src=``) and data blocks such as JSON or templates
    are ignored; blocks that only hold whitespace are dropped.
    """
    blocks: list[ScriptBlock] = []
    for match in SCRIPT_BLOCK.finditer(html):
        attrs = match.group("attrs")
        if SRC_ATTR.search(attrs):
            continue

        type_match = TYPE_ATTR.search(attrs)
        script_type = type_match.group("type").lower() if type_match else ""
        if script_type and script_type != "module" and script_type not in CLASSIC_TYPES:
            continue

        body = match.group("body")
        if not body.strip():
            continue

        blocks.append(
            ScriptBlock(
                source=body,
                line=html.count("\n", 0, match.start("body")) + 1,
                module=script_type == "module",
            )
        )
    return blocks


def check_syntax(context: CheckContext) -> Sequence[Result]:
    """Validate each inline block.

    Any syntax error fails the check. Otherwise an unavailable verdict for
    any block skips it.
    """
    name = "javascript-syntax"
    blocks = extract_inline_scripts(context.artifact_text)
    if not blocks:
        return [
            Result.skipped(name, "JavaScript syntax check (no inline script found)")
        ]

    errors: list[str] = []
    unavailable: list[str] = []
    for block in blocks:
        verdict = context.validator.validate_syntax(block.source, module=block.module)
        if verdict.skipped:
            unavailable.append(verdict.output or "validator unavailable")
        elif not verdict.ok:
            errors.append(
                f"script at line {block.line}:\n{verdict.output or ''}".rstrip()
            )

    if errors:
        return [
            Result.failed(
                name, "JavaScript syntax errors found", detail="\n".join(errors)
            )
        ]
    if unavailable:
        return [Result.skipped(name, f"JavaScript syntax check ({unavailable[0]})")]
    return [Result.passed(name, f"JavaScript syntax is valid ({len(blocks)} block(s))")]


def check_debug_calls(context: CheckContext) -> Sequence[Result]:
    marker = context.profile.debug_call
    limit = context.profile.thresholds.debug_calls
    count = context.artifact_text.count(marker)

    if count > limit:
        return [
            Result.warning(
                "debug-calls",
                f"Found {count} {marker} statements "
                "(consider removing in production)",
                detail=format_lines(find_lines(context.artifact_text, marker)),
            )
        ]
    return [
        Result.passed("debug-calls", f"{marker} usage is acceptable ({count} found)")
    ]


def check_todo_markers(context: CheckContext) -> Sequence[Result]:
    """Report TODO markers; informational only."""
    marker = context.profile.todo_marker
    lines = find_lines(context.artifact_text, marker)
    return [
        Result.info(
            "todo-markers",
            f"Found {len(lines)} {marker} comments",
            detail=format_lines(lines),
        )
    ]


javascript_suite = Suite(
    key="javascript",
    title="JavaScript Syntax Check",
    checks=(
        Check(name="javascript-syntax", evaluate=check_syntax),
        Check(name="debug-calls", evaluate=check_debug_calls),
        Check(name="todo-markers", evaluate=check_todo_markers),
    ),
)
