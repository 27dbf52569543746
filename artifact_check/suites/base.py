"""Building blocks shared by every suite of the rule library.

Checks are textual heuristics over the artifact, not a parser: a marker
found inside a comment or a string literal counts the same as real markup.
"""

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from functools import cached_property
from pathlib import Path

from artifact_check.models.config import RunConfig
from artifact_check.models.profile import Profile
from artifact_check.models.result import Result
from artifact_check.validators.base import SyntaxValidator


@dataclass(frozen=True, kw_only=True)
class CheckContext:
    """Read-only view of the project handed to every check."""

    config: RunConfig
    profile: Profile
    validator: SyntaxValidator = field(repr=False)

    @cached_property
    def artifact_text(self) -> str:
        """Artifact contents, read once per run."""
        return self.config.target_path.read_text(encoding="utf-8", errors="replace")

    def path(self, relative: str) -> Path:
        """Resolve a path beneath the project root."""
        return self.config.root / relative


@dataclass(frozen=True, kw_only=True)
class Check:
    """A named unit of work producing one or more results."""

    name: str
    evaluate: Callable[[CheckContext], Sequence[Result]] = field(repr=False)

    def run(self, context: CheckContext) -> Sequence[Result]:
        """Evaluate the check against the project."""
        return tuple(self.evaluate(context))


@dataclass(frozen=True, kw_only=True)
class Suite:
    """An ordered, static group of related checks."""

    key: str
    title: str
    checks: Sequence[Check]


def find_lines(text: str, marker: str) -> Sequence[tuple[int, str]]:
    """Return ``(line_number, line)`` pairs for lines containing marker."""
    return [
        (number, line.strip())
        for number, line in enumerate(text.splitlines(), start=1)
        if marker in line
    ]


def format_lines(lines: Sequence[tuple[int, str]]) -> str | None:
    """Render numbered lines the way ``grep -n`` would."""
    if not lines:
        return None
    return "\n".join(f"{number}:{line}" for number, line in lines)
