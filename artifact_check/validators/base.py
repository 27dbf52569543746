"""Abstract base class for JavaScript syntax validators."""

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True)
class SyntaxVerdict:
    """Answer from a syntax validator.

    ``skipped`` means no verdict could be reached (tool missing, timed out);
    ``ok`` is meaningless in that case.
    """

    ok: bool
    skipped: bool = False
    output: str | None = None

    @classmethod
    def unavailable(cls, reason: str) -> "SyntaxVerdict":
        """Verdict for a validator that could not run."""
        return cls(ok=False, skipped=True, output=reason)


@dataclass(frozen=True, kw_only=True)
class SyntaxValidator(ABC):
    """Pass/fail oracle for JavaScript source text."""

    @abstractmethod
    def validate_syntax(self, source: str, *, module: bool = False) -> SyntaxVerdict:
        """Check whether the given source parses.

        Args:
            source: JavaScript source text
            module: Parse as an ES module rather than a classic script

        Returns:
            The verdict; implementations never raise for invalid source

        """
