"""Models for check outcomes."""

from collections.abc import Sequence
from dataclasses import dataclass
from enum import StrEnum


class Status(StrEnum):
    """Outcome of a single evaluated condition."""

    PASS = "pass"
    FAIL = "fail"
    SKIP = "skip"
    WARN = "warn"
    INFO = "info"


@dataclass(frozen=True, kw_only=True)
class Result:
    """Outcome of one condition evaluated by a check.

    WARN and INFO results are advisory: they are rendered but never counted.
    """

    name: str
    status: Status
    message: str
    detail: str | None = None

    @classmethod
    def passed(cls, name: str, message: str, detail: str | None = None) -> "Result":
        """Build a PASS result."""
        return cls(name=name, status=Status.PASS, message=message, detail=detail)

    @classmethod
    def failed(cls, name: str, message: str, detail: str | None = None) -> "Result":
        """Build a FAIL result."""
        return cls(name=name, status=Status.FAIL, message=message, detail=detail)

    @classmethod
    def skipped(cls, name: str, message: str, detail: str | None = None) -> "Result":
        """Build a SKIP result."""
        return cls(name=name, status=Status.SKIP, message=message, detail=detail)

    @classmethod
    def warning(cls, name: str, message: str, detail: str | None = None) -> "Result":
        """Build a WARN result."""
        return cls(name=name, status=Status.WARN, message=message, detail=detail)

    @classmethod
    def info(cls, name: str, message: str, detail: str | None = None) -> "Result":
        """Build an INFO result."""
        return cls(name=name, status=Status.INFO, message=message, detail=detail)


@dataclass(frozen=True, kw_only=True)
class SuiteReport:
    """Results produced by one suite, in emission order."""

    suite: str
    title: str
    results: Sequence[Result]
