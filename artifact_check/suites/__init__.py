"""Rule library: the built-in check suites."""

from artifact_check.suites.base import Check, CheckContext, Suite

__all__ = ["Check", "CheckContext", "Suite"]
