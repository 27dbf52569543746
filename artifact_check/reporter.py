"""Result accounting and human-readable rendering."""

import logging
import sys
from dataclasses import dataclass, field, replace
from typing import TextIO

from rich.cells import cell_len
from rich.console import Console

from artifact_check.models.result import Result, Status

log = logging.getLogger(__name__)

STATUS_SYMBOLS = {
    Status.PASS: "✅",
    Status.FAIL: "❌",
    Status.SKIP: "⚠️ ",
    Status.WARN: "⚠️ ",
    Status.INFO: "ℹ️ ",
}

STATUS_STYLES = {
    Status.PASS: "green",
    Status.FAIL: "red",
    Status.SKIP: "yellow",
    Status.WARN: "yellow",
    Status.INFO: "blue",
}

RULE = "=" * 40
BOX_WIDTH = 40


@dataclass(frozen=True, kw_only=True)
class Tally:
    """Aggregate counters; ``total == passed + failed + skipped`` always."""

    total: int = 0
    passed: int = 0
    failed: int = 0
    skipped: int = 0

    def add(self, status: Status) -> "Tally":
        """Return the tally with one more result of the given status."""
        if status is Status.PASS:
            return replace(self, total=self.total + 1, passed=self.passed + 1)
        if status is Status.FAIL:
            return replace(self, total=self.total + 1, failed=self.failed + 1)
        if status is Status.SKIP:
            return replace(self, total=self.total + 1, skipped=self.skipped + 1)
        return self


def boxed(text: str, width: int = BOX_WIDTH) -> str:
    """Draw text inside a single-line box, centred by terminal cell width."""
    padding = max(width - cell_len(text), 0)
    left = padding // 2
    return "\n".join(
        (
            f"╔{'═' * width}╗",
            f"║{' ' * left}{text}{' ' * (padding - left)}║",
            f"╚{'═' * width}╝",
        )
    )


@dataclass(kw_only=True)
class Reporter:
    """Accumulates results into a tally and prints them as they arrive."""

    out: TextIO = field(default_factory=lambda: sys.stdout)
    verbose: bool = False
    warnings: int = field(default=0, init=False)
    _tally: Tally = field(default_factory=Tally, init=False, repr=False)
    _console: Console = field(init=False, repr=False)

    def __post_init__(self) -> None:
        # Plain text unless ``out`` is a terminal.
        self._console = Console(
            file=self.out, highlight=False, emoji=False, soft_wrap=True
        )

    def record(self, result: Result) -> None:
        """Count a result and render it."""
        self._tally = self._tally.add(result.status)
        if result.status is Status.WARN:
            self.warnings += 1
        log.debug("Recorded %s: %s", result.name, result.status)
        self.render(result, self.verbose)

    def summary(self) -> Tally:
        """Return the counters accumulated so far."""
        return self._tally

    def render(self, result: Result, verbose: bool) -> None:
        """Print one result line; info lines and details need verbose."""
        if result.status is Status.INFO and not verbose:
            return

        message = result.message
        if result.status is Status.SKIP:
            message = f"{message} (skipped)"
        self._print(
            f"{STATUS_SYMBOLS[result.status]} {message}", STATUS_STYLES[result.status]
        )

        if verbose and result.detail:
            for line in result.detail.splitlines():
                self._print(f"    {line}")

    def render_title(self, title: str) -> None:
        self._print("")
        self._print(boxed(title))
        self._print("")

    def render_header(self, title: str) -> None:
        self._print("")
        self._print(RULE)
        self._print(title)
        self._print(RULE)

    def render_fatal(self, message: str) -> None:
        """Print the reason a run was aborted."""
        self._print(
            f"{STATUS_SYMBOLS[Status.FAIL]} {message}", STATUS_STYLES[Status.FAIL]
        )
        self._print("")
        self._print("Run aborted: fix the project setup and run again.")

    def render_summary(self) -> None:
        """Print the numeric summary followed by the pass/fail banner."""
        tally = self.summary()
        self.render_header("Summary")
        self._print("")
        self._print(f"Total tests:   {tally.total}")
        self._print(f"Passed:        {tally.passed}")
        self._print(f"Failed:        {tally.failed}")
        self._print(f"Skipped:       {tally.skipped}")
        self._print(f"Warnings:      {self.warnings}")
        self._print("")

        if tally.failed == 0:
            self._print(boxed("✅ ALL CHECKS PASSED ✅"), "bold green")
        else:
            self._print(boxed("❌ SOME CHECKS FAILED ❌"), "bold red")
            self._print("")
            self._print("Fix the issues above and run again.")
        self._print("")

    def _print(self, line: str, style: str | None = None) -> None:
        self._console.print(line, style=style, markup=False)
