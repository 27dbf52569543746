"""Engine selecting, ordering and running the check suites."""

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from artifact_check.errors import FatalSetupError
from artifact_check.models.result import Result, SuiteReport
from artifact_check.reporter import Reporter, Tally
from artifact_check.suites.base import Check, CheckContext, Suite
from artifact_check.suites.loading import load_suite

log = logging.getLogger(__name__)

ENVIRONMENT_SUITE = "environment"
HTML_ONLY_SUITES: Sequence[str] = ("html-structure",)
FULL_SUITES: Sequence[str] = (
    "html-structure",
    "javascript",
    "dependencies",
    "documentation",
    "file-size",
    "security",
)


def exit_code(tally: Tally) -> int:
    """Derive the process exit status; only failures matter."""
    return 0 if tally.failed == 0 else 1


@dataclass(frozen=True, kw_only=True)
class Engine:
    """Runs the environment suite, then the suites selected by run mode."""

    context: CheckContext
    reporter: Reporter
    suite_loader: Callable[[str], Suite] = load_suite

    def selected_suites(self) -> Sequence[str]:
        """Suites to run after the environment check, in order."""
        if self.context.config.html_only:
            return HTML_ONLY_SUITES
        return FULL_SUITES

    def run(self) -> Sequence[SuiteReport]:
        """Run every selected suite to completion.

        Returns:
            One report per suite, environment first

        Raises:
            FatalSetupError: If the environment check finds the project
                unusable; no other suite runs in that case

        """
        keys = (ENVIRONMENT_SUITE, *self.selected_suites())
        log.info("Running %d suite(s): %s", len(keys), ", ".join(keys))

        reports = [
            self.run_suite(key, number) for number, key in enumerate(keys, start=1)
        ]

        tally = self.reporter.summary()
        log.info(
            "Run completed: total=%d passed=%d failed=%d skipped=%d",
            tally.total,
            tally.passed,
            tally.failed,
            tally.skipped,
        )
        return reports

    def run_suite(self, key: str, number: int) -> SuiteReport:
        """Run all checks of one suite, feeding results to the reporter."""
        suite = self.suite_loader(key)
        self.reporter.render_header(f"{number}. {suite.title}")

        results: list[Result] = []
        for check in suite.checks:
            for result in self._run_check(check):
                self.reporter.record(result)
                results.append(result)

        return SuiteReport(suite=suite.key, title=suite.title, results=results)

    def _run_check(self, check: Check) -> Sequence[Result]:
        """Run a check, turning unexpected errors into a failed result."""
        log.info("Running: %s", check.name)
        try:
            return check.run(self.context)
        except FatalSetupError:
            raise
        except Exception as e:
            log.error("Check %s crashed: %s", check.name, e, exc_info=e)
            return [
                Result.failed(
                    check.name,
                    f"Check {check.name} crashed: {type(e).__name__}: {e}",
                )
            ]
