"""CLI entry point for the artifact quality check."""

import argparse
import json
import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import Any, NoReturn, TextIO

from artifact_check.engine import Engine, exit_code
from artifact_check.errors import FatalSetupError, UsageError
from artifact_check.models.config import RunConfig
from artifact_check.models.profile import Profile
from artifact_check.models.result import Status, SuiteReport
from artifact_check.profile_loader import resolve_profile
from artifact_check.reporter import Reporter
from artifact_check.suites.base import CheckContext
from artifact_check.validators.base import SyntaxValidator
from artifact_check.validators.node import NodeSyntaxValidator

USAGE = (
    "Usage: artifact-check [--verbose] [--html-only] [--root PATH] "
    "[--target NAME] [--profile PATH] [--json]"
)


class ArgumentParser(argparse.ArgumentParser):
    """Argument parser raising instead of exiting with status 2."""

    def error(self, message: str) -> NoReturn:
        raise UsageError(message)


def build_parser() -> ArgumentParser:
    parser = ArgumentParser(
        prog="artifact-check",
        description="Run static quality checks on a single-file web artifact",
        usage=USAGE.removeprefix("Usage: "),
        add_help=False,
        allow_abbrev=False,
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Show informational lines and result details",
    )
    parser.add_argument(
        "--html-only",
        "--html",
        dest="html_only",
        action="store_true",
        help="Only run the HTML structure checks",
    )
    parser.add_argument(
        "--root",
        type=Path,
        default=None,
        help="Project root containing the artifact (default: current directory)",
    )
    parser.add_argument(
        "--target",
        default=None,
        help="Artifact path relative to the root (default: from profile)",
    )
    parser.add_argument(
        "--profile",
        type=Path,
        default=None,
        help="YAML profile overriding the built-in rule settings",
    )
    parser.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help="Print a JSON report to stdout; the text report goes to stderr",
    )
    return parser


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments, rejecting anything unrecognized."""
    return build_parser().parse_args(argv)


def project_root(args: argparse.Namespace) -> Path:
    """Absolute project root, defaulting to the working directory."""
    return (args.root or Path.cwd()).resolve()


def build_config(args: argparse.Namespace, profile: Profile) -> RunConfig:
    """Build the run configuration; command-line values win over the profile."""
    return RunConfig(
        root=project_root(args),
        target=args.target or profile.target,
        verbose=args.verbose,
        html_only=args.html_only,
        json_output=args.json_output,
        profile_path=args.profile,
    )


def format_output(
    suite_reports: Sequence[SuiteReport], reporter: Reporter
) -> dict[str, Any]:
    """Format suite reports for JSON output."""
    tally = reporter.summary()
    results = [
        {
            "suite": report.suite,
            "name": result.name,
            "status": str(result.status),
            "message": result.message,
            "detail": result.detail,
        }
        for report in suite_reports
        for result in report.results
    ]
    return {
        "total": tally.total,
        "passed": tally.passed,
        "failed": tally.failed,
        "skipped": tally.skipped,
        "warnings": sum(1 for r in results if r["status"] == Status.WARN),
        "exit_code": exit_code(tally),
        "results": results,
    }


def format_error(message: str) -> dict[str, Any]:
    """Format a fatal setup error for JSON output."""
    return {"exit_code": 1, "error": message, "results": []}


def run(
    config: RunConfig,
    profile: Profile,
    validator: SyntaxValidator | None = None,
    out: TextIO | None = None,
) -> int:
    """Run the checks and return the exit code."""
    log = logging.getLogger("artifact_check")

    if out is None:
        out = sys.stderr if config.json_output else sys.stdout
    if validator is None:
        validator = NodeSyntaxValidator(timeout=profile.syntax_timeout_seconds)

    reporter = Reporter(out=out, verbose=config.verbose)
    context = CheckContext(config=config, profile=profile, validator=validator)
    engine = Engine(context=context, reporter=reporter)

    reporter.render_title(f"{config.target} - Quality Check")
    log.info("Checking %s", config.target_path)

    try:
        suite_reports = engine.run()
    except FatalSetupError as e:
        log.error("Aborting: %s", e)
        reporter.render_fatal(str(e))
        if config.json_output:
            print(json.dumps(format_error(str(e)), indent=2))
        return 1

    reporter.render_summary()

    if config.json_output:
        print(json.dumps(format_output(suite_reports, reporter), indent=2))

    return exit_code(reporter.summary())


def main(argv: Sequence[str] | None = None) -> None:
    """CLI entry point."""
    try:
        args = parse_args(argv)
    except UsageError as e:
        print(f"Unknown option: {e}", file=sys.stderr)
        print(USAGE, file=sys.stderr)
        sys.exit(1)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    try:
        profile = resolve_profile(project_root(args), args.profile)
        config = build_config(args, profile)
    except FatalSetupError as e:
        print(f"❌ {e}", file=sys.stderr)
        if args.json_output:
            print(json.dumps(format_error(str(e)), indent=2))
        sys.exit(1)

    sys.exit(run(config, profile))


if __name__ == "__main__":  # pragma: no cover
    main()
