"""Run configuration built once from command-line arguments."""

from pathlib import Path

from pydantic import Field

from artifact_check.models.base import Model

DEFAULT_TARGET = "index_v5.html"


class RunConfig(Model):
    """Immutable settings for a single run."""

    root: Path = Field(..., description="Project root containing the artifact")
    target: str = Field(
        default=DEFAULT_TARGET, description="Artifact path relative to the root"
    )
    verbose: bool = Field(default=False, description="Show info lines and details")
    html_only: bool = Field(
        default=False, description="Run only the html-structure suite"
    )
    json_output: bool = Field(
        default=False, description="Print a JSON report to stdout"
    )
    profile_path: Path | None = Field(
        default=None, description="Explicit YAML profile to load"
    )

    @property
    def target_path(self) -> Path:
        """Absolute location of the artifact under review."""
        return self.root / self.target
