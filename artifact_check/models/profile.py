"""Models for the tunable data of the rule library.

Every default below reproduces the stock behaviour of the checks; a YAML
profile only needs to list the values it changes.
"""

from collections.abc import Sequence
from typing import Literal

from pydantic import Field, model_validator

from artifact_check.models.base import Model
from artifact_check.models.config import DEFAULT_TARGET


class Library(Model):
    """External library the artifact is expected to reference."""

    name: str = Field(..., description="Human-readable library name")
    marker: str = Field(..., description="Text whose presence proves inclusion")
    optional: bool = Field(default=False, description="Absence is only a warning")


class DocItem(Model):
    """Documentation file or directory expected beneath the root."""

    path: str = Field(..., description="Path relative to the project root")
    kind: Literal["file", "dir"] = Field(default="file", description="Entry type")
    optional: bool = Field(default=False, description="Absence is only a warning")
    count_pattern: str | None = Field(
        default=None,
        description="Glob counted recursively inside a directory entry",
    )
    fallback_ref: str | None = Field(
        default=None,
        description="Git ref where the file may live when absent on disk",
    )

    @model_validator(mode="after")
    def _check_kind_options(self) -> "DocItem":
        if self.count_pattern is not None and self.kind != "dir":
            raise ValueError("count_pattern only applies to directory entries")
        if self.fallback_ref is not None and self.kind != "file":
            raise ValueError("fallback_ref only applies to file entries")
        return self


class Thresholds(Model):
    """Numeric limits; counts strictly above a limit trigger a warning."""

    debug_calls: int = Field(default=5, ge=0)
    dom_injection: int = Field(default=20, ge=0)
    size_good_kb: int = Field(default=100, gt=0)
    size_acceptable_kb: int = Field(default=200, gt=0)

    @model_validator(mode="after")
    def _check_size_tiers(self) -> "Thresholds":
        if self.size_acceptable_kb < self.size_good_kb:
            raise ValueError("size_acceptable_kb must be >= size_good_kb")
        return self


DEFAULT_LIBRARIES: Sequence[Library] = (
    Library(name="Tesseract.js", marker="tesseract.min.js"),
    Library(name="XLSX.js", marker="xlsx.full.min.js"),
    Library(name="ONNX Runtime Web", marker="ort.min.js", optional=True),
)

DEFAULT_DOCS: Sequence[DocItem] = (
    DocItem(path="docs/architecture.md"),
    DocItem(path="docs/ai-coding.md"),
    DocItem(path="docs/decisions", kind="dir", optional=True, count_pattern="*.md"),
    DocItem(path="docs/runbooks/testing.md"),
    DocItem(path="claude.md", optional=True, fallback_ref="origin/main"),
)


class Profile(Model):
    """Everything the rule library needs to know about the project."""

    target: str = Field(default=DEFAULT_TARGET, description="Artifact file name")
    docs_dir: str = Field(default="docs", description="Documentation root")
    libraries: Sequence[Library] = Field(default=DEFAULT_LIBRARIES)
    docs: Sequence[DocItem] = Field(default=DEFAULT_DOCS)
    thresholds: Thresholds = Field(default_factory=Thresholds)
    debug_call: str = Field(default="console.log", description="Debug call marker")
    todo_marker: str = Field(default="TODO")
    dangerous_call: str = Field(default="eval(")
    dom_injection_api: str = Field(default="innerHTML")
    insecure_scheme: str = Field(default="http://")
    balanced_tag: str = Field(default="div", description="Tag checked for parity")
    syntax_timeout_seconds: float = Field(default=30.0, gt=0)
