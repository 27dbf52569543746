"""Tests for profile models."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from artifact_check.models.config import RunConfig
from artifact_check.models.profile import DocItem, Library, Profile, Thresholds


class TestDefaults:
    """Tests for the built-in profile."""

    def test_default_target(self) -> None:
        """Targets the single-file OCR artifact by default."""
        assert Profile().target == "index_v5.html"

    def test_default_libraries(self) -> None:
        """Two libraries are required and one is optional."""
        libraries = Profile().libraries

        assert [lib.marker for lib in libraries if not lib.optional] == [
            "tesseract.min.js",
            "xlsx.full.min.js",
        ]
        assert [lib.marker for lib in libraries if lib.optional] == ["ort.min.js"]

    def test_default_thresholds(self) -> None:
        """Thresholds match the stock limits."""
        thresholds = Profile().thresholds

        assert thresholds.debug_calls == 5
        assert thresholds.dom_injection == 20
        assert thresholds.size_good_kb == 100
        assert thresholds.size_acceptable_kb == 200

    def test_default_docs(self) -> None:
        """Optional items are the decisions directory and claude.md."""
        optional = [item.path for item in Profile().docs if item.optional]

        assert optional == ["docs/decisions", "claude.md"]


class TestValidation:
    """Tests for profile validation rules."""

    def test_rejects_unknown_keys(self) -> None:
        """Unknown keys are schema errors."""
        with pytest.raises(ValidationError):
            Profile.model_validate({"targte": "app.html"})

    def test_rejects_count_pattern_on_file(self) -> None:
        """Only directories can count entries."""
        with pytest.raises(ValidationError, match="count_pattern"):
            DocItem(path="README.md", count_pattern="*.md")

    def test_rejects_fallback_ref_on_dir(self) -> None:
        """Only files can be looked up in git."""
        with pytest.raises(ValidationError, match="fallback_ref"):
            DocItem(path="docs", kind="dir", fallback_ref="origin/main")

    def test_rejects_inverted_size_tiers(self) -> None:
        """The acceptable tier cannot be below the good tier."""
        with pytest.raises(ValidationError, match="size_acceptable_kb"):
            Thresholds(size_good_kb=300, size_acceptable_kb=200)

    def test_rejects_negative_thresholds(self) -> None:
        """Counts cannot be negative."""
        with pytest.raises(ValidationError):
            Thresholds(debug_calls=-1)

    def test_profile_is_frozen(self) -> None:
        """Profiles are read-only once built."""
        profile = Profile(libraries=[Library(name="Lib", marker="lib.js")])

        with pytest.raises(ValidationError):
            profile.target = "other.html"  # type: ignore[misc]


def test_run_config_target_path(tmp_path: Path) -> None:
    """The artifact path is the target beneath the root."""
    config = RunConfig(root=tmp_path, target="app/index.html")

    assert config.target_path == tmp_path / "app" / "index.html"
