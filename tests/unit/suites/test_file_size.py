"""Tests for the file size suite."""

from collections.abc import Callable

import pytest

from artifact_check.models.result import Status
from artifact_check.suites.base import CheckContext
from artifact_check.suites.file_size import check_artifact_size


@pytest.mark.parametrize(
    ("size_bytes", "expected", "label"),
    [
        (10 * 1024, Status.PASS, "(good)"),
        (100 * 1024 - 1, Status.PASS, "(good)"),
        (100 * 1024, Status.PASS, "(acceptable)"),
        (200 * 1024 - 1, Status.PASS, "(acceptable)"),
        (200 * 1024, Status.WARN, "(consider optimization)"),
    ],
)
def test_size_tiers(
    make_context: Callable[..., CheckContext],
    size_bytes: int,
    expected: Status,
    label: str,
) -> None:
    """Sizes are bucketed by whole kilobytes and never fail."""
    context = make_context("x" * size_bytes)

    [result] = check_artifact_size(context)

    assert result.status is expected
    assert result.message.endswith(label)
    assert result.message.startswith(f"index_v5.html size: {size_bytes // 1024}KB")
