"""Tests for the HTML structure suite."""

from collections.abc import Callable

import pytest

from artifact_check.models.profile import Profile
from artifact_check.models.result import Status
from artifact_check.suites.base import CheckContext
from artifact_check.suites.html_structure import (
    check_charset,
    check_required_tags,
    check_tag_balance,
    html_structure_suite,
)
from artifact_check.testing.artifacts import build_html


def test_valid_document_passes(make_context: Callable[..., CheckContext]) -> None:
    """A well-formed document passes every structural check."""
    context = make_context()

    results = [r for check in html_structure_suite.checks for r in check.run(context)]

    assert len(results) == 6
    assert all(r.status is Status.PASS for r in results)


def test_missing_head_fails_once(make_context: Callable[..., CheckContext]) -> None:
    """A missing <head> fails exactly one of the four tag results."""
    context = make_context(build_html(head=False))

    results = check_required_tags(context)

    assert len(results) == 4
    assert [r.status for r in results] == [
        Status.PASS,
        Status.PASS,
        Status.FAIL,
        Status.PASS,
    ]
    assert results[2].message == "Missing <head> tag"


@pytest.mark.parametrize(
    ("toggle", "name"),
    [
        ("doctype", "doctype"),
        ("html", "html-tag"),
        ("body", "body-tag"),
    ],
)
def test_each_required_tag_is_checked(
    make_context: Callable[..., CheckContext], toggle: str, name: str
) -> None:
    """Removing any required tag fails its own result."""
    context = make_context(build_html(**{toggle: False}))

    failed = [r.name for r in check_required_tags(context) if r.status is Status.FAIL]

    assert failed == [name]


def test_missing_charset_warns(make_context: Callable[..., CheckContext]) -> None:
    """An undeclared charset is only a warning."""
    context = make_context(build_html(charset=False))

    [result] = check_charset(context)

    assert result.status is Status.WARN


def test_charset_accepts_http_equiv_form(
    make_context: Callable[..., CheckContext],
) -> None:
    """The content-type meta form also declares UTF-8."""
    html = build_html(charset=False).replace(
        "<title>",
        '<meta http-equiv="Content-Type" content="text/html; charset=utf-8">\n<title>',
    )
    context = make_context(html)

    [result] = check_charset(context)

    assert result.status is Status.PASS


def test_unbalanced_divs_warn(make_context: Callable[..., CheckContext]) -> None:
    """A tag count mismatch is reported as a warning with both counts."""
    context = make_context(build_html(body_markup="<div><div>open</div>"))

    [result] = check_tag_balance(context)

    assert result.status is Status.WARN
    assert "2 open, 1 closed" in result.message


def test_balance_ignores_similar_tag_names(
    make_context: Callable[..., CheckContext],
) -> None:
    """Tags sharing a prefix with the balanced tag are not counted."""
    context = make_context(build_html(body_markup="<divider></divider><div></div>"))

    [result] = check_tag_balance(context)

    assert result.status is Status.PASS


def test_balanced_tag_is_configurable(
    make_context: Callable[..., CheckContext],
) -> None:
    """The profile chooses which tag is checked for parity."""
    context = make_context(
        build_html(body_markup="<section><div></div>"),
        profile=Profile(balanced_tag="section"),
    )

    [result] = check_tag_balance(context)

    assert result.status is Status.WARN
    assert "<section>" in result.message
