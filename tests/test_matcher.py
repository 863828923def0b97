"""Tests for tuiharness.matcher."""

from __future__ import annotations

import re
import typing as t

import pytest

from tuiharness.matcher import (
    Matcher,
    contains,
    equals,
    matches_regex,
    not_contains,
    predicate,
)


class MatcherFixture(t.NamedTuple):
    """Test fixture for matcher constructors."""

    test_id: str
    matcher: Matcher
    line: str
    expected: bool
    expected_name: str


MATCHER_FIXTURES: list[MatcherFixture] = [
    MatcherFixture(
        test_id="contains_hit",
        matcher=contains("commit 02"),
        line="pick commit 02",
        expected=True,
        expected_name="contains 'commit 02'",
    ),
    MatcherFixture(
        test_id="contains_miss",
        matcher=contains("commit 02"),
        line="pick commit 03",
        expected=False,
        expected_name="contains 'commit 02'",
    ),
    MatcherFixture(
        test_id="not_contains_hit",
        matcher=not_contains("drop"),
        line="pick commit 04",
        expected=True,
        expected_name="does not contain 'drop'",
    ),
    MatcherFixture(
        test_id="not_contains_miss",
        matcher=not_contains("drop"),
        line="drop commit 04",
        expected=False,
        expected_name="does not contain 'drop'",
    ),
    MatcherFixture(
        test_id="equals_hit",
        matcher=equals("stash"),
        line="stash",
        expected=True,
        expected_name="equals 'stash'",
    ),
    MatcherFixture(
        test_id="equals_substring_is_miss",
        matcher=equals("stash"),
        line="stash@{0}",
        expected=False,
        expected_name="equals 'stash'",
    ),
    MatcherFixture(
        test_id="regex_str",
        matcher=matches_regex(r"^commit \d{2}$"),
        line="commit 05",
        expected=True,
        expected_name=r"matches regular expression '^commit \d{2}$'",
    ),
    MatcherFixture(
        test_id="regex_compiled",
        matcher=matches_regex(re.compile("fix(up)?", re.IGNORECASE)),
        line="FIXUP commit 03",
        expected=True,
        expected_name="matches regular expression 'fix(up)?'",
    ),
    MatcherFixture(
        test_id="predicate",
        matcher=predicate(lambda line: line.endswith("01"), "ends with 01"),
        line="commit 01",
        expected=True,
        expected_name="ends with 01",
    ),
]


@pytest.mark.parametrize(
    list(MatcherFixture._fields),
    MATCHER_FIXTURES,
    ids=[f.test_id for f in MATCHER_FIXTURES],
)
def test_matcher(
    test_id: str,
    matcher: Matcher,
    line: str,
    expected: bool,
    expected_name: str,
) -> None:
    """Each constructor decides matches and names its intent."""
    ok, detail = matcher.test(line)
    assert ok is expected
    assert matcher.matches(line) is expected
    assert matcher.name == expected_name
    assert str(matcher) == expected_name
    assert isinstance(detail, str)


@pytest.mark.parametrize(
    "matcher",
    [contains("a"), not_contains("a"), equals("a"), matches_regex("a+")],
    ids=["contains", "not_contains", "equals", "regex"],
)
def test_matcher_is_pure(matcher: Matcher) -> None:
    """Evaluating a matcher repeatedly on the same line gives the same answer."""
    for line in ("a", "b", "aaa", ""):
        assert matcher.test(line) == matcher.test(line)


def test_failure_detail_quotes_target_and_line() -> None:
    """The detail names both the expectation and the rendered line."""
    ok, detail = contains("YOU ARE HERE").test("pick commit 02")
    assert not ok
    assert detail == "Expected 'YOU ARE HERE' to be contained in 'pick commit 02'"


def test_matcher_is_frozen() -> None:
    """Matchers are immutable values."""
    matcher = contains("x")
    with pytest.raises(AttributeError):
        matcher.name = "y"  # type: ignore[misc]
