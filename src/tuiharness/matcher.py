"""Named, pure predicates over a single line of rendered text.

A :class:`Matcher` is a plain value carrying a predicate and a description.
Matching semantics belong to the constructor functions in this module; the
navigation and assertion code only ever calls :meth:`Matcher.test`.

Examples
--------
>>> m = contains("commit 02")
>>> m.name
"contains 'commit 02'"
>>> m.test("commit 02 message")
(True, "Expected 'commit 02' to be contained in 'commit 02 message'")
>>> m.matches("commit 03")
False
"""

from __future__ import annotations

import dataclasses
import re
import typing as t

if t.TYPE_CHECKING:
    from collections.abc import Callable


@dataclasses.dataclass(frozen=True)
class Matcher:
    """Predicate over a text line plus a human-readable name.

    Parameters
    ----------
    name : str
        Description of the match intent, used verbatim in failure messages.
    check : callable
        ``line -> (matched, detail)``. ``detail`` explains a failed match.
    """

    name: str
    check: Callable[[str], tuple[bool, str]] = dataclasses.field(repr=False)

    def test(self, line: str) -> tuple[bool, str]:
        """Return whether ``line`` matches, with a diagnostic detail."""
        return self.check(line)

    def matches(self, line: str) -> bool:
        """Return whether ``line`` matches."""
        ok, _ = self.check(line)
        return ok

    def __str__(self) -> str:
        return self.name


def contains(target: str) -> Matcher:
    """Match lines containing ``target``.

    >>> contains("fixup").matches("fixup commit 03")
    True
    """

    def check(line: str) -> tuple[bool, str]:
        return target in line, f"Expected '{target}' to be contained in '{line}'"

    return Matcher(name=f"contains '{target}'", check=check)


def not_contains(target: str) -> Matcher:
    """Match lines not containing ``target``.

    >>> not_contains("drop").matches("pick commit 04")
    True
    """

    def check(line: str) -> tuple[bool, str]:
        return target not in line, f"Expected '{target}' to NOT be in '{line}'"

    return Matcher(name=f"does not contain '{target}'", check=check)


def equals(target: str) -> Matcher:
    """Match lines exactly equal to ``target``.

    >>> equals("stash").test("stash@{0}")
    (False, "Expected 'stash' to equal 'stash@{0}'")
    """

    def check(line: str) -> tuple[bool, str]:
        return line == target, f"Expected '{target}' to equal '{line}'"

    return Matcher(name=f"equals '{target}'", check=check)


def matches_regex(pattern: str | re.Pattern[str]) -> Matcher:
    r"""Match lines in which ``pattern`` is found (:func:`re.search`).

    >>> m = matches_regex(r"commit \d+$")
    >>> m.name
    "matches regular expression 'commit \\d+$'"
    >>> m.matches("pick commit 12")
    True
    """
    compiled = pattern if isinstance(pattern, re.Pattern) else re.compile(pattern)

    def check(line: str) -> tuple[bool, str]:
        return (
            compiled.search(line) is not None,
            f"Expected '{line}' to match regular expression '{compiled.pattern}'",
        )

    return Matcher(name=f"matches regular expression '{compiled.pattern}'", check=check)


def predicate(fn: Callable[[str], bool], name: str) -> Matcher:
    """Wrap a pure ``str -> bool`` function.

    >>> m = predicate(str.isupper, "is upper case")
    >>> m.test("abc")
    (False, "Expected 'abc' to satisfy: is upper case")
    """

    def check(line: str) -> tuple[bool, str]:
        return bool(fn(line)), f"Expected '{line}' to satisfy: {name}"

    return Matcher(name=name, check=check)
