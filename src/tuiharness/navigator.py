"""Move a list selection onto the row matching a :class:`~tuiharness.matcher.Matcher`.

Only the rendered page of the list is searched. A target scrolled out of view
fails with a "could not find" reason instead of triggering a scroll search;
that bound keeps every navigation time-limited and gives "not found" a single
meaning.
"""

from __future__ import annotations

import dataclasses
import logging
import typing as t

if t.TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from tuiharness.assertions import Assert
    from tuiharness.keybindings import KeybindingConfig
    from tuiharness.matcher import Matcher

logger = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True)
class MatchResult:
    """Outcome of searching one snapshot for a matcher.

    Examples
    --------
    >>> from tuiharness.matcher import contains
    >>> result = find_unique_match(["commit 02", "commit 01"], contains("01"))
    >>> result.index, result.found
    (1, True)
    >>> find_unique_match(["a"], contains("b")).missing
    True
    """

    matches: tuple[str, ...]
    index: int | None = None

    @property
    def found(self) -> bool:
        """Exactly one line matched."""
        return len(self.matches) == 1

    @property
    def missing(self) -> bool:
        """No line matched."""
        return not self.matches

    @property
    def ambiguous(self) -> bool:
        """More than one line matched."""
        return len(self.matches) > 1

    def reason(self, matcher: Matcher) -> str:
        """Explain why the match is not unique."""
        if self.ambiguous:
            lines = "\n".join(self.matches)
            return (
                f"Found {len(self.matches)} matches for `{matcher.name}`, "
                f"expected only a single match. Lines:\n{lines}"
            )
        if self.missing:
            return f"Could not find item matching: {matcher.name}"
        return ""


def find_unique_match(lines: Sequence[str], matcher: Matcher) -> MatchResult:
    """Search ``lines`` for the rows satisfying ``matcher``.

    ``index`` is set only when exactly one row matches.

    >>> from tuiharness.matcher import contains
    >>> commits = [f"commit 0{n}" for n in range(5, 0, -1)]
    >>> result = find_unique_match(commits, contains("commit 0"))
    >>> len(result.matches), result.index
    (5, None)
    """
    hits = [(i, line) for i, line in enumerate(lines) if matcher.matches(line)]
    if len(hits) == 1:
        index, line = hits[0]
        return MatchResult(matches=(line,), index=index)
    return MatchResult(matches=tuple(line for _, line in hits))


class ListNavigator:
    """Drive the selection of the focused list view.

    Parameters
    ----------
    asserter : Assert
        Provides the list-context precondition and the polling loop.
    keys : KeybindingConfig
        Source of the "next item" / "previous item" keys.
    press : callable
        Sends one key, including the settle delay.
    """

    def __init__(
        self,
        asserter: Assert,
        keys: KeybindingConfig,
        press: Callable[[str], None],
    ) -> None:
        self.asserter = asserter
        self.keys = keys
        self.press = press

    def navigate_to(self, matcher: Matcher) -> None:
        """Select the single visible row satisfying ``matcher``.

        Fails if the focused view is not a list, if no visible row matches, or
        if more than one visible row matches.

        Raises
        ------
        PreconditionViolation
            The focused context is not list-shaped.
        WaitTimeout
            No unique match appeared, or the selection never landed on it.
        """
        context = self.asserter.in_list_context()
        selected = match_index = -1

        def check() -> tuple[bool, str]:
            nonlocal selected, match_index
            # lines and selection must come from the same render
            snapshot = context.snapshot()
            result = find_unique_match(snapshot.lines, matcher)
            if result.index is None:
                return False, result.reason(matcher)
            if not 0 <= snapshot.selected_index < len(snapshot.lines):
                return False, f"No line selected while looking for {matcher.name}"
            selected, match_index = snapshot.selected_index, result.index
            return True, ""

        self.asserter.assert_with_retries(check)

        distance = match_index - selected
        if distance:
            universal = self.keys.universal
            key = universal.next_item if distance > 0 else universal.prev_item
            logger.debug(
                "moving %s from row %d to row %d in %s",
                "down" if distance > 0 else "up",
                selected,
                match_index,
                context.name,
            )
            for _ in range(abs(distance)):
                self.press(key)

        self.asserter.selected_line(matcher)
