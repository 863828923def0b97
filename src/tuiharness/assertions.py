"""Assertions over the rendered state of the application.

Two flavours:

- context-kind checks (:meth:`Assert.in_list_context`, :meth:`Assert.in_confirm`
  and friends) run once and raise
  :exc:`~tuiharness.exc.PreconditionViolation` straight away;
- content checks poll through :func:`~tuiharness.retry.retry_until_ok` and
  raise :exc:`~tuiharness.exc.WaitTimeout` with the last failure reason.
"""

from __future__ import annotations

import logging
import typing as t

from tuiharness.config import HarnessConfig
from tuiharness.exc import AssertionMismatch, PreconditionViolation
from tuiharness.retry import retry_until_ok
from tuiharness.types import ContextKind, ListContext

if t.TYPE_CHECKING:
    from tuiharness.matcher import Matcher
    from tuiharness.retry import CheckFn
    from tuiharness.types import Context, GuiDriver

logger = logging.getLogger(__name__)


def _describe(context: Context) -> str:
    return f"'{context.name}' ({context.kind!s})"


class Assert:
    """Assertion vocabulary bound to one :class:`~tuiharness.types.GuiDriver`.

    Parameters
    ----------
    gui : GuiDriver
        Driver of the application under test.
    config : HarnessConfig, optional
        Retry policy. Defaults to the process-wide configuration.
    """

    def __init__(self, gui: GuiDriver, config: HarnessConfig | None = None) -> None:
        self.gui = gui
        self.config = config if config is not None else HarnessConfig()

    def assert_with_retries(self, check: CheckFn) -> None:
        """Poll ``check`` within the configured attempt budget."""
        retry_until_ok(
            check,
            interval=self.config.retry_interval,
            attempts=self.config.retry_attempts,
        )

    def fail(self, message: str) -> t.NoReturn:
        """Abort the scenario."""
        raise AssertionMismatch(message)

    def current_context(self) -> Context:
        """Return the focused context."""
        return self.gui.current_context()

    # context-kind preconditions

    def in_list_context(self) -> ListContext:
        """Return the focused context, which must be list-shaped."""
        context = self.gui.current_context()
        if not isinstance(context, ListContext):
            raise PreconditionViolation("list", _describe(context))
        return context

    def _in_kind(self, kind: ContextKind) -> Context:
        context = self.gui.current_context()
        if context.kind is not kind:
            raise PreconditionViolation(kind.value, _describe(context))
        return context

    def in_confirm(self) -> Context:
        """Require a confirmation popup to be focused."""
        return self._in_kind(ContextKind.CONFIRMATION)

    def in_prompt(self) -> Context:
        """Require an editable prompt to be focused."""
        return self._in_kind(ContextKind.PROMPT)

    def in_menu(self) -> ListContext:
        """Require a menu to be focused."""
        context = self._in_kind(ContextKind.MENU)
        if not isinstance(context, ListContext):
            raise PreconditionViolation("list", _describe(context))
        return context

    # polled checks

    def current_view_name(self, expected: str) -> None:
        """Wait until the focused view is named ``expected``."""

        def check() -> tuple[bool, str]:
            actual = self.gui.current_context().name
            return actual == expected, (
                f"Expected current view to be '{expected}', but got '{actual}'"
            )

        self.assert_with_retries(check)

    def current_window_name(self, expected: str) -> None:
        """Wait until the focused window is named ``expected``."""

        def check() -> tuple[bool, str]:
            actual = self.gui.current_context().window_name
            return actual == expected, (
                f"Expected current window to be '{expected}', but got '{actual}'"
            )

        self.assert_with_retries(check)

    def current_view_title(self, matcher: Matcher) -> None:
        """Wait until the focused view's title satisfies ``matcher``."""

        def check() -> tuple[bool, str]:
            ok, detail = matcher.test(self.gui.current_context().title)
            return ok, f"Unexpected view title. {detail}"

        self.assert_with_retries(check)

    def current_view_content(self, matcher: Matcher) -> None:
        """Wait until the focused view's content satisfies ``matcher``."""

        def check() -> tuple[bool, str]:
            ok, detail = matcher.test(self.gui.current_context().content)
            return ok, f"Unexpected content in view. {detail}"

        self.assert_with_retries(check)

    def selected_line(self, matcher: Matcher) -> None:
        """Wait until the selected line of the focused list satisfies ``matcher``."""

        def check() -> tuple[bool, str]:
            context = self.gui.current_context()
            if not isinstance(context, ListContext):
                return False, (
                    f"Expected a list context when looking for selected line "
                    f"{matcher.name}, but current context is {_describe(context)}"
                )
            line = context.snapshot().selected_line
            if line is None:
                return False, f"No line selected, expected one that {matcher.name}"
            ok, detail = matcher.test(line)
            return ok, f"Unexpected selected line. {detail}"

        self.assert_with_retries(check)

    def selected_line_idx(self, expected: int) -> None:
        """Wait until the focused list selects row ``expected``."""

        def check() -> tuple[bool, str]:
            context = self.gui.current_context()
            if not isinstance(context, ListContext):
                return False, f"Expected a list context, got {_describe(context)}"
            actual = context.snapshot().selected_index
            return actual == expected, (
                f"Expected selected line index to be {expected}, but got {actual}"
            )

        self.assert_with_retries(check)

    def view_line_count(self, expected: int) -> None:
        """Wait until the focused list renders ``expected`` lines."""

        def check() -> tuple[bool, str]:
            context = self.gui.current_context()
            if not isinstance(context, ListContext):
                return False, f"Expected a list context, got {_describe(context)}"
            actual = len(context.snapshot().lines)
            return actual == expected, (
                f"Expected {expected} lines in '{context.name}', but got {actual}"
            )

        self.assert_with_retries(check)
