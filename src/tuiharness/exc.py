"""Provide exceptions used by tuiharness.

tuiharness.exc
~~~~~~~~~~~~~~

Every failure is fatal to the running scenario. Two kinds matter to scenario
authors: :exc:`WaitTimeout`, raised when a polled condition never became true
within the attempt budget, and :exc:`PreconditionViolation`, raised at once
when an operation is invoked while the application is in the wrong context.

Notes
-----
Exceptions in this module inherit from :exc:`TuiHarnessException`.
"""

from __future__ import annotations

import typing as t


class TuiHarnessException(Exception):
    """Base exception for all tuiharness errors."""


class WaitTimeout(TuiHarnessException):
    """Raised when a polled condition does not hold within the attempt budget.

    The message is the last failure reason reported by the check.

    Examples
    --------
    >>> err = WaitTimeout("Could not find item matching: contains 'x'", attempts=3)
    >>> str(err)
    "Could not find item matching: contains 'x'"
    >>> err.attempts
    3
    """

    def __init__(self, reason: str, attempts: int | None = None, *args: object) -> None:
        self.reason = reason
        self.attempts = attempts
        super().__init__(reason)


class PreconditionViolation(TuiHarnessException):
    """Raised if an operation is invoked in the wrong context kind.

    Never retried: polling cannot fix a caller-logic error.

    Examples
    --------
    >>> str(PreconditionViolation("list", "confirmation"))
    'Expected to be in a list context, but current context is confirmation'
    """

    def __init__(
        self,
        expected: str,
        actual: t.Any | None = None,
        *args: object,
    ) -> None:
        self.expected = expected
        self.actual = actual
        msg = f"Expected to be in a {expected} context"
        if actual is not None:
            msg += f", but current context is {actual!s}"
        super().__init__(msg)


class AssertionMismatch(TuiHarnessException, AssertionError):
    """Raised when a scenario explicitly fails."""


class UnknownKeybinding(TuiHarnessException, KeyError):
    """Raised if a symbolic action is missing from the keybinding table."""

    def __init__(self, action: str, *args: object) -> None:
        self.action = action
        super().__init__(f"Unknown keybinding: {action}")

    def __str__(self) -> str:
        return str(self.args[0])
