"""Bounded polling of live application state."""

from __future__ import annotations

import logging
import time
import typing as t

from tuiharness.constants import RETRY_ATTEMPTS, RETRY_INTERVAL_SECONDS
from tuiharness.exc import WaitTimeout

logger = logging.getLogger(__name__)

if t.TYPE_CHECKING:
    from collections.abc import Callable

    #: ``() -> (ok, reason)``; ``reason`` is reported if every attempt fails
    CheckFn = Callable[[], tuple[bool, str]]


def retry_until_ok(
    check: CheckFn,
    *,
    interval: float = RETRY_INTERVAL_SECONDS,
    attempts: int = RETRY_ATTEMPTS,
    raises: bool = True,
) -> bool:
    """
    Call ``check`` until it succeeds or the attempt budget is exhausted.

    Parameters
    ----------
    check : callable
        Returns ``(ok, reason)``. It may read application state but must not
        change it.
    interval : float
        Seconds to sleep between attempts. Defaults to ``0.05``, configurable
        via the ``TUIHARNESS_RETRY_INTERVAL_SECONDS`` environment variable.
    attempts : int
        Maximum number of calls to ``check``. Defaults to ``100``, configurable
        via the ``TUIHARNESS_RETRY_ATTEMPTS`` environment variable.
    raises : bool
        Whether to raise :exc:`~tuiharness.exc.WaitTimeout` on exhaustion.
        Defaults to ``True``.

    Returns
    -------
    bool
        ``True`` once ``check`` succeeds, ``False`` on exhaustion when
        ``raises`` is ``False``.

    Raises
    ------
    WaitTimeout
        With the reason of the last failed attempt.

    Examples
    --------
    >>> calls = []
    >>> def third_time_lucky():
    ...     calls.append(1)
    ...     return len(calls) == 3, f"only {len(calls)} calls"
    >>> retry_until_ok(third_time_lucky, interval=0)
    True
    >>> len(calls)
    3

    >>> retry_until_ok(lambda: (False, "never"), interval=0, attempts=2)
    Traceback (most recent call last):
    ...
    tuiharness.exc.WaitTimeout: never

    >>> retry_until_ok(lambda: (False, "never"), interval=0, attempts=2, raises=False)
    False
    """
    if attempts < 1:
        msg = f"attempts must be at least 1, got {attempts}"
        raise ValueError(msg)

    reason = ""
    for attempt in range(1, attempts + 1):
        if attempt > 1:
            time.sleep(interval)
        ok, reason = check()
        if ok:
            return True
        logger.debug("attempt %d/%d failed: %s", attempt, attempts, reason)

    if raises:
        raise WaitTimeout(reason, attempts=attempts)
    return False
