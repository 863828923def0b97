"""Polling and key press policy shared by a harness."""

from __future__ import annotations

import dataclasses

from tuiharness.constants import KEY_DELAY_MS, RETRY_ATTEMPTS, RETRY_INTERVAL_SECONDS


@dataclasses.dataclass(frozen=True)
class HarnessConfig:
    """Settle delay and retry budget.

    One config is shared by every :class:`~tuiharness.assertions.Assert` and
    :class:`~tuiharness.input.Input` of a harness; individual actions never
    override it.

    Attributes
    ----------
    key_delay_ms : int
        Milliseconds to sleep before every key press.
    retry_interval : float
        Seconds between poll attempts.
    retry_attempts : int
        Poll attempts before a condition is declared failed.

    Examples
    --------
    >>> config = HarnessConfig(key_delay_ms=0, retry_interval=0.01, retry_attempts=5)
    >>> config.max_wait
    0.05
    >>> HarnessConfig(retry_attempts=0)
    Traceback (most recent call last):
    ...
    ValueError: retry_attempts must be at least 1, got 0
    """

    key_delay_ms: int = KEY_DELAY_MS
    retry_interval: float = RETRY_INTERVAL_SECONDS
    retry_attempts: int = RETRY_ATTEMPTS

    def __post_init__(self) -> None:
        if self.key_delay_ms < 0:
            msg = f"key_delay_ms must not be negative, got {self.key_delay_ms}"
            raise ValueError(msg)
        if self.retry_interval < 0:
            msg = f"retry_interval must not be negative, got {self.retry_interval}"
            raise ValueError(msg)
        if self.retry_attempts < 1:
            msg = f"retry_attempts must be at least 1, got {self.retry_attempts}"
            raise ValueError(msg)

    @property
    def max_wait(self) -> float:
        """Worst-case seconds spent polling a single condition."""
        return round(self.retry_interval * self.retry_attempts, 6)
