"""Process-wide defaults for tuiharness.

Each value can be overridden through an environment variable, read once at
import time.
"""

from __future__ import annotations

import os

#: Milliseconds to sleep before every simulated key press
#: Can be configured via :envvar:`TUIHARNESS_KEY_DELAY_MS` environment variable
#: Defaults to 10 milliseconds
KEY_DELAY_MS = int(os.getenv("TUIHARNESS_KEY_DELAY_MS", 10))

#: Interval in seconds between poll attempts
#: Can be configured via :envvar:`TUIHARNESS_RETRY_INTERVAL_SECONDS`
#: Defaults to 0.05 seconds (50ms)
RETRY_INTERVAL_SECONDS = float(os.getenv("TUIHARNESS_RETRY_INTERVAL_SECONDS", 0.05))

#: Maximum number of poll attempts before a condition is declared failed
#: Can be configured via :envvar:`TUIHARNESS_RETRY_ATTEMPTS` environment variable
#: Defaults to 100 attempts (5 seconds at the default interval)
RETRY_ATTEMPTS = int(os.getenv("TUIHARNESS_RETRY_ATTEMPTS", 100))

#: Names of the side windows in the order of the "jump to block" keybindings
WINDOW_ORDER: tuple[str, ...] = (
    "status",
    "files",
    "localBranches",
    "commits",
    "stash",
)

#: View name of the suggestions list shown beneath a typeahead prompt
SUGGESTIONS_VIEW_NAME = "suggestions"
