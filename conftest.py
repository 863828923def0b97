"""Conftest.py (root-level).

We keep this in root pytest fixtures in pytest's doctest plugin to be available, as well
as avoiding conftest.py from being included in the wheel, in addition to pytester only
being available via the root directory.

See "pytest_plugins in non-top-level conftest files" in
https://docs.pytest.org/en/stable/deprecations.html
"""

from __future__ import annotations

import logging
import typing as t

import pytest
from _pytest.doctest import DoctestItem

from tuiharness.matcher import contains
from tuiharness.testing import FakeGui, FakeListView

if t.TYPE_CHECKING:
    from tuiharness.scenario import Harness

pytest_plugins = ["pytester"]


@pytest.fixture(autouse=True)
def add_doctest_fixtures(
    request: pytest.FixtureRequest,
    doctest_namespace: dict[str, t.Any],
) -> None:
    """Configure doctest fixtures for pytest-doctest.

    Doctests see a :class:`~tuiharness.testing.FakeGui` focused on a commits
    list of five commits, newest first, and a harness driving it.
    """
    if isinstance(request._pyfuncitem, DoctestItem):
        gui: FakeGui = request.getfixturevalue("fake_gui")
        gui.add_view(
            FakeListView("commits", lines=[f"commit 0{n}" for n in range(5, 0, -1)]),
        )
        harness: Harness = request.getfixturevalue("harness")
        doctest_namespace["gui"] = gui
        doctest_namespace["harness"] = harness
        doctest_namespace["contains"] = contains


@pytest.fixture(autouse=True)
def debug_logging(caplog: pytest.LogCaptureFixture) -> None:
    """Capture tuiharness debug logs so failing tests show the poll history."""
    caplog.set_level(logging.DEBUG, logger="tuiharness")
