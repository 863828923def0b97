"""tuiharness pytest plugin.

Registered through the ``pytest11`` entry point, so the fixtures are available
to any project with tuiharness installed. Override :func:`gui` to run
scenarios against another driver, e.g. :class:`~tuiharness.tmux.TmuxGui`.
"""

from __future__ import annotations

import logging

import pytest

from tuiharness.config import HarnessConfig
from tuiharness.keybindings import KeybindingConfig
from tuiharness.scenario import Harness
from tuiharness.testing import FakeGui
from tuiharness.types import GuiDriver

logger = logging.getLogger(__name__)


@pytest.fixture
def harness_config() -> HarnessConfig:
    """Return a fast policy suited to in-memory drivers.

    No settle delay, 10ms between poll attempts, 20 attempts.
    """
    return HarnessConfig(key_delay_ms=0, retry_interval=0.01, retry_attempts=20)


@pytest.fixture
def keybindings() -> KeybindingConfig:
    """Return the default keybinding table."""
    return KeybindingConfig()


@pytest.fixture
def fake_gui(keybindings: KeybindingConfig) -> FakeGui:
    """Return an empty :class:`~tuiharness.testing.FakeGui`.

    >>> from tuiharness.testing import FakeListView

    >>> def test_example(fake_gui, harness):
    ...     fake_gui.add_view(FakeListView("files", lines=["a.txt", "b.txt"]))
    ...     harness.input.next_item()
    ...     harness.assert_.selected_line_idx(1)
    """
    return FakeGui(keybindings)


@pytest.fixture
def gui(fake_gui: FakeGui) -> GuiDriver:
    """Return the driver :func:`harness` runs against, ``fake_gui`` by default."""
    return fake_gui


@pytest.fixture
def harness(
    gui: GuiDriver,
    keybindings: KeybindingConfig,
    harness_config: HarnessConfig,
) -> Harness:
    """Return a :class:`~tuiharness.scenario.Harness` wired to :func:`gui`."""
    logger.debug("creating harness for %r", gui)
    return Harness(gui, keys=keybindings, config=harness_config)
