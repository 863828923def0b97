"""Wire a driver, keybindings and policy into a runnable harness."""

from __future__ import annotations

import dataclasses
import logging
import typing as t

from tuiharness.assertions import Assert
from tuiharness.config import HarnessConfig
from tuiharness.input import Input
from tuiharness.keybindings import KeybindingConfig

if t.TYPE_CHECKING:
    from collections.abc import Callable

    from tuiharness.types import GuiDriver

logger = logging.getLogger(__name__)


class Harness:
    """An :class:`~tuiharness.input.Input` and :class:`~tuiharness.assertions.Assert`
    sharing one driver, keybinding table and config.

    Examples
    --------
    >>> from tuiharness.testing import FakeGui, FakeListView
    >>> gui = FakeGui()
    >>> commits = gui.add_view(FakeListView("commits", lines=["commit 02", "commit 01"]))
    >>> harness = Harness(gui, config=HarnessConfig(key_delay_ms=0))
    >>> harness.assert_.selected_line_idx(0)
    """

    def __init__(
        self,
        gui: GuiDriver,
        keys: KeybindingConfig | None = None,
        config: HarnessConfig | None = None,
    ) -> None:
        self.gui = gui
        self.keys = keys if keys is not None else KeybindingConfig()
        self.config = config if config is not None else HarnessConfig()
        self.assert_ = Assert(gui, self.config)
        self.input = Input(gui, self.keys, self.assert_, self.config)


@dataclasses.dataclass(frozen=True)
class Scenario:
    """A scripted end-to-end scenario.

    Parameters
    ----------
    description : str
        What the scenario exercises.
    run : callable
        ``run(input, assert_, keys)``, the scripted steps.
    skip : bool
        Skip the scenario without touching the driver.
    setup : callable, optional
        ``setup(gui)``, called before ``run``.
    """

    description: str
    run: Callable[[Input, Assert, KeybindingConfig], None]
    skip: bool = False
    setup: Callable[[GuiDriver], None] | None = None

    def run_with(
        self,
        gui: GuiDriver,
        keys: KeybindingConfig | None = None,
        config: HarnessConfig | None = None,
    ) -> Harness | None:
        """Run against ``gui``, returning the harness used (``None`` if skipped)."""
        if self.skip:
            logger.info("skipping scenario: %s", self.description)
            return None
        harness = Harness(gui, keys=keys, config=config)
        if self.setup is not None:
            self.setup(gui)
        logger.info("running scenario: %s", self.description)
        self.run(harness.input, harness.assert_, harness.keys)
        logger.info("scenario passed: %s", self.description)
        return harness
