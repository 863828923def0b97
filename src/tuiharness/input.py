"""Scenario-level input vocabulary.

:class:`Input` turns intents ("confirm", "switch to the commits window",
"navigate to the item containing X") into key presses resolved through the
keybinding table. Every key press is preceded by the configured settle delay.

Composite flows (:meth:`Input.accept_confirmation`, :meth:`Input.menu`, ...)
check that the expected popup is showing before acting. A popup of the wrong
kind fails at once; titles, content and selections are polled.

Examples
--------
>>> harness.input.navigate_to_list_item(contains("commit 02"))
>>> gui.pressed
['<down>', '<down>', '<down>']
>>> harness.input.navigate_to_list_item(contains("commit 05"))
>>> gui.pressed[3:]
['<up>', '<up>', '<up>']
"""

from __future__ import annotations

import logging
import time
import typing as t

from tuiharness.config import HarnessConfig
from tuiharness.constants import SUGGESTIONS_VIEW_NAME, WINDOW_ORDER
from tuiharness.matcher import contains
from tuiharness.navigator import ListNavigator

if t.TYPE_CHECKING:
    from tuiharness.assertions import Assert
    from tuiharness.keybindings import KeybindingConfig
    from tuiharness.matcher import Matcher
    from tuiharness.types import GuiDriver

logger = logging.getLogger(__name__)


class Input:
    """Send intents to the application under test.

    Parameters
    ----------
    gui : GuiDriver
        Driver of the application under test.
    keys : KeybindingConfig
        Keybinding table used to resolve symbolic actions.
    asserter : Assert
        Assertions used for post-conditions and flow preconditions.
    config : HarnessConfig, optional
        Settle delay. Defaults to ``asserter.config``.
    """

    def __init__(
        self,
        gui: GuiDriver,
        keys: KeybindingConfig,
        asserter: Assert,
        config: HarnessConfig | None = None,
    ) -> None:
        self.gui = gui
        self.keys = keys
        self.asserter = asserter
        self.config = config if config is not None else asserter.config
        self.navigator = ListNavigator(asserter, keys, self._press)

    # raw input

    def press(self, *keys: str) -> None:
        """Press literal keys, e.g. ``"w"`` or ``"<space>"``.

        Prefer keys from the keybinding table over literals so scenarios keep
        working when bindings change.
        """
        for key in keys:
            self._press(key)

    def _press(self, key: str) -> None:
        self.wait(self.config.key_delay_ms)
        logger.debug("pressing %s", key)
        self.gui.press_key(key)

    def press_action(self, action: str) -> None:
        """Press the key bound to a symbolic action such as ``"universal.edit"``."""
        self._press(self.keys.resolve(action))

    def type(self, content: str) -> None:
        """Press one key per character of ``content``."""
        for char in content:
            self._press(char)

    def wait(self, milliseconds: int) -> None:
        """Give the application time to process something before continuing."""
        if milliseconds > 0:
            time.sleep(milliseconds / 1000)

    def log(self, message: str) -> None:
        """Write to the harness log."""
        logger.info(message)

    def log_ui(self, message: str) -> None:
        """Write to the application's diagnostic channel."""
        self.gui.log(message)

    # universal actions

    def confirm(self) -> None:
        """Press the confirm key (enter)."""
        self._press(self.keys.universal.confirm)

    def enter(self) -> None:
        """Same as :meth:`confirm`."""
        self.confirm()

    def cancel(self) -> None:
        """Press the return key (escape)."""
        self._press(self.keys.universal.return_)

    def primary_action(self) -> None:
        """Press the select key (space)."""
        self._press(self.keys.universal.select)

    def next_item(self) -> None:
        """Press the next item key (down arrow)."""
        self._press(self.keys.universal.next_item)

    def previous_item(self) -> None:
        """Press the previous item key (up arrow)."""
        self._press(self.keys.universal.prev_item)

    # windows

    def switch_to_window(self, name: str) -> None:
        """Jump to the side window ``name`` and wait until it is focused."""
        try:
            index = WINDOW_ORDER.index(name)
        except ValueError:
            msg = f"Unknown window {name!r}, expected one of {', '.join(WINDOW_ORDER)}"
            raise ValueError(msg) from None
        self._press(self.keys.universal.jump_to_block[index])
        self.asserter.current_window_name(name)

    def switch_to_status_window(self) -> None:
        self.switch_to_window("status")

    def switch_to_files_window(self) -> None:
        self.switch_to_window("files")

    def switch_to_branches_window(self) -> None:
        self.switch_to_window("localBranches")

    def switch_to_commits_window(self) -> None:
        self.switch_to_window("commits")

    def switch_to_stash_window(self) -> None:
        self.switch_to_window("stash")

    # lists

    def navigate_to_list_item(self, matcher: Matcher) -> None:
        """Move the selection of the focused list onto the row matching ``matcher``.

        Only the visible page of the list is searched; see
        :mod:`tuiharness.navigator`.
        """
        self.navigator.navigate_to(matcher)

    # flows

    def accept_confirmation(self, title: Matcher, content: Matcher) -> None:
        """Confirm the confirmation popup showing ``title`` and ``content``."""
        self.asserter.in_confirm()
        self.asserter.current_view_title(title)
        self.asserter.current_view_content(content)
        self.confirm()

    def deny_confirmation(self, title: Matcher, content: Matcher) -> None:
        """Cancel the confirmation popup showing ``title`` and ``content``."""
        self.asserter.in_confirm()
        self.asserter.current_view_title(title)
        self.asserter.current_view_content(content)
        self.cancel()

    def prompt(self, title: Matcher, text: str) -> None:
        """Answer the prompt titled ``title`` with ``text``."""
        self.asserter.in_prompt()
        self.asserter.current_view_title(title)
        self.type(text)
        self.confirm()

    def typeahead(self, title: Matcher, text: str, expected_first_option: Matcher) -> None:
        """Type into a prompt, then confirm the first suggestion.

        After typing, focus moves to the suggestions list, whose selected
        (first) item must match ``expected_first_option``.
        """
        self.asserter.in_prompt()
        self.asserter.current_view_title(title)
        self.type(text)
        self.press(self.keys.universal.toggle_panel)
        self.asserter.current_view_name(SUGGESTIONS_VIEW_NAME)
        self.asserter.selected_line(expected_first_option)
        self.confirm()

    def menu(self, title: Matcher, option: Matcher) -> None:
        """Pick ``option`` from the menu titled ``title``."""
        self.asserter.in_menu()
        self.asserter.current_view_title(title)
        self.navigate_to_list_item(option)
        self.confirm()

    def alert(self, title: Matcher, content: Matcher) -> None:
        """Dismiss the alert showing ``title`` and ``content``."""
        self.asserter.in_confirm()
        self.asserter.current_view_title(title)
        self.asserter.current_view_content(content)
        self.confirm()

    def continue_merge(self) -> None:
        """Continue an in-progress merge or rebase from the rebase options menu."""
        self.press(self.keys.universal.create_rebase_options_menu)
        self.asserter.selected_line(contains("continue"))
        self.confirm()

    def continue_rebase(self) -> None:
        """Same as :meth:`continue_merge`."""
        self.continue_merge()
