"""Tests for tuiharness.input."""

from __future__ import annotations

import logging
import time

import pytest

from tuiharness import exc
from tuiharness.config import HarnessConfig
from tuiharness.constants import WINDOW_ORDER
from tuiharness.keybindings import KeybindingConfig
from tuiharness.matcher import contains, equals
from tuiharness.scenario import Harness
from tuiharness.testing import FakeGui, FakeListView, FakeView
from tuiharness.types import ContextKind


@pytest.fixture
def windows(fake_gui: FakeGui) -> dict[str, FakeListView]:
    """One list view per side window, status focused."""
    views: dict[str, FakeListView] = {}
    for name in WINDOW_ORDER:
        views[name] = FakeListView(name, lines=[f"{name} item"])
        fake_gui.add_view(views[name])
    return views


def test_press_waits_settle_delay_before_each_key(
    harness_config: HarnessConfig,
) -> None:
    """Presses never fire faster than the configured settle delay."""
    delay_ms = 30
    gui = FakeGui()
    gui.add_view(FakeView("status"))
    config = HarnessConfig(
        key_delay_ms=delay_ms,
        retry_interval=harness_config.retry_interval,
        retry_attempts=harness_config.retry_attempts,
    )
    harness = Harness(gui, config=config)

    start = time.monotonic()
    harness.input.press("a", "b", "c")

    assert gui.pressed == ["a", "b", "c"]
    stamps = [start, *gui.press_times]
    gaps = [after - before for before, after in zip(stamps, stamps[1:])]
    assert all(gap >= delay_ms / 1000 * 0.95 for gap in gaps), gaps


def test_type_presses_each_character(harness: Harness, fake_gui: FakeGui) -> None:
    """Typing is one key press per character."""
    fake_gui.add_view(FakeView("status"))
    harness.input.type("fix")
    assert fake_gui.pressed == ["f", "i", "x"]


def test_universal_actions_use_keybindings(
    fake_gui: FakeGui,
    harness_config: HarnessConfig,
) -> None:
    """Symbolic actions resolve through the keybinding table."""
    keys = KeybindingConfig.from_mapping(
        {
            "universal": {
                "nextItem": "j",
                "prevItem": "k",
                "confirm": "y",
                "return": "n",
            },
        },
    )
    fake_gui.add_view(FakeView("status"))
    harness = Harness(fake_gui, keys=keys, config=harness_config)
    harness.input.next_item()
    harness.input.previous_item()
    harness.input.confirm()
    harness.input.enter()
    harness.input.cancel()
    harness.input.primary_action()
    harness.input.press_action("commits.squashDown")
    assert fake_gui.pressed == ["j", "k", "y", "y", "n", "<space>", "s"]


def test_press_action_unknown(harness: Harness) -> None:
    """Unknown symbolic actions fail before any key is sent."""
    with pytest.raises(exc.UnknownKeybinding):
        harness.input.press_action("universal.teleport")


@pytest.mark.parametrize(
    ("method", "window", "key"),
    [
        ("switch_to_status_window", "status", "1"),
        ("switch_to_files_window", "files", "2"),
        ("switch_to_branches_window", "localBranches", "3"),
        ("switch_to_commits_window", "commits", "4"),
        ("switch_to_stash_window", "stash", "5"),
    ],
)
def test_switch_window(
    method: str,
    window: str,
    key: str,
    harness: Harness,
    fake_gui: FakeGui,
    windows: dict[str, FakeListView],
) -> None:
    """Each window switch presses its jump key and checks the focus."""
    getattr(harness.input, method)()
    assert fake_gui.pressed == [key]
    assert fake_gui.current_context().window_name == window


def test_switch_window_not_reached(harness: Harness, fake_gui: FakeGui) -> None:
    """A jump the application ignores fails on the window check."""
    fake_gui.add_view(FakeListView("status"))
    with pytest.raises(exc.WaitTimeout, match="Expected current window to be 'stash'"):
        harness.input.switch_to_stash_window()


def test_switch_unknown_window(harness: Harness) -> None:
    """Only the fixed side windows can be jumped to."""
    with pytest.raises(ValueError, match="Unknown window 'reflog'"):
        harness.input.switch_to_window("reflog")


def confirmation(title: str, text: str) -> FakeView:
    """Return a non-editable confirmation popup."""
    return FakeView("confirmation", kind=ContextKind.CONFIRMATION, title=title, text=text)


def test_accept_confirmation(harness: Harness, fake_gui: FakeGui) -> None:
    """Accepting checks title and content, then confirms."""
    fake_gui.add_view(FakeListView("commits", ["commit 01"]))
    fake_gui.show_popup(confirmation("Drop commit", "Are you sure?"))
    harness.input.accept_confirmation(equals("Drop commit"), contains("sure"))
    assert fake_gui.pressed == ["<enter>"]
    assert fake_gui.resolved == [("confirmation", "confirm", "Are you sure?")]


def test_deny_confirmation(harness: Harness, fake_gui: FakeGui) -> None:
    """Denying checks title and content, then cancels."""
    fake_gui.add_view(FakeListView("commits", ["commit 01"]))
    fake_gui.show_popup(confirmation("Drop commit", "Are you sure?"))
    harness.input.deny_confirmation(equals("Drop commit"), contains("sure"))
    assert fake_gui.pressed == ["<esc>"]
    assert fake_gui.resolved == [("confirmation", "cancel", "Are you sure?")]


def test_confirmation_with_wrong_title(harness: Harness, fake_gui: FakeGui) -> None:
    """A mismatching title aborts before any key is pressed."""
    fake_gui.add_view(FakeListView("commits", ["commit 01"]))
    fake_gui.show_popup(confirmation("Discard changes", "Are you sure?"))
    with pytest.raises(exc.WaitTimeout, match="Unexpected view title"):
        harness.input.accept_confirmation(equals("Drop commit"), contains("sure"))
    assert fake_gui.pressed == []


def test_confirmation_in_wrong_context(harness: Harness, fake_gui: FakeGui) -> None:
    """Running a confirmation flow without a confirmation is a precondition failure."""
    fake_gui.add_view(FakeListView("commits", ["commit 01"]))
    with pytest.raises(exc.PreconditionViolation, match="confirmation context"):
        harness.input.accept_confirmation(equals("Drop commit"), contains("sure"))
    assert fake_gui.pressed == []


def test_alert(harness: Harness, fake_gui: FakeGui) -> None:
    """Alerts are dismissed with confirm after checking title and content."""
    fake_gui.add_view(FakeListView("commits", ["commit 01"]))
    fake_gui.show_popup(confirmation("Error", "Nothing to squash"))
    harness.input.alert(equals("Error"), contains("Nothing to squash"))
    assert fake_gui.resolved == [("confirmation", "confirm", "Nothing to squash")]


def test_prompt(harness: Harness, fake_gui: FakeGui) -> None:
    """Prompts are answered by typing then confirming."""
    fake_gui.add_view(FakeListView("localBranches", ["master"]))
    fake_gui.show_popup(
        FakeView("confirmation", kind=ContextKind.PROMPT, title="New branch name"),
    )
    harness.input.prompt(contains("branch name"), "feature")
    assert fake_gui.pressed == [*"feature", "<enter>"]
    assert fake_gui.resolved == [("confirmation", "confirm", "feature")]


def test_prompt_in_confirmation(harness: Harness, fake_gui: FakeGui) -> None:
    """A non-editable popup is not a prompt."""
    fake_gui.add_view(FakeListView("commits", ["commit 01"]))
    fake_gui.show_popup(confirmation("New branch name", ""))
    with pytest.raises(exc.PreconditionViolation, match="prompt context"):
        harness.input.prompt(contains("branch name"), "feature")


def test_typeahead(harness: Harness, fake_gui: FakeGui) -> None:
    """Typeahead types, moves to the suggestions and picks the first."""
    fake_gui.add_view(FakeListView("localBranches", ["master"]))
    suggestions = FakeListView("suggestions", ["origin/feature", "origin/fix"])
    fake_gui.show_popup(
        FakeView(
            "confirmation",
            kind=ContextKind.PROMPT,
            title="Checkout branch",
            suggestions=suggestions,
        ),
    )
    harness.input.typeahead(equals("Checkout branch"), "origin/f", contains("feature"))
    assert fake_gui.pressed == [*"origin/f", "<tab>", "<enter>"]
    assert fake_gui.resolved == [("confirmation", "confirm", "origin/feature")]
    assert fake_gui.current_context().name == "localBranches"


def test_menu(harness: Harness, fake_gui: FakeGui) -> None:
    """Menus are navigated to the option, then confirmed."""
    fake_gui.add_view(FakeListView("commits", ["commit 01"]))
    fake_gui.show_popup(
        FakeListView(
            "menu",
            ["continue", "abort", "skip"],
            kind=ContextKind.MENU,
            title="Rebase options",
        ),
    )
    harness.input.menu(equals("Rebase options"), contains("abort"))
    assert fake_gui.pressed == ["<down>", "<enter>"]
    assert fake_gui.resolved == [("menu", "confirm", "abort")]


def test_menu_with_ambiguous_option(harness: Harness, fake_gui: FakeGui) -> None:
    """Menu options must match exactly one row."""
    fake_gui.add_view(FakeListView("commits", ["commit 01"]))
    fake_gui.show_popup(
        FakeListView("menu", ["reset soft", "reset hard"], kind=ContextKind.MENU),
    )
    with pytest.raises(exc.WaitTimeout, match="Found 2 matches for `contains 'reset'`"):
        harness.input.menu(equals(""), contains("reset"))
    assert fake_gui.pressed == []


def test_continue_rebase(harness: Harness, fake_gui: FakeGui) -> None:
    """Continuing opens the rebase options menu and confirms 'continue'."""
    continued: list[str] = []
    fake_gui.add_view(FakeListView("commits", ["commit 01"]))
    fake_gui.bind(
        "m",
        lambda gui: gui.show_popup(
            FakeListView(
                "menu",
                ["continue", "abort"],
                kind=ContextKind.MENU,
                on_confirm=lambda gui, option: continued.append(option),
            ),
        ),
    )
    harness.input.continue_rebase()
    assert fake_gui.pressed == ["m", "<enter>"]
    assert continued == ["continue"]


def test_wait(harness: Harness) -> None:
    """Waiting blocks for the given milliseconds."""
    start = time.monotonic()
    harness.input.wait(20)
    assert time.monotonic() - start >= 0.019


def test_logging(
    harness: Harness,
    fake_gui: FakeGui,
    caplog: pytest.LogCaptureFixture,
) -> None:
    """log goes to the harness logger, log_ui to the driver."""
    with caplog.at_level(logging.INFO, logger="tuiharness"):
        harness.input.log("starting rebase")
    harness.input.log_ui("visible in the app log")
    assert "starting rebase" in caplog.text
    assert fake_gui.logs == ["visible in the app log"]


def test_prompt_takes_navigation_keys_as_text(harness_config: HarnessConfig) -> None:
    """Characters bound to list navigation are still typed into a prompt."""
    keys = KeybindingConfig.from_mapping(
        {"universal": {"nextItem": "j", "prevItem": "k"}},
    )
    gui = FakeGui(keys)
    gui.add_view(FakeListView("localBranches", ["master", "develop"]))
    gui.show_popup(
        FakeView("confirmation", kind=ContextKind.PROMPT, title="New branch name"),
    )
    harness = Harness(gui, keys=keys, config=harness_config)
    harness.input.prompt(contains("branch"), "jk-fix")
    assert gui.resolved == [("confirmation", "confirm", "jk-fix")]
    assert gui.views["localBranches"].selected_index == 0
