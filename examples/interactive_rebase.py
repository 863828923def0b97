#!/usr/bin/env python
"""Interactive rebase scenario against a simulated git client.

Begins an interactive rebase, then fixups, drops and squashes some commits.
The application is a :class:`~tuiharness.testing.FakeGui` scripted to behave
like the commits panel of a git TUI, with a redraw lag so every assertion has
to poll.
"""

from __future__ import annotations

import dataclasses
import logging

from tuiharness.config import HarnessConfig
from tuiharness.matcher import contains
from tuiharness.scenario import Scenario
from tuiharness.testing import FakeGui, FakeListView, FakeView
from tuiharness.types import ContextKind

logger = logging.getLogger(__name__)


@dataclasses.dataclass
class Commit:
    name: str
    action: str | None = None


class RebaseApp:
    """Commits panel supporting edit, fixup, drop, squash and continue."""

    def __init__(self, gui: FakeGui, count: int) -> None:
        self.gui = gui
        self.commits = [Commit(f"commit {n:02}") for n in range(count, 0, -1)]
        self.here: int | None = None
        self.view = FakeListView("commits")
        self.render()

        keys = gui.keys
        gui.add_view(FakeView("status", text="On branch master"))
        gui.add_view(self.view)
        gui.bind(keys.universal.edit, self.edit)
        gui.bind(keys.commits.mark_commit_as_fixup, self.mark("fixup"))
        gui.bind(keys.universal.remove, self.mark("drop"))
        gui.bind(keys.commits.squash_down, self.mark("squash"))
        gui.bind(keys.universal.create_rebase_options_menu, self.options_menu)

    def render(self) -> None:
        lines = []
        for index, commit in enumerate(self.commits):
            if index == self.here:
                lines.append(f"{commit.name} <-- YOU ARE HERE")
            elif commit.action is not None:
                lines.append(f"{commit.action} {commit.name}")
            else:
                lines.append(commit.name)
        self.view.set_lines(lines)

    def edit(self, gui: FakeGui) -> None:
        self.here = self.view.selected_index
        for commit in self.commits[: self.here]:
            commit.action = "pick"
        self.render()

    def mark(self, action: str):
        def handler(gui: FakeGui) -> None:
            index = self.view.selected_index
            if self.here is not None and index < self.here:
                self.commits[index].action = action
                self.render()

        return handler

    def options_menu(self, gui: FakeGui) -> None:
        gui.show_popup(
            FakeListView(
                "menu",
                ["continue", "abort", "skip"],
                kind=ContextKind.MENU,
                title="Rebase options",
                on_confirm=self.resolve,
            ),
        )

    def resolve(self, gui: FakeGui, option: str) -> None:
        if option == "continue":
            kept: list[Commit] = []
            # oldest first, so fixups and squashes fold into the commit below
            for commit in reversed(self.commits):
                if commit.action == "drop":
                    continue
                if commit.action in ("fixup", "squash") and kept:
                    continue
                kept.append(Commit(commit.name))
            self.commits = list(reversed(kept))
        elif option == "abort":
            for commit in self.commits:
                commit.action = None
        self.here = None
        self.render()


def run(input, assert_, keys) -> None:
    input.switch_to_commits_window()
    assert_.current_view_name("commits")

    input.navigate_to_list_item(contains("commit 02"))
    input.press(keys.universal.edit)
    assert_.selected_line(contains("YOU ARE HERE"))

    input.previous_item()
    input.press(keys.commits.mark_commit_as_fixup)
    assert_.selected_line(contains("fixup"))

    input.previous_item()
    input.press(keys.universal.remove)
    assert_.selected_line(contains("drop"))

    input.previous_item()
    input.press(keys.commits.squash_down)
    assert_.selected_line(contains("squash"))

    input.continue_rebase()

    assert_.view_line_count(2)


interactive_rebase = Scenario(
    description="Begins an interactive rebase, then fixups, drops, and squashes some commits",
    run=run,
    setup=lambda gui: RebaseApp(gui, count=5),
)


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    gui = FakeGui(lag_reads=2)
    interactive_rebase.run_with(
        gui,
        config=HarnessConfig(key_delay_ms=1, retry_interval=0.01, retry_attempts=50),
    )
    print("pressed:", " ".join(gui.pressed))
    print("commits:", ", ".join(gui.views["commits"].content.splitlines()))


if __name__ == "__main__":
    main()
