"""Interfaces between the harness and the application under test.

The harness never sees the application's data structures, only what a
:class:`GuiDriver` exposes: key injection, the focused :class:`Context`, and a
diagnostic log channel.
"""

from __future__ import annotations

import dataclasses
import enum
import typing as t


class ContextKind(enum.Enum):
    """Kind of the currently focused region.

    >>> ContextKind.MENU.value
    'menu'
    """

    LIST = "list"
    CONFIRMATION = "confirmation"
    PROMPT = "prompt"
    MENU = "menu"
    OTHER = "other"

    def __str__(self) -> str:
        return self.value


@dataclasses.dataclass(frozen=True)
class ListSnapshot:
    """Visible lines of a list view and its selection, read in one instant.

    Examples
    --------
    >>> snap = ListSnapshot(("commit 02", "commit 01"), selected_index=1)
    >>> snap.selected_line
    'commit 01'
    >>> ListSnapshot((), selected_index=-1).selected_line is None
    True
    """

    lines: tuple[str, ...]
    selected_index: int

    @property
    def selected_line(self) -> str | None:
        """Return the selected line, ``None`` if nothing is selected."""
        if 0 <= self.selected_index < len(self.lines):
            return self.lines[self.selected_index]
        return None


@t.runtime_checkable
class Context(t.Protocol):
    """A focused region of the application."""

    @property
    def name(self) -> str:
        """View name, e.g. ``"commits"`` or ``"confirmation"``."""

    @property
    def window_name(self) -> str:
        """Name of the window the view lives in."""

    @property
    def kind(self) -> ContextKind:
        """Kind of region."""

    @property
    def title(self) -> str:
        """Rendered title."""

    @property
    def content(self) -> str:
        """Rendered body text."""


@t.runtime_checkable
class ListContext(Context, t.Protocol):
    """A list-shaped region.

    Lines and selection are only available together, through
    :meth:`snapshot`, so the two can never come from different renders.
    """

    def snapshot(self) -> ListSnapshot:
        """Return the visible lines and selected index of the current render."""


class GuiDriver(t.Protocol):
    """Capability the harness drives the application through."""

    def press_key(self, key: str) -> None:
        """Inject one key event."""

    def current_context(self) -> Context:
        """Return the currently focused region."""

    def log(self, message: str) -> None:
        """Write to the out-of-band diagnostic channel."""
