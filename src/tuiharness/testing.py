"""Scriptable in-memory UI driver for tests and examples.

:class:`FakeGui` implements :class:`~tuiharness.types.GuiDriver` over plain
Python objects. It understands the default keybindings well enough to move
list selections, focus windows, type into prompts and resolve popups, and can
simulate redraw latency.

Examples
--------
>>> gui = FakeGui()
>>> commits = gui.add_view(FakeListView("commits", lines=["commit 02", "commit 01"]))
>>> gui.press_key("<down>")
>>> gui.current_context().snapshot()
ListSnapshot(lines=('commit 02', 'commit 01'), selected_index=1)
>>> gui.show_popup(FakeView("confirmation", kind=ContextKind.CONFIRMATION, title="Drop?"))
>>> gui.press_key("<enter>")
>>> gui.resolved
[('confirmation', 'confirm', '')]
>>> gui.current_context().name
'commits'
"""

from __future__ import annotations

import logging
import time
import typing as t

from tuiharness.constants import SUGGESTIONS_VIEW_NAME, WINDOW_ORDER
from tuiharness.keybindings import KeybindingConfig
from tuiharness.types import ContextKind, ListSnapshot

if t.TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Sequence

    Handler = Callable[["FakeGui"], None]
    ConfirmHook = Callable[["FakeGui", str], None]

logger = logging.getLogger(__name__)


class FakeView:
    """A focusable region that is not a list (confirmation, prompt, ...).

    Parameters
    ----------
    name : str
        View name.
    kind : ContextKind
        Defaults to :attr:`ContextKind.OTHER`.
    window_name : str, optional
        Defaults to ``name``.
    title, text : str
        Rendered title and body. A prompt's ``text`` grows as keys are typed.
    suggestions : FakeListView, optional
        Suggestions list a prompt's toggle-panel key moves to.
    on_confirm : callable, optional
        ``on_confirm(gui, detail)`` run when the popup is confirmed.
    """

    def __init__(
        self,
        name: str,
        *,
        kind: ContextKind = ContextKind.OTHER,
        window_name: str | None = None,
        title: str = "",
        text: str = "",
        suggestions: FakeListView | None = None,
        on_confirm: ConfirmHook | None = None,
    ) -> None:
        self.name = name
        self.kind = kind
        self.window_name = window_name if window_name is not None else name
        self._title = title
        self.text = text
        self.suggestions = suggestions
        self.on_confirm = on_confirm
        self.gui: FakeGui | None = None

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.name!r}, kind={self.kind!s})"

    def _tick(self) -> None:
        if self.gui is not None:
            self.gui._tick()

    @property
    def title(self) -> str:
        self._tick()
        return self._title

    @title.setter
    def title(self, value: str) -> None:
        self._title = value

    @property
    def content(self) -> str:
        self._tick()
        return self.text

    @property
    def detail(self) -> str:
        """What confirming this view submits."""
        return self.text


class FakeListView(FakeView):
    """A list-shaped view.

    Parameters
    ----------
    lines : iterable of str
        Rendered rows, top first.
    selected_index : int
        Initially selected row.
    loading_reads : int
        Number of initial snapshots that render an empty list.
    """

    def __init__(
        self,
        name: str,
        lines: Iterable[str] = (),
        *,
        kind: ContextKind = ContextKind.LIST,
        window_name: str | None = None,
        title: str = "",
        selected_index: int = 0,
        loading_reads: int = 0,
        on_confirm: ConfirmHook | None = None,
    ) -> None:
        super().__init__(
            name,
            kind=kind,
            window_name=window_name,
            title=title,
            on_confirm=on_confirm,
        )
        self.lines: list[str] = list(lines)
        self.selected_index = selected_index
        self.loading_reads = loading_reads
        self.snapshot_count = 0

    def snapshot(self) -> ListSnapshot:
        self._tick()
        self.snapshot_count += 1
        if self.loading_reads > 0:
            self.loading_reads -= 1
            return ListSnapshot((), -1)
        if not self.lines:
            return ListSnapshot((), -1)
        return ListSnapshot(tuple(self.lines), self.selected_index)

    @property
    def content(self) -> str:
        self._tick()
        return "\n".join(self.lines)

    @property
    def selected_line(self) -> str | None:
        if 0 <= self.selected_index < len(self.lines):
            return self.lines[self.selected_index]
        return None

    @property
    def detail(self) -> str:
        return self.selected_line or ""

    def move(self, delta: int) -> None:
        """Move the selection, clamped to the list bounds."""
        if not self.lines:
            return
        self.selected_index = max(0, min(len(self.lines) - 1, self.selected_index + delta))

    def set_lines(self, lines: Sequence[str], selected_index: int | None = None) -> None:
        """Replace the rows, keeping the selection within bounds."""
        self.lines = list(lines)
        if selected_index is not None:
            self.selected_index = selected_index
        self.move(0)


class FakeGui:
    """In-memory :class:`~tuiharness.types.GuiDriver`.

    Parameters
    ----------
    keys : KeybindingConfig, optional
        Bindings the default key handling follows.
    windows : sequence of str
        Window names in "jump to block" order.
    lag_reads : int
        Reads of UI state that pass before pressed keys take effect. ``0``
        applies every key immediately.

    Attributes
    ----------
    pressed : list of str
        Every key received, in order.
    press_times : list of float
        :func:`time.monotonic` timestamp of each received key.
    resolved : list of tuple
        ``(view name, "confirm" | "cancel", detail)`` per closed popup.
    logs : list of str
        Messages sent to :meth:`log`.
    """

    def __init__(
        self,
        keys: KeybindingConfig | None = None,
        *,
        windows: Sequence[str] = WINDOW_ORDER,
        lag_reads: int = 0,
    ) -> None:
        self.keys = keys if keys is not None else KeybindingConfig()
        self.windows = tuple(windows)
        self.lag_reads = lag_reads
        self.views: dict[str, FakeView] = {}
        self.popups: list[FakeView] = []
        self.focused: str | None = None
        self.handlers: dict[str, Handler] = {}
        self.pressed: list[str] = []
        self.press_times: list[float] = []
        self.resolved: list[tuple[str, str, str]] = []
        self.logs: list[str] = []
        self._pending: list[str] = []
        self._reads_left = 0

    # setup

    def add_view(self, view: FakeView, *, focus: bool = False) -> FakeView:
        """Register a side view; the first one added is focused."""
        view.gui = self
        self.views[view.name] = view
        if focus or self.focused is None:
            self.focused = view.name
        return view

    def focus(self, name: str) -> None:
        self.focused = self.views[name].name

    def show_popup(self, view: FakeView) -> None:
        """Open ``view`` above everything else."""
        view.gui = self
        self.popups.append(view)

    def close_popup(self) -> FakeView:
        return self.popups.pop()

    def bind(self, key: str, handler: Handler) -> None:
        """Replace the default handling of ``key``."""
        self.handlers[key] = handler

    @property
    def focused_view(self) -> FakeView:
        """Focused view, without advancing simulated time."""
        if self.popups:
            return self.popups[-1]
        if self.focused is None:
            msg = "FakeGui has no views"
            raise LookupError(msg)
        return self.views[self.focused]

    # GuiDriver

    def press_key(self, key: str) -> None:
        self.pressed.append(key)
        self.press_times.append(time.monotonic())
        if self.lag_reads:
            self._pending.append(key)
            self._reads_left = self.lag_reads
        else:
            self._apply(key)

    def current_context(self) -> FakeView:
        self._tick()
        return self.focused_view

    def log(self, message: str) -> None:
        self.logs.append(message)

    # simulation

    def _tick(self) -> None:
        if not self._pending:
            return
        self._reads_left -= 1
        if self._reads_left <= 0:
            pending, self._pending = self._pending, []
            for key in pending:
                self._apply(key)

    def _apply(self, key: str) -> None:
        handler = self.handlers.get(key)
        if handler is not None:
            handler(self)
            return

        if not self.popups and self.focused is None:
            logger.debug("ignoring key %s, no view is focused", key)
            return

        universal = self.keys.universal
        view = self.focused_view
        if self.popups and view.kind is ContextKind.PROMPT:
            # prompts take every key, including ones bound to navigation
            self._apply_popup(key, view)
        elif key in (universal.next_item, universal.prev_item):
            if isinstance(view, FakeListView):
                view.move(1 if key == universal.next_item else -1)
        elif self.popups:
            self._apply_popup(key, view)
        elif key in universal.jump_to_block:
            self._jump(universal.jump_to_block.index(key))
        else:
            logger.debug("ignoring key %s in %s", key, view.name)

    def _apply_popup(self, key: str, view: FakeView) -> None:
        universal = self.keys.universal
        if key == universal.confirm:
            self.close_popup()
            detail = view.detail
            if view.name == SUGGESTIONS_VIEW_NAME and self.popups:
                # picking a suggestion submits the prompt underneath
                view = self.close_popup()
            self.resolved.append((view.name, "confirm", detail))
            if view.on_confirm is not None:
                view.on_confirm(self, detail)
        elif key == universal.return_:
            self.close_popup()
            self.resolved.append((view.name, "cancel", view.detail))
        elif view.kind is ContextKind.PROMPT:
            if key == universal.toggle_panel:
                if view.suggestions is not None:
                    self.show_popup(view.suggestions)
            elif key == "<backspace>":
                view.text = view.text[:-1]
            elif len(key) == 1:
                view.text += key
        else:
            logger.debug("ignoring key %s in popup %s", key, view.name)

    def _jump(self, index: int) -> None:
        if index >= len(self.windows):
            return
        window = self.windows[index]
        for view in self.views.values():
            if view.window_name == window:
                self.focused = view.name
                return
        logger.debug("no view in window %s", window)
