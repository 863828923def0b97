"""Drive a terminal application running in a tmux pane.

The application is treated as a single list-shaped view: every captured row
is a list line, and the selected row is the one starting with a marker
prefix. This fits applications that draw a cursor column, such as ``"> "``
in front of the current item.

Examples
--------
>>> to_tmux_key("<enter>")
'Enter'
>>> to_tmux_key("<c-r>")
'C-r'
>>> to_tmux_key("j") is None
True
"""

from __future__ import annotations

import logging
import re
import typing as t

from tuiharness.types import ContextKind, ListSnapshot

if t.TYPE_CHECKING:
    from libtmux.pane import Pane

logger = logging.getLogger(__name__)

#: Bracketed key names mapped to ``tmux send-keys`` key names
TMUX_KEY_NAMES: dict[str, str] = {
    "<enter>": "Enter",
    "<esc>": "Escape",
    "<tab>": "Tab",
    "<backtab>": "BTab",
    "<space>": "Space",
    "<backspace>": "BSpace",
    "<delete>": "DC",
    "<up>": "Up",
    "<down>": "Down",
    "<left>": "Left",
    "<right>": "Right",
    "<home>": "Home",
    "<end>": "End",
    "<pgup>": "PPage",
    "<pgdown>": "NPage",
}

_CHORD = re.compile(r"^<(?P<modifier>[ca])-(?P<key>.+)>$")
_FUNCTION_KEY = re.compile(r"^<f(?P<number>[0-9]{1,2})>$")


def to_tmux_key(key: str) -> str | None:
    """Return the tmux name of a bracketed key, ``None`` for literal text."""
    if key in TMUX_KEY_NAMES:
        return TMUX_KEY_NAMES[key]
    chord = _CHORD.match(key)
    if chord is not None:
        prefix = "C" if chord.group("modifier") == "c" else "M"
        return f"{prefix}-{chord.group('key')}"
    function_key = _FUNCTION_KEY.match(key)
    if function_key is not None:
        return f"F{function_key.group('number')}"
    return None


def parse_rows(rows: t.Iterable[str], marker: str) -> ListSnapshot:
    """Split captured rows into list lines and the selected index.

    The marker column is stripped from every row.

    >>> parse_rows(["  commit 02", "> commit 01", ""], "> ")
    ListSnapshot(lines=('commit 02', 'commit 01'), selected_index=1)
    """
    lines = [row.rstrip() for row in rows]
    while lines and not lines[-1]:
        lines.pop()

    selected = -1
    parsed = []
    for index, line in enumerate(lines):
        if line.startswith(marker):
            selected = index
        parsed.append(line[len(marker) :])
    return ListSnapshot(tuple(parsed), selected)


class TmuxListView:
    """The pane's screen, read as one list."""

    kind = ContextKind.LIST

    def __init__(self, gui: TmuxGui) -> None:
        self.gui = gui

    def __repr__(self) -> str:
        return f"TmuxListView({self.name!r}, pane={self.gui.pane.pane_id})"

    @property
    def name(self) -> str:
        return self.gui.view_name

    @property
    def window_name(self) -> str:
        return self.gui.window_name

    @property
    def title(self) -> str:
        return "\n".join(self.gui.pane.display_message("#{pane_title}", get_text=True))

    @property
    def content(self) -> str:
        return "\n".join(self.snapshot().lines)

    def snapshot(self) -> ListSnapshot:
        """Capture the pane once and parse it."""
        return parse_rows(self.gui.pane.capture_pane(), self.gui.selected_marker)


class TmuxGui:
    """:class:`~tuiharness.types.GuiDriver` backed by a :class:`libtmux.Pane`.

    Parameters
    ----------
    pane : libtmux.Pane
        Pane running the application under test.
    view_name : str
        Name reported for the pane's view.
    window_name : str, optional
        Name reported for the pane's window. Defaults to ``view_name``.
    selected_marker : str
        Prefix the application draws in front of the selected row.
    """

    def __init__(
        self,
        pane: Pane,
        *,
        view_name: str = "main",
        window_name: str | None = None,
        selected_marker: str = "> ",
    ) -> None:
        self.pane = pane
        self.view_name = view_name
        self.window_name = window_name if window_name is not None else view_name
        self.selected_marker = selected_marker

    def press_key(self, key: str) -> None:
        tmux_key = to_tmux_key(key)
        if tmux_key is None:
            # a bare ";" separates tmux commands
            literal = "\\;" if key == ";" else key
            self.pane.send_keys(literal, enter=False, literal=True)
        else:
            self.pane.send_keys(tmux_key, enter=False)

    def current_context(self) -> TmuxListView:
        return TmuxListView(self)

    def log(self, message: str) -> None:
        logger.info("%s: %s", self.pane.pane_id, message)
