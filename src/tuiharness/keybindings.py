"""Read-only lookup table from symbolic actions to literal key strings.

Key strings use the application's bracketed notation: single characters are
sent as-is, named keys are written ``<enter>``, ``<esc>``, ``<down>``, and
control chords ``<c-r>``.

Examples
--------
>>> keys = KeybindingConfig()
>>> keys.universal.next_item
'<down>'
>>> keys.universal.jump_to_block[3]
'4'
>>> keys.resolve("commits.markCommitAsFixup")
'f'
"""

from __future__ import annotations

import dataclasses
import re
import typing as t

from tuiharness.exc import UnknownKeybinding

if t.TYPE_CHECKING:
    from collections.abc import Mapping


@dataclasses.dataclass(frozen=True)
class UniversalKeybindings:
    """Bindings available in every view."""

    quit: str = "q"
    return_: str = "<esc>"
    toggle_panel: str = "<tab>"
    prev_item: str = "<up>"
    next_item: str = "<down>"
    prev_page: str = ","
    next_page: str = "."
    goto_top: str = "<"
    goto_bottom: str = ">"
    jump_to_block: tuple[str, ...] = ("1", "2", "3", "4", "5")
    select: str = "<space>"
    confirm: str = "<enter>"
    remove: str = "d"
    new: str = "n"
    edit: str = "e"
    create_rebase_options_menu: str = "m"
    undo: str = "z"
    redo: str = "<c-z>"


@dataclasses.dataclass(frozen=True)
class CommitsKeybindings:
    """Bindings of the commits view."""

    squash_down: str = "s"
    rename_commit: str = "r"
    mark_commit_as_fixup: str = "f"
    create_fixup_commit: str = "F"
    move_down_commit: str = "<c-j>"
    move_up_commit: str = "<c-k>"
    amend_to_commit: str = "A"
    pick_commit: str = "p"
    revert_commit: str = "t"
    checkout_commit: str = "<space>"


_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


def _attr_name(key: str) -> str:
    """Map a configuration key to its dataclass field.

    >>> _attr_name("markCommitAsFixup")
    'mark_commit_as_fixup'
    >>> _attr_name("return")
    'return_'
    """
    name = _CAMEL_BOUNDARY.sub("_", key).lower()
    if name == "return":
        return "return_"
    return name


def _section_from_mapping(
    cls: type[t.Any],
    section: str,
    values: Mapping[str, t.Any],
) -> t.Any:
    fields = {f.name for f in dataclasses.fields(cls)}
    kwargs: dict[str, t.Any] = {}
    for key, value in values.items():
        attr = _attr_name(key)
        if attr not in fields:
            raise UnknownKeybinding(f"{section}.{key}")
        kwargs[attr] = tuple(value) if isinstance(value, list) else value
    return cls(**kwargs)


@dataclasses.dataclass(frozen=True)
class KeybindingConfig:
    """Keybinding table grouped by section."""

    universal: UniversalKeybindings = dataclasses.field(
        default_factory=UniversalKeybindings,
    )
    commits: CommitsKeybindings = dataclasses.field(default_factory=CommitsKeybindings)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Mapping[str, t.Any]]) -> KeybindingConfig:
        """Build a table from user configuration, defaults filling the gaps.

        Keys are camelCase as in the application's config file.

        >>> keys = KeybindingConfig.from_mapping(
        ...     {"universal": {"nextItem": "j", "jumpToBlock": ["a", "b", "c", "d", "e"]}}
        ... )
        >>> keys.universal.next_item, keys.universal.prev_item
        ('j', '<up>')
        >>> keys.universal.jump_to_block
        ('a', 'b', 'c', 'd', 'e')
        """
        sections = {"universal": UniversalKeybindings, "commits": CommitsKeybindings}
        kwargs: dict[str, t.Any] = {}
        for section, values in data.items():
            if section not in sections:
                raise UnknownKeybinding(section)
            kwargs[section] = _section_from_mapping(sections[section], section, values)
        return cls(**kwargs)

    def resolve(self, action: str) -> str:
        """Return the key bound to ``"section.action"``.

        Both camelCase and snake_case action names are accepted.

        >>> KeybindingConfig().resolve("universal.return")
        '<esc>'
        >>> KeybindingConfig().resolve("universal.fly")
        Traceback (most recent call last):
        ...
        tuiharness.exc.UnknownKeybinding: Unknown keybinding: universal.fly
        """
        section_name, _, key = action.partition(".")
        section = getattr(self, section_name, None)
        if not key or not dataclasses.is_dataclass(section):
            raise UnknownKeybinding(action)
        attr = _attr_name(key)
        value = getattr(section, attr, None)
        if not isinstance(value, str):
            raise UnknownKeybinding(action)
        return value
