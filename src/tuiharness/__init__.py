"""tuiharness, scripted end-to-end scenarios for list-oriented terminal UIs."""

from .__about__ import (
    __author__,
    __copyright__,
    __description__,
    __email__,
    __license__,
    __package_name__,
    __title__,
    __version__,
)
from .assertions import Assert
from .config import HarnessConfig
from .input import Input
from .keybindings import KeybindingConfig
from .matcher import Matcher, contains, equals, matches_regex, not_contains, predicate
from .navigator import ListNavigator
from .scenario import Harness, Scenario

__all__ = (
    "Assert",
    "Harness",
    "HarnessConfig",
    "Input",
    "KeybindingConfig",
    "ListNavigator",
    "Matcher",
    "Scenario",
    "__author__",
    "__copyright__",
    "__description__",
    "__email__",
    "__license__",
    "__package_name__",
    "__title__",
    "__version__",
    "contains",
    "equals",
    "matches_regex",
    "not_contains",
    "predicate",
)
