"""Metadata package."""

from __future__ import annotations

__title__ = "tuiharness"
__package_name__ = "tuiharness"
__version__ = "0.1.0"
__description__ = "Scripted end-to-end scenarios for list-oriented terminal UIs"
__email__ = "tuiharness@example.org"
__author__ = "tuiharness contributors"
__github__ = "https://github.com/tuiharness/tuiharness"
__docs__ = "https://tuiharness.readthedocs.io"
__tracker__ = "https://github.com/tuiharness/tuiharness/issues"
__pypi__ = "https://pypi.org/project/tuiharness/"
__license__ = "MIT"
__copyright__ = "Copyright 2026- tuiharness contributors"
