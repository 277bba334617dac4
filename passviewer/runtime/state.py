"""Composite view state: main view, search mode, and overlay."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum


class MainMode(Enum):
    TABLE = "table"
    PREVIEW = "preview"
    SECRETS = "secrets"


class SearchMode(Enum):
    INACTIVE = "inactive"
    SUSPENDED = "suspended"
    ACTIVE = "active"


class OverlayMode(Enum):
    INACTIVE = "inactive"
    HELP = "help"
    FILE = "file"


class InputAxis(Enum):
    """Which axis of ``ViewState`` decides how keys are read."""

    OVERLAY = "overlay"
    SEARCH = "search"
    MAIN = "main"


@dataclass(frozen=True)
class ViewState:
    """Three independent view axes.

    Keys are interpreted by exactly one axis at a time, chosen by the fixed
    precedence overlay > active search > main mode.
    """

    main: MainMode = MainMode.PREVIEW
    search: SearchMode = SearchMode.INACTIVE
    overlay: OverlayMode = OverlayMode.INACTIVE

    @property
    def input_axis(self) -> InputAxis:
        if self.overlay is not OverlayMode.INACTIVE:
            return InputAxis.OVERLAY
        if self.search is SearchMode.ACTIVE:
            return InputAxis.SEARCH
        return InputAxis.MAIN

    @property
    def shows_details(self) -> bool:
        return self.main is not MainMode.TABLE

    @property
    def shows_secrets(self) -> bool:
        return self.main is MainMode.SECRETS

    @property
    def shows_search(self) -> bool:
        return self.search is not SearchMode.INACTIVE

    def with_main(self, main: MainMode) -> ViewState:
        return replace(self, main=main)

    def with_search(self, search: SearchMode) -> ViewState:
        return replace(self, search=search)

    def with_overlay(self, overlay: OverlayMode) -> ViewState:
        return replace(self, overlay=overlay)


__all__ = ["InputAxis", "MainMode", "OverlayMode", "SearchMode", "ViewState"]
