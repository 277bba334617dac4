"""View state machine.

``apply`` is a pure transition function over ``ViewState``. Each axis has its
own guarded transition helper so call sites never match on all three axes at
once. ``ViewController`` is the dispatch handler that owns the current state
and remembers the last transition for domain handlers that react to it.
"""

from __future__ import annotations

from ..actions import LIST_NAVIGATION, Action, Nav, SecretOp, Select, SelectAndFetch
from .state import MainMode, OverlayMode, SearchMode, ViewState

Transition = tuple[ViewState, "Action | None"]


def _back(state: ViewState) -> Transition:
    if state.overlay is not OverlayMode.INACTIVE:
        return state.with_overlay(OverlayMode.INACTIVE), None
    if state.main is MainMode.SECRETS:
        return state.with_main(MainMode.PREVIEW), None
    if state.main is MainMode.PREVIEW:
        return state.with_main(MainMode.TABLE), None
    return state, None


def _leave(state: ViewState, query_empty: bool) -> Transition:
    if state.overlay is not OverlayMode.INACTIVE:
        return state, None
    if state.search is SearchMode.ACTIVE:
        next_search = SearchMode.INACTIVE if query_empty else SearchMode.SUSPENDED
        return state.with_search(next_search), None
    if state.search is SearchMode.SUSPENDED:
        return state.with_search(SearchMode.INACTIVE), None
    return state, None


def _leave_secrets(state: ViewState) -> ViewState:
    """Moving the selection while secrets are shown drops back to preview."""
    if state.main is MainMode.SECRETS:
        return state.with_main(MainMode.PREVIEW)
    return state


def apply(action: Action, state: ViewState, query_empty: bool = True) -> Transition:
    """Return the next view state and an optional chained action.

    ``query_empty`` tells ``Nav.LEAVE`` whether an active search should close
    outright or be suspended with its query kept.
    """
    if action is Nav.BACK:
        return _back(state)
    if action is Nav.LEAVE:
        return _leave(state, query_empty)
    if action is Nav.PREVIEW:
        return state.with_main(MainMode.PREVIEW), None
    if action is Nav.SECRETS:
        return state.with_main(MainMode.SECRETS), SecretOp.FETCH
    if isinstance(action, SelectAndFetch):
        return state.with_main(MainMode.SECRETS), SecretOp.FETCH
    if action is Nav.SEARCH:
        return state.with_search(SearchMode.ACTIVE), None
    if action is Nav.HELP:
        return state.with_overlay(OverlayMode.HELP), None
    if action is Nav.FILE:
        return state.with_overlay(OverlayMode.FILE), SecretOp.FETCH
    if action in LIST_NAVIGATION or isinstance(action, Select):
        return _leave_secrets(state), None
    return state, None


class ViewController:
    """Dispatch handler owning the live ``ViewState``."""

    def __init__(self, query_empty=lambda: True, state: ViewState | None = None) -> None:
        self._query_empty = query_empty
        self.state = state if state is not None else ViewState()
        self.previous = self.state

    def update(self, action: Action) -> Action | None:
        self.previous = self.state
        self.state, follow_up = apply(action, self.state, self._query_empty())
        return follow_up

    def left_main(self, mode: MainMode) -> bool:
        """Return whether the last action moved the main view away from ``mode``."""
        return self.previous.main is mode and self.state.main is not mode

    def left_search(self, mode: SearchMode) -> bool:
        return self.previous.search is mode and self.state.search is not mode


__all__ = ["ViewController", "apply"]
