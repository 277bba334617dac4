"""Keyboard translation: one key token to at most one action.

The key map is chosen by ``ViewState.input_axis``; nothing else about the
state is consulted.
"""

from __future__ import annotations

from ..actions import Action, Insert, Nav, SearchEdit, SecretOp
from ..runtime.state import InputAxis, MainMode, OverlayMode, ViewState
from .key_registry import KeyComboBinding, KeyComboRegistry

HELP_KEYS = KeyComboRegistry().register_bindings(
    KeyComboBinding(("ESC", "F1"), Nav.BACK),
)

FILE_KEYS = KeyComboRegistry().register_bindings(
    KeyComboBinding(("ESC", "i"), Nav.BACK),
)

SEARCH_KEYS = KeyComboRegistry().register_bindings(
    KeyComboBinding(("ESC", "ENTER"), Nav.LEAVE),
    KeyComboBinding(("DOWN",), Nav.DOWN),
    KeyComboBinding(("UP",), Nav.UP),
    KeyComboBinding(("PAGE_DOWN",), Nav.PAGE_DOWN),
    KeyComboBinding(("PAGE_UP",), Nav.PAGE_UP),
    KeyComboBinding(("F1",), Nav.HELP),
    KeyComboBinding(("BACKSPACE",), SearchEdit.REMOVE_LEFT),
    KeyComboBinding(("DELETE",), SearchEdit.REMOVE_RIGHT),
    KeyComboBinding(("LEFT",), SearchEdit.MOVE_LEFT),
    KeyComboBinding(("RIGHT",), SearchEdit.MOVE_RIGHT),
    KeyComboBinding(("HOME",), SearchEdit.MOVE_TO_START),
    KeyComboBinding(("END",), SearchEdit.MOVE_TO_END),
)

TABLE_KEYS = KeyComboRegistry().register_bindings(
    KeyComboBinding(("j", "DOWN"), Nav.DOWN),
    KeyComboBinding(("k", "UP"), Nav.UP),
    KeyComboBinding(("f", "PAGE_DOWN"), Nav.PAGE_DOWN),
    KeyComboBinding(("b", "PAGE_UP"), Nav.PAGE_UP),
    KeyComboBinding(("g", "HOME"), Nav.TOP),
    KeyComboBinding(("G", "END"), Nav.BOTTOM),
    KeyComboBinding(("l", "RIGHT", "ENTER"), Nav.PREVIEW),
    KeyComboBinding(("/",), Nav.SEARCH),
    KeyComboBinding(("F1",), Nav.HELP),
    KeyComboBinding(("i",), Nav.FILE),
    KeyComboBinding(("y",), SecretOp.COPY_PASSWORD),
    KeyComboBinding(("c",), SecretOp.COPY_ID),
    KeyComboBinding(("v",), SecretOp.COPY_LOGIN),
    KeyComboBinding(("x",), SecretOp.COPY_OTP),
    KeyComboBinding(("ESC",), Nav.LEAVE),
    KeyComboBinding(("q", "Q"), Nav.QUIT),
)

DETAILS_KEYS = TABLE_KEYS.extended(
    KeyComboBinding(("h", "LEFT"), Nav.BACK),
    KeyComboBinding(("l", "RIGHT", "ENTER"), Nav.SECRETS),
    KeyComboBinding(("r",), SecretOp.FETCH_OTP),
)


def _is_text(key: str) -> bool:
    return len(key) == 1 and key.isprintable()


def translate_key(key: str, view: ViewState) -> Action | None:
    """Map one key token to an action under the map selected by ``view``."""
    if not key or key.startswith("MOUSE"):
        return None
    axis = view.input_axis
    if axis is InputAxis.OVERLAY:
        registry = HELP_KEYS if view.overlay is OverlayMode.HELP else FILE_KEYS
        return registry.lookup(key)
    if axis is InputAxis.SEARCH:
        action = SEARCH_KEYS.lookup(key)
        if action is None and _is_text(key):
            return Insert(key)
        return action
    if view.main is MainMode.TABLE:
        return TABLE_KEYS.lookup(key)
    return DETAILS_KEYS.lookup(key)


__all__ = [
    "DETAILS_KEYS",
    "FILE_KEYS",
    "HELP_KEYS",
    "SEARCH_KEYS",
    "TABLE_KEYS",
    "translate_key",
]
