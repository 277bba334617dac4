"""Typed actions flowing through the dispatch loop.

Every input source (keys, mouse, background results) is reduced to one of
these immutable values before anything touches state.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union


class Nav(Enum):
    """View navigation commands."""

    BACK = "back"
    LEAVE = "leave"
    DOWN = "down"
    UP = "up"
    PAGE_DOWN = "page_down"
    PAGE_UP = "page_up"
    TOP = "top"
    BOTTOM = "bottom"
    PREVIEW = "preview"
    SECRETS = "secrets"
    SEARCH = "search"
    HELP = "help"
    FILE = "file"
    QUIT = "quit"


class SecretOp(Enum):
    """Commands that may start a background secret operation."""

    COPY_ID = "copy_id"
    FETCH = "fetch"
    COPY_PASSWORD = "copy_password"
    COPY_LOGIN = "copy_login"
    FETCH_OTP = "fetch_otp"
    COPY_OTP = "copy_otp"


class SearchEdit(Enum):
    """Query editing commands without a payload."""

    REMOVE_LEFT = "remove_left"
    REMOVE_RIGHT = "remove_right"
    MOVE_LEFT = "move_left"
    MOVE_RIGHT = "move_right"
    MOVE_TO_START = "move_to_start"
    MOVE_TO_END = "move_to_end"


class Signal(Enum):
    """Payload-free control actions."""

    NOOP = "noop"
    REDRAW = "redraw"
    RESET_STATUS = "reset_status"


@dataclass(frozen=True)
class Select:
    """Select the row ``index`` of the visible subset."""

    index: int


@dataclass(frozen=True)
class SelectAndFetch:
    """Select row ``index`` and open its secrets."""

    index: int


@dataclass(frozen=True)
class Insert:
    """Insert one character at the query cursor."""

    char: str


@dataclass(frozen=True)
class SetStatus:
    message: str


@dataclass(frozen=True)
class DisplaySecrets:
    """Decrypted file content for ``entry_id`` arrived from a worker."""

    entry_id: str
    content: str


@dataclass(frozen=True)
class DisplayOtp:
    """One-time code for ``entry_id`` arrived from a worker."""

    entry_id: str
    code: str


Action = Union[
    Nav,
    SecretOp,
    SearchEdit,
    Signal,
    Select,
    SelectAndFetch,
    Insert,
    SetStatus,
    DisplaySecrets,
    DisplayOtp,
]

LIST_NAVIGATION: frozenset[Nav] = frozenset(
    {Nav.DOWN, Nav.UP, Nav.PAGE_DOWN, Nav.PAGE_UP, Nav.TOP, Nav.BOTTOM}
)

__all__ = [
    "Action",
    "DisplayOtp",
    "DisplaySecrets",
    "Insert",
    "LIST_NAVIGATION",
    "Nav",
    "SearchEdit",
    "SecretOp",
    "Select",
    "SelectAndFetch",
    "SetStatus",
    "Signal",
]
