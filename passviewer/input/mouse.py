"""Mouse token parsing."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class MouseKind(Enum):
    DOWN = "MOUSE_LEFT_DOWN"
    UP = "MOUSE_LEFT_UP"
    DRAG = "MOUSE_LEFT_DRAG"
    WHEEL_UP = "MOUSE_WHEEL_UP"
    WHEEL_DOWN = "MOUSE_WHEEL_DOWN"


_KINDS = {kind.value: kind for kind in MouseKind}


@dataclass(frozen=True)
class MouseEvent:
    """Mouse event with zero-based screen coordinates."""

    kind: MouseKind
    col: int
    row: int


def parse_mouse(key: str) -> MouseEvent | None:
    """Parse a ``MOUSE_*:col:row`` token from the reader.

    The terminal reports 1-based coordinates; the event carries 0-based ones.
    Tokens without coordinates or of unknown kind yield ``None``.
    """
    parts = key.split(":")
    if len(parts) != 3:
        return None
    kind = _KINDS.get(parts[0])
    if kind is None:
        return None
    try:
        col = int(parts[1])
        row = int(parts[2])
    except ValueError:
        return None
    return MouseEvent(kind, max(0, col - 1), max(0, row - 1))


__all__ = ["MouseEvent", "MouseKind", "parse_mouse"]
