"""Input decoding and translation to actions."""

from .keys import translate_key
from .mouse import MouseEvent, MouseKind, parse_mouse
from .reader import read_key

__all__ = ["MouseEvent", "MouseKind", "parse_mouse", "read_key", "translate_key"]
