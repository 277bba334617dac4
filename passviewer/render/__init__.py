"""Terminal presentation: layout, nodes and frame encoding."""

from .layout import Rect, compute_layout
from .tree import PresentationTree

__all__ = ["PresentationTree", "Rect", "compute_layout"]
