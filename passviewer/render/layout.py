"""Screen geometry: rectangles and the per-frame layout."""

from __future__ import annotations

from dataclasses import dataclass

from ..runtime.state import OverlayMode, ViewState

DETAILS_HEIGHT = 14
SEARCH_BOX_WIDTH = 35
SEARCH_BOX_HEIGHT = 3
SEARCH_BOX_TOP = 3
HELP_MARGIN = (6, 3)
FILE_MARGIN = (8, 4)


@dataclass(frozen=True)
class Rect:
    """Zero-based screen rectangle."""

    x: int
    y: int
    width: int
    height: int

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def bottom(self) -> int:
        return self.y + self.height

    def contains(self, col: int, row: int) -> bool:
        return self.x <= col < self.right and self.y <= row < self.bottom

    def inset(self, horizontal: int, vertical: int) -> Rect:
        return Rect(
            self.x + horizontal,
            self.y + vertical,
            max(0, self.width - 2 * horizontal),
            max(0, self.height - 2 * vertical),
        )

    def is_empty(self) -> bool:
        return self.width <= 0 or self.height <= 0


@dataclass(frozen=True)
class FrameLayout:
    """Where each node goes this frame; ``None`` means not shown."""

    menu: Rect
    table: Rect
    details: Rect | None
    status: Rect
    search: Rect | None
    help: Rect | None
    file: Rect | None


def compute_layout(width: int, height: int, view: ViewState) -> FrameLayout:
    """Split the screen into menu, table, details and status rows plus popups."""
    screen = Rect(0, 0, max(1, width), max(3, height))
    menu = Rect(0, 0, screen.width, 1)
    status = Rect(0, screen.height - 1, screen.width, 1)
    details: Rect | None = None
    table_bottom = status.y
    if view.shows_details:
        details_height = min(DETAILS_HEIGHT, max(0, screen.height - 3))
        table_bottom = status.y - details_height
        details = Rect(0, table_bottom, screen.width, details_height)
    table = Rect(0, 1, screen.width, max(0, table_bottom - 1))

    search: Rect | None = None
    if view.shows_search:
        search_width = min(SEARCH_BOX_WIDTH, screen.width)
        search = Rect(
            max(0, screen.width - (search_width + 1)),
            min(SEARCH_BOX_TOP, screen.height),
            search_width,
            min(SEARCH_BOX_HEIGHT, max(0, screen.height - SEARCH_BOX_TOP)),
        )

    help_area = screen.inset(*HELP_MARGIN) if view.overlay is OverlayMode.HELP else None
    file_area = screen.inset(*FILE_MARGIN) if view.overlay is OverlayMode.FILE else None
    return FrameLayout(menu, table, details, status, search, help_area, file_area)


__all__ = ["FrameLayout", "Rect", "compute_layout"]
