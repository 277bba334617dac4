"""Frame buffer of positioned ANSI writes."""

from __future__ import annotations

from .ansi import RESET, clip_ansi_line, display_width, fit_ansi_line
from .layout import Rect


class Canvas:
    """Collect cursor-addressed writes for one frame and encode them at once."""

    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self.out: list[str] = ["\033[H\033[J"]

    def _visible(self, x: int, y: int) -> bool:
        return 0 <= y < self.height and 0 <= x < self.width

    def text(self, x: int, y: int, content: str, width: int, style: str = "") -> None:
        """Write ``content`` padded to ``width`` columns at ``(x, y)``."""
        width = min(width, self.width - x)
        if width <= 0 or not self._visible(x, y):
            return
        self.out.append(f"\033[{y + 1};{x + 1}H{style}{fit_ansi_line(content, width)}{RESET}")

    def put(self, x: int, y: int, content: str, style: str = "") -> None:
        """Write ``content`` at ``(x, y)`` without padding."""
        if not self._visible(x, y):
            return
        clipped = clip_ansi_line(content, self.width - x)
        self.out.append(f"\033[{y + 1};{x + 1}H{style}{clipped}{RESET}")

    def fill(self, rect: Rect, style: str) -> None:
        for row in range(rect.y, rect.bottom):
            self.text(rect.x, row, "", rect.width, style)

    def box(self, rect: Rect, title: str, border: str, title_style: str) -> None:
        """Clear ``rect`` and draw a rounded frame with a centered title."""
        if rect.width < 2 or rect.height < 2:
            return
        inner = rect.width - 2
        self.put(rect.x, rect.y, "╭" + "─" * inner + "╮", border)
        for row in range(rect.y + 1, rect.bottom - 1):
            self.put(rect.x, row, "│" + " " * inner + "│", border)
        self.put(rect.x, rect.bottom - 1, "╰" + "─" * inner + "╯", border)
        if title:
            title_x = rect.x + max(1, (rect.width - display_width(title)) // 2)
            self.put(title_x, rect.y, clip_ansi_line(title, inner), title_style)

    def encode(self) -> bytes:
        return "".join(self.out).encode("utf-8", errors="replace")


__all__ = ["Canvas"]
