"""Presentation tree: lays out nodes, draws a frame, and routes mouse events."""

from __future__ import annotations

from ..actions import Action
from ..input.mouse import MouseEvent
from ..runtime.dashboard import Dashboard
from ..runtime.state import OverlayMode, SearchMode, ViewState
from .canvas import Canvas
from .layout import compute_layout
from .nodes import DetailsPanel, EntryTable, FilePopup, HelpPopup, Menu, Node, SearchBox, StatusBar
from .theme import DEFAULT_THEME, UITheme


class PresentationTree:
    """Owns the node instances so their last rendered areas survive between frames."""

    def __init__(self, theme: UITheme = DEFAULT_THEME) -> None:
        self.theme = theme
        self.menu = Menu()
        self.table = EntryTable()
        self.details = DetailsPanel()
        self.search = SearchBox()
        self.help = HelpPopup()
        self.file = FilePopup()
        self.status = StatusBar()

    def nodes(self) -> tuple[Node, ...]:
        return (self.menu, self.table, self.details, self.search, self.help, self.file, self.status)

    def render(self, dashboard: Dashboard, view: ViewState, width: int, height: int) -> bytes:
        """Draw one full frame and return it encoded for the terminal."""
        for node in self.nodes():
            node.forget()
        layout = compute_layout(width, height, view)
        canvas = Canvas(width, height)
        theme = self.theme

        self.menu.render(canvas, layout.menu, theme)
        self.table.render(canvas, layout.table, dashboard, theme)
        if layout.details is not None:
            self.details.render(canvas, layout.details, dashboard, view, theme)
        self.status.render(canvas, layout.status, dashboard.status_text(), theme)
        if layout.search is not None:
            suspended = view.search is SearchMode.SUSPENDED
            self.search.render(canvas, layout.search, dashboard.query, suspended, theme)
        if layout.help is not None:
            self.help.render(canvas, layout.help, theme)
        if layout.file is not None:
            self.file.render(canvas, layout.file, dashboard, theme)
        return canvas.encode()

    def hit_test(self, event: MouseEvent, view: ViewState) -> Action | None:
        """Resolve a mouse event to an action.

        Nodes are asked back to front and the last non-``None`` answer wins,
        so the menu bar beats an overlay and an overlay beats everything below.
        """
        walk: list[Node] = [self.table]
        if view.search is not SearchMode.INACTIVE:
            walk.append(self.search)
        walk.append(self.details)
        if view.overlay is OverlayMode.HELP:
            walk.append(self.help)
        elif view.overlay is OverlayMode.FILE:
            walk.append(self.file)
        walk.append(self.menu)

        action: Action | None = None
        for node in walk:
            latest = node.hit_test(event, view)
            if latest is not None:
                action = latest
        return action


__all__ = ["PresentationTree"]
