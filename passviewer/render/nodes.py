"""Presentation nodes.

Each node draws itself into a ``Canvas`` and remembers the rectangle it was
drawn into. Mouse hit-testing uses only that remembered area, so a node that
was not drawn in the last frame never claims an event.
"""

from __future__ import annotations

from ..actions import Action, Nav, SecretOp, Select, SelectAndFetch, Signal
from ..input.mouse import MouseEvent, MouseKind
from ..runtime.dashboard import Dashboard, OTP_PLACEHOLDER
from ..runtime.search import SearchQuery
from ..runtime.state import SearchMode, ViewState
from .ansi import display_width, fit_ansi_line, highlight_matches
from .canvas import Canvas
from .help import HELP_LINES
from .layout import Rect
from .theme import UITheme

PASSWORD_PLACEHOLDER = "********"


class Node:
    """Base for presentation nodes."""

    def __init__(self) -> None:
        self.area: Rect | None = None

    def forget(self) -> None:
        self.area = None

    def hit_test(self, event: MouseEvent, view: ViewState) -> Action | None:
        return None


class Button(Node):
    """One-line clickable label; a left press inside it yields ``action``."""

    def __init__(self, label: str, key_label: str, action: Action) -> None:
        super().__init__()
        self.label = label
        self.key_label = key_label
        self.action = action

    @property
    def width(self) -> int:
        return display_width(self.label) + display_width(self.key_label) + 3

    def render(self, canvas: Canvas, rect: Rect, theme: UITheme) -> None:
        self.area = rect
        content = f"{self.label} {theme.button_key}{self.key_label}{theme.button_label}"
        pad = max(0, (rect.width - display_width(self.label) - display_width(self.key_label) - 1) // 2)
        canvas.text(rect.x, rect.y, " " * pad + content, rect.width, theme.button_label)

    def hit_test(self, event: MouseEvent, view: ViewState) -> Action | None:
        if self.area is None or event.kind is not MouseKind.DOWN:
            return None
        if self.area.contains(event.col, event.row):
            return self.action
        return None


def _last_hit(nodes: list[Node], event: MouseEvent, view: ViewState) -> Action | None:
    action: Action | None = None
    for node in nodes:
        latest = node.hit_test(event, view)
        if latest is not None:
            action = latest
    return action


class Menu(Node):
    """Top bar with the Search, Help and Quit buttons and the program name."""

    TITLE = "passviewer  "

    def __init__(self) -> None:
        super().__init__()
        self.buttons = [
            Button("Search", "(/)", Nav.SEARCH),
            Button("Help", "(F1)", Nav.HELP),
            Button("Quit", "(q)", Nav.QUIT),
        ]

    def forget(self) -> None:
        super().forget()
        for button in self.buttons:
            button.forget()

    def render(self, canvas: Canvas, rect: Rect, theme: UITheme) -> None:
        self.area = rect
        title_x = max(0, rect.right - display_width(self.TITLE))
        canvas.text(rect.x, rect.y, "", rect.width, theme.menu_bar)
        canvas.put(title_x, rect.y, self.TITLE, theme.menu_logo)
        x = rect.x
        for button in self.buttons:
            width = min(button.width, max(0, rect.right - x))
            if width <= 0:
                button.forget()
                continue
            button.render(canvas, Rect(x, rect.y, width, 1), theme)
            x += button.width

    def hit_test(self, event: MouseEvent, view: ViewState) -> Action | None:
        return _last_hit(self.buttons, event, view)


class EntryTable(Node):
    """Scrolling entry list with a last-modified column and a scrollbar."""

    MODIFIED_WIDTH = 25
    TRACK_HIT_WIDTH = 8

    def __init__(self) -> None:
        super().__init__()
        self.offset = 0
        self.length = 0
        self.content_area: Rect | None = None
        self.track_area: Rect | None = None

    def forget(self) -> None:
        super().forget()
        self.content_area = None
        self.track_area = None

    def _scroll_to(self, selected: int | None, rows: int) -> None:
        if rows <= 0:
            self.offset = 0
            return
        if selected is not None:
            if selected < self.offset:
                self.offset = selected
            elif selected >= self.offset + rows:
                self.offset = selected - rows + 1
        self.offset = max(0, min(self.offset, self.length - rows))

    def render(self, canvas: Canvas, rect: Rect, dashboard: Dashboard, theme: UITheme) -> None:
        self.area = rect
        if rect.height <= 0 or rect.width <= 1:
            self.content_area = None
            self.track_area = None
            return
        entries = dashboard.visible_entries()
        self.length = len(entries)
        rows = rect.height - 1
        selected = dashboard.selected
        self._scroll_to(selected, rows)

        table_width = rect.width - 1
        id_width = max(1, table_width - self.MODIFIED_WIDTH - 2)
        header = f" {fit_ansi_line('Password file', id_width)} Last modified (UTC)"
        canvas.text(rect.x, rect.y, header, table_width, theme.table_header)
        canvas.text(rect.right - 1, rect.y, "", 1, theme.table_header)

        query = dashboard.query.text
        for line in range(rows):
            index = self.offset + line
            y = rect.y + 1 + line
            if index >= self.length:
                canvas.text(rect.x, y, "", table_width, theme.table_row)
                continue
            entry = entries[index]
            is_selected = index == selected
            name = highlight_matches(
                fit_ansi_line(entry.entry_id, id_width),
                query,
                theme.table_match,
                theme.table_match_end,
            )
            marker = "│" if is_selected else " "
            if is_selected:
                style = theme.table_selected
            elif index % 2:
                style = theme.table_row_alt
            else:
                style = theme.table_row
            canvas.text(rect.x, y, f"{marker}{name} {entry.last_modified()}", table_width, style)

        self._render_scrollbar(canvas, Rect(rect.right - 1, rect.y + 1, 1, rows), selected, theme)
        self.content_area = Rect(rect.x, rect.y + 1, max(0, rect.width - self.TRACK_HIT_WIDTH), rows)
        track_width = min(self.TRACK_HIT_WIDTH, rect.width)
        self.track_area = Rect(rect.right - track_width, rect.y + 1, track_width, rows)

    def _render_scrollbar(self, canvas: Canvas, track: Rect, selected: int | None, theme: UITheme) -> None:
        rows = track.height
        if rows <= 0:
            return
        thumb_size = rows
        thumb_top = 0
        if self.length > rows:
            thumb_size = max(1, rows * rows // self.length)
            position = selected or 0
            thumb_top = (rows - thumb_size) * position // max(1, self.length - 1)
        for line in range(rows):
            inside = thumb_top <= line < thumb_top + thumb_size
            style = theme.scrollbar_thumb if inside else theme.scrollbar_track
            canvas.text(track.x, track.y + line, "", 1, style)

    def hit_test(self, event: MouseEvent, view: ViewState) -> Action | None:
        if self.content_area is not None and self.content_area.contains(event.col, event.row):
            if event.kind is MouseKind.DOWN:
                return SelectAndFetch(self.offset + event.row - self.content_area.y)
            if event.kind is MouseKind.WHEEL_DOWN:
                return Nav.DOWN
            if event.kind is MouseKind.WHEEL_UP:
                return Nav.UP
            return None
        if self.track_area is not None and self.track_area.contains(event.col, event.row):
            if event.kind in (MouseKind.DOWN, MouseKind.DRAG):
                line = event.row - self.track_area.y
                span = self.track_area.height - 1
                ratio = line / span if span > 0 else 0.0
                return Select(int(ratio * self.length))
        return None


class DetailsPanel(Node):
    """Details of the selected entry with per-field action buttons."""

    FIELD_HEIGHT = 4

    def __init__(self) -> None:
        super().__init__()
        self.copy_id = Button("Copy", "(c)", SecretOp.COPY_ID)
        self.show_file = Button("Show file", "(i)", Nav.FILE)
        self.copy_password = Button("Copy", "(y)", SecretOp.COPY_PASSWORD)
        self.copy_otp = Button("Copy", "(x)", SecretOp.COPY_OTP)
        self.refresh_otp = Button("Refresh", "(r)", SecretOp.FETCH_OTP)
        self.copy_login = Button("Copy", "(v)", SecretOp.COPY_LOGIN)
        self.buttons = [
            self.copy_id,
            self.show_file,
            self.copy_password,
            self.copy_otp,
            self.refresh_otp,
            self.copy_login,
        ]

    def forget(self) -> None:
        super().forget()
        for button in self.buttons:
            button.forget()

    def render(
        self,
        canvas: Canvas,
        rect: Rect,
        dashboard: Dashboard,
        view: ViewState,
        theme: UITheme,
    ) -> None:
        self.area = rect
        for button in self.buttons:
            button.forget()
        if rect.height < 4:
            return
        canvas.text(rect.x, rect.y, "▔" * rect.width, rect.width, theme.details_border)
        canvas.fill(Rect(rect.x, rect.y + 1, rect.width, rect.height - 1), "")
        top = rect.y + (2 if rect.height > 5 else 1)

        details = dashboard.details
        known = details.entry_id is not None
        secrets = view.shows_secrets
        password = details.password if secrets and details.password is not None else PASSWORD_PLACEHOLDER
        otp = details.otp if secrets and details.otp is not None else OTP_PLACEHOLDER
        login = details.login if secrets and details.login is not None else ""
        lines = str(details.line_count) if details.line_count is not None else ""

        column_width = max(1, (rect.width - 4) // 2)
        left_x = rect.x + 1
        right_x = left_x + column_width + 2
        left = [
            ("Password file", details.entry_id or "", [self.copy_id]),
            ("Number of lines", lines, [self.show_file]),
        ]
        right = [
            ("Password", password if known else "", [self.copy_password]),
            ("One-time password (OTP)", otp if known else "", [self.copy_otp, self.refresh_otp]),
            ("Login", login, [self.copy_login]),
        ]
        for x, fields in ((left_x, left), (right_x, right)):
            for slot, (title, value, buttons) in enumerate(fields):
                y = top + slot * self.FIELD_HEIGHT
                if y + 1 >= rect.bottom:
                    break
                self._render_field(canvas, Rect(x, y, column_width, 2), title, value, buttons, theme)

    def _render_field(
        self,
        canvas: Canvas,
        rect: Rect,
        title: str,
        value: str,
        buttons: list[Button],
        theme: UITheme,
    ) -> None:
        canvas.text(rect.x, rect.y, f"{theme.details_field}{title}{theme.reset}", rect.width)
        button_x = rect.right
        for button in reversed(buttons):
            button_x -= button.width + 1
            if button_x <= rect.x:
                break
            button.render(canvas, Rect(button_x, rect.y + 1, button.width, 1), theme)
        value_width = max(0, button_x - rect.x - 1)
        canvas.text(rect.x, rect.y + 1, value, value_width, theme.details_value)

    def hit_test(self, event: MouseEvent, view: ViewState) -> Action | None:
        return _last_hit(self.buttons, event, view)


class SearchBox(Node):
    """Floating query box; dimmed while search is suspended."""

    PROMPT = " ⧸ "

    def render(self, canvas: Canvas, rect: Rect, query: SearchQuery, suspended: bool, theme: UITheme) -> None:
        self.area = rect
        if rect.is_empty():
            return
        text = query.text
        cursor = min(query.cursor, len(text))
        if cursor < len(text):
            body = f"{text[:cursor]}\033[4m{text[cursor]}\033[24m{text[cursor + 1:]}"
        else:
            body = f"{text}_"
        style = theme.dim if suspended else ""
        if rect.height >= 3:
            canvas.box(rect, "Search", theme.popup_border, theme.popup_title)
            canvas.text(rect.x + 1, rect.y + 1, self.PROMPT + body, rect.width - 2, style)
        else:
            canvas.text(rect.x, rect.y, self.PROMPT + body, rect.width, style)

    def hit_test(self, event: MouseEvent, view: ViewState) -> Action | None:
        if self.area is None or event.kind is not MouseKind.DOWN:
            return None
        if self.area.contains(event.col, event.row):
            return Nav.SEARCH
        if view.search is SearchMode.ACTIVE:
            return Nav.LEAVE
        return None


class Popup(Node):
    """Modal bordered popup with a close button; swallows every mouse event."""

    TITLE = ""

    def __init__(self) -> None:
        super().__init__()
        self.close_button = Button("Close", "(Esc)", Nav.BACK)

    def forget(self) -> None:
        super().forget()
        self.close_button.forget()

    def _frame(self, canvas: Canvas, rect: Rect, theme: UITheme) -> Rect:
        """Draw the frame and close button; return the body rectangle."""
        self.area = rect
        self.close_button.forget()
        canvas.box(rect, self.TITLE, theme.popup_border, theme.popup_title)
        body = rect.inset(2, 1)
        if rect.height >= 5:
            width = min(self.close_button.width + 2, body.width)
            button_rect = Rect(rect.x + (rect.width - width) // 2, rect.bottom - 2, width, 1)
            self.close_button.render(canvas, button_rect, theme)
            body = Rect(body.x, body.y, body.width, max(0, body.height - 2))
        return body

    def hit_test(self, event: MouseEvent, view: ViewState) -> Action | None:
        action = self.close_button.hit_test(event, view)
        if action is None:
            return Signal.NOOP
        return action


class HelpPopup(Popup):
    TITLE = "Help"

    def render(self, canvas: Canvas, rect: Rect, theme: UITheme) -> None:
        if rect.is_empty():
            self.area = rect
            return
        body = self._frame(canvas, rect, theme)
        for row, (kind, line) in enumerate(HELP_LINES[: max(0, body.height - 1)]):
            pad = max(0, (body.width - display_width(line)) // 2)
            style = theme.popup_heading if kind == "heading" else ""
            canvas.text(body.x, body.y + 1 + row, " " * pad + line, body.width, style)


class FilePopup(Popup):
    """Raw decrypted file of the selected entry."""

    TITLE = "File"

    def render(self, canvas: Canvas, rect: Rect, dashboard: Dashboard, theme: UITheme) -> None:
        if rect.is_empty():
            self.area = rect
            return
        body = self._frame(canvas, rect, theme)
        if body.height <= 0:
            return
        entry_id = dashboard.details.entry_id
        if entry_id is not None:
            canvas.text(body.x, body.y, f"{theme.popup_heading}Password file ID: {theme.reset}{entry_id}", body.width)
        content = dashboard.file_content
        if content is None:
            return
        for row, line in enumerate(content.splitlines()[: max(0, body.height - 2)]):
            canvas.text(body.x + 2, body.y + 2 + row, line, body.width - 2)


class StatusBar(Node):
    RIGHT_TEXT = "│ F1 Help"

    def render(self, canvas: Canvas, rect: Rect, message: str, theme: UITheme) -> None:
        self.area = rect
        canvas.text(rect.x, rect.y, build_status_line(message, rect.width, self.RIGHT_TEXT), rect.width, theme.status_bar)


def build_status_line(left_text: str, width: int, right_text: str) -> str:
    usable = max(1, width - 1)
    if usable <= len(right_text):
        return right_text[-usable:]
    left_limit = max(0, usable - len(right_text) - 1)
    left = f" {left_text}"[:left_limit]
    gap = " " * (usable - display_width(left) - len(right_text))
    return f"{left}{gap}{right_text}"


__all__ = [
    "Button",
    "DetailsPanel",
    "EntryTable",
    "FilePopup",
    "HelpPopup",
    "Menu",
    "Node",
    "Popup",
    "SearchBox",
    "StatusBar",
    "build_status_line",
]
