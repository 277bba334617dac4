from __future__ import annotations

import unittest

from passviewer.actions import Nav, SecretOp, Select, SelectAndFetch, Signal
from passviewer.input.mouse import MouseEvent, MouseKind
from passviewer.render.ansi import ANSI_ESCAPE_RE
from passviewer.render.tree import PresentationTree
from passviewer.render.theme import DEFAULT_THEME
from passviewer.runtime.dashboard import Dashboard
from passviewer.runtime.executor import BackgroundExecutor, CompletionChannel
from passviewer.runtime.machine import ViewController
from passviewer.runtime.state import MainMode, OverlayMode, SearchMode, ViewState
from passviewer.store.entries import Entry

WIDTH = 80
HEIGHT = 24

TABLE = ViewState(main=MainMode.TABLE)
PREVIEW = ViewState(main=MainMode.PREVIEW)
SECRETS = ViewState(main=MainMode.SECRETS)


class _NullTool:
    pass


def _down(col: int, row: int) -> MouseEvent:
    return MouseEvent(MouseKind.DOWN, col, row)


class _TreeCase(unittest.TestCase):
    def setUp(self) -> None:
        executor = BackgroundExecutor(CompletionChannel(), blocking=True)
        self.addCleanup(executor.shutdown)
        entries = [Entry("alpha"), Entry("beta"), Entry("work/gamma", 0.0)]
        self.dashboard = Dashboard(entries, ViewController(), _NullTool(), executor)
        self.tree = PresentationTree()

    def render(self, view: ViewState) -> str:
        frame = self.tree.render(self.dashboard, view, WIDTH, HEIGHT).decode("utf-8")
        return ANSI_ESCAPE_RE.sub("", frame)


class RenderTests(_TreeCase):
    def test_frame_shows_entries_menu_and_status(self) -> None:
        frame = self.render(TABLE)
        for text in ("alpha", "beta", "work/gamma", "Password file", "Last modified (UTC)"):
            self.assertIn(text, frame)
        self.assertIn("Jan 01, 1970, 00:00", frame)
        self.assertIn("Unknown", frame)
        self.assertIn("Search (/)", frame)
        self.assertIn("Quit (q)", frame)
        self.assertIn("Ready", frame)
        self.assertIn("F1 Help", frame)

    def test_frame_starts_by_clearing_the_screen(self) -> None:
        frame = self.tree.render(self.dashboard, TABLE, WIDTH, HEIGHT)
        self.assertTrue(frame.startswith(b"\x1b[H\x1b[J"))

    def test_status_message_replaces_idle_text(self) -> None:
        self.dashboard.status = "⧗ Fetching password entry..."
        frame = self.render(TABLE)
        self.assertIn("⧗ Fetching password entry...", frame)
        self.assertNotIn("Ready", frame)

    def test_preview_masks_secrets(self) -> None:
        self.dashboard.details.password = "hunter2"
        frame = self.render(PREVIEW)
        self.assertIn("Number of lines", frame)
        self.assertIn("One-time password (OTP)", frame)
        self.assertIn("********", frame)
        self.assertNotIn("hunter2", frame)

    def test_secrets_view_shows_decrypted_fields(self) -> None:
        self.dashboard.details.password = "hunter2"
        self.dashboard.details.login = "bob"
        self.dashboard.details.line_count = 2
        frame = self.render(SECRETS)
        self.assertIn("hunter2", frame)
        self.assertIn("bob", frame)
        self.assertNotIn("********", frame)

    def test_help_popup_lists_key_sections(self) -> None:
        frame = self.render(ViewState(overlay=OverlayMode.HELP))
        self.assertIn("Help", frame)
        self.assertIn("Close (Esc)", frame)
        self.assertIn("Navigation", frame)

    def test_file_popup_shows_content(self) -> None:
        self.dashboard.file_content = "hunter2\nlogin: bob\n"
        frame = self.render(ViewState(main=MainMode.SECRETS, overlay=OverlayMode.FILE))
        self.assertIn("Password file ID: alpha", frame)
        self.assertIn("login: bob", frame)

    def test_search_box_shows_query(self) -> None:
        self.dashboard.query.insert("a")
        self.dashboard.query.insert("l")
        frame = self.render(ViewState(main=MainMode.TABLE, search=SearchMode.ACTIVE))
        self.assertIn("Search", frame)
        self.assertIn("al_", frame)

    def test_filtered_rows_are_highlighted(self) -> None:
        executor = BackgroundExecutor(CompletionChannel(), blocking=True)
        self.addCleanup(executor.shutdown)
        self.dashboard = Dashboard([Entry("mail/Straße"), Entry("alpha")], ViewController(), _NullTool(), executor)
        self.dashboard.query.insert("ß")
        self.dashboard.filter()
        self.assertEqual([entry.entry_id for entry in self.dashboard.visible_entries()], ["mail/Straße"])

        frame = self.tree.render(self.dashboard, TABLE, WIDTH, HEIGHT).decode("utf-8")
        self.assertIn(f"{DEFAULT_THEME.table_match}ß{DEFAULT_THEME.table_match_end}", frame)

    def test_empty_subset_renders(self) -> None:
        self.dashboard.query.insert("zzz")
        self.dashboard.filter()
        frame = self.render(PREVIEW)
        self.assertNotIn("alpha", frame)
        self.assertIn("Password file", frame)


class HitTestTests(_TreeCase):
    def test_nothing_is_hit_before_the_first_frame(self) -> None:
        self.assertIsNone(self.tree.hit_test(_down(5, 3), TABLE))

    def test_row_click_selects_and_fetches(self) -> None:
        self.render(TABLE)
        # Menu on row 0, table header on row 1, first entry on row 2.
        self.assertEqual(self.tree.hit_test(_down(5, 2), TABLE), SelectAndFetch(0))
        self.assertEqual(self.tree.hit_test(_down(5, 3), TABLE), SelectAndFetch(1))

    def test_header_and_release_are_ignored(self) -> None:
        self.render(TABLE)
        self.assertIsNone(self.tree.hit_test(_down(5, 1), TABLE))
        self.assertIsNone(self.tree.hit_test(MouseEvent(MouseKind.UP, 5, 3), TABLE))

    def test_wheel_moves_selection(self) -> None:
        self.render(TABLE)
        self.assertIs(self.tree.hit_test(MouseEvent(MouseKind.WHEEL_DOWN, 5, 3), TABLE), Nav.DOWN)
        self.assertIs(self.tree.hit_test(MouseEvent(MouseKind.WHEEL_UP, 5, 3), TABLE), Nav.UP)

    def test_scrollbar_track_selects_proportionally(self) -> None:
        self.render(TABLE)
        # Track spans the last eight columns of rows 2..22.
        self.assertEqual(self.tree.hit_test(_down(75, 2), TABLE), Select(0))
        self.assertEqual(self.tree.hit_test(_down(79, 12), TABLE), Select(1))
        self.assertEqual(self.tree.hit_test(MouseEvent(MouseKind.DRAG, 73, 12), TABLE), Select(1))

    def test_menu_buttons(self) -> None:
        self.render(TABLE)
        self.assertIs(self.tree.hit_test(_down(3, 0), TABLE), Nav.SEARCH)
        self.assertIs(self.tree.hit_test(_down(15, 0), TABLE), Nav.HELP)
        self.assertIs(self.tree.hit_test(_down(25, 0), TABLE), Nav.QUIT)
        self.assertIsNone(self.tree.hit_test(_down(50, 0), TABLE))

    def test_details_buttons(self) -> None:
        self.render(PREVIEW)
        self.assertIs(self.tree.hit_test(_down(30, 12), PREVIEW), SecretOp.COPY_ID)
        self.assertIs(self.tree.hit_test(_down(30, 16), PREVIEW), Nav.FILE)
        self.assertIs(self.tree.hit_test(_down(70, 12), PREVIEW), SecretOp.COPY_PASSWORD)
        self.assertIs(self.tree.hit_test(_down(56, 16), PREVIEW), SecretOp.COPY_OTP)
        self.assertIs(self.tree.hit_test(_down(67, 16), PREVIEW), SecretOp.FETCH_OTP)
        self.assertIs(self.tree.hit_test(_down(70, 20), PREVIEW), SecretOp.COPY_LOGIN)

    def test_hidden_details_do_not_claim_clicks(self) -> None:
        self.render(PREVIEW)
        self.render(TABLE)
        self.assertIsInstance(self.tree.hit_test(_down(30, 12), TABLE), SelectAndFetch)

    def test_help_popup_is_modal(self) -> None:
        view = ViewState(main=MainMode.TABLE, overlay=OverlayMode.HELP)
        self.render(view)
        self.assertIs(self.tree.hit_test(_down(5, 3), view), Signal.NOOP)
        self.assertIs(self.tree.hit_test(MouseEvent(MouseKind.WHEEL_DOWN, 5, 3), view), Signal.NOOP)

    def test_popup_close_button(self) -> None:
        view = ViewState(main=MainMode.TABLE, overlay=OverlayMode.HELP)
        self.render(view)
        # Popup spans rows 3..20; the close button sits on row 19, centered.
        self.assertIs(self.tree.hit_test(_down(39, 19), view), Nav.BACK)

    def test_menu_stays_clickable_above_popup(self) -> None:
        view = ViewState(main=MainMode.TABLE, overlay=OverlayMode.HELP)
        self.render(view)
        self.assertIs(self.tree.hit_test(_down(25, 0), view), Nav.QUIT)

    def test_active_search_box(self) -> None:
        view = ViewState(main=MainMode.TABLE, search=SearchMode.ACTIVE)
        self.render(view)
        # Box occupies columns 44..78 on rows 3..5.
        self.assertIs(self.tree.hit_test(_down(50, 4), view), Nav.SEARCH)
        self.assertIs(self.tree.hit_test(_down(10, 10), view), Nav.LEAVE)

    def test_suspended_search_box_lets_table_clicks_through(self) -> None:
        view = ViewState(main=MainMode.TABLE, search=SearchMode.SUSPENDED)
        self.render(view)
        self.assertIs(self.tree.hit_test(_down(50, 4), view), Nav.SEARCH)
        self.assertEqual(self.tree.hit_test(_down(10, 3), view), SelectAndFetch(1))


if __name__ == "__main__":
    unittest.main()
