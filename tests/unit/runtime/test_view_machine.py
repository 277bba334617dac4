from __future__ import annotations

import unittest

from passviewer.actions import Insert, Nav, SecretOp, Select, SelectAndFetch, SetStatus
from passviewer.runtime.machine import ViewController, apply
from passviewer.runtime.state import InputAxis, MainMode, OverlayMode, SearchMode, ViewState


class ApplyTransitionTests(unittest.TestCase):
    def test_back_steps_from_secrets_to_preview_to_table(self) -> None:
        state = ViewState(main=MainMode.SECRETS)
        state, follow_up = apply(Nav.BACK, state)
        self.assertEqual(state.main, MainMode.PREVIEW)
        self.assertIsNone(follow_up)
        state, _ = apply(Nav.BACK, state)
        self.assertEqual(state.main, MainMode.TABLE)
        state, _ = apply(Nav.BACK, state)
        self.assertEqual(state.main, MainMode.TABLE)

    def test_back_closes_overlay_before_touching_main_mode(self) -> None:
        state = ViewState(main=MainMode.SECRETS, overlay=OverlayMode.HELP)
        state, follow_up = apply(Nav.BACK, state)
        self.assertEqual(state, ViewState(main=MainMode.SECRETS))
        self.assertIsNone(follow_up)

    def test_leave_closes_empty_search_and_suspends_non_empty_search(self) -> None:
        active = ViewState(search=SearchMode.ACTIVE)
        closed, _ = apply(Nav.LEAVE, active, query_empty=True)
        suspended, _ = apply(Nav.LEAVE, active, query_empty=False)
        self.assertEqual(closed.search, SearchMode.INACTIVE)
        self.assertEqual(suspended.search, SearchMode.SUSPENDED)

        again, _ = apply(Nav.LEAVE, suspended, query_empty=False)
        self.assertEqual(again.search, SearchMode.INACTIVE)

    def test_leave_is_ignored_while_overlay_is_open(self) -> None:
        state = ViewState(search=SearchMode.ACTIVE, overlay=OverlayMode.FILE)
        self.assertEqual(apply(Nav.LEAVE, state, query_empty=False), (state, None))

    def test_entering_secrets_requests_fetch(self) -> None:
        for action in (Nav.SECRETS, SelectAndFetch(3)):
            state, follow_up = apply(action, ViewState(main=MainMode.TABLE))
            self.assertEqual(state.main, MainMode.SECRETS)
            self.assertIs(follow_up, SecretOp.FETCH)

    def test_file_overlay_requests_fetch_and_keeps_main_mode(self) -> None:
        state, follow_up = apply(Nav.FILE, ViewState(main=MainMode.PREVIEW))
        self.assertEqual(state, ViewState(main=MainMode.PREVIEW, overlay=OverlayMode.FILE))
        self.assertIs(follow_up, SecretOp.FETCH)

    def test_search_help_and_preview_set_their_axis(self) -> None:
        self.assertEqual(apply(Nav.SEARCH, ViewState())[0].search, SearchMode.ACTIVE)
        self.assertEqual(apply(Nav.HELP, ViewState())[0].overlay, OverlayMode.HELP)
        self.assertEqual(apply(Nav.PREVIEW, ViewState(main=MainMode.TABLE))[0].main, MainMode.PREVIEW)

    def test_list_navigation_drops_secrets_back_to_preview(self) -> None:
        secrets = ViewState(main=MainMode.SECRETS)
        for action in (Nav.DOWN, Nav.UP, Nav.PAGE_DOWN, Nav.PAGE_UP, Nav.TOP, Nav.BOTTOM, Select(2)):
            state, follow_up = apply(action, secrets)
            self.assertEqual(state.main, MainMode.PREVIEW)
            self.assertIsNone(follow_up)

        table = ViewState(main=MainMode.TABLE)
        self.assertEqual(apply(Nav.DOWN, table), (table, None))

    def test_unrelated_actions_leave_state_unchanged(self) -> None:
        state = ViewState(main=MainMode.SECRETS, search=SearchMode.SUSPENDED)
        for action in (Insert("a"), SetStatus("x"), SecretOp.COPY_LOGIN, Nav.QUIT):
            self.assertEqual(apply(action, state), (state, None))

    def test_apply_is_deterministic(self) -> None:
        states = [
            ViewState(main=main, search=search, overlay=overlay)
            for main in MainMode
            for search in SearchMode
            for overlay in OverlayMode
        ]
        for state in states:
            for action in Nav:
                self.assertEqual(apply(action, state, False), apply(action, state, False))


class InputAxisTests(unittest.TestCase):
    def test_overlay_beats_active_search_beats_main(self) -> None:
        self.assertEqual(
            ViewState(search=SearchMode.ACTIVE, overlay=OverlayMode.HELP).input_axis,
            InputAxis.OVERLAY,
        )
        self.assertEqual(ViewState(search=SearchMode.ACTIVE).input_axis, InputAxis.SEARCH)
        self.assertEqual(ViewState(search=SearchMode.SUSPENDED).input_axis, InputAxis.MAIN)


class ViewControllerTests(unittest.TestCase):
    def test_remembers_previous_state_for_transition_queries(self) -> None:
        query_empty = [False]
        controller = ViewController(lambda: query_empty[0], ViewState(main=MainMode.SECRETS))

        self.assertIsNone(controller.update(Nav.BACK))
        self.assertTrue(controller.left_main(MainMode.SECRETS))

        controller.update(Nav.SEARCH)
        self.assertTrue(controller.entered_search(SearchMode.ACTIVE))
        self.assertFalse(controller.left_main(MainMode.SECRETS))

        controller.update(Nav.LEAVE)
        self.assertEqual(controller.state.search, SearchMode.SUSPENDED)
        self.assertTrue(controller.left_search(SearchMode.ACTIVE))

        query_empty[0] = True
        controller.update(Nav.LEAVE)
        self.assertTrue(controller.left_search(SearchMode.SUSPENDED))
        self.assertEqual(controller.state.search, SearchMode.INACTIVE)

    def test_update_returns_follow_up(self) -> None:
        controller = ViewController()
        self.assertIs(controller.update(Nav.SECRETS), SecretOp.FETCH)


if __name__ == "__main__":
    unittest.main()
