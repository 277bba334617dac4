"""Runtime composition root.

Wires the store, the dispatch handlers, the presentation tree and the
terminal together, then hands control to the main loop.
"""

from __future__ import annotations

import logging
import os
import sys
from dataclasses import dataclass, field

from ..actions import Action
from ..config import Settings
from ..input import parse_mouse, translate_key
from ..render.tree import PresentationTree
from ..store import Entry, PassTool, resolve_store_dir, scan_store
from .dashboard import Dashboard
from .dispatch import Dispatcher
from .events import result_to_action
from .executor import BackgroundExecutor, CompletionChannel
from .loop import LoopControl, LoopState, RuntimeLoopCallbacks, RuntimeLoopTiming, run_main_loop
from .machine import ViewController
from .search import SearchQuery
from .terminal import TerminalController

logger = logging.getLogger(__name__)

WINDOW_TITLE = "passviewer"


@dataclass
class Session:
    """Everything one viewer run owns, minus the terminal."""

    dashboard: Dashboard
    view: ViewController
    dispatcher: Dispatcher
    channel: CompletionChannel
    tree: PresentationTree = field(default_factory=PresentationTree)
    loop_state: LoopState = field(default_factory=LoopState)

    def translate(self, key: str) -> Action | None:
        """Turn a key or mouse token into at most one action."""
        if key.startswith("MOUSE"):
            event = parse_mouse(key)
            if event is None:
                return None
            return self.tree.hit_test(event, self.view.state)
        return translate_key(key, self.view.state)

    def drain_results(self) -> list[Action]:
        return [result_to_action(result) for result in self.channel.drain()]

    def render(self, width: int, height: int) -> bytes:
        return self.tree.render(self.dashboard, self.view.state, width, height)

    def callbacks(self) -> RuntimeLoopCallbacks:
        return RuntimeLoopCallbacks(
            render=self.render,
            translate=self.translate,
            dispatch=self.dispatcher.dispatch,
            drain_results=self.drain_results,
        )


def build_session(
    entries: list[Entry],
    tool: PassTool,
    executor: BackgroundExecutor,
    channel: CompletionChannel,
) -> Session:
    """Assemble the handlers in dispatch priority order: loop control, view, dashboard."""
    query = SearchQuery()
    view = ViewController(query.is_empty)
    dashboard = Dashboard(entries, view, tool, executor, query=query)
    loop_state = LoopState()
    dispatcher = Dispatcher([LoopControl(loop_state), view, dashboard])
    return Session(
        dashboard=dashboard,
        view=view,
        dispatcher=dispatcher,
        channel=channel,
        loop_state=loop_state,
    )


def run_app(settings: Settings) -> None:
    """Run the viewer on the controlling terminal until the user quits."""
    stdin_fd = sys.stdin.fileno()
    stdout_fd = sys.stdout.fileno()
    if not os.isatty(stdin_fd):
        raise SystemExit("passviewer needs an interactive terminal on stdin.")

    store_dir = resolve_store_dir()
    entries = scan_store(store_dir)
    terminal = TerminalController(stdin_fd, stdout_fd)
    channel = CompletionChannel()
    executor = BackgroundExecutor(
        channel,
        blocking=settings.tty_pinentry,
        blocking_context=terminal.suspended,
    )
    session = build_session(entries, PassTool(store_dir), executor, channel)
    logger.info(
        "starting with %d entries (tty_pinentry=%s, tick=%dms)",
        len(entries),
        settings.tty_pinentry,
        settings.tick_ms,
    )

    if settings.set_title:
        terminal.set_title(WINDOW_TITLE)
    try:
        run_main_loop(
            session.loop_state,
            terminal,
            stdin_fd,
            RuntimeLoopTiming(tick_ms=settings.tick_ms),
            session.callbacks(),
        )
    finally:
        executor.shutdown()
        terminal.restore_title()
    logger.info("stopped")


__all__ = ["Session", "WINDOW_TITLE", "build_session", "run_app"]
