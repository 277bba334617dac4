"""Main interactive event loop for the terminal UI.

Each iteration is one tick: drain background results, render when something
changed, then wait at most one tick for a key. Feature logic lives in the
dispatch handlers; the loop only moves actions around.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from ..actions import Action, Nav, Signal
from ..input import read_key
from .terminal import TerminalController


DEFAULT_TICK_MS = 80


@dataclass
class LoopState:
    """Flags shared between the loop and the application handler."""

    dirty: bool = True
    quit: bool = False
    size: tuple[int, int] = (0, 0)


class LoopControl:
    """Dispatch handler for actions that steer the loop itself."""

    def __init__(self, state: LoopState) -> None:
        self.state = state

    def update(self, action: Action) -> Action | None:
        if action is Nav.QUIT:
            self.state.quit = True
        elif action is Signal.REDRAW:
            self.state.dirty = True
        return None


@dataclass(frozen=True)
class RuntimeLoopTiming:
    tick_ms: int = DEFAULT_TICK_MS


@dataclass(frozen=True)
class RuntimeLoopCallbacks:
    """Injected operations used by ``run_main_loop``."""

    render: Callable[[int, int], bytes]
    translate: Callable[[str], Action | None]
    dispatch: Callable[[Action], list[Action]]
    drain_results: Callable[[], list[Action]]
    read_key: Callable[..., str] = read_key


def run_main_loop(
    state: LoopState,
    terminal: TerminalController,
    stdin_fd: int,
    timing: RuntimeLoopTiming,
    callbacks: RuntimeLoopCallbacks,
) -> None:
    """Run the interactive loop until an action sets ``state.quit``."""
    ops = callbacks
    with terminal.raw_mode():
        while not state.quit:
            size = terminal.size()
            if size != state.size:
                state.size = size
                state.dirty = True

            for action in ops.drain_results():
                ops.dispatch(action)
                state.dirty = True
            if state.quit:
                break

            if state.dirty:
                state.dirty = False
                terminal.write(ops.render(*size))

            try:
                key = ops.read_key(stdin_fd, timeout_ms=timing.tick_ms)
            except KeyboardInterrupt:
                # Ignore SIGINT-style interrupts so terminal copy shortcuts do not exit the app.
                continue
            if key == "":
                continue
            action = ops.translate(key)
            if action is None:
                continue
            ops.dispatch(action)
            state.dirty = True


__all__ = [
    "DEFAULT_TICK_MS",
    "LoopControl",
    "LoopState",
    "RuntimeLoopCallbacks",
    "RuntimeLoopTiming",
    "run_main_loop",
]
