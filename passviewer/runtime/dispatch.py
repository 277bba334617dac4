"""Action dispatch with bounded follow-up chaining."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Protocol

from ..actions import Action
from ..errors import DispatchError

logger = logging.getLogger(__name__)

MAX_DISPATCH_HOPS = 16


class ActionHandler(Protocol):
    def update(self, action: Action) -> Action | None: ...


class Dispatcher:
    """Apply actions to handlers in priority order, following chained actions.

    Every handler sees each action. At most one handler may answer with a
    follow-up; that follow-up is dispatched next. The chain ends when no
    handler answers.
    """

    def __init__(self, handlers: Sequence[ActionHandler], max_hops: int = MAX_DISPATCH_HOPS) -> None:
        self._handlers = tuple(handlers)
        self._max_hops = max_hops

    def dispatch(self, action: Action) -> list[Action]:
        """Dispatch ``action`` and its chain; return every action applied."""
        applied: list[Action] = []
        current: Action | None = action
        while current is not None:
            if len(applied) >= self._max_hops:
                raise DispatchError(
                    f"action chain exceeded {self._max_hops} hops: "
                    + " -> ".join(repr(step) for step in applied[-4:])
                )
            applied.append(current)
            follow_up: Action | None = None
            for handler in self._handlers:
                answer = handler.update(current)
                if answer is None:
                    continue
                if follow_up is not None:
                    raise DispatchError(
                        f"{type(handler).__name__} answered {current!r} with {answer!r} "
                        f"after {follow_up!r} was already chained"
                    )
                follow_up = answer
            if follow_up is not None:
                logger.debug("%r -> %r", current, follow_up)
            current = follow_up
        return applied


__all__ = ["ActionHandler", "Dispatcher", "MAX_DISPATCH_HOPS"]
