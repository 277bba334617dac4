"""Gate that keeps one background operation in flight per entry and class.

The gate lives on the main thread only. Workers never see it: they receive a
``Permit`` whose completion they signal, and the gate inspects that permit the
next time the same ``(entry_id, op_class)`` pair is requested.
"""

from __future__ import annotations

import logging
import threading
from concurrent.futures import Future
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)


class Permit:
    """Completion signal for one granted background operation."""

    def __init__(self, entry_id: str, op_class: str) -> None:
        self.entry_id = entry_id
        self.op_class = op_class
        self._completed = threading.Event()
        self._task: Future | None = None

    def bind(self, task: Future) -> None:
        """Attach the task running this operation so its liveness can be checked."""
        self._task = task

    def complete(self) -> None:
        self._completed.set()

    @property
    def completed(self) -> bool:
        return self._completed.is_set()

    @property
    def task_alive(self) -> bool:
        return self._task is not None and not self._task.done()

    def in_flight(self) -> bool:
        """Return whether the operation may still be running.

        A permit that was never bound to a task, or whose task finished
        without signalling, is not in flight.
        """
        return not self.completed and self.task_alive


@dataclass
class PendingOperation:
    entry_id: str
    op_class: str
    permit: Permit = field(repr=False)


class OperationGate:
    """Advisory dedup of background operations keyed by operation class.

    Each class tracks its most recent request. A new permit is granted when
    the entry id changes, or when the tracked operation for the same id is no
    longer in flight. Different classes never block each other.
    """

    def __init__(self) -> None:
        self._pending: dict[str, PendingOperation] = {}

    def request(self, entry_id: str, op_class: str) -> Permit | None:
        current = self._pending.get(op_class)
        if current is not None and current.entry_id == entry_id and current.permit.in_flight():
            logger.debug("denied duplicate %s for %s", op_class, entry_id)
            return None
        permit = Permit(entry_id, op_class)
        self._pending[op_class] = PendingOperation(entry_id, op_class, permit)
        return permit

    def pending(self, op_class: str) -> PendingOperation | None:
        return self._pending.get(op_class)


__all__ = ["OperationGate", "PendingOperation", "Permit"]
