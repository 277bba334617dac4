"""Background execution of secret operations and the completion channel.

Operations run on a small thread pool so the main loop never waits on
``pass``. In blocking mode they run inline instead, inside a context that
hands the terminal over to a tty passphrase prompt.
"""

from __future__ import annotations

import contextlib
import logging
from collections.abc import Callable
from concurrent.futures import ThreadPoolExecutor
from queue import Empty, Queue
from typing import ContextManager

from ..errors import PassviewerError
from .dedup import Permit
from .events import BackgroundResult, StatusResult

logger = logging.getLogger(__name__)

DEFAULT_MAX_WORKERS = 2


class CompletionChannel:
    """Many-producer, single-consumer FIFO of background results."""

    def __init__(self) -> None:
        self._results: Queue[BackgroundResult] = Queue()

    def put(self, result: BackgroundResult) -> None:
        self._results.put(result)

    def drain(self) -> list[BackgroundResult]:
        """Return every queued result in arrival order without blocking."""
        out: list[BackgroundResult] = []
        while True:
            try:
                out.append(self._results.get_nowait())
            except Empty:
                break
        return out


class BackgroundExecutor:
    """Run operations off the interactive path and report exactly one result each."""

    def __init__(
        self,
        channel: CompletionChannel,
        *,
        blocking: bool = False,
        max_workers: int = DEFAULT_MAX_WORKERS,
        blocking_context: Callable[[], ContextManager[object]] = contextlib.nullcontext,
    ) -> None:
        self._channel = channel
        self._blocking = blocking
        self._blocking_context = blocking_context
        self._pool: ThreadPoolExecutor | None = None
        if not blocking:
            self._pool = ThreadPoolExecutor(
                max_workers=max(1, max_workers),
                thread_name_prefix="passviewer-op",
            )

    @property
    def blocking(self) -> bool:
        return self._blocking

    def _run(self, permit: Permit, operation: Callable[[], BackgroundResult]) -> None:
        try:
            result = operation()
        except PassviewerError as exc:
            logger.info("%s for %s failed: %s", permit.op_class, permit.entry_id, exc)
            result = StatusResult(f"✗ {exc}")
        except Exception as exc:
            logger.exception("%s for %s crashed", permit.op_class, permit.entry_id)
            result = StatusResult(f"✗ {type(exc).__name__}: {exc}")
        try:
            self._channel.put(result)
        finally:
            permit.complete()

    def spawn(self, permit: Permit, operation: Callable[[], BackgroundResult]) -> None:
        """Start ``operation`` under ``permit``.

        In blocking mode this returns only after the result is queued.
        """
        logger.debug("spawn %s for %s (blocking=%s)", permit.op_class, permit.entry_id, self._blocking)
        if self._pool is None:
            with self._blocking_context():
                self._run(permit, operation)
            return
        permit.bind(self._pool.submit(self._run, permit, operation))

    def shutdown(self) -> None:
        """Stop accepting work; running operations finish on their own."""
        if self._pool is not None:
            self._pool.shutdown(wait=False)


__all__ = ["BackgroundExecutor", "CompletionChannel", "DEFAULT_MAX_WORKERS"]
