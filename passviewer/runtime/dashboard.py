"""Domain handler: entries, selection, filter, secret details and status.

The dashboard reacts to actions after the view controller has applied them,
so it can attach domain effects to the transition that just happened.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from functools import partial

from ..actions import (
    Action,
    DisplayOtp,
    DisplaySecrets,
    Insert,
    Nav,
    SearchEdit,
    SecretOp,
    Select,
    SelectAndFetch,
    SetStatus,
    Signal,
)
from ..store.entries import Entry
from ..store.pass_tool import PassTool, has_otp_uri
from .dedup import OperationGate
from .events import BackgroundResult, OtpResult, SecretResult, StatusResult
from .executor import BackgroundExecutor
from .machine import ViewController
from .search import SearchQuery
from .state import MainMode, SearchMode

logger = logging.getLogger(__name__)

PAGE_STEP = 10
IDLE_STATUS = "Ready"
NO_SELECTION_STATUS = "No entry selected"
OTP_PLACEHOLDER = "******"


def _copy_id(tool: PassTool, entry_id: str) -> BackgroundResult:
    tool.copy_id(entry_id)
    return StatusResult("Password file id copied to clipboard")


def _decrypt(tool: PassTool, entry_id: str) -> BackgroundResult:
    return SecretResult(entry_id, tool.decrypt(entry_id))


def _derive_otp(tool: PassTool, entry_id: str) -> BackgroundResult:
    return OtpResult(entry_id, tool.derive_otp(entry_id))


def _copy_password(tool: PassTool, entry_id: str) -> BackgroundResult:
    tool.copy_password(entry_id)
    return StatusResult("Password copied to clipboard, clears after 45 seconds")


def _copy_login(tool: PassTool, entry_id: str) -> BackgroundResult:
    tool.copy_login(entry_id)
    return StatusResult("Login copied to clipboard, clears after 45 seconds")


def _copy_otp(tool: PassTool, entry_id: str) -> BackgroundResult:
    tool.copy_otp(entry_id)
    return StatusResult("One-time password copied to clipboard, clears after 45 seconds")


@dataclass(frozen=True)
class OperationKind:
    """How one ``SecretOp`` is gated, announced and run."""

    op_class: str
    progress: str
    run: Callable[[PassTool, str], BackgroundResult]


OPERATIONS: dict[SecretOp, OperationKind] = {
    SecretOp.COPY_ID: OperationKind("copy_id", "⧗ Copying password file id...", _copy_id),
    SecretOp.FETCH: OperationKind("decrypt", "⧗ Fetching password entry...", _decrypt),
    SecretOp.FETCH_OTP: OperationKind("otp", "⧗ Fetching one-time password...", _derive_otp),
    SecretOp.COPY_PASSWORD: OperationKind("copy_password", "⧗ Copying password...", _copy_password),
    SecretOp.COPY_LOGIN: OperationKind("copy_login", "⧗ Copying login...", _copy_login),
    SecretOp.COPY_OTP: OperationKind("copy_otp", "⧗ Copying one-time password...", _copy_otp),
}


@dataclass
class SecretDetails:
    """Fields shown in the details panel for the selected entry."""

    entry_id: str | None = None
    line_count: int | None = None
    password: str | None = None
    login: str | None = None
    otp: str | None = None

    def reset(self) -> None:
        self.entry_id = None
        self.line_count = None
        self.hide_secrets()

    def hide_secrets(self) -> None:
        self.password = None
        self.login = None
        self.otp = None


class Dashboard:
    """Dispatch handler owning everything the screen shows besides the view axes."""

    def __init__(
        self,
        entries: list[Entry],
        view: ViewController,
        tool: PassTool,
        executor: BackgroundExecutor,
        gate: OperationGate | None = None,
        query: SearchQuery | None = None,
    ) -> None:
        self.entries = list(entries)
        self.view = view
        self.tool = tool
        self.executor = executor
        self.gate = gate if gate is not None else OperationGate()
        self.query = query if query is not None else SearchQuery()
        self.subset: list[int] = list(range(len(self.entries)))
        self.selected: int | None = None
        self.details = SecretDetails()
        self.file_content: str | None = None
        self.status: str | None = None
        self.select(0)

    # Selection and filtering

    def visible_entries(self) -> list[Entry]:
        return [self.entries[index] for index in self.subset]

    def selected_entry(self) -> Entry | None:
        if self.selected is None:
            return None
        return self.entries[self.subset[self.selected]]

    def select(self, index: int) -> None:
        """Select row ``index`` of the subset, clamped to the visible rows."""
        if not self.subset:
            self.selected = None
            self._forget_entry()
            return
        self.selected = min(max(index, 0), len(self.subset) - 1)
        entry_id = self.entries[self.subset[self.selected]].entry_id
        if self.details.entry_id == entry_id:
            return
        self._forget_entry()
        self.details.entry_id = entry_id

    def _forget_entry(self) -> None:
        self.status = None
        self.file_content = None
        self.details.reset()

    def next(self, step: int = 1) -> None:
        if self.selected is None:
            self.select(0)
            return
        self.select(self.selected + step)

    def previous(self, step: int = 1) -> None:
        if self.selected is None:
            self.select(0)
            return
        self.select(self.selected - step)

    def top(self) -> None:
        self.select(0)

    def bottom(self) -> None:
        self.select(len(self.subset) - 1)

    def filter(self) -> None:
        """Recompute the subset from the current query and select its first row."""
        needle = self.query.text.lower()
        self.subset = [
            index for index, entry in enumerate(self.entries) if needle in entry.entry_id.lower()
        ]
        self.select(0)

    def reset_filter(self) -> None:
        """Show every entry again, keeping the selected entry where possible."""
        absolute = 0
        if self.selected is not None and self.subset:
            absolute = self.subset[self.selected]
        self.subset = list(range(len(self.entries)))
        self.select(absolute)

    # Dispatch

    def update(self, action: Action) -> Action | None:
        self._follow_view()

        if action is Nav.DOWN:
            self.next()
        elif action is Nav.UP:
            self.previous()
        elif action is Nav.PAGE_DOWN:
            self.next(PAGE_STEP)
        elif action is Nav.PAGE_UP:
            self.previous(PAGE_STEP)
        elif action is Nav.TOP:
            self.top()
        elif action is Nav.BOTTOM:
            self.bottom()
        elif isinstance(action, (Select, SelectAndFetch)):
            self.select(action.index)
        elif isinstance(action, Insert):
            self.query.insert(action.char)
            self.filter()
        elif isinstance(action, SearchEdit):
            if self.query.edit(action):
                self.filter()
        elif isinstance(action, SecretOp):
            return self._start(action)
        elif isinstance(action, SetStatus):
            self.status = action.message
        elif action is Signal.RESET_STATUS:
            self.status = None
        elif isinstance(action, DisplaySecrets):
            return self._show_secrets(action)
        elif isinstance(action, DisplayOtp):
            self._show_otp(action)
        return None

    def _follow_view(self) -> None:
        if self.view.left_main(MainMode.SECRETS):
            self.details.hide_secrets()
            self.file_content = None
        if self.view.left_search(SearchMode.SUSPENDED) and self.view.state.search is SearchMode.INACTIVE:
            self.query.reset()
            self.reset_filter()

    def _start(self, op: SecretOp) -> Action | None:
        entry = self.selected_entry()
        if entry is None:
            return SetStatus(NO_SELECTION_STATUS)
        kind = OPERATIONS[op]
        permit = self.gate.request(entry.entry_id, kind.op_class)
        if permit is None:
            return None
        self.executor.spawn(permit, partial(kind.run, self.tool, entry.entry_id))
        if self.executor.blocking:
            return Signal.REDRAW
        return SetStatus(kind.progress)

    def _is_current(self, entry_id: str) -> bool:
        entry = self.selected_entry()
        return entry is not None and entry.entry_id == entry_id

    def _show_secrets(self, action: DisplaySecrets) -> Action | None:
        self.status = None
        if not self._is_current(action.entry_id):
            logger.debug("dropping stale secrets for %s", action.entry_id)
            return None
        lines = action.content.splitlines()
        self.file_content = action.content
        self.details.entry_id = action.entry_id
        self.details.line_count = len(lines)
        if not self.view.state.shows_secrets:
            # Fetched for the file overlay, or the secrets view was left meanwhile.
            self.details.hide_secrets()
            return None
        self.details.password = lines[0] if lines else ""
        self.details.login = lines[1] if len(lines) > 1 else None
        if has_otp_uri(action.content):
            self.details.otp = OTP_PLACEHOLDER
            return SecretOp.FETCH_OTP
        self.details.otp = None
        return None

    def _show_otp(self, action: DisplayOtp) -> None:
        self.status = None
        if not self._is_current(action.entry_id):
            logger.debug("dropping stale one-time password for %s", action.entry_id)
            return
        self.details.otp = action.code.strip()

    def status_text(self) -> str:
        return self.status if self.status is not None else IDLE_STATUS


__all__ = [
    "Dashboard",
    "IDLE_STATUS",
    "NO_SELECTION_STATUS",
    "OPERATIONS",
    "OTP_PLACEHOLDER",
    "OperationKind",
    "PAGE_STEP",
    "SecretDetails",
]
