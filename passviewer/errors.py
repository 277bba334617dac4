"""Exception types raised inside passviewer."""

from __future__ import annotations


class PassviewerError(Exception):
    """Base class for passviewer errors."""


class PassToolError(PassviewerError):
    """The ``pass`` command could not be run or exited unsuccessfully."""


class ClipboardError(PassviewerError):
    """No clipboard command is available or the copy failed."""


class DispatchError(PassviewerError):
    """An action chain broke an internal invariant.

    This is a programming error and is never shown as a status message.
    """
