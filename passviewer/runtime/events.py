"""Messages produced by background operations and their action mapping."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from ..actions import Action, DisplayOtp, DisplaySecrets, SetStatus, Signal


@dataclass(frozen=True)
class StatusResult:
    """Status text from a finished operation; ``None`` restores the idle text."""

    message: str | None = None


@dataclass(frozen=True)
class SecretResult:
    entry_id: str
    content: str


@dataclass(frozen=True)
class OtpResult:
    entry_id: str
    code: str


BackgroundResult = Union[StatusResult, SecretResult, OtpResult]


def result_to_action(result: BackgroundResult) -> Action:
    """Reinterpret a channel message as the action the dispatch loop applies."""
    if isinstance(result, SecretResult):
        return DisplaySecrets(result.entry_id, result.content)
    if isinstance(result, OtpResult):
        return DisplayOtp(result.entry_id, result.code)
    if result.message is None:
        return Signal.RESET_STATUS
    return SetStatus(result.message)


__all__ = [
    "BackgroundResult",
    "OtpResult",
    "SecretResult",
    "StatusResult",
    "result_to_action",
]
