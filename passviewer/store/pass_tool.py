"""Thin wrapper over the ``pass`` command line tool.

Each method is one request/response call. Failures raise ``PassToolError``
with a message fit for the status bar; callers never see ``CalledProcessError``
or a missing-binary ``OSError``.
"""

from __future__ import annotations

import logging
import os
import subprocess
from pathlib import Path

from ..errors import PassToolError
from . import clipboard

logger = logging.getLogger(__name__)

PASS_COMMAND = "pass"
CLIPBOARD_CLEAR_SECONDS = 45
OTP_URI_PREFIX = "otpauth://"


class PassTool:
    """Decrypt, derive one-time codes, and copy secrets for store entries."""

    def __init__(self, store_dir: Path, command: str = PASS_COMMAND) -> None:
        self.store_dir = store_dir
        self.command = command

    def _env(self) -> dict[str, str]:
        env = dict(os.environ)
        env["PASSWORD_STORE_DIR"] = str(self.store_dir)
        env["PASSWORD_STORE_CLIP_TIME"] = str(CLIPBOARD_CLEAR_SECONDS)
        return env

    def _run(self, *args: str) -> str:
        argv = [self.command, *args]
        logger.debug("running %s %s", self.command, args[0] if args else "")
        try:
            proc = subprocess.run(
                argv,
                capture_output=True,
                text=True,
                check=False,
                env=self._env(),
            )
        except OSError as exc:
            raise PassToolError(f"(pass) cannot run {self.command}: {exc}") from exc
        if proc.returncode != 0:
            detail = proc.stderr.strip() or f"exit status {proc.returncode}"
            raise PassToolError(f"(pass) {detail}")
        return proc.stdout

    def decrypt(self, entry_id: str) -> str:
        """Return the decrypted file content of ``entry_id``."""
        return self._run("show", entry_id)

    def derive_otp(self, entry_id: str) -> str:
        """Return the current one-time code for ``entry_id``."""
        code = self._run("otp", "code", entry_id).strip()
        if not code:
            raise PassToolError("(pass) empty one-time password")
        return code

    def copy_password(self, entry_id: str) -> None:
        self._run("show", "--clip", entry_id)

    def copy_login(self, entry_id: str) -> None:
        self._run("show", "--clip=2", entry_id)

    def copy_otp(self, entry_id: str) -> None:
        self._run("otp", "code", "--clip", entry_id)

    def copy_id(self, entry_id: str) -> None:
        clipboard.copy_text(entry_id)


def has_otp_uri(content: str) -> bool:
    return any(line.startswith(OTP_URI_PREFIX) for line in content.splitlines())


__all__ = [
    "CLIPBOARD_CLEAR_SECONDS",
    "OTP_URI_PREFIX",
    "PASS_COMMAND",
    "PassTool",
    "has_otp_uri",
]
