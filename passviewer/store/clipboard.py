"""Clipboard copy through the platform's clipboard command."""

from __future__ import annotations

import os
import shutil
import subprocess
import sys

from ..errors import ClipboardError


def clipboard_commands() -> list[list[str]]:
    """Return candidate clipboard commands for this platform in preference order."""
    if sys.platform == "darwin":
        return [["pbcopy"]]
    if os.name == "nt":
        return [["clip"]]
    return [
        ["wl-copy"],
        ["xclip", "-selection", "clipboard"],
        ["xsel", "--clipboard", "--input"],
    ]


def copy_text(text: str) -> None:
    """Copy ``text`` using the first clipboard command that succeeds.

    Raises ``ClipboardError`` when no command is installed or all of them fail.
    """
    available = [command for command in clipboard_commands() if shutil.which(command[0]) is not None]
    if not available:
        raise ClipboardError("Clipboard error: no clipboard command found")

    last_error = ""
    for command in available:
        try:
            proc = subprocess.run(
                command,
                input=text,
                text=True,
                capture_output=True,
                check=False,
            )
        except OSError as exc:
            last_error = str(exc)
            continue
        if proc.returncode == 0:
            return
        last_error = proc.stderr.strip() or f"{command[0]} exited with {proc.returncode}"
    raise ClipboardError(f"Clipboard error: {last_error}")


__all__ = ["clipboard_commands", "copy_text"]
