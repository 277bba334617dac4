"""Password-store discovery and enumeration.

Resolves the store root the way ``pass`` does and scans it once for
``.gpg`` files. Unreadable directories are skipped so a partially readable
store still produces a usable list.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path

logger = logging.getLogger(__name__)

STORE_DIR_ENV = "PASSWORD_STORE_DIR"
DEFAULT_STORE_DIRNAME = ".password-store"
SECRET_SUFFIX = ".gpg"
HOME_PREFIXES = ("$HOME", "~")


@dataclass(frozen=True)
class Entry:
    """One secret-store record."""

    entry_id: str
    modified: float | None = None

    def last_modified(self) -> str:
        """Format the modification time for the entry table (UTC)."""
        if self.modified is None:
            return "Unknown"
        stamp = datetime.fromtimestamp(self.modified, tz=timezone.utc)
        return stamp.strftime("%b %d, %Y, %H:%M")


def resolve_store_dir(environ: dict[str, str] | None = None, home: Path | None = None) -> Path:
    """Return the store root from ``$PASSWORD_STORE_DIR`` or the default.

    Accepts absolute paths and paths whose first component is ``~`` or a
    literal ``$HOME``. Anything else, including ``~user``, falls back to
    ``~/.password-store``.
    """
    env = os.environ if environ is None else environ
    home_dir = Path.home() if home is None else home
    raw = env.get(STORE_DIR_ENV, "").strip()
    if raw:
        for prefix in HOME_PREFIXES:
            if raw == prefix or raw.startswith(prefix + "/"):
                return home_dir / raw[len(prefix):].lstrip("/")
        path = Path(raw)
        if path.is_absolute():
            return path
        logger.warning("ignoring relative %s=%r", STORE_DIR_ENV, raw)
    return home_dir / DEFAULT_STORE_DIRNAME


def entry_id_for(path: Path, store_dir: Path) -> str:
    """Strip the store root and the secret suffix from ``path``."""
    relative = path.relative_to(store_dir)
    return relative.with_suffix("").as_posix()


def scan_store(store_dir: Path) -> list[Entry]:
    """Collect all entries below ``store_dir`` sorted by id.

    Hidden directories (``.git``, ``.extensions``) are not descended into.
    """
    entries: list[Entry] = []

    def on_error(exc: OSError) -> None:
        logger.warning("cannot read %s: %s", getattr(exc, "filename", store_dir), exc)

    for dirpath, dirnames, filenames in os.walk(store_dir, onerror=on_error):
        dirnames[:] = sorted(name for name in dirnames if not name.startswith("."))
        for filename in filenames:
            if not filename.endswith(SECRET_SUFFIX):
                continue
            path = Path(dirpath) / filename
            try:
                modified: float | None = path.stat().st_mtime
            except OSError:
                modified = None
            entries.append(Entry(entry_id_for(path, store_dir), modified))

    entries.sort(key=lambda entry: entry.entry_id)
    logger.info("found %d entries in %s", len(entries), store_dir)
    return entries


__all__ = [
    "DEFAULT_STORE_DIRNAME",
    "Entry",
    "SECRET_SUFFIX",
    "STORE_DIR_ENV",
    "entry_id_for",
    "resolve_store_dir",
    "scan_store",
]
