"""Persistent JSON config helpers.

Holds startup preferences: blocking tty pinentry, window title, and the loop
tick. All access is defensive: malformed or missing config falls back safely.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, replace
from pathlib import Path

from platformdirs import user_config_dir

from .runtime.loop import DEFAULT_TICK_MS

logger = logging.getLogger(__name__)

APP_NAME = "passviewer"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME

MIN_TICK_MS = 20
MAX_TICK_MS = 1000


@dataclass(frozen=True)
class Settings:
    tty_pinentry: bool = False
    set_title: bool = False
    tick_ms: int = DEFAULT_TICK_MS

    def with_flags(self, *, tty_pinentry: bool = False, set_title: bool = False) -> Settings:
        """Layer command-line switches on top; a flag can only turn a feature on."""
        return replace(
            self,
            tty_pinentry=self.tty_pinentry or tty_pinentry,
            set_title=self.set_title or set_title,
        )


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return {}
    except (OSError, ValueError) as exc:
        logger.warning("ignoring config %s: %s", CONFIG_PATH, exc)
        return {}
    return data if isinstance(data, dict) else {}


def _load_bool(data: dict[str, object], key: str) -> bool | None:
    value = data.get(key)
    return value if isinstance(value, bool) else None


def _load_tick_ms(data: dict[str, object]) -> int | None:
    value = data.get("tick_ms")
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    if value < MIN_TICK_MS or value > MAX_TICK_MS:
        return None
    return value


def load_settings() -> Settings:
    """Build ``Settings`` from the config file, dropping invalid values key by key."""
    data = load_config()
    defaults = Settings()
    tty_pinentry = _load_bool(data, "tty_pinentry")
    set_title = _load_bool(data, "set_title")
    tick_ms = _load_tick_ms(data)
    return Settings(
        tty_pinentry=defaults.tty_pinentry if tty_pinentry is None else tty_pinentry,
        set_title=defaults.set_title if set_title is None else set_title,
        tick_ms=defaults.tick_ms if tick_ms is None else tick_ms,
    )


__all__ = [
    "APP_NAME",
    "CONFIG_PATH",
    "MAX_TICK_MS",
    "MIN_TICK_MS",
    "Settings",
    "load_config",
    "load_settings",
]
