"""Help overlay content."""

from __future__ import annotations

HELP_LINES: tuple[tuple[str, str], ...] = (
    ("heading", "Navigation"),
    ("text", ""),
    ("text", "(↓), (↑), (j), (k) Select list entry"),
    ("text", "(⇣), (⇡), (b), (f) Skip list entries"),
    ("text", "(⇱), (g) Select first entry in list"),
    ("text", "(⇲), (G) Select last entry in list"),
    ("text", ""),
    ("text", "(←) (h) (→) (l) (↵) Switch between view modes"),
    ("text", "for password list, preview and secrets"),
    ("text", ""),
    ("text", "Keyboard shortcuts are mapped in all view modes."),
    ("text", ""),
    ("heading", "Secrets"),
    ("text", ""),
    ("text", "(y) Copy password  (v) Copy login  (x) Copy one-time password"),
    ("text", "(c) Copy password file id  (i) Show file  (r) Refresh one-time password"),
    ("text", ""),
    ("heading", "Search"),
    ("text", ""),
    ("text", "(/) Start search"),
    ("text", "(Esc), (↵) Suspend search"),
    ("text", "Pressing (Esc) a second time clears the search and resets the filter."),
    ("text", "(↓) and (↑) work as usual to select a result."),
)

__all__ = ["HELP_LINES"]
