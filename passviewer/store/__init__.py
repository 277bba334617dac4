"""Store collaborators: entry enumeration, the ``pass`` tool, and the clipboard."""

from .entries import Entry, resolve_store_dir, scan_store
from .pass_tool import PassTool

__all__ = ["Entry", "PassTool", "resolve_store_dir", "scan_store"]
