"""Public runtime entry points.

Groups the viewer bootstrap (``run_app``) with the view state machine, the
dispatch loop and the background operation machinery.
"""

from __future__ import annotations


def run_app(*args, **kwargs):
    """Lazily import the composition root to keep submodule imports light."""
    from .app import run_app as _run_app

    return _run_app(*args, **kwargs)


__all__ = ["run_app"]
