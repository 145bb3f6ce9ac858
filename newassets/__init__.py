"""Public package surface for newassets.

Exports ``main`` for programmatic CLI invocation.
The pipeline lives in ``time_window``, ``sorting``, ``tree_model`` and
``session``.
"""

from __future__ import annotations


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)

__all__ = ["main"]
