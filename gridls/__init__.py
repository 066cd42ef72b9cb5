"""Public package surface for gridls.

Exports ``main`` for programmatic CLI invocation and ``walk`` for listing
from code. Most implementation lives in submodules under ``gridls``.
"""

from __future__ import annotations


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)


def walk(*args, **kwargs):
    """Lazily import the walker and list paths with it."""
    from .walker import walk as _walk

    return _walk(*args, **kwargs)


__all__ = ["main", "walk"]
