"""dirtree: depth-limited directory listing with per-type statistics.

``main`` runs the command line. The building blocks live in submodules:
``traversal`` walks roots, ``report`` formats rows and totals, ``pattern``
compiles ``-f`` filters and ``file_tree_model`` reads and classifies entries.
"""

from __future__ import annotations


def main(*args, **kwargs):
    """Run the CLI; imported lazily so ``import dirtree`` stays cheap."""
    from .cli import main as _main

    return _main(*args, **kwargs)

__all__ = ["main"]
