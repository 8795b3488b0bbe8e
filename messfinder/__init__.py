"""Find leftover files and dirty git repositories under workspace roots.

``walk.display`` yields ``MessReport`` events for one root, ``git_status``
decides why a repository is dirty, and ``render`` turns reports into lines.
``main`` runs the command-line tool.
"""

from __future__ import annotations


def main(*args, **kwargs):
    """Run the CLI, importing it on first use."""
    from .cli import main as _main

    return _main(*args, **kwargs)

__all__ = ["main"]
