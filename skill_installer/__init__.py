"""Public package surface for skill-installer.

Exports ``main`` for programmatic CLI invocation and ``select`` for callers
that want the interactive selector on its own.
"""

from __future__ import annotations

from .agents import AgentOption
from .selector import SelectionCancelled, select


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)


__all__ = ["AgentOption", "SelectionCancelled", "main", "select"]
