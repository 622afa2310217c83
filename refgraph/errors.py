"""Error taxonomy for a refgraph run.

Configuration errors abort before scanning; read errors abort the run with no
partial document; invariant errors mean a defect in graph construction.
"""

from __future__ import annotations


class RefgraphError(Exception):
    """Base class for all refgraph failures."""


class ConfigError(RefgraphError):
    """Invalid option, pattern or empty input set."""


class SourceReadError(RefgraphError):
    """An input file could not be read."""

    def __init__(self, path: str, reason: str):
        super().__init__(f"cannot read {path}: {reason}")
        self.path = path


class GraphInvariantError(RefgraphError):
    """The graph store violates one of its invariants."""
