"""Analysis layer: identifiers, reference scanning, graph store, reduction, scoring."""

from . import graph, importance, matcher, metrics, naming, scanner, tred  # noqa: F401

__all__ = ["graph", "importance", "matcher", "metrics", "naming", "scanner", "tred"]
