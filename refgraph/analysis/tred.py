"""
Transitive reduction (a la Graphviz tred) with a per-edge style verdict.

The graph may contain cycles, where a transitive reduction is not uniquely
defined. The DFS therefore starts from nodes in a random order; which edge of
a cycle ends up "reducible" depends on that order. Pass a seeded
``random.Random`` to make the result reproducible.

Levels:
  0 none     : reducible edges are drawn like any other edge
  1 highlight: reducible edges are dimmed
  2 ignore   : dimmed and excluded from layout ranking
  3 delete   : reducible edges are omitted
"""

from __future__ import annotations

import random
from enum import Enum, IntEnum
from typing import Dict, Iterator, List, Optional, Set, Tuple

from refgraph.analysis.graph import DependencyGraph, Edge


class ReduceLevel(IntEnum):
    NONE = 0
    HIGHLIGHT = 1
    IGNORE = 2
    DELETE = 3


class EdgeStyle(Enum):
    NORMAL = "normal"
    DIM = "dim"
    IGNORE = "ignore"
    DELETE = "delete"


_STYLE_BY_LEVEL = {
    ReduceLevel.NONE: EdgeStyle.NORMAL,
    ReduceLevel.HIGHLIGHT: EdgeStyle.DIM,
    ReduceLevel.IGNORE: EdgeStyle.IGNORE,
    ReduceLevel.DELETE: EdgeStyle.DELETE,
}


class TransitiveReducer:
    """Classifies edges implied by a longer path; owns all DFS state for one run."""

    def __init__(
        self,
        graph: DependencyGraph,
        level: int = ReduceLevel.NONE,
        *,
        rng: Optional[random.Random] = None,
    ):
        self.graph = graph
        self.level = ReduceLevel(min(int(level), ReduceLevel.DELETE))
        self.reduced: Set[Edge] = set()
        self._marks: Set[str] = set()
        self._rng = rng or random.Random()
        self._predecessors: Dict[str, List[str]] = {}
        if self.level > ReduceLevel.NONE:
            self._predecessors = graph.predecessor_map()
            self._reduce()

    def is_reducible(self, src: str, dst: str) -> bool:
        return self.level != ReduceLevel.NONE and (src, dst) in self.reduced

    def link_style(self, src: str, dst: str) -> EdgeStyle:
        if self.is_reducible(src, dst):
            return _STYLE_BY_LEVEL[self.level]
        return EdgeStyle.NORMAL

    def _reduce(self) -> None:
        order = list(self.graph)
        self._rng.shuffle(order)
        for name in order:
            self._visit(name)

    def _enter(self, name: str, parent: Optional[str]) -> Iterator[str]:
        self._marks.add(name)
        # an on-stack predecessor other than the parent reaches this node via a longer path
        for src in self._predecessors.get(name, ()):
            if src != parent and src in self._marks:
                self.reduced.add((src, name))
        return iter(sorted(self.graph[name].links))

    def _visit(self, start: str) -> None:
        frames: List[Tuple[str, Iterator[str]]] = [(start, self._enter(start, None))]
        while frames:
            name, targets = frames[-1]
            for dst in targets:
                if dst not in self._marks and (name, dst) not in self.reduced:
                    frames.append((dst, self._enter(dst, name)))
                    break
            else:
                frames.pop()
                self._marks.discard(name)


__all__ = ["TransitiveReducer", "ReduceLevel", "EdgeStyle"]
