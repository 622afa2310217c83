"""
Dependency graph store.

Nodes are **node identifiers** (normalized file base names). Each node record
keeps the display label and cluster key of the first file seen for it, every
contributing file path, and its outbound links. Records are frozen once the
scan has finished; the reducer, scorer and renderer only read them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, FrozenSet, Iterator, List, Set, Tuple

from refgraph.errors import GraphInvariantError

Edge = Tuple[str, str]


@dataclass(frozen=True)
class GraphNode:
    label: str
    files: Tuple[str, ...]
    links: FrozenSet[str]
    cluster: str


@dataclass
class NodeBuilder:
    """Mutable accumulator used while scanning; frozen into a GraphNode afterwards."""

    label: str
    cluster: str
    files: List[str] = field(default_factory=list)
    links: Set[str] = field(default_factory=set)

    def freeze(self, identifier: str) -> GraphNode:
        links = frozenset(self.links - {identifier})
        return GraphNode(self.label, tuple(self.files), links, self.cluster)


class DependencyGraph:
    """Ordered mapping node identifier -> GraphNode (first-seen order)."""

    def __init__(self, nodes: Dict[str, GraphNode]):
        self._nodes: Dict[str, GraphNode] = dict(nodes)

    @classmethod
    def from_builders(cls, builders: Dict[str, NodeBuilder]) -> "DependencyGraph":
        return cls({name: builder.freeze(name) for name, builder in builders.items()})

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[str]:
        return iter(self._nodes)

    def __contains__(self, name: object) -> bool:
        return name in self._nodes

    def __getitem__(self, name: str) -> GraphNode:
        return self._nodes[name]

    def items(self):
        return self._nodes.items()

    def edges(self) -> List[Edge]:
        """All edges, nodes in first-seen order, targets sorted."""
        return [(src, dst) for src, node in self._nodes.items() for dst in sorted(node.links)]

    def edge_count(self) -> int:
        return sum(len(node.links) for node in self._nodes.values())

    def predecessor_map(self) -> Dict[str, List[str]]:
        """Node identifier -> nodes linking to it, in first-seen order."""
        preds: Dict[str, List[str]] = {name: [] for name in self._nodes}
        for src, node in self._nodes.items():
            for dst in node.links:
                preds.setdefault(dst, []).append(src)
        return preds

    def validate(self) -> None:
        """Raise GraphInvariantError on self-links or links to unknown nodes."""
        for name, node in self._nodes.items():
            if name in node.links:
                raise GraphInvariantError(f"node {name!r} links to itself")
            dangling = sorted(dst for dst in node.links if dst not in self._nodes)
            if dangling:
                raise GraphInvariantError(f"node {name!r} links to unknown node(s): {', '.join(dangling)}")

    def fan_in_out(self) -> Dict[str, Tuple[int, int]]:
        fan_in: Dict[str, int] = {name: 0 for name in self._nodes}
        for node in self._nodes.values():
            for dst in node.links:
                if dst in fan_in:
                    fan_in[dst] += 1
        return {name: (fan_in[name], len(node.links)) for name, node in self._nodes.items()}

    def clusters(self) -> Dict[str, List[str]]:
        """Cluster key -> node identifiers, both in first-seen order."""
        groups: Dict[str, List[str]] = {}
        for name, node in self._nodes.items():
            groups.setdefault(node.cluster, []).append(name)
        return groups

    def _dfs_cycles(
        self,
        root: str,
        visited: Set[str],
        stack: List[str],
        on_stack: Set[str],
        cycles: List[List[str]],
    ) -> None:
        # explicit frames: reference chains can be longer than the recursion limit
        frames: List[Tuple[str, Iterator[str]]] = []

        def enter(node: str) -> None:
            visited.add(node)
            stack.append(node)
            on_stack.add(node)
            frames.append((node, iter(sorted(self._nodes[node].links))))

        enter(root)
        while frames:
            node, targets = frames[-1]
            for nxt in targets:
                if nxt not in visited:
                    enter(nxt)
                    break
                if nxt in on_stack:
                    self._record_cycle_from(stack, nxt, cycles)
            else:
                frames.pop()
                stack.pop()
                on_stack.remove(node)

    def _record_cycle_from(self, stack: List[str], target: str, cycles: List[List[str]]) -> None:
        idx = stack.index(target)
        cycle = stack[idx:].copy()
        if cycle and cycle not in cycles:
            cycles.append(cycle)

    def find_cycles(self) -> List[List[str]]:
        visited: Set[str] = set()
        on_stack: Set[str] = set()
        stack: List[str] = []
        cycles: List[List[str]] = []
        for node in self._nodes:
            if node not in visited:
                self._dfs_cycles(node, visited, stack, on_stack, cycles)
        return cycles


__all__ = ["DependencyGraph", "GraphNode", "NodeBuilder", "Edge"]
