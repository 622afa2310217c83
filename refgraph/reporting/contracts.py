"""Decorator capabilities consumed by the renderer.

Edge classification comes from the transitive reducer; node display attributes
come from the fan counter and importance scorer. The renderer only sees these
two interfaces.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Protocol

from refgraph.analysis.graph import GraphNode
from refgraph.analysis.tred import EdgeStyle


@dataclass(frozen=True)
class NodeStyle:
    """Display attributes for one node; fan counts are None when not shown."""

    fontsize: float
    fan_in: Optional[int] = None
    fan_out: Optional[int] = None


class LinkDecorator(Protocol):
    def link_style(self, src: str, dst: str) -> EdgeStyle: ...


class NodeDecorator(Protocol):
    def node_style(self, name: str, node: GraphNode) -> NodeStyle: ...
