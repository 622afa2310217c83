"""Node decorator: font size from importance scale, optional fan-in/fan-out counts."""

from __future__ import annotations

from refgraph.analysis.graph import DependencyGraph, GraphNode
from refgraph.analysis.importance import ImportanceScorer
from refgraph.reporting.contracts import NodeStyle

FIXED_FONTSIZE = 40
SCALED_FONTSIZE_BASE = 30


class FanNodeDecorator:
    def __init__(self, graph: DependencyGraph, fan_counter: bool = False, scorer: ImportanceScorer | None = None):
        self.fan_counter = fan_counter
        self.scorer = scorer
        self._fan = graph.fan_in_out() if fan_counter else {}

    def fontsize(self, name: str) -> float:
        if self.scorer is None or not self.scorer.enabled:
            return FIXED_FONTSIZE
        return round(self.scorer.scale(name) * SCALED_FONTSIZE_BASE, 2)

    def node_style(self, name: str, node: GraphNode) -> NodeStyle:
        if self.fan_counter:
            fan_in, fan_out = self._fan[name]
            return NodeStyle(self.fontsize(name), fan_in, fan_out)
        return NodeStyle(self.fontsize(name))
