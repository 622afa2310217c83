"""
Node importance (PageRank-style random surfer) and the derived visual scale.
"""

from __future__ import annotations

import math
from typing import Dict

from refgraph.analysis.graph import DependencyGraph

DAMPING = 0.85
TOLERANCE = 0.01
MAX_ITERATIONS = 100


def pagerank(
    graph: DependencyGraph,
    *,
    damping: float = DAMPING,
    tolerance: float = TOLERANCE,
    max_iterations: int = MAX_ITERATIONS,
) -> Dict[str, float]:
    """
    Fixed-point iteration starting from uniform mass 1/n.

    Sinks (no outbound links) spread their whole mass evenly over all nodes
    ("warp" mass). Stops once the summed absolute change drops below
    ``tolerance`` or after ``max_iterations`` rounds.
    """
    nodes = list(graph)
    n = len(nodes)
    if n == 0:
        return {}
    scores = {node: 1.0 / n for node in nodes}
    incoming: Dict[str, list] = {node: [] for node in nodes}
    out_degree: Dict[str, int] = {}
    for src, node in graph.items():
        out_degree[src] = len(node.links)
        for dst in node.links:
            incoming[dst].append(src)

    for _ in range(max_iterations):
        warp = sum(scores[node] for node in nodes if out_degree[node] == 0) / n
        new_scores = {}
        for node in nodes:
            rank_sum = sum(scores[src] / out_degree[src] for src in incoming[node])
            new_scores[node] = damping * (rank_sum + warp) + (1.0 - damping) / n
        delta = sum(abs(new_scores[node] - scores[node]) for node in nodes)
        scores = new_scores
        if delta < tolerance:
            break
    return scores


def importance_scale(scores: Dict[str, float]) -> Dict[str, float]:
    """1 + ln(score / min score); the least important node gets exactly 1."""
    if not scores:
        return {}
    lowest = min(scores.values())
    return {node: 1.0 + math.log(score / lowest) for node, score in scores.items()}


class ImportanceScorer:
    """Per-node visual scale; uniform 1.0 when disabled."""

    def __init__(self, graph: DependencyGraph, enabled: bool = True):
        self.enabled = enabled
        if enabled:
            self.scores = pagerank(graph)
            self.scales = importance_scale(self.scores)
        else:
            self.scores = {}
            self.scales = {name: 1.0 for name in graph}

    def scale(self, name: str) -> float:
        return self.scales.get(name, 1.0)


__all__ = ["pagerank", "importance_scale", "ImportanceScorer", "DAMPING"]
