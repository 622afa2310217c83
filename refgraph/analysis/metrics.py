"""
Graph analysis helpers: summary and metrics.
"""

from __future__ import annotations

from typing import Dict, Optional

from refgraph.analysis.graph import DependencyGraph
from refgraph.analysis.importance import ImportanceScorer
from refgraph.analysis.tred import TransitiveReducer


def summarize_graph(
    graph: DependencyGraph,
    reducer: Optional[TransitiveReducer] = None,
    scorer: Optional[ImportanceScorer] = None,
) -> Dict:
    """
    Build a summary dict for a DependencyGraph.

      {
        "nodes": int,
        "edges": int,
        "clusters": int,
        "cycles_count": int,
        "cycles": list[list[str]],
        "reduce_level": int,
        "reducible_edges": list[[src, dst]],
        "metrics": { name: {label, files, fan_in, fan_out, importance}, ... }
      }
    """
    cycles = graph.find_cycles()
    fan = graph.fan_in_out()
    reducible = sorted(reducer.reduced) if reducer is not None and reducer.level else []
    return {
        "nodes": len(graph),
        "edges": graph.edge_count(),
        "clusters": len(graph.clusters()),
        "cycles_count": len(cycles),
        "cycles": cycles,
        "reduce_level": int(reducer.level) if reducer is not None else 0,
        "reducible_edges": [list(edge) for edge in reducible],
        "metrics": {
            name: {
                "label": node.label,
                "files": list(node.files),
                "fan_in": fan[name][0],
                "fan_out": fan[name][1],
                "importance": scorer.scale(name) if scorer is not None and scorer.enabled else None,
            }
            for name, node in graph.items()
        },
    }
