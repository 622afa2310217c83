"""Core orchestration pipeline for refgraph.

One sequential pass per run: list sources, scan them into a graph, run the
transitive reducer and the importance scorer over the finished graph, then
render. Rendering goes into a buffer so a failure never leaves a partial
document on stdout.
"""

from __future__ import annotations

import io
import random
from dataclasses import dataclass
from typing import Any, Dict, List

from refgraph.analysis.graph import DependencyGraph
from refgraph.analysis.importance import ImportanceScorer
from refgraph.analysis.metrics import summarize_graph
from refgraph.analysis.scanner import scan
from refgraph.analysis.tred import TransitiveReducer
from refgraph.config import GraphOptions
from refgraph.core.sources import list_sources
from refgraph.errors import ConfigError
from refgraph.orchestration.logging import get_logger
from refgraph.reporting.dot import DotGraphPrinter
from refgraph.reporting.styles import FanNodeDecorator

_log = get_logger("pipeline")


@dataclass
class GraphSnapshot:
    """Everything computed for one run; read-only after analyze()."""

    sources: List[str]
    graph: DependencyGraph
    reducer: TransitiveReducer
    scorer: ImportanceScorer

    def summary(self) -> Dict[str, Any]:
        return summarize_graph(self.graph, self.reducer, self.scorer)


def analyze(opts: GraphOptions) -> GraphSnapshot:
    """Build the graph and run reduction + scoring over it."""
    sources = list_sources(opts.globs, opts.ignore)
    if not sources:
        raise ConfigError("no source files matched: " + " ".join(opts.globs))
    graph = scan(sources, case_sensitive=opts.case_sensitive, filters=opts.filters)
    reducer = TransitiveReducer(graph, opts.reduce, rng=random.Random(opts.seed))
    scorer = ImportanceScorer(graph, enabled=opts.importance)
    _log.debug(
        "refgraph: %d file(s), %d node(s), %d edge(s), %d reducible at level %d",
        len(sources),
        len(graph),
        graph.edge_count(),
        len(reducer.reduced),
        reducer.level,
    )
    return GraphSnapshot(sources=sources, graph=graph, reducer=reducer, scorer=scorer)


def render_dot(snapshot: GraphSnapshot, opts: GraphOptions) -> str:
    buf = io.StringIO()
    decorator = FanNodeDecorator(snapshot.graph, opts.fan_counter, snapshot.scorer)
    printer = DotGraphPrinter(buf, opts.cluster, decorator, snapshot.reducer)
    printer.print_graph(snapshot.graph)
    return buf.getvalue()


def run_graph(opts: GraphOptions) -> str:
    """Full run: analyze and render the DOT document."""
    return render_dot(analyze(opts), opts)
