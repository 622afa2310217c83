"""
Reference scanner.

Reads every source file, applies the configured substitution rules, and
records a directed edge from the file's node to every node whose label occurs
in the transformed text. Matching is lexical only: no parsing, no per-language
grammar.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Pattern, Sequence, Tuple

from refgraph.analysis.graph import DependencyGraph, NodeBuilder
from refgraph.analysis.matcher import ReferenceMatcher
from refgraph.analysis.naming import cluster_key, node_identifier, node_label
from refgraph.errors import SourceReadError
from refgraph.orchestration.logging import get_logger

SourceFilter = Tuple[Pattern[str], str]

_log = get_logger("scanner")


def read_source(path: str) -> str:
    try:
        return Path(path).read_text(encoding="utf-8", errors="replace")
    except OSError as e:
        raise SourceReadError(path, e.strerror or str(e)) from e


def apply_filters(source: str, filters: Sequence[SourceFilter]) -> str:
    """Apply each (pattern, replacement) rule in order, replacing all occurrences."""
    for pattern, replacement in filters:
        source = pattern.sub(replacement, source)
    return source


def scan(
    sources: Sequence[str],
    *,
    case_sensitive: bool = False,
    filters: Sequence[SourceFilter] = (),
) -> DependencyGraph:
    """Build the dependency graph for ``sources`` in a single pass."""
    labels = [node_label(path) for path in sources]
    names = [node_identifier(path, case_sensitive) for path in sources]
    matcher = ReferenceMatcher.build(labels, case_sensitive=case_sensitive)

    builders: Dict[str, NodeBuilder] = {}
    for path, name, label in zip(sources, names, labels):
        text = apply_filters(read_source(path), filters)
        builder = builders.get(name)
        if builder is None:
            builder = builders[name] = NodeBuilder(label=label, cluster=cluster_key(path))
        builder.files.append(path)
        found = set(matcher.references(text))
        found.discard(name)
        builder.links.update(found)
        _log.debug("scanned %s -> %s (%d reference(s))", path, name, len(found))

    graph = DependencyGraph.from_builders(builders)
    graph.validate()
    return graph

