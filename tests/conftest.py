"""Pytest configuration. Ensures project root is in sys.path for refgraph_cli, cli and refgraph."""
import sys
from pathlib import Path
from typing import Dict

import pytest

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from refgraph.analysis.graph import DependencyGraph, GraphNode


def make_graph(edges: Dict[str, list], clusters: Dict[str, str] | None = None) -> DependencyGraph:
    """Graph from {name: [targets]}; every name is its own label and file."""
    clusters = clusters or {}
    return DependencyGraph(
        {
            name: GraphNode(name, (f"{name}.txt",), frozenset(targets), clusters.get(name, "."))
            for name, targets in edges.items()
        }
    )


@pytest.fixture
def write_sources(tmp_path: Path):
    """Write {relative path: content} under tmp_path; return the absolute paths in order."""

    def _write(files: Dict[str, str]) -> list:
        paths = []
        for rel, content in files.items():
            p = tmp_path / rel
            p.parent.mkdir(parents=True, exist_ok=True)
            p.write_text(content, encoding="utf-8")
            paths.append(str(p))
        return paths

    return _write
