"""
Graphviz DOT renderer.

Pure formatting: the graph, a node decorator and a link decorator go in, a
``digraph`` document comes out on the given text stream.
"""

from __future__ import annotations

import re
from contextlib import contextmanager
from typing import Dict, Iterator, List, TextIO, Tuple

from refgraph.analysis.graph import DependencyGraph, Edge, GraphNode
from refgraph.analysis.tred import EdgeStyle
from refgraph.errors import GraphInvariantError
from refgraph.reporting.contracts import LinkDecorator, NodeDecorator

_HEADER = (
    "  overlap = false;",
    "  rankdir = LR;",
    "  nodesep = 0.5;",
    '  node [fontsize = 40, style = filled, fontcolor = "#123456", fillcolor = white,fontname="Arial, Helvetica", margin="0.22,0.1"];',
    '  edge [color = "#ff1122dd", arrowsize=2, style="setlinewidth(4)"];',
    '  bgcolor = "transparent";',
)

_DIM_ATTRS = 'color="#3366ff66", style=solid, arrowsize=1, style="setlinewidth(4)"'

_RECORD_SPECIALS = re.compile(r"([{}|<>])")


def _escape(text: str) -> str:
    return text.replace("\\", "\\\\").replace('"', '\\"')


def _fmt_size(value: float) -> str:
    return f"{value:g}"


class DotGraphPrinter:
    """Prints a DependencyGraph as DOT, flat or clustered by directory."""

    def __init__(self, io: TextIO, cluster: bool, node_decorator: NodeDecorator, link_decorator: LinkDecorator):
        self.io = io
        self.cluster = cluster
        self.node_decorator = node_decorator
        self.link_decorator = link_decorator

    def print_graph(self, graph: DependencyGraph) -> None:
        clusters = graph.clusters()
        if self.cluster and len(clusters) >= 2:
            self._print_clustered(graph, clusters)
        else:
            self._print_flat(graph)

    def _write(self, line: str = "") -> None:
        self.io.write(line + "\n")

    @contextmanager
    def _digraph(self) -> Iterator[None]:
        self._write("digraph {")
        for line in _HEADER:
            self._write(line)
        yield
        self._write("}")

    @contextmanager
    def _subgraph(self, number: int, label: str) -> Iterator[None]:
        self._write(f"  subgraph cluster{number} {{")
        self._write(f'    label = "{_escape(label)}";')
        self._write('    fontcolor = "#123456"; fontsize = 30; fontname="Arial, Helvetica";')
        yield
        self._write("  }")

    def _print_flat(self, graph: DependencyGraph) -> None:
        with self._digraph():
            self._write()
            self._write("  // nodes")
            for name, node in graph.items():
                self._print_node(name, node, "  ")
            self._write()
            self._write("  // links")
            for src, dst in graph.edges():
                self._print_link(src, dst, "  ")

    def _split_links(
        self, graph: DependencyGraph, clusters: Dict[str, List[str]]
    ) -> Tuple[Dict[str, List[Edge]], List[Edge]]:
        inner: Dict[str, List[Edge]] = {key: [] for key in clusters}
        outer: List[Edge] = []
        for src, dst in graph.edges():
            if dst not in graph:
                raise GraphInvariantError(f"edge {src!r} -> {dst!r} targets an unknown node")
            key = graph[src].cluster
            if graph[dst].cluster == key:
                inner[key].append((src, dst))
            else:
                outer.append((src, dst))
        return inner, outer

    def _print_clustered(self, graph: DependencyGraph, clusters: Dict[str, List[str]]) -> None:
        inner, outer = self._split_links(graph, clusters)
        with self._digraph():
            for number, (key, names) in enumerate(clusters.items()):
                with self._subgraph(number, key):
                    for name in names:
                        self._print_node(name, graph[name], "    ")
                    for src, dst in inner[key]:
                        self._print_link(src, dst, "    ")
            for src, dst in outer:
                self._print_link(src, dst, "  ")

    def _print_node(self, name: str, node: GraphNode, indent: str) -> None:
        for path in node.files:
            self._write(f"{indent}/* {path.replace('*/', '* /')} */")
        style = self.node_decorator.node_style(name, node)
        size = _fmt_size(style.fontsize)
        if style.fan_in is not None:
            label = _RECORD_SPECIALS.sub(r"\\\1", _escape(node.label))
            self._write(
                f'{indent}"{_escape(name)}" [label = "{label}|{{{style.fan_in} in|{style.fan_out} out}}", '
                f"shape = Mrecord, fontsize={size}];"
            )
        else:
            self._write(f'{indent}"{_escape(name)}" [label = "{_escape(node.label)}", shape = ellipse, fontsize={size}];')

    def _print_link(self, src: str, dst: str, indent: str) -> None:
        if src == dst:
            return
        style = self.link_decorator.link_style(src, dst)
        edge = f'{indent}"{_escape(src)}" -> "{_escape(dst)}"'
        if style is EdgeStyle.NORMAL:
            self._write(f"{edge};")
        elif style is EdgeStyle.DIM:
            self._write(f"{edge} [{_DIM_ATTRS}];")
        elif style is EdgeStyle.IGNORE:
            self._write(f"{edge} [{_DIM_ATTRS}, constraint=false];")
        elif style is EdgeStyle.DELETE:
            return
        else:
            raise GraphInvariantError(f"unexpected edge style from link decorator: {style!r}")


__all__ = ["DotGraphPrinter"]
