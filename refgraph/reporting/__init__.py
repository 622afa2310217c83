"""Report formatting: DOT documents, node/edge decorators, text summaries."""

from refgraph.reporting.contracts import LinkDecorator, NodeDecorator, NodeStyle
from refgraph.reporting.dot import DotGraphPrinter
from refgraph.reporting.styles import FanNodeDecorator
from refgraph.reporting.ux import format_summary, format_summary_md, should_use_color

__all__ = [
    "DotGraphPrinter",
    "FanNodeDecorator",
    "LinkDecorator",
    "NodeDecorator",
    "NodeStyle",
    "format_summary",
    "format_summary_md",
    "should_use_color",
]
