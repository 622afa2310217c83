"""Parser wiring extracted from refgraph_cli entrypoint."""

from __future__ import annotations

import argparse
import re
from typing import Optional

from refgraph.config import GraphOptions

_REDUCE_EPILOG = """\
reduce levels (-r, repeatable):
  level 0: no reduction at all
  level 1 (-r): randomly guess and dim unimportant path
  level 2 (-rr): randomly guess and ignore unimportant path on layout
  level 3 (-rrr): randomly guess and delete unimportant path
"""


def _regex(raw: str) -> re.Pattern:
    try:
        return re.compile(raw)
    except re.error as e:
        raise argparse.ArgumentTypeError(f"invalid regular expression {raw!r}: {e}") from e


def build_parser(*, version: str, defaults: Optional[GraphOptions] = None) -> argparse.ArgumentParser:
    """Configure top-level CLI parser and subcommands."""
    defaults = defaults or GraphOptions()
    parser = argparse.ArgumentParser(
        prog="refgraph",
        description="refgraph: infer a dependency graph between source files and render it as Graphviz DOT",
        epilog="Commands: graph | summary | help. Use refgraph <command> --help for details.",
    )
    parser.add_argument("--version", "-V", action="version", version=f"%(prog)s {version}")
    subparsers = parser.add_subparsers(dest="command")

    graph_parser = subparsers.add_parser(
        "graph",
        help="Print the dependency graph as DOT on stdout",
        epilog=_REDUCE_EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    _add_graph_options(graph_parser, defaults)

    summary_parser = subparsers.add_parser(
        "summary",
        help="Print node/edge counts, cycles and fan-in/fan-out",
        epilog=_REDUCE_EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    _add_graph_options(summary_parser, defaults)
    summary_parser.add_argument("--format", choices=["text", "markdown"], default="text", help="Output format (default: text)")
    summary_parser.add_argument("--json", action="store_true", help="Output JSON (machine-readable)")
    summary_parser.add_argument("--color", action="store_true", default=None, dest="color", help="Force color output (default: auto from TTY)")
    summary_parser.add_argument("--no-color", action="store_false", dest="color", help="Disable color output")

    subparsers.add_parser("help", help="Show refgraph command overview")

    return parser


def _add_graph_options(p: argparse.ArgumentParser, defaults: GraphOptions) -> None:
    """Options shared by graph and summary: input selection, filters, layout, reduction."""
    p.add_argument("globs", nargs="+", metavar="source-file", help="Source file glob(s), e.g. 'src/**/*.py'")
    p.add_argument("-i", "--ignore", action="append", type=_regex, default=[], metavar="REGEXP", help="Ignore files whose path matches REGEXP (use | to combine)")
    p.add_argument("-s", "--gsub-from", action="append", type=_regex, default=[], metavar="REGEXP", help="Filter source code like s///g (from part)")
    p.add_argument("-g", "--gsub-to", action="append", default=[], metavar="TO", help="Filter source code like s///g (to part)")
    p.add_argument("-c", "--case-sensitive", action=argparse.BooleanOptionalAction, default=defaults.case_sensitive, help="Make module names case sensitive")
    p.add_argument("-l", "--cluster", action=argparse.BooleanOptionalAction, default=defaults.cluster, help="Cluster nodes by parent directory")
    p.add_argument("-f", "--fan-counter", action=argparse.BooleanOptionalAction, default=defaults.fan_counter, help="Show fan-in/fan-out counters")
    p.add_argument("-p", "--importance", action=argparse.BooleanOptionalAction, default=defaults.importance, help="Scale nodes by importance")
    p.add_argument("-r", "--reduce", action="count", default=defaults.reduce, help=f"Increase compaction level a la Graphviz tred (default: {defaults.reduce})")
    p.add_argument("--seed", type=int, default=defaults.seed, help="Seed for the reduction's random node order")
    p.add_argument("--quiet", "-q", action="store_true", help="Only log warnings and errors")
    p.add_argument("--verbose", "-v", action="store_true", help="Log per-file scan details")
    p.set_defaults(default_options=defaults)
