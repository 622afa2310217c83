"""Core CLI handlers: graph, summary, help."""

from __future__ import annotations

import json
from typing import Any

from refgraph.config import GraphOptions, clamp_reduce, pair_filters
from refgraph.errors import GraphInvariantError, SourceReadError


def _err(msg: str) -> None:
    """Log unified error message (via logger, respects --quiet)."""
    _clog().error("refgraph: %s", msg)


def _clog() -> Any:
    from refgraph.orchestration.logging import get_logger

    return get_logger("cli")


def options_from_args(args: Any) -> GraphOptions:
    """Merge parsed CLI args over the configured defaults. Raises ConfigError."""
    defaults: GraphOptions = getattr(args, "default_options", None) or GraphOptions()
    ignore = defaults.ignore
    if args.ignore:
        if len(args.ignore) > 1:
            _clog().warning("warning: overwriting ignore expression; you should use |")
        ignore = args.ignore[-1]
    if args.gsub_from or args.gsub_to:
        filters = pair_filters(args.gsub_from, args.gsub_to)
    else:
        filters = list(defaults.filters)
    return GraphOptions(
        globs=list(args.globs),
        ignore=ignore,
        filters=filters,
        case_sensitive=args.case_sensitive,
        cluster=args.cluster,
        fan_counter=args.fan_counter,
        importance=args.importance,
        reduce=clamp_reduce(args.reduce),
        seed=args.seed,
    )


def handle_help(parser: Any) -> int:
    """Print high-level command overview and detailed argparse help."""
    from refgraph import __version__

    print(f"refgraph: textual dependency graphs for source trees (v{__version__})")
    print()
    print("Commands:")
    print("  graph GLOB...     print the dependency graph as Graphviz DOT")
    print("  summary GLOB...   node/edge counts, cycles, fan-in/fan-out, reducible edges")
    print()
    print("  refgraph graph 'src/**/*.c' -i test -l -rr | dot -Tsvg > deps.svg")
    print("  --help after any command for details.")
    print()
    parser.print_help()
    return 0


def handle_graph(args: Any) -> int:
    """Render the DOT document to stdout (nothing is printed on failure)."""
    from refgraph.core.pipeline import run_graph

    opts = options_from_args(args)
    try:
        document = run_graph(opts)
    except (SourceReadError, GraphInvariantError) as e:
        _err(str(e))
        return 1
    print(document, end="")
    return 0


def handle_summary(args: Any) -> int:
    """Print a summary of the graph: text, markdown or JSON."""
    from refgraph.core.pipeline import analyze
    from refgraph.reporting.ux import format_summary, format_summary_md, should_use_color

    opts = options_from_args(args)
    try:
        snapshot = analyze(opts)
    except (SourceReadError, GraphInvariantError) as e:
        _err(str(e))
        return 1
    summary = snapshot.summary()
    if getattr(args, "json", False):
        print(json.dumps(summary, indent=2, ensure_ascii=False))
    elif getattr(args, "format", "text") == "markdown":
        print(format_summary_md(summary))
    else:
        print(format_summary(summary, use_color=should_use_color(getattr(args, "color", None))))
    return 0
