"""CLI command dispatch wiring extracted from refgraph_cli."""

from __future__ import annotations

import argparse
from typing import Any, Callable

from cli import handlers
from refgraph.errors import ConfigError


def dispatch_command(parser: argparse.ArgumentParser, args: Any) -> int:
    """Dispatch parsed CLI args to the matching command handler.

    Configuration errors end the process with usage text (exit 2) before any
    file is scanned.
    """
    from refgraph.orchestration.logging import configure_cli_logging

    quiet = getattr(args, "quiet", False)
    verbose = getattr(args, "verbose", False)
    configure_cli_logging(quiet=quiet, verbose=verbose)

    if args.command is None:
        return handlers.handle_help(parser)

    dispatch: dict[str, Callable[[], int]] = {
        "help": lambda: handlers.handle_help(parser),
        "graph": lambda: handlers.handle_graph(args),
        "summary": lambda: handlers.handle_summary(args),
    }
    handler = dispatch.get(args.command)
    if handler is None:
        return 0
    try:
        return handler()
    except ConfigError as e:
        parser.error(str(e))
