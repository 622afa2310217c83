"""Centralized logging helpers for the CLI and pipeline."""

from __future__ import annotations

import logging
import os
import sys

_configured = False


def _resolve_level() -> int:
    raw = os.environ.get("REFGRAPH_LOG_LEVEL", "").strip().upper()
    if raw:
        return getattr(logging, raw, logging.INFO)
    return logging.INFO


def configure_cli_logging(*, quiet: bool = False, verbose: bool = False) -> None:
    """Set refgraph.* logger levels from CLI flags. --quiet/--verbose override env."""
    global _configured
    env_level = _resolve_level()
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.WARNING
    else:
        level = env_level
    root = logging.getLogger("refgraph")
    root.setLevel(level)
    if not root.handlers:
        h = logging.StreamHandler(sys.stderr)
        h.setFormatter(logging.Formatter("%(message)s"))
        root.addHandler(h)
        root.propagate = False
    for child in ("scanner", "pipeline", "cli"):
        logging.getLogger(f"refgraph.{child}").setLevel(level)
    _configured = True


def get_logger(name: str) -> logging.Logger:
    """Return a refgraph.<name> logger; messages go to stderr via the package root handler."""
    logger = logging.getLogger(f"refgraph.{name}")
    if not _configured:
        logger.setLevel(_resolve_level())
    return logger
