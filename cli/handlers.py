"""CLI handlers facade.

Thin wrapper that re-exports concrete handler implementations from
cli.core_handlers so the public `cli.handlers.handle_*` API stays stable.
"""
from __future__ import annotations

from .core_handlers import handle_graph, handle_help, handle_summary

__all__ = ["handle_help", "handle_graph", "handle_summary"]
