"""
Node naming for source files.

A file maps to a node identifier derived from its base name: extension
stripped, case-folded unless case-sensitive, underscores removed. Several
files (e.g. implementation + header) may share one identifier.
"""

from __future__ import annotations

import os


def node_label(path: str) -> str:
    """Base name without extension, case preserved."""
    return os.path.splitext(os.path.basename(path))[0]


def normalize_identifier(text: str, case_sensitive: bool = False) -> str:
    """Fold a label (or matched reference text) into identifier form."""
    if not case_sensitive:
        text = text.lower()
    return text.replace("_", "")


def node_identifier(path: str, case_sensitive: bool = False) -> str:
    return normalize_identifier(node_label(path), case_sensitive)


def cluster_key(path: str) -> str:
    """Name of the immediate parent directory ('.' for bare file names)."""
    parent = os.path.dirname(path)
    return os.path.basename(parent.rstrip(os.sep)) or parent or "."
