"""Core orchestration layer: source listing and the run pipeline."""

from . import pipeline, sources  # noqa: F401

__all__ = ["pipeline", "sources"]
