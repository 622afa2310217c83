"""
Summary report UX: colors, ASCII bars, markdown export.
"""

from __future__ import annotations

import sys
from typing import Any, Dict, List, Optional


# ANSI codes (no external deps)
_RESET = "\033[0m"
_BOLD = "\033[1m"
_DIM = "\033[2m"
_YELLOW = "\033[33m"
_CYAN = "\033[36m"

TOP_N = 10


def _color(text: str, code: str, use_color: bool) -> str:
    return f"{code}{text}{_RESET}" if use_color else text


def should_use_color(force: Optional[bool] = None) -> bool:
    """Use color only when stdout is TTY, unless force is set."""
    if force is not None:
        return force
    return sys.stdout.isatty()


def ascii_bar(value: int, max_val: int = 100, width: int = 10) -> str:
    """Simple ASCII bar: [████░░░░░░] 4/10"""
    if max_val <= 0:
        return "[] 0"
    filled = max(0, min(width, int(width * value / max_val)))
    bar = "█" * filled + "░" * (width - filled)
    return f"[{bar}] {value}/{max_val}"


def _ranked(metrics: Dict[str, Dict[str, Any]], key: str) -> List[tuple]:
    rows = [(name, m[key]) for name, m in metrics.items() if m.get(key)]
    return sorted(rows, key=lambda row: (-row[1], row[0]))[:TOP_N]


def format_summary(summary: Dict[str, Any], *, use_color: bool = False) -> str:
    """Format summarize_graph() output as plain text."""
    metrics = summary.get("metrics", {})
    cycles = summary.get("cycles", [])
    reducible = summary.get("reducible_edges", [])

    c = lambda t, code: _color(t, code, use_color)

    lines = [
        c("--- Dependency Graph Summary ---", _CYAN),
        f"Nodes: {summary.get('nodes', 0)}",
        f"Edges: {summary.get('edges', 0)}",
        f"Clusters: {summary.get('clusters', 0)}",
        f"Cycles: {c(str(len(cycles)), _YELLOW) if cycles else '0'}",
        "",
    ]

    max_fan = max((max(m["fan_in"], m["fan_out"]) for m in metrics.values()), default=0)
    for title, key in (("Top fan-in:", "fan_in"), ("Top fan-out:", "fan_out")):
        ranked = _ranked(metrics, key)
        if ranked:
            lines.append(c(title, _BOLD))
            for name, value in ranked:
                lines.append(f"  {metrics[name]['label']:<24} {ascii_bar(value, max_fan, 10)}")
            lines.append("")

    ranked = _ranked(metrics, "importance")
    if ranked:
        lines.append(c("Top importance:", _BOLD))
        for name, value in ranked:
            lines.append(f"  {metrics[name]['label']:<24} {value:.2f}")
        lines.append("")

    if cycles:
        lines.append(c("Cycles:", _BOLD))
        for cycle in cycles[:TOP_N]:
            lines.append("  " + " -> ".join(cycle + cycle[:1]))
        if len(cycles) > TOP_N:
            lines.append(f"  {c('...', _DIM)} and {len(cycles) - TOP_N} more")
        lines.append("")

    if summary.get("reduce_level"):
        lines.append(c(f"Reducible edges (level {summary['reduce_level']}): {len(reducible)}", _BOLD))
        for src, dst in reducible[:TOP_N]:
            lines.append(f"  {src} -> {dst}")
        if len(reducible) > TOP_N:
            lines.append(f"  {c('...', _DIM)} and {len(reducible) - TOP_N} more")
        lines.append("")

    lines.append(c("--- End Summary ---", _DIM))
    return "\n".join(lines)


def format_summary_md(summary: Dict[str, Any]) -> str:
    """Format summarize_graph() output as Markdown."""
    metrics = summary.get("metrics", {})
    cycles = summary.get("cycles", [])

    lines = [
        "# Dependency Graph Summary",
        "",
        f"- **Nodes:** {summary.get('nodes', 0)}",
        f"- **Edges:** {summary.get('edges', 0)}",
        f"- **Clusters:** {summary.get('clusters', 0)}",
        f"- **Cycles:** {len(cycles)}",
        "",
        "## Nodes",
        "",
        "| node | fan-in | fan-out | files |",
        "|---|---|---|---|",
    ]
    for m in metrics.values():
        files = ", ".join(f"`{f}`" for f in m["files"])
        lines.append(f"| {m['label']} | {m['fan_in']} | {m['fan_out']} | {files} |")
    lines.append("")

    if cycles:
        lines.append("## Cycles")
        lines.append("")
        for cycle in cycles:
            lines.append("- " + " → ".join(cycle + cycle[:1]))
        lines.append("")

    return "\n".join(lines)
