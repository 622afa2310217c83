"""
Run options and configuration loading.

Precedence: CLI flag > environment (REFGRAPH_*) > pyproject.toml [tool.refgraph] > defaults.
"""

from __future__ import annotations

import os
import re
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Pattern, Sequence, Tuple, Union

from refgraph.errors import ConfigError

MAX_REDUCE_LEVEL = 3

_BOOL_KEYS = ("case_sensitive", "cluster", "fan_counter", "importance")


@dataclass
class GraphOptions:
    globs: List[str] = field(default_factory=list)
    ignore: Optional[Pattern[str]] = None
    filters: List[Tuple[Pattern[str], str]] = field(default_factory=list)
    case_sensitive: bool = False
    cluster: bool = False
    fan_counter: bool = False
    importance: bool = False
    reduce: int = 0
    seed: Optional[int] = None


def compile_pattern(raw: str, what: str = "pattern") -> Pattern[str]:
    try:
        return re.compile(raw)
    except re.error as e:
        raise ConfigError(f"invalid {what} {raw!r}: {e}") from e


def pair_filters(froms: Sequence[Union[str, Pattern[str]]], tos: Sequence[str]) -> List[Tuple[Pattern[str], str]]:
    """Zip -s/-g values into compiled substitution rules; counts must match."""
    if len(froms) != len(tos):
        raise ConfigError("specify filter in form of: -s foo -g bar")
    rules = []
    for src, dst in zip(froms, tos):
        if isinstance(src, str):
            src = compile_pattern(src, "substitution pattern")
        rules.append((src, dst))
    return rules


def clamp_reduce(level: int) -> int:
    if level < 0:
        raise ConfigError(f"reduce level must be >= 0, got {level}")
    return min(level, MAX_REDUCE_LEVEL)


def load_pyproject_config(root: Path) -> Dict[str, Any]:
    """Return the [tool.refgraph] table of root/pyproject.toml, or {} when absent."""
    pyproject = root / "pyproject.toml"
    if not pyproject.exists():
        return {}
    try:
        data = tomllib.loads(pyproject.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, tomllib.TOMLDecodeError) as e:
        raise ConfigError(f"cannot parse {pyproject}: {e}") from e
    table = data.get("tool", {}).get("refgraph", {})
    if not isinstance(table, dict):
        raise ConfigError(f"[tool.refgraph] in {pyproject} must be a table")
    return table


def _int_value(table: Dict[str, Any], key: str) -> int:
    value = table[key]
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigError(f"[tool.refgraph] {key} must be an integer")
    return value


def env_seed() -> Optional[int]:
    raw = os.environ.get("REFGRAPH_SEED", "").strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError as e:
        raise ConfigError(f"REFGRAPH_SEED must be an integer, got {raw!r}") from e


def defaults_from_config(table: Dict[str, Any]) -> GraphOptions:
    """GraphOptions seeded from a [tool.refgraph] table and the environment."""
    opts = GraphOptions()
    for key in _BOOL_KEYS:
        if key in table:
            if not isinstance(table[key], bool):
                raise ConfigError(f"[tool.refgraph] {key} must be true or false")
            setattr(opts, key, table[key])
    if "ignore" in table:
        opts.ignore = compile_pattern(str(table["ignore"]), "ignore pattern")
    rules = table.get("filters", [])
    if not isinstance(rules, list) or any(not isinstance(r, list) or len(r) != 2 for r in rules):
        raise ConfigError("[tool.refgraph] filters must be a list of [pattern, replacement] pairs")
    opts.filters = pair_filters([str(r[0]) for r in rules], [str(r[1]) for r in rules])
    if "reduce" in table:
        opts.reduce = clamp_reduce(_int_value(table, "reduce"))
    if "seed" in table:
        opts.seed = _int_value(table, "seed")
    seed = env_seed()
    if seed is not None:
        opts.seed = seed
    return opts
