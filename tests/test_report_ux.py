import random
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from conftest import make_graph
from refgraph.analysis.importance import ImportanceScorer
from refgraph.analysis.metrics import summarize_graph
from refgraph.analysis.tred import TransitiveReducer
from refgraph.reporting.ux import ascii_bar, format_summary, format_summary_md, should_use_color


def _summary():
    graph = make_graph({"a": ["b", "c"], "b": ["c", "a"], "c": []})
    return summarize_graph(graph, TransitiveReducer(graph, 1, rng=random.Random(0)), ImportanceScorer(graph))


def test_ascii_bar():
    assert ascii_bar(5, 10, 10) == "[█████░░░░░] 5/10"
    assert ascii_bar(1, 0) == "[] 0"


def test_should_use_color_force():
    assert should_use_color(True) is True
    assert should_use_color(False) is False


def test_format_summary_plain_text():
    text = format_summary(_summary())
    assert "\033[" not in text
    assert "Nodes: 3" in text
    assert "Edges: 4" in text
    assert "Top fan-in:" in text
    assert "Top importance:" in text
    assert "a -> b -> a" in text
    assert "Reducible edges (level 1): 1" in text


def test_format_summary_markdown():
    md = format_summary_md(_summary())
    assert md.startswith("# Dependency Graph Summary")
    assert "| c | 2 | 0 | `c.txt` |" in md
    assert "## Cycles" in md
