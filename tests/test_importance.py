import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from conftest import make_graph
from refgraph.analysis.importance import ImportanceScorer, importance_scale, pagerank


def test_empty_graph():
    assert pagerank(make_graph({})) == {}
    assert importance_scale({}) == {}


def test_mass_is_conserved_with_sinks():
    graph = make_graph({"a": ["b"], "b": ["c"], "c": [], "d": ["c"]})
    scores = pagerank(graph)
    assert sum(scores.values()) == pytest.approx(1.0)


def test_star_center_is_most_important():
    graph = make_graph({"hub": [], "b": ["hub"], "c": ["hub"], "d": ["hub"]})
    scores = pagerank(graph)
    assert max(scores, key=scores.get) == "hub"
    assert scores["b"] == scores["c"] == scores["d"]


def test_minimum_node_scales_to_exactly_one():
    graph = make_graph({"hub": [], "b": ["hub"], "c": ["hub"], "d": ["hub", "b"]})
    scales = importance_scale(pagerank(graph))
    assert min(scales.values()) == 1.0
    assert scales["hub"] > 1.0


def test_symmetric_cycle_is_uniform():
    scores = pagerank(make_graph({"a": ["b"], "b": ["a"]}))
    assert scores["a"] == pytest.approx(0.5)
    assert scores["b"] == pytest.approx(0.5)


def test_iteration_cap_is_respected():
    graph = make_graph({"a": ["b"], "b": ["c"], "c": []})
    one_round = pagerank(graph, max_iterations=1)
    # one round from uniform 1/3: c is the only sink, so warp = (1/3) / 3
    warp = (1 / 3) / 3
    assert one_round["a"] == pytest.approx(0.85 * warp + 0.15 / 3)
    assert one_round["b"] == pytest.approx(0.85 * (1 / 3 + warp) + 0.15 / 3)


def test_disabled_scorer_is_neutral():
    graph = make_graph({"a": ["b"], "b": []})
    scorer = ImportanceScorer(graph, enabled=False)
    assert scorer.scale("a") == scorer.scale("b") == 1.0
    assert scorer.scores == {}
