import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from refgraph.config import (
    clamp_reduce,
    defaults_from_config,
    load_pyproject_config,
    pair_filters,
)
from refgraph.errors import ConfigError


def test_missing_pyproject_gives_empty_table(tmp_path):
    assert load_pyproject_config(tmp_path) == {}


def test_pyproject_without_tool_table(tmp_path):
    (tmp_path / "pyproject.toml").write_text('[project]\nname = "x"\n', encoding="utf-8")
    assert load_pyproject_config(tmp_path) == {}


def test_defaults_from_config_table(monkeypatch):
    monkeypatch.delenv("REFGRAPH_SEED", raising=False)
    opts = defaults_from_config(
        {
            "cluster": True,
            "case_sensitive": True,
            "ignore": "test|vendor",
            "filters": [["#.*", ""], ["require '(\\w+)'", "\\1"]],
            "reduce": 2,
            "seed": 9,
        }
    )
    assert opts.cluster is True
    assert opts.case_sensitive is True
    assert opts.fan_counter is False
    assert opts.ignore.search("src/vendor/x.c")
    assert [p.pattern for p, _ in opts.filters] == ["#.*", "require '(\\w+)'"]
    assert opts.reduce == 2
    assert opts.seed == 9


def test_env_seed_overrides_pyproject(monkeypatch):
    monkeypatch.setenv("REFGRAPH_SEED", "17")
    assert defaults_from_config({"seed": 9}).seed == 17


def test_env_seed_must_be_integer(monkeypatch):
    monkeypatch.setenv("REFGRAPH_SEED", "soon")
    with pytest.raises(ConfigError):
        defaults_from_config({})


@pytest.mark.parametrize(
    "table",
    [
        {"filters": [["only-pattern"]]},
        {"filters": "not a list"},
        {"ignore": "("},
        {"cluster": "yes"},
        {"reduce": -1},
    ],
)
def test_bad_config_values(table, monkeypatch):
    monkeypatch.delenv("REFGRAPH_SEED", raising=False)
    with pytest.raises(ConfigError):
        defaults_from_config(table)


def test_pair_filters_requires_matching_counts():
    with pytest.raises(ConfigError):
        pair_filters(["a", "b"], ["x"])
    rules = pair_filters(["a+"], ["b"])
    assert rules[0][0].sub(rules[0][1], "caaat") == "cbt"


def test_clamp_reduce():
    assert clamp_reduce(0) == 0
    assert clamp_reduce(3) == 3
    assert clamp_reduce(8) == 3
    with pytest.raises(ConfigError):
        clamp_reduce(-2)
