import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from refgraph.analysis.matcher import ReferenceMatcher, label_alternative


def test_label_alternative_makes_underscores_optional():
    assert label_alternative("foo_bar") == "foo_?bar"
    assert label_alternative("a.b") == r"a\.b"


def test_longer_label_wins_at_same_position():
    matcher = ReferenceMatcher.build(["foo", "foobar"])
    assert list(matcher.references("call foobar() then foo()")) == ["foobar", "foo"]


def test_word_boundary_required_before_but_not_after():
    matcher = ReferenceMatcher.build(["bar"])
    assert list(matcher.references("foobar")) == []
    assert list(matcher.references("bars and bar")) == ["bar", "bar"]


def test_underscore_tolerance_resolves_to_same_identifier():
    matcher = ReferenceMatcher.build(["foo_bar"])
    assert list(matcher.references("foobar foo_bar FOO_BAR")) == ["foobar", "foobar", "foobar"]


def test_case_sensitive_matcher_ignores_other_case():
    matcher = ReferenceMatcher.build(["Widget"], case_sensitive=True)
    assert list(matcher.references("widget Widget")) == ["Widget"]


def test_empty_label_set_matches_nothing():
    matcher = ReferenceMatcher.build([])
    assert list(matcher.references("anything at all")) == []


def test_case_folded_match_resolves_to_label_identifier():
    # U+017F equals "s" under IGNORECASE, but its lower() does not
    matcher = ReferenceMatcher.build(["scanner", "main"])
    assert list(matcher.references("ſcanner() and MAIN")) == ["scanner", "main"]


def test_labels_differing_in_case_share_an_identifier():
    matcher = ReferenceMatcher.build(["Foo_Bar", "foobar"])
    assert list(matcher.references("FooBar foo_bar")) == ["foobar", "foobar"]
